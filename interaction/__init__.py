"""
WaySnap Interaction Module
"""

from .events import PointerEvent, WaySnapEvent, WaySnapEventType
from .overlay import SketchFeature, SketchKind, SketchOverlay, SketchStyle
from .viewport import RecordingViewport, Viewport, fit_coordinates
from .way_snap import SessionMode, WaySnapInteraction, WaySnapOptions
