"""
WaySnap - Sketch Overlay
========================

Vorschau-Geometrie für den Renderer. Statt Styles über Feature-Properties
zu entscheiden, trägt jedes Overlay-Element explizit seinen Style-Typ.

Zeichenreihenfolge:
    Sketch-Linie -> Candidate-Linien -> Candidate-Punkte -> Draft -> Sketch-Punkt
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Sequence

from PySide6.QtCore import QObject, Signal

from sketcher.geometry import Coordinate, Polyline


class SketchStyle(Enum):
    """Render-Hinweis für Vorschau-Geometrie"""
    NORMAL = auto()
    CANDIDATE = auto()
    DRAFT = auto()


class SketchKind(Enum):
    POINT = auto()
    LINE = auto()


@dataclass
class SketchFeature:
    """Ein Element der Vorschau"""
    kind: SketchKind
    coordinates: List[Coordinate] = field(default_factory=list)
    style: SketchStyle = SketchStyle.NORMAL
    source_id: Optional[str] = None


class SketchOverlay(QObject):
    """
    Hält die aktuell angezeigte Vorschau.

    Signals:
        changed: Nach jedem rebuild() oder clear()
    """

    changed = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._features: List[SketchFeature] = []
        self.visible = True

    @property
    def features(self) -> List[SketchFeature]:
        return list(self._features) if self.visible else []

    def rebuild(self,
                sketch_line: Optional[Sequence[Coordinate]] = None,
                candidate_lines: Sequence[Polyline] = (),
                candidate_points: Sequence[Coordinate] = (),
                draft: Optional[Polyline] = None,
                sketch_point: Optional[Coordinate] = None):
        features = []
        if sketch_line:
            features.append(SketchFeature(SketchKind.LINE, list(sketch_line)))
        for line in candidate_lines:
            if draft is not None and line.id == draft.id:
                continue
            style = SketchStyle.DRAFT if line.properties.get("draft") else SketchStyle.CANDIDATE
            features.append(SketchFeature(SketchKind.LINE, list(line.coordinates), style, line.id))
        for point in candidate_points:
            features.append(SketchFeature(SketchKind.POINT, [point], SketchStyle.CANDIDATE))
        if draft is not None:
            features.append(SketchFeature(SketchKind.LINE, list(draft.coordinates), SketchStyle.DRAFT, draft.id))
        if sketch_point is not None:
            features.append(SketchFeature(SketchKind.POINT, [sketch_point]))
        self._features = features
        self.changed.emit()

    def clear(self):
        self._features = []
        self.changed.emit()
