"""
WaySnap Network Module
"""

from .way_network import WayNetwork
from .feature_collection import FeatureCollection
