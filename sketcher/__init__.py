"""
WaySnap Sketcher Module
"""

from .geometry import (
    Coordinate, Extent, Polyline,
    as_coordinate, same_coordinate, index_of, path_length, segment_contains, extent_of
)

from .line_string import split, split_coordinates, split_index, shorter_arc, loop_travel_indices
