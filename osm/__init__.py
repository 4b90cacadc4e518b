"""
WaySnap OSM Module
Overpass-basierte Way-Quelle
"""

from .overpass_api import OverpassAPI, OverpassAPIError, OverpassAPIEndpointURLUnsetError
from .osm_ways import OSMWays
from .response import OSMNode, OSMWay, OverpassResponse
from .way_source import OSMWaySource, OSMWaySourceOptions, DEFAULT_OVERPASS_QUERY
from .projection import EPSG_3857, EPSG_4326, transform, transform_extent
