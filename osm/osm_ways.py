"""
WaySnap - OSM Ways
Lädt OSM-Ways aus der Overpass API und wandelt sie in Polylinien um.
"""

from typing import List, Optional

from loguru import logger

from sketcher.geometry import Extent, Polyline
from .overpass_api import OverpassAPI
from .projection import EPSG_4326, transform, transform_extent
from .response import OverpassResponse


class OSMWays:
    """OSM Way Fetcher"""

    @staticmethod
    def fetch(extent: Extent, query: str, projection: str = EPSG_4326,
              endpoint: Optional[str] = None) -> List[Polyline]:
        """
        Holt Ways im Extent und gibt sie als Polylinien in `projection` zurück.

        Args:
            extent: Extent in `projection`
            query: OverpassQL für die Ways (ohne Settings und Out-Statement)
            projection: Arbeits-Projektion der Koordinaten
            endpoint: Optionaler Endpoint, überschreibt OverpassAPI.endpoint_url
        """
        if projection != EPSG_4326:
            extent = transform_extent(extent, projection, EPSG_4326)

        response = OverpassResponse.from_json(
            OverpassAPI.fetch_in_extent(extent, query, "out;", endpoint)
        )
        return OSMWays.to_polylines(response, projection)

    @staticmethod
    def to_polylines(response: OverpassResponse, projection: str = EPSG_4326) -> List[Polyline]:
        nodes = {node.id: node for node in response.nodes}

        features = []
        for way in response.ways:
            missing = [n for n in way.nodes if n not in nodes]
            if missing:
                logger.debug(f"[OSMWays] Way {way.id}: {len(missing)} Nodes fehlen in der Antwort")
            coordinates = [
                transform((nodes[n].lon, nodes[n].lat), EPSG_4326, projection)
                for n in way.nodes if n in nodes
            ]
            if len(coordinates) < 2:
                continue
            properties = dict(way.tags)
            properties["osmid"] = way.id
            features.append(Polyline(coordinates, id=str(way.id), properties=properties))
        return features
