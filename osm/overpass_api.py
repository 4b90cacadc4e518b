"""
WaySnap - Overpass API Client
=============================

Holt OSM-Daten per POST von einer Overpass-Instanz.
Öffentliche Instanzen: https://wiki.openstreetmap.org/wiki/Overpass_API#Public_Overpass_API_instances

Verwendung:
    from osm.overpass_api import OverpassAPI

    OverpassAPI.endpoint_url = "https://overpass-api.de/api/interpreter"
    data = OverpassAPI.fetch_in_extent(extent, '(way["highway"];>;);')
"""

from typing import Any, Dict, Optional

import requests
from loguru import logger

from config.feature_flags import is_enabled
from sketcher.geometry import Extent


class OverpassAPIEndpointURLUnsetError(RuntimeError):
    """Weder Parameter noch OverpassAPI.endpoint_url gesetzt."""

    def __init__(self):
        msg = ("No endpoint URL for Overpass API specified for class attribute endpoint_url of OverpassAPI."
               " Please specify one from https://wiki.openstreetmap.org/wiki/Overpass_API#Public_Overpass_API_instances")
        logger.error(f"[Overpass] {msg}")
        super().__init__(msg)


class OverpassAPIError(RuntimeError):
    """HTTP- oder JSON-Fehler beim Abruf."""


def _format_number(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


class OverpassAPI:
    """Statischer Overpass-Client"""

    # Default-Endpoint für alle Abfragen ohne expliziten Endpoint
    endpoint_url: Optional[str] = None
    timeout: float = 60.0

    @classmethod
    def fetch(cls, settings: str, query: str, out: str = "out;",
              endpoint: Optional[str] = None) -> Dict[str, Any]:
        """
        Fragt die Overpass API ab.

        Args:
            settings: OverpassQL Settings-Statement
            query: OverpassQL Query-Statement(s)
            out: OverpassQL Out-Statement
            endpoint: Endpoint-URL, überschreibt endpoint_url

        Returns:
            Dekodierte JSON-Antwort

        Raises:
            OverpassAPIEndpointURLUnsetError: Kein Endpoint bekannt
            OverpassAPIError: Request oder Dekodierung fehlgeschlagen
        """
        url = endpoint or cls.endpoint_url
        if not url:
            raise OverpassAPIEndpointURLUnsetError()

        data = settings + query + (out or "out;")
        if is_enabled("osm_debug_logging"):
            logger.debug(f"[Overpass] POST {url} data={data}")

        try:
            response = requests.post(url, data={"data": data}, timeout=cls.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise OverpassAPIError(f"Overpass request failed: {e}") from e
        except ValueError as e:
            raise OverpassAPIError(f"Overpass response is not JSON: {e}") from e

    @staticmethod
    def extent_to_bbox(extent: Extent) -> str:
        """Extent (min_x, min_y, max_x, max_y) als OverpassQL bbox-Setting (S,W,N,E)."""
        values = [
            min(extent[1], extent[3]),
            min(extent[0], extent[2]),
            max(extent[1], extent[3]),
            max(extent[0], extent[2]),
        ]
        return "[bbox:" + ",".join(_format_number(v) for v in values) + "]"

    @classmethod
    def fetch_in_extent(cls, extent: Extent, query: str, out: str = "out;",
                        endpoint: Optional[str] = None) -> Dict[str, Any]:
        settings = cls.extent_to_bbox(extent) + "[out:json];"
        return cls.fetch(settings, query, out, endpoint)
