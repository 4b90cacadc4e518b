"""
WaySnap - OSM Way Source
========================

Way-Netzwerk, das sich bei Bedarf aus der Overpass API befüllt.

Caching:
- Bereits geladene Extents werden nicht erneut abgefragt
- Ab `cached_features_count` Features wird der Cache beim nächsten
  erfolgreichen Abruf geleert (Speicherverbrauch)
- Während eines Abrufs werden weitere Anfragen ignoriert
"""

from dataclasses import dataclass
from typing import List, Optional

from loguru import logger

from config.feature_flags import is_enabled
from network.way_network import WayNetwork
from sketcher.geometry import Extent
from .osm_ways import OSMWays
from .overpass_api import OverpassAPIEndpointURLUnsetError, OverpassAPIError
from .projection import EPSG_4326, buffer_extent, contains_extent

DEFAULT_OVERPASS_QUERY = '(way["highway"];>;);'


@dataclass
class OSMWaySourceOptions:
    """Optionen der OSM Way Source"""
    cached_features_count: int = 20000
    fetch_buffer_size: float = 0.0  # Puffer um den Abruf-Extent (weniger Requests beim Pannen)
    maximum_resolution: float = 0.0  # Erst ab dieser Auflösung (oder feiner) laden
    overpass_endpoint_url: Optional[str] = None
    overpass_query: str = DEFAULT_OVERPASS_QUERY
    projection: str = EPSG_4326


class OSMWaySource(WayNetwork):
    """
    Way-Netzwerk mit Overpass-Loader.

    Fehler beim Abruf bleiben hier: sie werden geloggt und als False
    zurückgegeben, `changed` wird dann nicht ausgelöst.
    """

    def __init__(self, options: Optional[OSMWaySourceOptions] = None, parent=None):
        super().__init__(parent=parent)
        self.options = options or OSMWaySourceOptions()
        self._busy = False
        self._loaded_extents: List[Extent] = []

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def loaded_extents(self) -> List[Extent]:
        return list(self._loaded_extents)

    def load_features(self, extent: Extent, resolution: float) -> bool:
        """
        Lädt Ways im Extent, sofern nötig.

        Returns:
            True wenn ein Abruf erfolgreich war und neue Daten vorliegen
        """
        if self._busy:
            return False
        if resolution > self.options.maximum_resolution:
            if is_enabled("osm_debug_logging"):
                logger.debug(f"[OSMWaySource] Auflösung {resolution} > {self.options.maximum_resolution}, kein Abruf")
            return False
        if any(contains_extent(loaded, extent) for loaded in self._loaded_extents):
            return False

        fetch_extent = extent
        if self.options.fetch_buffer_size:
            fetch_extent = buffer_extent(extent, self.options.fetch_buffer_size)

        self._busy = True
        try:
            features = OSMWays.fetch(
                fetch_extent,
                self.options.overpass_query,
                self.options.projection,
                self.options.overpass_endpoint_url,
            )
        except (OverpassAPIEndpointURLUnsetError, OverpassAPIError) as e:
            logger.warning(f"[OSMWaySource] Abruf für {fetch_extent} fehlgeschlagen: {e}")
            return False
        finally:
            self._busy = False

        # Cache nur nach erfolgreichem Abruf leeren
        if len(self) > self.options.cached_features_count:
            logger.info(f"[OSMWaySource] Cache voll ({len(self)} Features), wird geleert")
            self.clear(notify=False)
            self._loaded_extents.clear()

        new_features = [f for f in features if self.get_feature_by_id(f.id) is None]
        self.add_features(new_features, notify=False)
        self._loaded_extents.append(fetch_extent)
        logger.info(f"[OSMWaySource] {len(new_features)} neue Ways ({len(features)} geladen)")
        self.changed.emit()
        return True
