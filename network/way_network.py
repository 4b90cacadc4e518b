"""
WaySnap - Way Network
=====================

Abfragbare Menge von Referenz-Polylinien (z.B. Straßengraph), auf die beim
Zeichnen gesnappt wird.

Zwei getrennte Quellen:
- das echte Netzwerk (vom Provider befüllt, `changed` Signal bei Änderung)
- das ephemere Overlay (nur der Draft-Rest während einer Edit-Session)

Das Overlay taucht nie in all() oder query_containing() auf und löst kein
`changed` aus.
"""

from typing import Dict, Iterable, List, Optional, Sequence

from loguru import logger
from PySide6.QtCore import QObject, Signal
from shapely.geometry import Point
from shapely.strtree import STRtree

from sketcher.geometry import Polyline


class WayNetwork(QObject):
    """
    In-Memory Way-Netzwerk mit STRtree-Index für Punkt-auf-Linie Abfragen.

    Signals:
        changed: Nach jeder Änderung des echten Netzwerks
    """

    changed = Signal()

    def __init__(self, features: Optional[Iterable[Polyline]] = None, parent=None):
        super().__init__(parent)
        self._features: List[Polyline] = []
        self._by_id: Dict[str, Polyline] = {}
        self._ephemeral: List[Polyline] = []

        # Lazy: wird bei der ersten Abfrage nach einer Änderung neu gebaut
        self._tree: Optional[STRtree] = None

        if features:
            self.add_features(features)

    # ==================== ECHTES NETZWERK ====================

    def __len__(self) -> int:
        return len(self._features)

    def all(self) -> List[Polyline]:
        return list(self._features)

    def get_feature_by_id(self, feature_id: str) -> Optional[Polyline]:
        return self._by_id.get(feature_id)

    def add_feature(self, feature: Polyline, notify: bool = True):
        self._add(feature)
        self._invalidate()
        if notify:
            self.changed.emit()

    def add_features(self, features: Iterable[Polyline], notify: bool = True):
        """Fügt alle Features ein oder keines, wenn eines ungültig ist."""
        features = list(features)
        for feature in features:
            self._check(feature)
        for feature in features:
            self._add(feature)
        self._invalidate()
        if notify and features:
            self.changed.emit()

    def remove_feature(self, feature: Polyline, notify: bool = True) -> bool:
        if feature not in self._features:
            return False
        self._features.remove(feature)
        self._by_id.pop(feature.id, None)
        self._invalidate()
        if notify:
            self.changed.emit()
        return True

    def clear(self, notify: bool = True):
        self._features.clear()
        self._by_id.clear()
        self._invalidate()
        if notify:
            self.changed.emit()

    def query_containing(self, coordinate: Sequence[float]) -> List[Polyline]:
        """
        Alle Linien, auf denen `coordinate` liegt (randinklusive).
        Reihenfolge = Einfüge-Reihenfolge.
        """
        if not self._features:
            return []
        if self._tree is None:
            self._tree = STRtree([f.to_shapely() for f in self._features])
        hits = self._tree.query(Point(coordinate[0], coordinate[1]), predicate="intersects")
        return [self._features[int(i)] for i in sorted(hits)]

    def _check(self, feature: Polyline):
        if len(feature) < 2:
            raise ValueError(f"Way {feature.id} braucht mindestens 2 Koordinaten")

    def _add(self, feature: Polyline):
        self._check(feature)
        existing = self._by_id.get(feature.id)
        if existing is not None:
            self._features.remove(existing)
        self._features.append(feature)
        self._by_id[feature.id] = feature

    def _invalidate(self):
        self._tree = None

    # ==================== EPHEMERES OVERLAY ====================

    def insert_ephemeral(self, feature: Polyline):
        """Legt eine Vorschau-Linie (Draft-Rest) im Overlay ab."""
        if feature not in self._ephemeral:
            self._ephemeral.append(feature)
            logger.debug(f"[WayNetwork] Overlay +{feature.id}")

    def remove_ephemeral(self, feature: Polyline) -> bool:
        if feature in self._ephemeral:
            self._ephemeral.remove(feature)
            logger.debug(f"[WayNetwork] Overlay -{feature.id}")
            return True
        return False

    def ephemeral_features(self) -> List[Polyline]:
        return list(self._ephemeral)

    def query_ephemeral_containing(self, coordinate: Sequence[float]) -> List[Polyline]:
        return [f for f in self._ephemeral if f.contains(coordinate)]
