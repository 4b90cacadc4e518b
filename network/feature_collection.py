"""
WaySnap - Feature Collection
============================

Ziel-Collection der gezeichneten bzw. editierten Polylinien.
"""

from typing import Iterable, Iterator, List, Optional

from PySide6.QtCore import QObject, Signal

from sketcher.geometry import Polyline


class FeatureCollection(QObject):
    """
    Geordnete Collection von Polylinien (Identitäts-Semantik).

    Signals:
        feature_added: Polyline wurde hinzugefügt
        feature_removed: Polyline wurde entfernt
    """

    feature_added = Signal(object)
    feature_removed = Signal(object)

    def __init__(self, features: Optional[Iterable[Polyline]] = None, parent=None):
        super().__init__(parent)
        self._features: List[Polyline] = list(features or [])

    def __len__(self) -> int:
        return len(self._features)

    def __iter__(self) -> Iterator[Polyline]:
        return iter(list(self._features))

    def add(self, feature: Polyline):
        if self.contains(feature):
            return
        self._features.append(feature)
        self.feature_added.emit(feature)

    def remove(self, feature: Polyline) -> bool:
        if not self.contains(feature):
            return False
        self._features = [f for f in self._features if f is not feature]
        self.feature_removed.emit(feature)
        return True

    def contains(self, feature: Polyline) -> bool:
        return any(f is feature for f in self._features)

    def all(self) -> List[Polyline]:
        return list(self._features)
