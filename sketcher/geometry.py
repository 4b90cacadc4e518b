"""
WaySnap Sketcher - Geometrie-Primitives
Koordinaten und Polylinien für das Way-Snapping

Koordinaten werden EXAKT verglichen (keine Toleranz). Innerhalb einer
Session werden Koordinaten nie neu berechnet, sondern nur kopiert, daher
bleibt der exakte Vergleich stabil.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple
import uuid

from shapely.geometry import LineString, MultiPoint, Point


Coordinate = Tuple[float, float]
Extent = Tuple[float, float, float, float]  # (min_x, min_y, max_x, max_y)


def as_coordinate(value: Sequence[float]) -> Coordinate:
    """
    FIREWALL: Wandelt Listen, Tupel und NumPy-Werte in ein natives Float-Tupel.
    """
    x, y = value[0], value[1]
    return (float(x), float(y))


def same_coordinate(a: Optional[Sequence[float]], b: Optional[Sequence[float]]) -> bool:
    """Exakter Koordinaten-Vergleich."""
    if a is None or b is None:
        return False
    return a[0] == b[0] and a[1] == b[1]


def index_of(coordinates: Sequence[Coordinate], coordinate: Sequence[float]) -> int:
    """Erster Index einer exakt gleichen Koordinate, -1 wenn nicht vorhanden."""
    for i, c in enumerate(coordinates):
        if same_coordinate(c, coordinate):
            return i
    return -1


def path_length(coordinates: Sequence[Coordinate]) -> float:
    """Euklidische Gesamtlänge einer Koordinatenfolge."""
    if len(coordinates) < 2:
        return 0.0
    return LineString(coordinates).length


def segment_contains(a: Coordinate, b: Coordinate, coordinate: Sequence[float]) -> bool:
    """
    Prüft ob `coordinate` auf dem Segment a-b liegt (randinklusive).
    Kollinear und innerhalb der Bounding-Box des Segments.
    """
    if same_coordinate(a, b):
        return same_coordinate(a, coordinate)
    return LineString([a, b]).intersects(Point(coordinate[0], coordinate[1]))


def extent_of(coordinates: Iterable[Sequence[float]]) -> Optional[Extent]:
    """Bounding-Box einer Punktmenge, None wenn leer."""
    points = [as_coordinate(c) for c in coordinates]
    if not points:
        return None
    return tuple(MultiPoint(points).bounds)


@dataclass(eq=False)
class Polyline:
    """
    Geordnete Koordinatenfolge mit stabiler ID.

    Vergleiche zwischen Polylinien laufen über Identität (eq=False), damit
    Features als Referenz in Events und Collections weitergereicht werden
    können. Eine Polylinie ist ein Loop, wenn erste und letzte Koordinate
    identisch sind.
    """
    coordinates: List[Coordinate] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    properties: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.coordinates = [as_coordinate(c) for c in self.coordinates]

    def __len__(self) -> int:
        return len(self.coordinates)

    @property
    def first(self) -> Optional[Coordinate]:
        return self.coordinates[0] if self.coordinates else None

    @property
    def last(self) -> Optional[Coordinate]:
        return self.coordinates[-1] if self.coordinates else None

    @property
    def is_loop(self) -> bool:
        return len(self.coordinates) > 2 and same_coordinate(self.first, self.last)

    @property
    def length(self) -> float:
        return path_length(self.coordinates)

    @property
    def bounds(self) -> Optional[Extent]:
        return extent_of(self.coordinates)

    def set_coordinates(self, coordinates: Iterable[Sequence[float]]):
        """Ersetzt die Geometrie in-place (die Referenz bleibt erhalten)."""
        self.coordinates = [as_coordinate(c) for c in coordinates]

    def index_of(self, coordinate: Sequence[float]) -> int:
        return index_of(self.coordinates, coordinate)

    def has_vertex(self, coordinate: Sequence[float]) -> bool:
        return self.index_of(coordinate) >= 0

    def contains(self, coordinate: Sequence[float]) -> bool:
        """
        Räumlicher Test: liegt die Koordinate auf der Linie?
        Randinklusive, auch mitten auf einem Segment.
        """
        if len(self.coordinates) < 2:
            return self.has_vertex(coordinate)
        return self.to_shapely().intersects(Point(coordinate[0], coordinate[1]))

    def to_shapely(self) -> LineString:
        return LineString(self.coordinates)

    def copy(self, **properties) -> 'Polyline':
        """Kopie mit gleicher ID, zusätzliche Properties werden gemerged."""
        merged = dict(self.properties)
        merged.update(properties)
        return Polyline(list(self.coordinates), id=self.id, properties=merged)

    def to_dict(self) -> dict:
        """Serialisiert zu Dictionary für JSON."""
        return {
            "type": "Polyline",
            "id": self.id,
            "coordinates": [list(c) for c in self.coordinates],
            "properties": dict(self.properties),
        }

    def __repr__(self):
        return f"Polyline(id={self.id!r}, n={len(self.coordinates)})"
