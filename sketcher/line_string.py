"""
WaySnap Sketcher - LineString Utilities
=======================================

Zustandslose Geometrie-Funktionen auf Polylinien:
- split(): Koordinate als Vertex einfügen, wenn sie auf einem Segment liegt
- shorter_arc(): kürzerer der beiden Wege zwischen zwei Indizes eines Loops

Verwendung:
    from sketcher.line_string import split, shorter_arc

    line = split(line, (0.0, 5.0))
    path = shorter_arc(loop, 1, 5)
"""

from typing import List, Sequence

from .geometry import Coordinate, Polyline, path_length, same_coordinate, segment_contains


def split_index(coordinates: Sequence[Coordinate], coordinate: Sequence[float]) -> int:
    """
    Index, vor dem `coordinate` eingefügt werden muss.

    Returns:
        Index des Segment-Endpunkts, -1 wenn die Koordinate bereits ein
        Vertex ist oder auf keinem Segment liegt.
    """
    if not coordinates or same_coordinate(coordinates[0], coordinate):
        return -1
    for i in range(1, len(coordinates)):
        if same_coordinate(coordinates[i], coordinate):
            return -1
        if segment_contains(coordinates[i - 1], coordinates[i], coordinate):
            return i
    return -1


def split_coordinates(coordinates: Sequence[Coordinate], coordinate: Sequence[float]) -> List[Coordinate]:
    """Wie split(), aber auf einer reinen Koordinatenliste."""
    idx = split_index(coordinates, coordinate)
    if idx < 0:
        return list(coordinates)
    point = (float(coordinate[0]), float(coordinate[1]))
    return list(coordinates[:idx]) + [point] + list(coordinates[idx:])


def split(polyline: Polyline, coordinate: Sequence[float]) -> Polyline:
    """
    Fügt `coordinate` als Vertex ein, wenn sie auf einem Segment der
    Polylinie liegt und noch kein Vertex ist.

    Liegt die Koordinate auf keinem Segment (oder ist sie schon ein Vertex),
    wird die Eingabe unverändert zurückgegeben. Das Ergebnis ist eine neue
    Polylinie mit gleicher ID und gleichen Properties.
    """
    idx = split_index(polyline.coordinates, coordinate)
    if idx < 0:
        return polyline
    result = polyline.copy()
    result.set_coordinates(split_coordinates(polyline.coordinates, coordinate))
    return result


def loop_travel_indices(length: int, from_idx: int, to_idx: int) -> List[int]:
    """
    Läuft mit steigendem Index von `from_idx` bis `to_idx` (inklusive) über
    einen Loop mit `length` Koordinaten und springt dabei über die Naht.

    Beispiel:
        length=5, from_idx=1, to_idx=3 -> [1, 2, 3]
        length=6, from_idx=4, to_idx=3 -> [4, 5, 1, 2, 3]

    Index 0 wird beim Sprung übersprungen, weil er dieselbe Koordinate wie
    der letzte Index trägt.
    """
    if from_idx < to_idx:
        return list(range(from_idx, to_idx + 1))
    return list(range(from_idx, length)) + list(range(1, to_idx + 1))


def shorter_arc(loop: Polyline, from_idx: int, to_idx: int) -> List[Coordinate]:
    """
    Kürzerer Weg auf einem Loop von `from_idx` nach `to_idx`.

    Berechnet Vorwärts- und Rückwärtslauf und gibt die Koordinaten des
    kürzeren zurück, beginnend bei `from_idx`. Bei Gleichstand gewinnt der
    Vorwärtslauf. Leere Liste bei from_idx == to_idx.
    """
    if from_idx == to_idx:
        return []

    coordinates = loop.coordinates
    length = len(coordinates)
    forward = [coordinates[i] for i in loop_travel_indices(length, from_idx, to_idx)]
    backward = [coordinates[i] for i in reversed(loop_travel_indices(length, to_idx, from_idx))]

    if path_length(forward) <= path_length(backward):
        return list(forward)
    return list(backward)
