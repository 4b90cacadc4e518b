"""
WaySnap - Projektionen
Umrechnung zwischen EPSG:4326 (lon/lat) und EPSG:3857 (Web Mercator)
"""

import math
from typing import Sequence

from sketcher.geometry import Coordinate, Extent

EARTH_RADIUS = 6378137.0

EPSG_4326 = "EPSG:4326"
EPSG_3857 = "EPSG:3857"
SUPPORTED = (EPSG_4326, EPSG_3857)


def _check(code: str):
    if code not in SUPPORTED:
        raise ValueError(f"Projektion {code} nicht unterstützt (nur {', '.join(SUPPORTED)})")


def transform(coordinate: Sequence[float], source: str, destination: str) -> Coordinate:
    _check(source)
    _check(destination)
    x, y = float(coordinate[0]), float(coordinate[1])
    if source == destination:
        return (x, y)
    if source == EPSG_4326:
        mx = EARTH_RADIUS * math.radians(x)
        my = EARTH_RADIUS * math.log(math.tan(math.pi / 4 + math.radians(y) / 2))
        return (mx, my)
    lon = math.degrees(x / EARTH_RADIUS)
    lat = math.degrees(2 * math.atan(math.exp(y / EARTH_RADIUS)) - math.pi / 2)
    return (lon, lat)


def transform_extent(extent: Extent, source: str, destination: str) -> Extent:
    x1, y1 = transform((extent[0], extent[1]), source, destination)
    x2, y2 = transform((extent[2], extent[3]), source, destination)
    return (min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))


def buffer_extent(extent: Extent, size: float) -> Extent:
    return (extent[0] - size, extent[1] - size, extent[2] + size, extent[3] + size)


def contains_extent(outer: Extent, inner: Extent) -> bool:
    return (outer[0] <= inner[0] and outer[1] <= inner[1]
            and inner[2] <= outer[2] and inner[3] <= outer[3])
