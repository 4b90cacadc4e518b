"""
WaySnap - Overpass API Response
Datenmodell der Overpass-Antwort mit [out:json] Settings
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class OSMNode:
    id: int
    lat: float
    lon: float
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass
class OSMWay:
    id: int
    nodes: List[int] = field(default_factory=list)
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass
class OverpassResponse:
    """Antwort der Overpass API, nur Nodes und Ways (Relations werden ignoriert)."""
    version: float = 0.0
    generator: str = ""
    nodes: List[OSMNode] = field(default_factory=list)
    ways: List[OSMWay] = field(default_factory=list)
    osm3s: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'OverpassResponse':
        response = cls(
            version=data.get("version", 0.0),
            generator=data.get("generator", ""),
            osm3s=data.get("osm3s", {}),
        )
        for element in data.get("elements", []):
            kind = element.get("type")
            if kind == "node":
                response.nodes.append(OSMNode(
                    id=element["id"],
                    lat=float(element["lat"]),
                    lon=float(element["lon"]),
                    tags=element.get("tags", {}),
                ))
            elif kind == "way":
                response.ways.append(OSMWay(
                    id=element["id"],
                    nodes=list(element.get("nodes", [])),
                    tags=element.get("tags", {}),
                ))
        return response
