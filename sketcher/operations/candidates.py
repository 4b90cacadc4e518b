"""
WaySnap - Candidate Locator
===========================

Findet alle Way-Linien, die durch die Spitze (Tip) der aktiven Polylinie
laufen ("Candidate Lines"), und alle Vertices dieser Linien
("Candidate Points").

Verwendung:
    from sketcher.operations import CandidateLocator

    locator = CandidateLocator(way_network)
    candidates = locator.locate(tip)
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, TYPE_CHECKING
from loguru import logger

from config.feature_flags import is_enabled
from sketcher.geometry import Coordinate, Polyline, as_coordinate
from .base import SketchOperation, OperationResult

if TYPE_CHECKING:
    from network.way_network import WayNetwork


@dataclass
class CandidateSet:
    """Abgeleitete, flüchtige Candidates für einen Tip."""
    tip: Optional[Coordinate] = None
    lines: List[Polyline] = field(default_factory=list)
    points: List[Coordinate] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.lines


class CandidateLocator(SketchOperation):
    """
    Candidate-Suche auf dem Way-Netzwerk.

    Das echte Netzwerk wird zuerst abgefragt, danach das ephemere Overlay
    (Draft-Rest beim Editieren) als zweite, explizite Quelle. Jede Treffer-Linie
    wird als Kopie mit gleicher ID zurückgegeben und markiert
    (`candidate=True`, Overlay-Linien zusätzlich `draft=True`).
    """

    def __init__(self, network: 'WayNetwork'):
        super().__init__(network)

    def locate(self, tip: Sequence[float]) -> CandidateSet:
        tip = as_coordinate(tip)
        lines = [f.copy(candidate=True) for f in self.source.query_containing(tip)]
        lines += [f.copy(candidate=True, draft=True) for f in self.source.query_ephemeral_containing(tip)]

        # Gemeinsame Knotenpunkte bleiben absichtlich doppelt
        points = [c for line in lines for c in line.coordinates]

        if is_enabled("waysnap_debug_logging"):
            logger.debug(f"[Candidates] tip={tip} lines={[l.id for l in lines]} points={len(points)}")
        return CandidateSet(tip=tip, lines=lines, points=points)

    def execute(self, tip: Sequence[float]) -> OperationResult:
        candidates = self.locate(tip)
        if candidates.is_empty:
            return OperationResult.no_target("Keine Way-Linie am Tip")
        return OperationResult.ok(f"{len(candidates.lines)} Candidates", candidates)
