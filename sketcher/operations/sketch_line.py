"""
WaySnap - Sketch Line Builder
=============================

Berechnet die Vorschau-Linie vom Tip der aktiven Polylinie bis zum Cursor.

Regeln:
1. Nur Candidate-Linien, die den Cursor enthalten, kommen in Frage.
2. Die erste Linie mit nicht-leerem Weg gewinnt (Reihenfolge der Candidates).
   Loops nutzen den kürzeren Bogen; Tip == Cursor auf einem Loop bedeutet
   "keine Vorschau".
3. Ohne Ergebnis: gerade Strecke [tip, cursor].
4. Endet ein Candidate-Weg auf dem Draft-Rest, wird der Rest angehängt und
   die Vorschau als "merge pending" markiert.

Verwendung:
    from sketcher.operations import SketchLineBuilder

    builder = SketchLineBuilder()
    result = builder.build(tip, pointer, candidates.lines, draft)
    if not result.is_empty:
        preview = result.coordinates
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence
from loguru import logger

from config.feature_flags import is_enabled
from sketcher.geometry import Coordinate, Polyline, as_coordinate, same_coordinate
from sketcher.line_string import shorter_arc, split
from .base import SketchOperation, OperationResult


@dataclass
class SketchLineResult:
    """Ergebnis einer Sketch-Linien-Berechnung."""
    coordinates: List[Coordinate] = field(default_factory=list)
    merge_pending: bool = False
    source_id: Optional[str] = None  # None = gerade Strecke

    @property
    def is_empty(self) -> bool:
        return len(self.coordinates) < 2

    @property
    def follows_candidate(self) -> bool:
        return self.source_id is not None

    @classmethod
    def empty(cls) -> 'SketchLineResult':
        return cls()


class SketchLineBuilder(SketchOperation):
    """
    Sketch-Linie entlang der Candidate-Linien.

    Fehlende Koordinaten (z.B. Split hat den Tip nicht eingefügt) führen zu
    einer leeren Vorschau statt zu einer Exception.
    """

    def __init__(self):
        super().__init__(source=None)

    def walk(self, line: Polyline, tip: Coordinate, pointer: Coordinate) -> Optional[List[Coordinate]]:
        """
        Weg auf einer einzelnen Candidate-Linie von `tip` bis `pointer`.

        Returns:
            Koordinaten (inklusive beider Enden), leere Liste wenn die Linie
            keinen Weg liefert, None wenn die Vorschau ganz entfallen muss.
        """
        if line.is_loop and same_coordinate(tip, pointer):
            return None

        line = split(split(line, tip), pointer)

        tip_idx = line.index_of(tip)
        if tip_idx < 0:
            return []
        pointer_idx = line.index_of(pointer)
        if pointer_idx < 0:
            return []

        if line.is_loop:
            return shorter_arc(line, tip_idx, pointer_idx)

        if pointer_idx == tip_idx:
            return []
        if tip_idx < pointer_idx:
            return list(line.coordinates[tip_idx:pointer_idx + 1])
        return list(reversed(line.coordinates[pointer_idx:tip_idx + 1]))

    def build(self, tip: Sequence[float], pointer: Sequence[float],
              candidate_lines: Sequence[Polyline],
              draft: Optional[Polyline] = None) -> SketchLineResult:
        tip = as_coordinate(tip)
        pointer = as_coordinate(pointer)

        result = SketchLineResult.empty()
        for line in candidate_lines:
            if not line.contains(pointer):
                continue
            coordinates = self.walk(line, tip, pointer)
            if coordinates is None:
                if is_enabled("waysnap_debug_logging"):
                    logger.debug(f"[SketchLine] Loop {line.id}: Tip == Cursor, keine Vorschau")
                return SketchLineResult.empty()
            if coordinates:
                result = SketchLineResult(coordinates=coordinates, source_id=line.id)
                break

        if result.is_empty:
            if same_coordinate(tip, pointer):
                return SketchLineResult.empty()
            return SketchLineResult(coordinates=[tip, pointer])

        if draft is not None:
            self._merge_draft(result, draft)
        return result

    def _merge_draft(self, result: SketchLineResult, draft: Polyline):
        """Hängt den Draft-Rest ab dem Verbindungspunkt an."""
        junction = result.coordinates[-1]
        if len(draft) < 2 or not draft.contains(junction):
            return
        draft = split(draft, junction)
        idx = draft.index_of(junction)
        if idx < 0:
            return
        result.coordinates.extend(draft.coordinates[idx + 1:])
        result.merge_pending = True
        if is_enabled("waysnap_debug_logging"):
            logger.debug(f"[SketchLine] Merge mit Draft {draft.id} ab Index {idx}")

    def execute(self, tip: Sequence[float], pointer: Sequence[float],
                candidate_lines: Sequence[Polyline],
                draft: Optional[Polyline] = None) -> OperationResult:
        result = self.build(tip, pointer, candidate_lines, draft)
        if result.is_empty:
            return OperationResult.no_target("Keine Sketch-Linie")
        if result.follows_candidate:
            return OperationResult.ok(f"Weg entlang {result.source_id}", result)
        return OperationResult.warning("Gerade Strecke (kein Candidate)", result)
