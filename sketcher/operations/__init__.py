"""
WaySnap - Sketch Operations Module
==================================

Die Bausteine der Way-Snap Engine als eigenständige, testbare Klassen.

Verwendung:
    from sketcher.operations import CandidateLocator, SketchLineBuilder

    candidates = CandidateLocator(way_network).locate(tip)
    result = SketchLineBuilder().build(tip, pointer, candidates.lines)

    if not result.is_empty:
        # Vorschau anzeigen
"""

from .base import OperationResult, ResultStatus, SketchOperation
from .candidates import CandidateLocator, CandidateSet
from .sketch_line import SketchLineBuilder, SketchLineResult
from .edit_split import EditSplitOperation, EditSplitData, EditSplitError

__all__ = [
    # Core
    'OperationResult',
    'ResultStatus',
    'SketchOperation',
    # Candidates
    'CandidateLocator',
    'CandidateSet',
    # Sketch Line
    'SketchLineBuilder',
    'SketchLineResult',
    # Edit Split
    'EditSplitOperation',
    'EditSplitData',
    'EditSplitError',
]
