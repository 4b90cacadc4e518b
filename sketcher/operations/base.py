"""
WaySnap - Base Classes for Sketch Operations
============================================

Gemeinsames Ergebnis-Format der Way-Snap Operationen. Die Interaction
wertet nur den Status aus, Details liegen in `data`:

    CandidateLocator     -> CandidateSet       (NO_TARGET: kein Way am Tip)
    SketchLineBuilder    -> SketchLineResult   (WARNING: gerade Strecke)
    EditSplitOperation   -> EditSplitData
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any
from enum import Enum, auto


class ResultStatus(Enum):
    """Status einer Operation."""
    SUCCESS = auto()
    WARNING = auto()  # Ergebnis vorhanden, aber nur Fallback
    NO_TARGET = auto()  # Nichts zum Snappen


@dataclass
class OperationResult:
    status: ResultStatus
    message: str = ""
    data: Any = None

    @property
    def success(self) -> bool:
        return self.status in (ResultStatus.SUCCESS, ResultStatus.WARNING)

    @classmethod
    def ok(cls, message: str = "", data: Any = None) -> 'OperationResult':
        return cls(ResultStatus.SUCCESS, message, data)

    @classmethod
    def warning(cls, message: str, data: Any = None) -> 'OperationResult':
        return cls(ResultStatus.WARNING, message, data)

    @classmethod
    def no_target(cls, message: str = "Kein Ziel gefunden") -> 'OperationResult':
        return cls(ResultStatus.NO_TARGET, message)


class SketchOperation(ABC):
    """
    Operation auf einer Datenquelle (Way-Netzwerk oder Ziel-Collection).
    Jeder Aufruf von execute() liefert ein eigenes OperationResult.
    """

    def __init__(self, source):
        self.source = source

    @abstractmethod
    def execute(self, *args, **kwargs) -> OperationResult:
        pass
