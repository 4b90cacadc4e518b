"""
WaySnap - Interaction Events
Event-Typen und Payload der Way-Snap Notifications
"""

from dataclasses import dataclass
from enum import Enum

from sketcher.geometry import Polyline


class WaySnapEventType(Enum):
    """Lifecycle-Events einer Way-Snap Session"""
    WAYSNAPSTART = "waysnapstart"  # Session startet (Create oder Edit)
    WAYSNAPSTARTCREATE = "waysnapstartcreate"  # Neues Feature angelegt
    WAYSNAPSTARTEDIT = "waysnapstartedit"  # Bestehendes Feature wird editiert
    WAYSNAPUPDATE = "waysnapupdate"  # Neue Vertices committed
    WAYSNAPEND = "waysnapend"  # Session beendet


@dataclass(frozen=True)
class WaySnapEvent:
    """Payload aller Way-Snap Notifications"""
    type: WaySnapEventType
    feature: Polyline


@dataclass(frozen=True)
class PointerEvent:
    """
    Pointer-Event in Arbeits-Projektion.
    Die Umrechnung von Bildschirm-Pixeln liegt beim Host.
    """
    type: str  # "move" oder "click"
    coordinate: tuple

    MOVE = "move"
    CLICK = "click"

    @classmethod
    def move(cls, x: float, y: float) -> 'PointerEvent':
        return cls(cls.MOVE, (float(x), float(y)))

    @classmethod
    def click(cls, x: float, y: float) -> 'PointerEvent':
        return cls(cls.CLICK, (float(x), float(y)))
