"""
WaySnap - Viewport Anbindung
Kamera/Viewport liegt beim Host, die Engine ruft nur fit_to_extent() auf.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

from sketcher.geometry import Coordinate, Extent, extent_of


class Viewport(ABC):
    """Schnittstelle zum Host-Viewport"""

    @abstractmethod
    def fit_to_extent(self, extent: Extent, padding: float):
        """Passt die Ansicht an `extent` an, mit `padding` auf allen Seiten."""
        pass


class RecordingViewport(Viewport):
    """Viewport ohne Kamera, merkt sich nur die Fit-Aufrufe (Tests, Headless)."""

    def __init__(self):
        self.fits: List[Tuple[Extent, float]] = []

    def fit_to_extent(self, extent: Extent, padding: float):
        self.fits.append((extent, padding))

    @property
    def last_extent(self):
        return self.fits[-1][0] if self.fits else None


def fit_coordinates(viewport: Viewport, coordinates: Sequence[Coordinate], padding: float) -> bool:
    """
    Fit auf eine Punktmenge. Nur bei mindestens 2 verschiedenen Punkten,
    sonst gibt es keine sinnvolle Ausdehnung.
    """
    if viewport is None:
        return False
    if len(set(coordinates)) < 2:
        return False
    viewport.fit_to_extent(extent_of(coordinates), padding)
    return True
