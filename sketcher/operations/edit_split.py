"""
WaySnap - Edit Split Operation
==============================

Startet den Edit-Modus auf einer bestehenden Polylinie: die Linie wird am
angeklickten Vertex geteilt. Der Anfang bleibt als aktive Geometrie stehen,
der Rest wird als Draft beiseitegelegt.

Verwendung:
    from sketcher.operations import EditSplitOperation

    op = EditSplitOperation(target_collection)
    result = op.find_feature(click)

    if result.success:
        feature = op.split_at(result.data, click)
        data = op.execute(feature, click).data
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, TYPE_CHECKING
from loguru import logger

from sketcher.geometry import Coordinate, Polyline, as_coordinate
from sketcher.line_string import split_coordinates
from .base import SketchOperation, OperationResult

if TYPE_CHECKING:
    from network.feature_collection import FeatureCollection


class EditSplitError(ValueError):
    """Vertrag verletzt: Klick ist kein Vertex der Ziel-Polylinie."""


@dataclass
class EditSplitData:
    """Ergebnis eines Edit-Splits."""
    feature: Polyline
    committed: List[Coordinate]
    draft: Optional[Polyline]  # None wenn am letzten Vertex geklickt wurde
    original: List[Coordinate] = field(default_factory=list)  # Geometrie vor dem Edit


class EditSplitOperation(SketchOperation):
    """
    Edit-Modus Splitter.

    Trennt Suche (find_feature) von Ausführung (execute). execute() kürzt die
    Live-Geometrie sofort auf den behaltenen Anfang.
    """

    def __init__(self, collection: 'FeatureCollection'):
        super().__init__(collection)

    def find_feature(self, coordinate: Sequence[float]) -> OperationResult:
        """Erstes Feature der Ziel-Collection, auf dem `coordinate` liegt."""
        for feature in self.source.all():
            if feature.contains(coordinate):
                return OperationResult.ok(data=feature)
        return OperationResult.no_target("Kein editierbares Feature unter dem Cursor")

    def split_at(self, feature: Polyline, click: Sequence[float]) -> Polyline:
        """
        Fügt den Klickpunkt als Vertex in die Live-Geometrie ein, wenn er auf
        einem Segment liegt. Danach gilt der Vertrag von execute().
        """
        if not feature.has_vertex(click):
            feature.set_coordinates(split_coordinates(feature.coordinates, click))
        return feature

    def execute(self, feature: Polyline, click: Sequence[float],
                original: Optional[Sequence[Coordinate]] = None) -> OperationResult:
        """
        Teilt `feature` am Vertex `click`.

        Args:
            feature: Polylinie aus der Ziel-Collection
            click: Exakter Vertex von `feature`
            original: Geometrie vor einem vorherigen split_at(), für Restore

        Returns:
            OperationResult mit EditSplitData in `data`

        Raises:
            EditSplitError: Feature nicht in der Collection oder Klick kein Vertex
        """
        click = as_coordinate(click)
        if not self.source.contains(feature):
            raise EditSplitError(f"Feature {feature.id} ist nicht in der Ziel-Collection")

        idx = feature.index_of(click)
        if idx < 0:
            raise EditSplitError(f"{click} ist kein Vertex von Feature {feature.id}")

        coordinates = list(feature.coordinates)
        committed = coordinates[:idx + 1]
        suffix = coordinates[idx:]

        draft = None
        if len(suffix) >= 2:
            draft = Polyline(suffix, id=f"{feature.id}:draft",
                             properties={"draft": True, "origin_id": feature.id})

        feature.set_coordinates(committed)
        logger.debug(f"[EditSplit] {feature.id} an Index {idx}: "
                     f"{len(committed)} behalten, Draft {len(suffix) if draft else 0}")

        data = EditSplitData(
            feature=feature,
            committed=list(committed),
            draft=draft,
            original=list(original) if original is not None else coordinates,
        )
        return OperationResult.ok(f"{feature.id} geteilt", data)
