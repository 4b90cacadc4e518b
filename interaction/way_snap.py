"""
WaySnap - Way Snap Interaction
==============================

Session-Zustandsmaschine für das Zeichnen und Umformen einer Polylinie
entlang eines Referenz-Netzwerks (z.B. OSM-Straßen).

Ablauf:
- Move: Sketch-Punkt folgt dem Cursor, bei aktiver Session zusätzlich die
  Sketch-Linie vom Tip bis zum Cursor
- Klick im Idle: neues Feature anlegen oder bestehendes Feature editieren
- Klick bei aktiver Session: Sketch-Linie committen, Klick auf den Tip beendet

Verwendung:
    interaction = WaySnapInteraction(WaySnapOptions(source=target, way_source=ways))
    interaction.ended.connect(on_end)

    interaction.handle_pointer_event(PointerEvent.move(0, -50))
    interaction.handle_pointer_event(PointerEvent.click(0, -50))
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional

from loguru import logger
from PySide6.QtCore import QObject, Signal

from config.feature_flags import is_enabled
from network.feature_collection import FeatureCollection
from network.way_network import WayNetwork
from osm.way_source import OSMWaySource, OSMWaySourceOptions
from sketcher.geometry import Coordinate, Polyline, as_coordinate, same_coordinate
from sketcher.operations import (
    CandidateLocator, CandidateSet, EditSplitOperation, SketchLineBuilder, SketchLineResult
)

from .events import PointerEvent, WaySnapEvent, WaySnapEventType
from .overlay import SketchFeature, SketchOverlay
from .viewport import Viewport, fit_coordinates


@dataclass
class WaySnapOptions:
    """Optionen der Way-Snap Interaction"""
    source: FeatureCollection  # Ziel-Collection der Features
    way_source: Optional[WayNetwork] = None  # None = OSMWaySource aus den Overpass-Optionen
    viewport: Optional[Viewport] = None
    auto_focus: bool = True  # Ansicht automatisch auf nächste Candidates fitten
    focus_padding: float = 50
    allow_create: bool = True
    allow_edit: bool = True

    # Nur für die Default-Way-Source (way_source=None)
    maximum_resolution: float = 0.0
    fetch_buffer_size: float = 0.0
    overpass_endpoint_url: Optional[str] = None


class SessionMode(Enum):
    IDLE = auto()
    CREATE = auto()
    EDIT = auto()


class WaySnapInteraction(QObject):
    """
    Way-Snap Interaction.

    Hält die committed Vertices der aktiven Polylinie, den Draft-Rest im
    Edit-Modus und die abgeleiteten Candidates/Sketch-Geometrien.
    Es gibt immer höchstens eine aktive Polylinie.

    Signals:
        started: Session startet (Create oder Edit)
        create_started: Neues Feature angelegt
        edit_started: Bestehendes Feature im Edit-Modus
        updated: Neue Vertices committed
        ended: Session beendet (genau einmal pro Session)
    """

    started = Signal(object)
    create_started = Signal(object)
    edit_started = Signal(object)
    updated = Signal(object)
    ended = Signal(object)

    def __init__(self, options: WaySnapOptions, parent=None):
        super().__init__(parent)
        self.options = options
        if options.way_source is None:
            options.way_source = OSMWaySource(OSMWaySourceOptions(
                maximum_resolution=options.maximum_resolution,
                fetch_buffer_size=options.fetch_buffer_size,
                overpass_endpoint_url=options.overpass_endpoint_url,
            ))

        # Session-Zustand
        self._mode = SessionMode.IDLE
        self._coordinates: List[Coordinate] = []
        self._active_feature: Optional[Polyline] = None
        self._draft: Optional[Polyline] = None
        self._original_coordinates: Optional[List[Coordinate]] = None

        # Abgeleitete Vorschau
        self._sketch_point: Optional[Coordinate] = None
        self._sketch_line: Optional[SketchLineResult] = None
        self._candidates = CandidateSet()

        self._active = True

        self._locator = CandidateLocator(options.way_source)
        self._builder = SketchLineBuilder()
        self._splitter = EditSplitOperation(options.source)
        self.overlay = SketchOverlay(self)

        options.way_source.changed.connect(self._on_ways_changed)

    # ==================== OPTIONEN ====================

    @property
    def allow_create(self) -> bool:
        return self.options.allow_create

    @allow_create.setter
    def allow_create(self, value: bool):
        self.options.allow_create = bool(value)

    @property
    def allow_edit(self) -> bool:
        return self.options.allow_edit

    @allow_edit.setter
    def allow_edit(self, value: bool):
        self.options.allow_edit = bool(value)

    @property
    def auto_focus(self) -> bool:
        return self.options.auto_focus

    @auto_focus.setter
    def auto_focus(self, value: bool):
        self.options.auto_focus = bool(value)

    @property
    def focus_padding(self) -> float:
        return self.options.focus_padding

    @focus_padding.setter
    def focus_padding(self, value: float):
        self.options.focus_padding = float(value)

    def get_active(self) -> bool:
        return self._active

    def set_active(self, active: bool):
        """
        (De-)aktiviert die Interaction. Eine laufende Session wird beim
        Deaktivieren abgebrochen (siehe abort()).
        """
        active = bool(active)
        if active == self._active:
            return
        self._active = active
        if not active:
            if self._mode != SessionMode.IDLE:
                self.abort()
            self._sketch_point = None
        self.overlay.visible = active
        self._refresh_overlay()

    # ==================== ZUSTAND ====================

    @property
    def mode(self) -> SessionMode:
        return self._mode

    def get_active_feature(self) -> Optional[Polyline]:
        return self._active_feature

    def get_way_source(self) -> WayNetwork:
        return self.options.way_source

    @property
    def coordinates(self) -> List[Coordinate]:
        """Committed Vertices der aktiven Polylinie (Kopie)."""
        return list(self._coordinates)

    @property
    def sketch_point(self) -> Optional[Coordinate]:
        return self._sketch_point

    @property
    def sketch_line(self) -> Optional[List[Coordinate]]:
        return list(self._sketch_line.coordinates) if self._sketch_line else None

    @property
    def merge_pending(self) -> bool:
        return bool(self._sketch_line and self._sketch_line.merge_pending)

    @property
    def candidate_lines(self) -> List[Polyline]:
        return list(self._candidates.lines)

    @property
    def candidate_points(self) -> List[Coordinate]:
        return list(self._candidates.points)

    @property
    def draft_line(self) -> Optional[Polyline]:
        return self._draft

    def get_sketch_features(self) -> List[SketchFeature]:
        return self.overlay.features

    # ==================== EVENTS ====================

    def _signal_for(self, event_type: WaySnapEventType):
        return {
            WaySnapEventType.WAYSNAPSTART: self.started,
            WaySnapEventType.WAYSNAPSTARTCREATE: self.create_started,
            WaySnapEventType.WAYSNAPSTARTEDIT: self.edit_started,
            WaySnapEventType.WAYSNAPUPDATE: self.updated,
            WaySnapEventType.WAYSNAPEND: self.ended,
        }[event_type]

    def on(self, event_type: WaySnapEventType, callback: Callable[[WaySnapEvent], None]):
        """Abonniert ein Lifecycle-Event."""
        self._signal_for(event_type).connect(callback)

    def off(self, event_type: WaySnapEventType, callback: Callable[[WaySnapEvent], None]):
        self._signal_for(event_type).disconnect(callback)

    def _dispatch(self, event_type: WaySnapEventType):
        self._signal_for(event_type).emit(WaySnapEvent(event_type, self._active_feature))

    # ==================== POINTER ====================

    def handle_pointer_event(self, event: PointerEvent) -> bool:
        """
        Verarbeitet ein Pointer-Event.

        Returns:
            True wenn das Event konsumiert wurde, False lässt dem Host
            sein Default-Verhalten (z.B. Pan).
        """
        if not self._active:
            return False
        coordinate = as_coordinate(event.coordinate)
        if event.type == PointerEvent.MOVE:
            self._handle_move(coordinate)
            return False
        if event.type == PointerEvent.CLICK:
            return self._handle_click(coordinate)
        return False

    def _handle_move(self, coordinate: Coordinate):
        self._update_sketch_point(coordinate)
        if self._coordinates:
            self._update_sketch_line(coordinate)
        self._refresh_overlay()

    def _handle_click(self, coordinate: Coordinate) -> bool:
        if not self._coordinates:
            return self._start(coordinate)

        if same_coordinate(self._coordinates[-1], coordinate):
            self.finish()
            return True

        if self._sketch_line is not None:
            self._commit(self._sketch_line)
            return True

        return False

    # ==================== SESSION ====================

    def _start(self, coordinate: Coordinate) -> bool:
        if self.allow_edit:
            result = self._splitter.find_feature(coordinate)
            if result.success:
                self._start_edit(result.data, coordinate)
                return True

        if self.allow_create:
            self._start_create(self._sketch_point or coordinate)
            return True

        return False

    def _start_create(self, coordinate: Coordinate):
        self._mode = SessionMode.CREATE
        self._coordinates = [coordinate]
        self._active_feature = Polyline([coordinate])
        logger.info(f"[WaySnap] Create gestartet bei {coordinate}")

        self._calculate_candidates()
        self._refresh_overlay()
        self._dispatch(WaySnapEventType.WAYSNAPSTART)
        self._dispatch(WaySnapEventType.WAYSNAPSTARTCREATE)

    def _start_edit(self, feature: Polyline, coordinate: Coordinate):
        original = list(feature.coordinates)
        self._splitter.split_at(feature, coordinate)
        data = self._splitter.execute(feature, coordinate, original=original).data

        self._mode = SessionMode.EDIT
        self._active_feature = feature
        self._coordinates = list(data.committed)
        self._original_coordinates = data.original
        self._draft = data.draft
        if self._draft is not None:
            self.options.way_source.insert_ephemeral(self._draft)
        logger.info(f"[WaySnap] Edit gestartet auf {feature.id} bei {coordinate}")

        self._calculate_candidates()
        self._refresh_overlay()
        self._dispatch(WaySnapEventType.WAYSNAPSTART)
        self._dispatch(WaySnapEventType.WAYSNAPSTARTEDIT)

    def _commit(self, sketch_line: SketchLineResult):
        """Übernimmt die Sketch-Linie (ohne ersten Punkt = Tip) als Vertices."""
        self._coordinates.extend(sketch_line.coordinates[1:])
        self._update_feature()
        self._dispatch(WaySnapEventType.WAYSNAPUPDATE)

        if sketch_line.merge_pending:
            logger.info(f"[WaySnap] Draft {self._draft.id if self._draft else '-'} wieder angeschlossen")
            self._release_draft()
            self.finish()

    def _update_feature(self):
        feature = self._active_feature
        feature.set_coordinates(self._coordinates)
        if len(self._coordinates) > 1 and not self.options.source.contains(feature):
            self.options.source.add(feature)

        self._sketch_line = None
        self._calculate_candidates()
        self._refresh_overlay()

    def finish(self):
        """
        Beendet die Session (wie Doppelklick auf den letzten Vertex).
        Ein nicht wieder angeschlossener Draft-Rest wird verworfen.
        """
        if self._mode == SessionMode.IDLE:
            return
        feature = self._active_feature

        if self.auto_focus and len(feature) >= 2:
            fit_coordinates(self.options.viewport, feature.coordinates, self.focus_padding)

        if self._draft is not None:
            logger.info(f"[WaySnap] Draft {self._draft.id} verworfen, {feature.id} bleibt gekürzt")
            self._release_draft()

        # Einzelner Vertex ist keine Linie mehr
        if len(feature) < 2 and self.options.source.contains(feature):
            self.options.source.remove(feature)
            logger.info(f"[WaySnap] {feature.id} hat weniger als 2 Vertices, aus Ziel entfernt")

        logger.info(f"[WaySnap] Session beendet: {feature.id} mit {len(feature)} Vertices")
        self._reset()
        self._dispatch_end(feature)

    def abort(self):
        """
        Bricht die Session ohne abschließenden Klick ab.

        Edit: Feature bekommt exakt seine Geometrie vor dem Edit zurück.
        Create: Feature wird wieder aus der Ziel-Collection entfernt.
        """
        if self._mode == SessionMode.IDLE:
            return
        feature = self._active_feature

        if self._mode == SessionMode.EDIT and self._original_coordinates is not None:
            feature.set_coordinates(self._original_coordinates)
        elif self._mode == SessionMode.CREATE:
            self.options.source.remove(feature)

        self._release_draft()
        logger.info(f"[WaySnap] Session abgebrochen: {feature.id} ({self._mode.name})")
        self._reset()
        self._dispatch_end(feature)

    def _dispatch_end(self, feature: Polyline):
        self.ended.emit(WaySnapEvent(WaySnapEventType.WAYSNAPEND, feature))

    def _release_draft(self):
        if self._draft is not None:
            self.options.way_source.remove_ephemeral(self._draft)
            self._draft = None

    def _reset(self):
        self._mode = SessionMode.IDLE
        self._coordinates = []
        self._active_feature = None
        self._original_coordinates = None
        self._sketch_point = None
        self._sketch_line = None
        self._candidates = CandidateSet()
        self.overlay.clear()

    # ==================== VORSCHAU ====================

    def _calculate_candidates(self, fit: bool = True):
        tip = self._coordinates[-1]
        result = self._locator.execute(tip)
        self._candidates = result.data if result.success else CandidateSet(tip=tip)
        if fit and self.auto_focus:
            self._fit_candidates(tip)

    def _fit_candidates(self, tip: Coordinate):
        """Fit auf alle Candidate-Punkte, die noch nicht Teil der aktiven Linie sind."""
        feature = self._active_feature
        coordinates = [
            p for p in self._candidates.points
            if same_coordinate(p, tip) or not feature.contains(p)
        ]
        fit_coordinates(self.options.viewport, coordinates, self.focus_padding)

    def _update_sketch_point(self, coordinate: Coordinate):
        if not self._coordinates and not self.allow_create:
            self._sketch_point = None
            return
        self._sketch_point = coordinate

    def _update_sketch_line(self, coordinate: Coordinate):
        result = self._builder.execute(self._coordinates[-1], coordinate, self._candidates.lines, self._draft)
        self._sketch_line = result.data if result.success else None
        if is_enabled("waysnap_debug_logging"):
            logger.debug(f"[WaySnap] Sketch-Linie zu {coordinate}: {result.status.name} "
                         f"{result.message} {self.sketch_line}")

    def _refresh_overlay(self):
        self.overlay.rebuild(
            sketch_line=self.sketch_line,
            candidate_lines=self._candidates.lines,
            candidate_points=self._candidates.points,
            draft=self._draft,
            sketch_point=self._sketch_point,
        )

    def _on_ways_changed(self):
        """Netzwerk hat neue Daten: Candidates neu, ohne Vertices oder Fit zu ändern."""
        if self._mode == SessionMode.IDLE:
            return
        logger.debug(f"[WaySnap] Way-Netzwerk geändert, Candidates für {self._coordinates[-1]} neu")
        self._calculate_candidates(fit=False)
        if self._sketch_point is not None:
            self._update_sketch_line(self._sketch_point)
        self._refresh_overlay()
