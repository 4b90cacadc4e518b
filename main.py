#!/usr/bin/env python3
"""
WaySnap - Headless Demo
Spielt eine Zeichen- und eine Edit-Session auf einem kleinen Straßennetz ab
"""

import sys
import os

from loguru import logger

# Füge Projektverzeichnis zum Pfad hinzu
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def build_demo_network():
    """Kreuzung mit Loop, wie im Test-Netzwerk"""
    from network import WayNetwork
    from sketcher import Polyline

    return WayNetwork([
        Polyline([(0, -50), (0, 0)], id="down_to_center"),
        Polyline([(0, 0), (-25, 25), (-50, 25)], id="center_turn_left"),
        Polyline([(0, 0), (0, 10)], id="center_to_loop"),
        Polyline([(0, 10), (-10, 10), (-10, 20), (0, 20), (10, 20), (10, 10), (0, 10)], id="loop"),
        Polyline([(0, 20), (0, 30)], id="loop_extended"),
        Polyline([(0, 0), (25, 25), (50, 25)], id="center_turn_right"),
    ])


def main():
    """Startet die Demo"""
    from config.version import VERSION_FULL
    from config.feature_flags import set_flag
    from interaction import PointerEvent, RecordingViewport, WaySnapInteraction, WaySnapOptions
    from network import FeatureCollection

    debug = "--debug" in sys.argv[1:]
    logger.remove()
    logger.add(sys.stderr, format="<level>{level: <8}</level> | {message}", level="DEBUG" if debug else "INFO")
    set_flag("waysnap_debug_logging", debug)

    logger.info(f"WaySnap {VERSION_FULL}")

    target = FeatureCollection()
    viewport = RecordingViewport()
    interaction = WaySnapInteraction(WaySnapOptions(
        source=target,
        way_source=build_demo_network(),
        viewport=viewport,
    ))
    interaction.ended.connect(lambda e: logger.info(f"END {e.feature.id}: {e.feature.coordinates}"))

    def click(x, y):
        interaction.handle_pointer_event(PointerEvent.move(x, y))
        interaction.handle_pointer_event(PointerEvent.click(x, y))

    # Neues Feature: Süden -> Kreuzung -> rechts abbiegen, Doppelklick beendet
    for x, y in [(0, -50), (0, 0), (50, 25), (50, 25)]:
        click(x, y)

    # Edit: ab der Kreuzung nach links umleiten
    for x, y in [(0, 0), (-50, 25), (-50, 25)]:
        click(x, y)

    for feature in target:
        logger.info(f"Feature {feature.id}: {feature.coordinates}")
    logger.info(f"Viewport-Fits: {len(viewport.fits)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
