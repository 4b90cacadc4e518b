"""
WaySnap - Feature Flags
=======================

Debug-Schalter zur Laufzeit. Pointer-Move Pfade loggen nur, wenn das
entsprechende Flag aktiv ist, damit das Log bei normaler Nutzung ruhig bleibt.
"""

from typing import Dict

FEATURE_FLAGS: Dict[str, bool] = {
    # Debug-Modi
    "waysnap_debug_logging": False,  # Sketch-Linie, Candidates, Pointer-Events
    "osm_debug_logging": False,  # Overpass Requests und Cache-Verhalten
}


def is_enabled(flag: str) -> bool:
    """
    Prüft ob ein Feature-Flag aktiviert ist.

    Args:
        flag: Name des Feature-Flags

    Returns:
        True wenn aktiviert, False wenn nicht aktiviert oder unbekannt
    """
    return FEATURE_FLAGS.get(flag, False)


def set_flag(flag: str, value: bool) -> None:
    """
    Setzt ein Feature-Flag zur Laufzeit.
    Nützlich für Tests und Debugging.

    Args:
        flag: Name des Feature-Flags
        value: Neuer Wert
    """
    FEATURE_FLAGS[flag] = value


def get_all_flags() -> Dict[str, bool]:
    """Gibt alle Feature-Flags zurück."""
    return FEATURE_FLAGS.copy()
