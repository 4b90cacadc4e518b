from loguru import logger

from config import get_all_flags, get_version_info, is_enabled, set_flag
from interaction import PointerEvent
from sketcher.operations import CandidateLocator, SketchLineBuilder


def test_debug_flags_default_off():
    assert is_enabled("waysnap_debug_logging") is False
    assert is_enabled("osm_debug_logging") is False
    assert is_enabled("unknown_flag") is False


def test_set_flag_is_isolated_per_test():
    set_flag("waysnap_debug_logging", True)
    assert get_all_flags()["waysnap_debug_logging"] is True


def test_debug_logging_follows_flag(way_network):
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    try:
        candidates = CandidateLocator(way_network).locate((0, 0))
        SketchLineBuilder().build((0, 0), (50, 25), candidates.lines)
        assert not any(m.startswith("[Candidates]") for m in messages)

        set_flag("waysnap_debug_logging", True)
        CandidateLocator(way_network).locate((0, 0))
        assert any(m.startswith("[Candidates]") for m in messages)
    finally:
        logger.remove(handler_id)


def test_version_info():
    info = get_version_info()
    assert info["app_name"] == "WaySnap"
    assert info["version_full"].startswith("v0.3.0")


def test_interaction_logs_sketch_line_status(interaction):
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    try:
        set_flag("waysnap_debug_logging", True)
        interaction.handle_pointer_event(PointerEvent.click(0, -50))
        interaction.handle_pointer_event(PointerEvent.move(-20, -70))
        assert any(m.startswith("[WaySnap] Sketch-Linie") and "WARNING" in m for m in messages)
    finally:
        logger.remove(handler_id)
