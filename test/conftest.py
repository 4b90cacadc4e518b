import pytest

from config.feature_flags import set_flag
from interaction import RecordingViewport, WaySnapInteraction, WaySnapOptions
from network import FeatureCollection
from sketcher.geometry import Polyline

from waysnap_test_utils import EDIT_FEATURE_COORDINATES, default_way_network


# Global Feature Flag Defaults - Single Source of Truth for Test Isolation
# ========================================================================
# WICHTIG: Jeder Test muss mit sauberen Feature-Flags starten.
# Diese Defaults müssen mit config/feature_flags.py synchron gehalten werden.
FEATURE_FLAG_DEFAULTS = {
    # Debug-Modi
    "waysnap_debug_logging": False,
    "osm_debug_logging": False,
}


@pytest.fixture(autouse=True)
def _global_feature_flag_isolation():
    """
    Globale Feature-Flag-Isolation.

    Stellt sicher, dass jeder Test mit sauberen, deterministischen
    Feature-Flags startet.
    """
    for key, value in FEATURE_FLAG_DEFAULTS.items():
        set_flag(key, value)

    yield

    for key, value in FEATURE_FLAG_DEFAULTS.items():
        set_flag(key, value)


@pytest.fixture
def way_network():
    """Frisches Referenz-Netzwerk pro Test."""
    return default_way_network()


@pytest.fixture
def target():
    """Leere Ziel-Collection (Create-Szenarien)."""
    return FeatureCollection()


@pytest.fixture
def edit_feature():
    return Polyline(EDIT_FEATURE_COORDINATES, id="edit_me")


@pytest.fixture
def edit_target(edit_feature):
    """Ziel-Collection mit einem bestehenden Feature (Edit-Szenarien)."""
    return FeatureCollection([edit_feature])


@pytest.fixture
def viewport():
    return RecordingViewport()


@pytest.fixture
def interaction(target, way_network):
    return WaySnapInteraction(WaySnapOptions(source=target, way_source=way_network))


@pytest.fixture
def edit_interaction(edit_target, way_network):
    return WaySnapInteraction(WaySnapOptions(source=edit_target, way_source=way_network))
