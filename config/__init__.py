"""
WaySnap - Configuration Module
==============================

Zentrale Konfiguration für Debug-Flags und Versionsinformationen.
"""

from .feature_flags import is_enabled, set_flag, get_all_flags, FEATURE_FLAGS
from .version import APP_NAME, VERSION, VERSION_STRING, get_version_info
