"""Settings snapshot, enumerations and serialization.

This package provides:
- Settings: the immutable configuration record and its enumerations
- encode/decode, dumps/loads: the stable external representation
- load_settings: locating and restoring a saved snapshot
"""

from asselect.settings.application import AppPaths, load_settings
from asselect.settings.codec import decode, dumps, encode, loads
from asselect.settings.model import (
    AirType,
    Format,
    Group,
    Overlay,
    Settings,
    parse_airtype,
    parse_format,
    parse_overlay,
)

__all__ = [
    "AirType",
    "AppPaths",
    "Format",
    "Group",
    "Overlay",
    "Settings",
    "decode",
    "dumps",
    "encode",
    "load_settings",
    "loads",
    "parse_airtype",
    "parse_format",
    "parse_overlay",
]
