"""Fixed values shared by the settings model and reducer."""

from __future__ import annotations

from typing import Final

# Altitude ceiling defaults (feet / flight level units)
DEFAULT_MAX_LEVEL: Final = 660
MAX_LEVEL_LIMIT: Final = 65535

# Literal tokens understood by the generic ``Set`` action
RADIO_ON_TOKEN: Final = "yes"
HOME_NONE_TOKEN: Final = "no"

# Environment variable naming an explicit settings snapshot file
SETTINGS_ENV_VAR: Final = "ASSELECT_SETTINGS"
