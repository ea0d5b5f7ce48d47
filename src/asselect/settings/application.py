"""Locating and loading a saved settings snapshot for the command line."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

from asselect.constants import SETTINGS_ENV_VAR
from asselect.settings.codec import loads
from asselect.settings.model import Settings

# Load environment variables (such as ASSELECT_SETTINGS) from .env file(s)
load_dotenv()

logger: Final = logging.getLogger(__name__)


def _default_search_paths() -> list[Path]:
    return [
        Path("settings.yaml"),
        Path("~/.config/asselect/settings.yaml").expanduser(),
        Path("/etc/asselect/settings.yaml"),
    ]


@dataclass
class AppPaths:
    """Where a settings snapshot is looked for when none is given."""

    search_paths: list[Path] = field(default_factory=_default_search_paths)
    env_var: str = SETTINGS_ENV_VAR

    def resolve(self) -> Path | None:
        """Find the snapshot file to use.

        Returns:
            Path from the environment variable, else the first existing
            search path, else None

        Raises:
            FileNotFoundError: If the environment variable names a missing file
        """
        env_path = os.environ.get(self.env_var)
        if env_path:
            path = Path(env_path)
            if not path.exists():
                raise FileNotFoundError(f"Settings file from {self.env_var} not found: {path}")
            return path

        for candidate in self.search_paths:
            if candidate.exists():
                return candidate
        return None


def load_settings(path: Path | None = None, paths: AppPaths | None = None) -> Settings:
    """Load a settings snapshot from a YAML (or JSON) file.

    The file is restored verbatim; free-text values such as ``home`` and the
    named items are never rewritten.

    Args:
        path: Snapshot file (optional, searches default locations if None)
        paths: Search configuration used when ``path`` is None

    Returns:
        The restored snapshot, or default settings when no file is found

    Raises:
        FileNotFoundError: If an explicit path does not exist
        SettingsDecodeError: If the file content is not valid settings
    """
    if path is None:
        path = (paths or AppPaths()).resolve()
        if path is None:
            logger.debug("No settings file found, using defaults")
            return Settings()
    elif not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    logger.info("Loading settings from %s", path)
    # JSON is a subset of YAML, so one parser covers both
    return loads(path.read_text(encoding="utf-8"), "yaml")
