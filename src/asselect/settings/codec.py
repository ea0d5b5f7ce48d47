"""Structured encode/decode for settings snapshots.

Enumerations are written as their member names and the named-item sets as
sorted lists, so encoding the same snapshot always produces the same text.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Final, Literal

import yaml
from pydantic import ValidationError

from asselect.errors import SettingsDecodeError
from asselect.settings.model import Settings

logger: Final = logging.getLogger(__name__)

TextFormat = Literal["json", "yaml"]


def encode(settings: Settings) -> dict[str, Any]:
    """Convert a snapshot to plain JSON-compatible data."""
    return settings.model_dump(mode="json")


def decode(data: Any) -> Settings:
    """Restore a snapshot from plain data.

    Missing fields take their defaults; in particular ``loa``, ``rat`` and
    ``wave`` come back empty for snapshots saved before they existed.

    Args:
        data: Mapping produced by :func:`encode` (or an older equivalent)

    Returns:
        Validated Settings object

    Raises:
        SettingsDecodeError: If the data does not describe valid settings
    """
    if data is None:
        return Settings()
    try:
        return Settings.model_validate(data)
    except ValidationError as err:
        raise SettingsDecodeError(f"Invalid settings:\n{err}", err) from err


def dumps(settings: Settings, fmt: TextFormat = "json") -> str:
    """Serialize a snapshot as JSON or YAML text."""
    data = encode(settings)
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False)
    return json.dumps(data, indent=2)


def loads(text: str, fmt: TextFormat = "json") -> Settings:
    """Restore a snapshot from JSON or YAML text.

    Raises:
        SettingsDecodeError: If the text cannot be parsed or is invalid
    """
    try:
        data = yaml.safe_load(text) if fmt == "yaml" else json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise SettingsDecodeError(f"Unable to parse settings {fmt.upper()}: {exc}", exc) from exc

    logger.debug("Decoding %s settings snapshot", fmt)
    return decode(data)
