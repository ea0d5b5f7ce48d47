"""Transition function folding actions into new settings snapshots.

``reduce`` never raises and never mutates its input; the caller installs the
returned snapshot as its new current value. ``step`` is the same transition
but also reports the error, if any, that the action carried.
"""

from __future__ import annotations

import functools
import logging
import re
from collections.abc import Iterable
from enum import Enum
from typing import Any, Final, NamedTuple, assert_never

from asselect.constants import HOME_NONE_TOKEN, MAX_LEVEL_LIMIT, RADIO_ON_TOKEN
from asselect.errors import InvalidNumericInput, ReduceError
from asselect.settings.model import AirType, Settings, parse_airtype, parse_format, parse_overlay
from asselect.state.actions import (
    Action,
    ClearLoa,
    ClearRat,
    ClearWave,
    Set,
    SetLoa,
    SetRat,
    SetWave,
)

logger: Final = logging.getLogger(__name__)

# Unsigned decimal, as accepted by a u16 parse (optional leading plus sign)
_LEVEL_PATTERN: Final = re.compile(r"\+?[0-9]+")


class SettingKey(str, Enum):
    """Field names accepted by the generic ``Set`` action."""

    ATZ = "atz"
    ILS = "ils"
    UNLICENSED = "unlicensed"
    MICROLIGHT = "microlight"
    GLIDING = "gliding"
    HIRTA_GVS = "hirta_gvs"
    OBSTACLE = "obstacle"
    MAX_LEVEL = "max_level"
    RADIO = "radio"
    HOME = "home"
    OVERLAY = "overlay"
    FORMAT = "format"


_SETTING_KEYS: Final[dict[str, SettingKey]] = {key.value: key for key in SettingKey}


class Transition(NamedTuple):
    """Result of applying one action."""

    settings: Settings
    error: ReduceError | None = None


def parse_level(value: str) -> int:
    """Parse an altitude ceiling as an unsigned 16-bit integer.

    Raises:
        InvalidNumericInput: If the value is not a decimal integer in range
    """
    if _LEVEL_PATTERN.fullmatch(value) is None:
        raise InvalidNumericInput(SettingKey.MAX_LEVEL.value, value, MAX_LEVEL_LIMIT)
    level = int(value)
    if level > MAX_LEVEL_LIMIT:
        raise InvalidNumericInput(SettingKey.MAX_LEVEL.value, value, MAX_LEVEL_LIMIT)
    return level


def _set_field(current: Settings, name: str, value: str) -> Transition:
    key = _SETTING_KEYS.get(name)
    changes: dict[str, Any]

    match key:
        case None:
            logger.debug("Ignoring unknown setting %r", name)
            return Transition(current)
        case SettingKey.ATZ:
            airtype = parse_airtype(value)
            changes = {"atz": AirType.CTR if airtype is None else airtype}
        case (
            SettingKey.ILS
            | SettingKey.UNLICENSED
            | SettingKey.MICROLIGHT
            | SettingKey.GLIDING
            | SettingKey.HIRTA_GVS
            | SettingKey.OBSTACLE
        ):
            changes = {key.value: parse_airtype(value)}
        case SettingKey.MAX_LEVEL:
            try:
                changes = {"max_level": parse_level(value)}
            except InvalidNumericInput as err:
                logger.warning("Keeping max_level=%d: %s", current.max_level, err)
                return Transition(current, err)
        case SettingKey.RADIO:
            changes = {"radio": value == RADIO_ON_TOKEN}
        case SettingKey.HOME:
            changes = {"home": None if value == HOME_NONE_TOKEN else value}
        case SettingKey.OVERLAY:
            changes = {"overlay": parse_overlay(value)}
        case SettingKey.FORMAT:
            changes = {"format": parse_format(value)}
        case _:
            assert_never(key)

    return Transition(current.with_changes(**changes))


def step(current: Settings, action: Action) -> Transition:
    """Apply ``action`` to ``current`` and report any input error.

    Args:
        current: Snapshot to start from (left unchanged)
        action: Change request to apply

    Returns:
        Transition holding the next snapshot and the error, if any. When an
        error is reported the affected field keeps its current value.
    """
    match action:
        case Set(name=name, value=value):
            return _set_field(current, name, value)
        case SetLoa() | SetRat() | SetWave():
            names = current.members(action.group)
            names = names | {action.name} if action.checked else names - {action.name}
            return Transition(current.with_changes(**{action.group.value: names}))
        case ClearLoa() | ClearRat() | ClearWave():
            return Transition(current.with_changes(**{action.group.value: frozenset()}))
        case _:
            assert_never(action)


def reduce(current: Settings, action: Action) -> Settings:
    """Return the snapshot that results from applying ``action`` to ``current``."""
    return step(current, action).settings


def replay(initial: Settings, actions: Iterable[Action]) -> Settings:
    """Fold a sequence of actions over ``initial``."""
    return functools.reduce(reduce, actions, initial)
