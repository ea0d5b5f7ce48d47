"""User-initiated change requests consumed by the reducer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from asselect.settings.model import Group


@dataclass(frozen=True)
class Set:
    """Generic keyed update from a form control (field name + raw value)."""

    name: str
    value: str


@dataclass(frozen=True)
class _Toggle:
    name: str
    checked: bool

    group: ClassVar[Group]


@dataclass(frozen=True)
class SetLoa(_Toggle):
    """Include or exclude a Letter of Agreement."""

    group: ClassVar[Group] = Group.LOA


@dataclass(frozen=True)
class SetRat(_Toggle):
    """Include or exclude a RAT."""

    group: ClassVar[Group] = Group.RAT


@dataclass(frozen=True)
class SetWave(_Toggle):
    """Include or exclude a wave box."""

    group: ClassVar[Group] = Group.WAVE


@dataclass(frozen=True)
class _Clear:
    group: ClassVar[Group]


@dataclass(frozen=True)
class ClearLoa(_Clear):
    """Deselect all Letters of Agreement."""

    group: ClassVar[Group] = Group.LOA


@dataclass(frozen=True)
class ClearRat(_Clear):
    """Deselect all RATs."""

    group: ClassVar[Group] = Group.RAT


@dataclass(frozen=True)
class ClearWave(_Clear):
    """Deselect all wave boxes."""

    group: ClassVar[Group] = Group.WAVE


Action: TypeAlias = Set | SetLoa | SetRat | SetWave | ClearLoa | ClearRat | ClearWave

_TOGGLES: dict[Group, type[_Toggle]] = {cls.group: cls for cls in (SetLoa, SetRat, SetWave)}
_CLEARS: dict[Group, type[_Clear]] = {cls.group: cls for cls in (ClearLoa, ClearRat, ClearWave)}


def toggle(group: Group, name: str, checked: bool) -> SetLoa | SetRat | SetWave:
    """Build the membership action for ``group``."""
    return _TOGGLES[group](name, checked)  # type: ignore[return-value]


def clear(group: Group) -> ClearLoa | ClearRat | ClearWave:
    """Build the clear action for ``group``."""
    return _CLEARS[group]()  # type: ignore[return-value]
