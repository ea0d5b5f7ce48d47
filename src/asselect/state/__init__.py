"""Action vocabulary, reducer and snapshot store."""

from asselect.state.actions import (
    Action,
    ClearLoa,
    ClearRat,
    ClearWave,
    Set,
    SetLoa,
    SetRat,
    SetWave,
    clear,
    toggle,
)
from asselect.state.reducer import SettingKey, Transition, reduce, replay, step
from asselect.state.store import SettingsStore
from asselect.state.tokens import from_checkbox, from_form, parse_action

__all__ = [
    "Action",
    "ClearLoa",
    "ClearRat",
    "ClearWave",
    "Set",
    "SetLoa",
    "SetRat",
    "SetWave",
    "SettingKey",
    "SettingsStore",
    "Transition",
    "clear",
    "from_checkbox",
    "from_form",
    "parse_action",
    "reduce",
    "replay",
    "step",
    "toggle",
]
