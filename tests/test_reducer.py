"""Tests for the settings transition function."""

import pytest

from asselect.errors import InvalidNumericInput
from asselect.settings import AirType, Format, Overlay, Settings
from asselect.state import (
    ClearLoa,
    ClearRat,
    ClearWave,
    Set,
    SetLoa,
    SetRat,
    SetWave,
    reduce,
    replay,
    step,
)


def test_atz_mapping(defaults: Settings) -> None:
    assert reduce(defaults, Set("atz", "danger")).atz is AirType.DANGER
    assert reduce(defaults, Set("atz", "classd")).atz is AirType.CLASS_D


def test_atz_unknown_falls_back_to_ctr(defaults: Settings) -> None:
    danger = reduce(defaults, Set("atz", "danger"))
    assert reduce(danger, Set("atz", "bogus")).atz is AirType.CTR


@pytest.mark.parametrize(
    "field", ["ils", "unlicensed", "microlight", "gliding", "hirta_gvs", "obstacle"]
)
def test_optional_mappings(defaults: Settings, field: str) -> None:
    mapped = reduce(defaults, Set(field, "gsec"))
    assert getattr(mapped, field) is AirType.GLIDING
    assert getattr(reduce(mapped, Set(field, "exclude")), field) is None


def test_max_level(defaults: Settings) -> None:
    assert reduce(defaults, Set("max_level", "195")).max_level == 195
    assert reduce(defaults, Set("max_level", "0")).max_level == 0
    assert reduce(defaults, Set("max_level", "65535")).max_level == 65535
    assert reduce(defaults, Set("max_level", "+100")).max_level == 100


@pytest.mark.parametrize("value", ["", "abc", "-1", "65536", "1.5", " 100", "1e3", "٣"])
def test_invalid_max_level_keeps_value(defaults: Settings, value: str) -> None:
    current = reduce(defaults, Set("max_level", "245"))
    transition = step(current, Set("max_level", value))
    assert transition.settings == current
    assert isinstance(transition.error, InvalidNumericInput)
    assert transition.error.field == "max_level"
    assert transition.error.value == value
    assert reduce(current, Set("max_level", value)).max_level == 245


def test_radio(defaults: Settings) -> None:
    on = reduce(defaults, Set("radio", "yes"))
    assert on.radio is True
    assert reduce(on, Set("radio", "Yes")).radio is False
    assert reduce(on, Set("radio", "no")).radio is False


def test_home(defaults: Settings) -> None:
    home = reduce(defaults, Set("home", "Foo"))
    assert home.home == "Foo"
    assert reduce(home, Set("home", "no")).home is None
    assert reduce(defaults, Set("home", "")).home == ""


def test_overlay(defaults: Settings) -> None:
    assert reduce(defaults, Set("overlay", "fl195")).overlay is Overlay.FL195
    assert reduce(defaults, Set("overlay", "fl105")).overlay is Overlay.FL105
    atzdz = reduce(defaults, Set("overlay", "atzdz"))
    assert atzdz.overlay is Overlay.ATZ_DZ
    assert reduce(atzdz, Set("overlay", "none")).overlay is None


def test_format(defaults: Settings) -> None:
    competition = reduce(defaults, Set("format", "competition"))
    assert competition.format is Format.COMPETITION
    assert reduce(defaults, Set("format", "ratonly")).format is Format.RAT_ONLY
    assert reduce(competition, Set("format", "xyz")).format is Format.OPENAIR


@pytest.mark.parametrize("name", ["unknown", "ATZ", "Radio", "loa", ""])
def test_unknown_key_is_ignored(populated: Settings, name: str) -> None:
    transition = step(populated, Set(name, "yes"))
    assert transition.settings == populated
    assert transition.error is None


def test_reduce_is_pure(populated: Settings) -> None:
    before = populated.model_dump()
    action = SetLoa("NEW LOA", True)
    assert reduce(populated, action) == reduce(populated, action)
    assert populated.model_dump() == before
    assert "NEW LOA" not in populated.loa


def test_toggle_is_idempotent(defaults: Settings) -> None:
    once = reduce(defaults, SetLoa("A", True))
    assert reduce(once, SetLoa("A", True)) == once
    assert once.loa == {"A"}
    assert reduce(defaults, SetLoa("A", False)) == defaults


def test_toggle_inverse(populated: Settings) -> None:
    added = reduce(populated, SetLoa("A", True))
    assert reduce(added, SetLoa("A", False)) == populated


@pytest.mark.parametrize(
    "toggle, clear, field",
    [(SetLoa, ClearLoa, "loa"), (SetRat, ClearRat, "rat"), (SetWave, ClearWave, "wave")],
)
def test_groups_are_independent(toggle: type, clear: type, field: str) -> None:
    settings = replay(Settings(), [toggle("X", True), toggle("Y", True)])
    assert getattr(settings, field) == {"X", "Y"}
    for other in {"loa", "rat", "wave"} - {field}:
        assert getattr(settings, other) == frozenset()
    assert getattr(reduce(settings, clear()), field) == frozenset()


def test_clear_after_any_history(populated: Settings) -> None:
    actions = [SetLoa("A", True), SetLoa("B", True), SetLoa("A", False), SetLoa("C", True)]
    cleared = reduce(replay(populated, actions), ClearLoa())
    assert cleared.loa == frozenset()
    assert cleared.rat == populated.rat
    assert reduce(Settings(), ClearLoa()).loa == frozenset()


def test_radio_and_rat_scenario(defaults: Settings) -> None:
    final = replay(
        defaults,
        [
            Set("radio", "yes"),
            SetRat("R1", True),
            SetRat("R2", True),
            SetRat("R1", False),
        ],
    )
    assert final.radio is True
    assert final.rat == {"R2"}
    assert final.with_changes(radio=False, rat=frozenset()) == defaults


def test_replay_is_deterministic(defaults: Settings) -> None:
    actions = [Set("atz", "danger"), SetWave("W", True), Set("max_level", "bad"), ClearRat()]
    assert replay(defaults, actions) == replay(defaults, actions)
    assert replay(defaults, []) is defaults
