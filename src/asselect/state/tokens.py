"""Building actions from already-extracted UI or command-line input.

Token forms accepted by :func:`parse_action`:

- ``key=value``   generic setting update
- ``+group:name`` select a named item (group is loa, rat or wave)
- ``~group:name`` deselect a named item
- ``!group``      deselect every item in the group
"""

from __future__ import annotations

from asselect.errors import ActionSyntaxError
from asselect.settings.model import Group
from asselect.state.actions import Action, Set, clear, toggle


def from_form(name: str, value: str) -> Set:
    """Action for a form control change (select or text input)."""
    return Set(name, value)


def from_checkbox(group: Group | str, name: str, checked: bool) -> Action:
    """Action for a checkbox in one of the named item lists."""
    return toggle(_group(str(group), group), name, checked)


def _group(token: str, text: Group | str) -> Group:
    try:
        return Group(text)
    except ValueError as exc:
        raise ActionSyntaxError(token) from exc


def parse_action(token: str) -> Action:
    """Parse one textual action token.

    Raises:
        ActionSyntaxError: If the token matches none of the accepted forms
    """
    if token[:1] in ("+", "~"):
        group, sep, name = token[1:].partition(":")
        if not sep or not name:
            raise ActionSyntaxError(token)
        return toggle(_group(token, group), name, token[0] == "+")

    if token.startswith("!"):
        return clear(_group(token, token[1:]))

    name, sep, value = token.partition("=")
    if not sep or not name:
        raise ActionSyntaxError(token)
    return from_form(name, value)
