"""Exception classes for settings transitions and snapshot decoding.

This module defines the small hierarchy of errors the settings core can
report. None of them escape ``reduce``; they are returned to the caller
(see :func:`asselect.state.reducer.step`) or raised by the codec and the
text front-end helpers.
"""

from __future__ import annotations

from typing import Optional


class SettingsError(Exception):
    """Base class for all asselect errors."""


class ReduceError(SettingsError):
    """A single ``Set`` action carried a value the reducer could not use.

    The transition that produced it leaves the affected field unchanged.
    """

    def __init__(self, field: str, value: str, message: str) -> None:
        """Initialize the error.

        Args:
            field: Settings field the action targeted
            value: Raw value supplied by the caller
            message: Human-readable description
        """
        super().__init__(f"{field}: {message} ({value!r})")
        self.field: str = field
        self.value: str = value
        self.message: str = message


class InvalidNumericInput(ReduceError):
    """Raised when a numeric field receives malformed or out-of-range input."""

    def __init__(self, field: str, value: str, upper: int) -> None:
        super().__init__(field, value, f"expected an integer between 0 and {upper}")
        self.upper = upper


class SettingsDecodeError(SettingsError):
    """Raised when a stored settings representation cannot be restored."""

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        """Initialize with decoding error details.

        Args:
            message: Description of the decoding error
            original_error: The original exception that was caught
        """
        super().__init__(message)
        self.original_error = original_error


class ActionSyntaxError(SettingsError):
    """Raised when a textual action token does not match any action form."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unrecognised action: {token!r}")
        self.token = token
