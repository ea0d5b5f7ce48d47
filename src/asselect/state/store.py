"""Owner of the current settings snapshot."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Final

from asselect.errors import ReduceError
from asselect.settings.model import Settings
from asselect.state.actions import Action
from asselect.state.reducer import step

logger: Final = logging.getLogger(__name__)

Listener = Callable[[Settings], None]


class SettingsStore:
    """Holds the single current snapshot and replaces it on every action.

    Dispatches are serialized with a lock, so actions may arrive from more
    than one thread. Listeners (typically a renderer) are called with the new
    snapshot after each dispatch that changed it, while the lock is still
    held, so they see snapshots in the order they were installed.

    Examples:
        store = SettingsStore()
        store.subscribe(render)
        store.dispatch(Set("radio", "yes"))
    """

    def __init__(self, initial: Settings | None = None) -> None:
        self._current = initial or Settings()
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []

    @property
    def current(self) -> Settings:
        """The most recently installed snapshot."""
        return self._current

    def dispatch(self, action: Action) -> ReduceError | None:
        """Apply ``action`` and install the resulting snapshot.

        Args:
            action: Change request to apply

        Returns:
            The input error reported by the transition, or None
        """
        with self._lock:
            previous = self._current
            transition = step(previous, action)
            self._current = transition.settings
            logger.debug("Dispatched %r", action)
            if transition.settings != previous:
                self._notify(transition.settings)
        return transition.error

    def reset(self) -> None:
        """Restore default settings."""
        with self._lock:
            previous = self._current
            current = self._current = Settings()
            if current != previous:
                self._notify(current)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for new snapshots.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, settings: Settings) -> None:
        for listener in list(self._listeners):
            try:
                listener(settings)
            except Exception:
                logger.exception("Settings listener %r failed", listener)
