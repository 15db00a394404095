"""Observable store holding the history state.

The store knows nothing about undo. It holds one immutable ``HistoryState``
value, replaces it on ``set_state`` and tells every subscriber about it
before returning.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Protocol, TypeVar, Union

from .constants import HistoryConstants

Item = TypeVar("Item")

Listener = Callable[["HistoryState[Any]", "HistoryState[Any]"], None]


@dataclass(frozen=True)
class HistoryState(Generic[Item]):
    """Snapshot of the history: the entries and the current position."""
    sequence: tuple[Item, ...] = ()
    cursor: int = HistoryConstants.EMPTY_CURSOR

    @property
    def current(self) -> Item | None:
        if self.cursor < 0 or self.cursor >= len(self.sequence):
            return None
        return self.sequence[self.cursor]


StateOrUpdater = Union[HistoryState, Callable[[HistoryState], HistoryState]]


class HistoryStore(Protocol):
    """Shape a store must have to back a ``HistoryManager``."""

    def get_state(self) -> HistoryState: ...

    def set_state(self, state: StateOrUpdater) -> None: ...

    def subscribe(self, listener: Listener) -> Callable[[], None]: ...


class SimpleHistoryStore:
    """In-memory store with synchronous notification.

    Listeners are called as ``listener(state, previous_state)`` in the
    order they subscribed, once per ``set_state`` call.
    """

    def __init__(self, initial: HistoryState | None = None):
        self._state: HistoryState = initial if initial is not None else HistoryState()
        self._listeners: list[Listener] = []

    def get_state(self) -> HistoryState:
        return self._state

    def set_state(self, state: StateOrUpdater) -> None:
        """Replace the state and notify subscribers.

        Args:
            state: The next state, or a function mapping the current state
                to the next one.
        """
        previous = self._state
        next_state = state(previous) if callable(state) else state
        self._state = next_state
        # Iterate over a copy; listeners may unsubscribe while we notify
        for listener in tuple(self._listeners):
            if listener in self._listeners:
                listener(next_state, previous)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener.

        Returns:
            A function that removes the listener. Calling it twice is harmless.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)


def create_simple_history_store() -> SimpleHistoryStore:
    """Create an empty store (no entries, cursor -1)."""
    return SimpleHistoryStore()
