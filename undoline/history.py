"""Cursor-addressed, bounded history of items."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .constants import HistoryConstants
from .errors import HistoryConfigError
from .store import HistoryState, HistoryStore, SimpleHistoryStore

logger = logging.getLogger(__name__)

Item = TypeVar("Item")


@dataclass
class HistoryManagerOptions(Generic[Item]):
    """Options for a ``HistoryManager``.

    ``initial_state`` is the seed entry; ``None`` means the history starts
    empty. ``store`` defaults to a fresh ``SimpleHistoryStore``.
    """
    max_history_length: int = HistoryConstants.DEFAULT_MAX_HISTORY_LENGTH
    initial_state: Optional[Item] = None
    store: Optional[HistoryStore] = None

    def validate(self) -> None:
        """Raise ``HistoryConfigError`` if the options cannot be used."""
        length = self.max_history_length
        # bool is an int subclass but never a meaningful bound
        if isinstance(length, bool) or not isinstance(length, int):
            raise HistoryConfigError(
                f"max_history_length must be an int, got {type(length).__name__}"
            )
        if length <= 0:
            raise HistoryConfigError(f"max_history_length must be positive, got {length}")


class HistoryManager(Generic[Item]):
    """Owns the cursor arithmetic over a ``HistoryStore``.

    The cursor lives in ``[floor, len(history) - 1]``. The floor is 0 when a
    seed entry exists (or after ``clear()`` kept the current entry) and -1
    otherwise, so that the first pushed entry can itself be undone.

    Every mutating operation reads the current state once, computes the next
    state and writes it back with a single ``set_state`` call.

    Usage::

        history = HistoryManager(HistoryManagerOptions(max_history_length=10))
        history.push("a")
        history.push("b")
        history.undo()       # -> "a"
        history.redo()       # -> "b"
    """

    def __init__(self, options: Optional[HistoryManagerOptions[Item]] = None):
        self._options = options if options is not None else HistoryManagerOptions()
        self._options.validate()
        self._store: HistoryStore = (
            self._options.store if self._options.store is not None else SimpleHistoryStore()
        )
        self._floor = HistoryConstants.EMPTY_CURSOR
        self._store.set_state(self._seed_state())

    def _has_seed(self) -> bool:
        return self._options.initial_state is not None

    def _seed_state(self) -> HistoryState[Item]:
        """Build the starting state and reset the floor to match it."""
        if self._has_seed():
            self._floor = 0
            return HistoryState(sequence=(self._options.initial_state,), cursor=0)
        self._floor = HistoryConstants.EMPTY_CURSOR
        return HistoryState()

    @property
    def _state(self) -> HistoryState[Item]:
        return self._store.get_state()

    def push(self, item: Item) -> Item:
        """Push an item and make it current.

        - Entries after the cursor are discarded first (the redo branch is lost).
        - If the history grows past ``max_history_length`` the oldest entry is
          evicted.

        Args:
            item: The item to record.

        Returns:
            The pushed item.
        """
        state = self._state
        sequence = state.sequence[:state.cursor + 1] + (item,)
        overflow = len(sequence) - self.get_max_length()
        if overflow > 0:
            logger.debug(f"History full, evicting {overflow} oldest item(s)")
            sequence = sequence[overflow:]
        self._store.set_state(HistoryState(sequence=sequence, cursor=len(sequence) - 1))
        return item

    def undo(self) -> Optional[Item]:
        """Move the cursor back one entry.

        Returns:
            The entry now current, or ``None`` when nothing moved (or when the
            cursor moved before the first entry).
        """
        if not self.can_undo():
            return None
        state = self._state
        next_state = HistoryState(sequence=state.sequence, cursor=state.cursor - 1)
        self._store.set_state(next_state)
        return next_state.current

    def redo(self) -> Optional[Item]:
        """Move the cursor forward one entry.

        Returns:
            The entry now current, or ``None`` if already at the newest entry.
        """
        if not self.can_redo():
            return None
        state = self._state
        next_state = HistoryState(sequence=state.sequence, cursor=state.cursor + 1)
        self._store.set_state(next_state)
        return next_state.current

    def can_undo(self) -> bool:
        return self._state.cursor > self._floor

    def can_redo(self) -> bool:
        state = self._state
        return state.cursor < len(state.sequence) - 1

    def get_current(self) -> Optional[Item]:
        return self._state.current

    def get_history(self) -> list[Item]:
        return list(self._state.sequence)

    def get_cursor(self) -> int:
        return self._state.cursor

    def get_max_length(self) -> int:
        return self._options.max_history_length

    def get_initial_state(self) -> Optional[Item]:
        return self._options.initial_state

    def clear(self) -> None:
        """Collapse the history to the current entry.

        The current entry becomes the only entry and the new floor, so neither
        undo nor redo is possible afterwards. When no entry is current the
        history becomes empty.
        """
        state = self._state
        if state.cursor < 0:
            self._floor = HistoryConstants.EMPTY_CURSOR
            self._store.set_state(HistoryState())
            return
        self._floor = 0
        self._store.set_state(HistoryState(sequence=(state.current,), cursor=0))

    def reset(self) -> Optional[Item]:
        """Restore the configured seed entry (or an empty history).

        Unlike ``clear()`` this ignores the cursor. Callers that mirror the
        entries in external state must re-apply the returned seed themselves.

        Returns:
            The seed entry, or ``None`` when the manager has no seed.
        """
        self._store.set_state(self._seed_state())
        return self._options.initial_state

    @property
    def store(self) -> HistoryStore:
        """The store backing this manager, for subscribing to changes."""
        return self._store
