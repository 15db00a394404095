"""Read-only helpers for UI layers bound to a history store.

A UI only needs to subscribe to the store and re-derive what it shows:
whether undo/redo are available, the current entry and the list of entries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from .history import HistoryManager

Item = TypeVar("Item")


@dataclass(frozen=True)
class HistoryView(Generic[Item]):
    """Everything a history panel renders, derived from one state."""
    can_undo: bool
    can_redo: bool
    current: Optional[Item]
    cursor: int
    history: tuple[Item, ...]


def select_history(manager: HistoryManager[Item]) -> HistoryView[Item]:
    """Derive a ``HistoryView`` from the manager's current state."""
    return HistoryView(
        can_undo=manager.can_undo(),
        can_redo=manager.can_redo(),
        current=manager.get_current(),
        cursor=manager.get_cursor(),
        history=tuple(manager.get_history()),
    )


def _shallow_equal(a: HistoryView[Any], b: HistoryView[Any]) -> bool:
    # Entries are compared by identity; they are never mutated in place
    return (
        a.can_undo == b.can_undo
        and a.can_redo == b.can_redo
        and a.cursor == b.cursor
        and a.current is b.current
        and len(a.history) == len(b.history)
        and all(x is y for x, y in zip(a.history, b.history))
    )


def watch_history(
    manager: HistoryManager[Item],
    callback: Callable[[HistoryView[Item]], None],
    fire_immediately: bool = False,
) -> Callable[[], None]:
    """Call ``callback`` with a fresh view whenever the view changes.

    Store updates that leave the view unchanged are skipped.

    Args:
        manager: The manager to watch.
        callback: Receives the new ``HistoryView``.
        fire_immediately: Also call ``callback`` once with the current view.

    Returns:
        A function that stops watching.
    """
    last = select_history(manager)

    def listener(state, previous) -> None:
        nonlocal last
        view = select_history(manager)
        if _shallow_equal(view, last):
            return
        last = view
        callback(view)

    unsubscribe = manager.store.subscribe(listener)
    if fire_immediately:
        callback(last)
    return unsubscribe
