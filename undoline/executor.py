"""Command executors.

``SimpleCommandExecutor`` runs commands and reports what happened through
events. ``HistoryCommandExecutor`` adds a ``HistoryManager`` so reversible
commands can be undone and redone.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Optional, TypeVar

from .commands import Command, UndoableCommand, is_undoable
from .errors import get_error_with_fallback
from .events import (
    CommandEvent,
    CommandExecuted,
    CommandExecuting,
    CommandFailed,
    CommandRedone,
    CommandSucceeded,
    CommandUndone,
    EventEmitter,
    HistoryReset,
)
from .history import HistoryManager, HistoryManagerOptions

logger = logging.getLogger(__name__)

Context = TypeVar("Context")


class SimpleCommandExecutor(Generic[Context]):
    """Executes commands and emits lifecycle events.

    Events are emitted in the order ``command:executing``, then
    ``command:succeeded`` or ``command:failed``, then ``command:executed``.
    A command that raises never takes the caller down with it: the failure
    is reported through ``command:failed`` and ``execute`` returns False.
    """

    def __init__(self, emitter: Optional[EventEmitter] = None):
        self._emitter = emitter if emitter is not None else EventEmitter()

    def execute(self, command: Command[Context]) -> bool:
        """Execute a command.

        Args:
            command: Command to execute.

        Returns:
            True if the command completed without raising.
        """
        self._emitter.emit(CommandExecuting(command))
        try:
            succeeded = self.run(command, command.execute)
            if succeeded:
                self._emitter.emit(CommandSucceeded(command))
            return succeeded
        finally:
            # Reported even when the command failed
            self._emitter.emit(CommandExecuted(command))

    def run(self, command: Command[Context], action: Callable[[], Any]) -> bool:
        """Call ``action`` on behalf of ``command``, absorbing its failure.

        Returns:
            True on success. On failure ``command:failed`` has been emitted.
        """
        try:
            action()
        except Exception as e:
            error = get_error_with_fallback(e)
            logger.warning(f"Command {command!r} failed: {error!r}")
            self._emitter.emit(CommandFailed(command, error))
            return False
        return True

    def on(self, event, listener) -> Callable[[], None]:
        """Shortcut for ``emitter.on``."""
        return self._emitter.on(event, listener)

    @property
    def emitter(self) -> EventEmitter:
        return self._emitter


class HistoryCommandExecutor(Generic[Context]):
    """Command executor that keeps a history of reversible commands.

    It runs commands through a ``SimpleCommandExecutor`` (sharing its
    emitter) and records reversible ones in a ``HistoryManager``.

    By default a reversible command that raised is not recorded, so undo
    never reaches a command whose forward action did not complete. Pass
    ``record_failed=True`` to record every reversible command regardless.
    """

    def __init__(
        self,
        options: Optional[HistoryManagerOptions[UndoableCommand[Context]]] = None,
        record_failed: bool = False,
    ):
        self._base_executor: SimpleCommandExecutor[Context] = SimpleCommandExecutor()
        self._history: HistoryManager[UndoableCommand[Context]] = HistoryManager(options)
        self._record_failed = record_failed

    def execute(self, command: Command[Context]) -> bool:
        """Execute a command and record it if it is reversible.

        Returns:
            True if the command completed without raising.
        """
        succeeded = self._base_executor.execute(command)
        if is_undoable(command) and (succeeded or self._record_failed):
            self._history.push(command)
        return succeeded

    def undo(self) -> Optional[UndoableCommand[Context]]:
        """Revert the current command and move the cursor back.

        Returns:
            The reverted command, or None if there was nothing to undo or
            its ``undo`` raised (in which case the cursor stays put).
        """
        if not self._history.can_undo():
            return None
        # The command to revert is the one current before the cursor moves
        command = self._history.get_current()
        if not self._base_executor.run(command, command.undo):
            return None
        self._history.undo()
        logger.debug(f"Undid {command!r}, cursor at {self._history.get_cursor()}")
        self._emit(CommandUndone(command))
        return command

    def redo(self) -> Optional[UndoableCommand[Context]]:
        """Move the cursor forward and re-apply the command found there.

        Returns:
            The re-applied command, or None if there was nothing to redo or
            its ``execute`` raised (in which case the cursor is moved back).
        """
        if not self._history.can_redo():
            return None
        command = self._history.redo()
        if not self._base_executor.run(command, command.execute):
            self._history.undo()
            return None
        logger.debug(f"Redid {command!r}, cursor at {self._history.get_cursor()}")
        self._emit(CommandRedone(command))
        return command

    def reset(self) -> Optional[UndoableCommand[Context]]:
        """Reset the history to its seed and re-apply the seed command.

        Returns:
            The seed command, or None when the history has no seed.
        """
        seed = self._history.reset()
        if seed is not None:
            self._base_executor.run(seed, seed.execute)
        self._emit(HistoryReset(seed))
        return seed

    def can_undo(self) -> bool:
        return self._history.can_undo()

    def can_redo(self) -> bool:
        return self._history.can_redo()

    def on(self, event, listener) -> Callable[[], None]:
        """Shortcut for ``emitter.on``."""
        return self.emitter.on(event, listener)

    def _emit(self, event: CommandEvent) -> None:
        self.emitter.emit(event)

    @property
    def emitter(self) -> EventEmitter:
        return self._base_executor.emitter

    @property
    def history(self) -> HistoryManager[UndoableCommand[Context]]:
        return self._history
