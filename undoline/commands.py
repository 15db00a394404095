"""Command pattern: units of work with an optional inverse."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Generic, TypeVar

Context = TypeVar("Context")


class Command(ABC, Generic[Context]):
    """Base class for commands.

    ``context`` is a value snapshot of what the command does, used for
    display and inspection only. Commands that cannot be reverted derive
    from this class directly; ``reversible`` is fixed per class.
    """

    reversible: ClassVar[bool] = False

    def __init__(self, context: Context = None):
        self.context = context

    @abstractmethod
    def execute(self) -> None:
        """Apply the command."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(context={self.context!r})"


class UndoableCommand(Command[Context]):
    """A command that can revert what ``execute`` did."""

    reversible: ClassVar[bool] = True

    @abstractmethod
    def undo(self) -> None:
        """Revert the command."""
        pass


class FunctionCommand(Command[Context]):
    """Non-reversible command backed by a callable."""

    def __init__(self, context: Context, execute: Callable[[], Any]):
        super().__init__(context)
        self._execute = execute

    def execute(self) -> None:
        self._execute()


class FunctionUndoableCommand(UndoableCommand[Context]):
    """Reversible command backed by a pair of callables."""

    def __init__(self, context: Context, execute: Callable[[], Any], undo: Callable[[], Any]):
        super().__init__(context)
        self._execute = execute
        self._undo = undo

    def execute(self) -> None:
        self._execute()

    def undo(self) -> None:
        self._undo()


def simple_command(context: Context, execute: Callable[[], Any]) -> FunctionCommand[Context]:
    """Build a command that leaves no trace in history."""
    return FunctionCommand(context, execute)


def undoable_command(
    context: Context,
    execute: Callable[[], Any],
    undo: Callable[[], Any],
) -> FunctionUndoableCommand[Context]:
    """Build a command that history executors record and can revert."""
    return FunctionUndoableCommand(context, execute, undo)


def is_undoable(command: Command[Any]) -> bool:
    """Check whether ``command`` was built as a reversible command."""
    return command.reversible
