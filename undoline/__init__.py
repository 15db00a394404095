"""undoline - linear undo/redo history with command executors."""

from .commands import (
    Command,
    UndoableCommand,
    FunctionCommand,
    FunctionUndoableCommand,
    simple_command,
    undoable_command,
    is_undoable,
)
from .errors import HistoryError, HistoryConfigError, UnknownEventError, get_error_with_fallback
from .events import (
    EventEmitter,
    CommandExecuting,
    CommandSucceeded,
    CommandFailed,
    CommandExecuted,
    CommandUndone,
    CommandRedone,
    HistoryReset,
)
from .executor import SimpleCommandExecutor, HistoryCommandExecutor
from .history import HistoryManager, HistoryManagerOptions
from .store import HistoryState, HistoryStore, SimpleHistoryStore, create_simple_history_store

__all__ = [
    'Command',
    'UndoableCommand',
    'FunctionCommand',
    'FunctionUndoableCommand',
    'simple_command',
    'undoable_command',
    'is_undoable',
    'HistoryError',
    'HistoryConfigError',
    'UnknownEventError',
    'get_error_with_fallback',
    'EventEmitter',
    'CommandExecuting',
    'CommandSucceeded',
    'CommandFailed',
    'CommandExecuted',
    'CommandUndone',
    'CommandRedone',
    'HistoryReset',
    'SimpleCommandExecutor',
    'HistoryCommandExecutor',
    'HistoryManager',
    'HistoryManagerOptions',
    'HistoryState',
    'HistoryStore',
    'SimpleHistoryStore',
    'create_simple_history_store',
]
