"""Events emitted by command executors and the emitter that dispatches them.

Every event is a frozen dataclass with a fixed ``name``. Listeners subscribe
to an event class (or its name) and receive the event instance. Dispatch is
synchronous and in registration order. Exceptions raised by a listener are
not caught here; they reach whoever triggered the emit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Optional, Type, TypeVar, Union

from .commands import Command, UndoableCommand
from .errors import UnknownEventError


@dataclass(frozen=True)
class CommandEvent:
    """Base class for all executor events."""
    name: ClassVar[str] = ""


@dataclass(frozen=True)
class CommandExecuting(CommandEvent):
    name: ClassVar[str] = "command:executing"
    command: Command[Any]


@dataclass(frozen=True)
class CommandSucceeded(CommandEvent):
    name: ClassVar[str] = "command:succeeded"
    command: Command[Any]


@dataclass(frozen=True)
class CommandFailed(CommandEvent):
    name: ClassVar[str] = "command:failed"
    command: Command[Any]
    error: Exception


@dataclass(frozen=True)
class CommandExecuted(CommandEvent):
    name: ClassVar[str] = "command:executed"
    command: Command[Any]


@dataclass(frozen=True)
class CommandUndone(CommandEvent):
    name: ClassVar[str] = "command:undo"
    command: UndoableCommand[Any]


@dataclass(frozen=True)
class CommandRedone(CommandEvent):
    name: ClassVar[str] = "command:redo"
    command: UndoableCommand[Any]


@dataclass(frozen=True)
class HistoryReset(CommandEvent):
    """History went back to its seed; ``command`` is the seed or ``None``."""
    name: ClassVar[str] = "reset"
    command: Optional[UndoableCommand[Any]]


EVENT_TYPES: dict[str, Type[CommandEvent]] = {
    event_type.name: event_type
    for event_type in (
        CommandExecuting,
        CommandSucceeded,
        CommandFailed,
        CommandExecuted,
        CommandUndone,
        CommandRedone,
        HistoryReset,
    )
}

E = TypeVar("E", bound=CommandEvent)
EventKey = Union[str, Type[CommandEvent]]
EventListener = Callable[[Any], None]


def resolve_event_type(event: EventKey) -> Type[CommandEvent]:
    """Map an event name or class to the event class.

    Raises:
        UnknownEventError: If ``event`` is not one of the known events.
    """
    if isinstance(event, str):
        try:
            return EVENT_TYPES[event]
        except KeyError:
            raise UnknownEventError(event) from None
    if event not in EVENT_TYPES.values():
        raise UnknownEventError(getattr(event, "__name__", repr(event)))
    return event


class EventEmitter:
    """Typed publish/subscribe over the closed set of executor events."""

    def __init__(self):
        self._listeners: dict[Type[CommandEvent], list[EventListener]] = {
            event_type: [] for event_type in EVENT_TYPES.values()
        }

    def on(self, event: EventKey, listener: EventListener) -> Callable[[], None]:
        """Subscribe ``listener`` to ``event``.

        Returns:
            A function that removes the subscription.
        """
        event_type = resolve_event_type(event)
        self._listeners[event_type].append(listener)
        return lambda: self.off(event_type, listener)

    def once(self, event: EventKey, listener: EventListener) -> Callable[[], None]:
        """Subscribe ``listener`` for the next emission of ``event`` only."""
        event_type = resolve_event_type(event)

        def wrapper(payload: Any) -> None:
            self.off(event_type, wrapper)
            listener(payload)

        return self.on(event_type, wrapper)

    def off(self, event: EventKey, listener: EventListener) -> None:
        """Remove one registration of ``listener``; unknown listeners are ignored."""
        listeners = self._listeners[resolve_event_type(event)]
        try:
            listeners.remove(listener)
        except ValueError:
            pass

    def emit(self, event: CommandEvent) -> None:
        """Deliver ``event`` to its listeners, in registration order."""
        listeners = self._listeners[resolve_event_type(type(event))]
        for listener in tuple(listeners):
            if listener in listeners:
                listener(event)

    def listener_count(self, event: EventKey) -> int:
        return len(self._listeners[resolve_event_type(event)])

    def remove_all_listeners(self, event: Optional[EventKey] = None) -> None:
        if event is None:
            for listeners in self._listeners.values():
                listeners.clear()
            return
        self._listeners[resolve_event_type(event)].clear()
