"""Textual counter demo bound to a history store."""

from __future__ import annotations

from typing import Callable, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Button, Footer, Header, Label, ListItem, ListView

from .commands import FunctionUndoableCommand, undoable_command
from .events import CommandFailed
from .executor import HistoryCommandExecutor
from .selectors import HistoryView, watch_history
from .settings import HistorySettings


class Counter:
    """The external state the demo's commands act on."""

    def __init__(self, value: int = 0):
        self.value = value

    def set(self, value: int) -> None:
        self.value = value


def set_count_command(counter: Counter, value: int) -> FunctionUndoableCommand[dict]:
    """Command that sets the counter to ``value`` and restores it on undo."""
    previous = counter.value
    return undoable_command(
        {"count": value},
        lambda: counter.set(value),
        lambda: counter.set(previous),
    )


def increment_command(counter: Counter) -> FunctionUndoableCommand[dict]:
    return set_count_command(counter, counter.value + 1)


def decrement_command(counter: Counter) -> FunctionUndoableCommand[dict]:
    return set_count_command(counter, counter.value - 1)


class CounterApp(App):
    """Counter with undo/redo, reset and a rendered history list."""

    CSS = """
    #controls {
        height: auto;
    }
    #count {
        padding: 1 2;
        text-style: bold;
    }
    ListItem.current {
        background: $accent;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+z", "undo", "Undo"),
        Binding("ctrl+y", "redo", "Redo"),
        Binding("plus", "increment", "+1"),
        Binding("minus", "decrement", "-1"),
        Binding("ctrl+r", "reset_history", "Reset"),
    ]

    def __init__(self, settings: Optional[HistorySettings] = None, start: int = 0):
        super().__init__()
        self.history_settings = settings if settings is not None else HistorySettings()
        self.counter = Counter(start)
        seed = set_count_command(self.counter, start)
        self.executor: HistoryCommandExecutor[dict] = HistoryCommandExecutor(
            self.history_settings.to_options(initial_state=seed),
            record_failed=self.history_settings.record_failed,
        )
        self._unsubscribers: list[Callable[[], None]] = []

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="controls"):
            yield Button("Undo", id="undo")
            yield Button("Redo", id="redo")
            yield Button("-1", id="decrement")
            yield Button("+1", id="increment")
            yield Button("Reset", id="reset")
        yield Label(str(self.counter.value), id="count")
        yield ListView(id="history")
        yield Footer()

    def on_mount(self) -> None:
        self._unsubscribers.append(
            watch_history(self.executor.history, self._render_history, fire_immediately=True)
        )
        self._unsubscribers.append(self.executor.on(CommandFailed, self._on_command_failed))

    def on_unmount(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        actions = {
            "undo": self.action_undo,
            "redo": self.action_redo,
            "increment": self.action_increment,
            "decrement": self.action_decrement,
            "reset": self.action_reset_history,
        }
        action = actions.get(event.button.id or "")
        if action is not None:
            action()

    def action_increment(self) -> None:
        self.executor.execute(increment_command(self.counter))
        self._render_count()

    def action_decrement(self) -> None:
        self.executor.execute(decrement_command(self.counter))
        self._render_count()

    def action_undo(self) -> None:
        self.executor.undo()
        self._render_count()

    def action_redo(self) -> None:
        self.executor.redo()
        self._render_count()

    def action_reset_history(self) -> None:
        self.executor.reset()
        self._render_count()

    def _render_count(self) -> None:
        self.query_one("#count", Label).update(str(self.counter.value))

    def _render_history(self, view: HistoryView) -> None:
        self.query_one("#undo", Button).disabled = not view.can_undo
        self.query_one("#redo", Button).disabled = not view.can_redo

        history = self.query_one("#history", ListView)
        history.clear()
        for index, command in enumerate(view.history):
            item = ListItem(Label(str(command.context["count"])))
            if index == view.cursor:
                item.add_class("current")
            history.append(item)

    def _on_command_failed(self, event: CommandFailed) -> None:
        self.notify(f"Command failed: {event.error}", severity="error")


def main():
    """Run the Textual counter demo."""
    app = CounterApp()
    app.run()


if __name__ == "__main__":
    main()
