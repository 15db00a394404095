"""Tests for HistoryManager cursor arithmetic, bounds and seeding."""

from unittest.mock import Mock

import pytest

from undoline.constants import HistoryConstants
from undoline.errors import HistoryConfigError
from undoline.history import HistoryManager, HistoryManagerOptions
from undoline.store import HistoryState, SimpleHistoryStore


def make_manager(max_history_length=5, initial_state=None, store=None):
    return HistoryManager(HistoryManagerOptions(
        max_history_length=max_history_length,
        initial_state=initial_state,
        store=store,
    ))


class TestUnseededHistory:
    """History without an initial state: cursor floor is -1."""

    def setup_method(self):
        self.manager = make_manager()

    def test_starts_empty(self):
        assert self.manager.get_history() == []
        assert self.manager.get_cursor() == -1
        assert self.manager.get_current() is None
        assert not self.manager.can_undo()
        assert not self.manager.can_redo()

    def test_push_appends_and_moves_cursor(self):
        assert self.manager.push("item1") == "item1"
        assert self.manager.get_history() == ["item1"]
        assert self.manager.get_cursor() == 0

        self.manager.push("item2")
        assert self.manager.get_history() == ["item1", "item2"]
        assert self.manager.get_cursor() == 1
        assert self.manager.get_current() == "item2"

    def test_first_push_can_be_undone(self):
        """Without a seed the first entry is undoable back to cursor -1."""
        self.manager.push("item1")
        assert self.manager.can_undo()

        assert self.manager.undo() is None
        assert self.manager.get_cursor() == -1
        assert self.manager.get_current() is None
        assert not self.manager.can_undo()
        assert self.manager.can_redo()

        assert self.manager.redo() == "item1"
        assert self.manager.get_cursor() == 0

    def test_undo_returns_new_current(self):
        self.manager.push("item1")
        self.manager.push("item2")

        assert self.manager.undo() == "item1"
        assert self.manager.get_cursor() == 0
        assert self.manager.can_undo()
        assert self.manager.can_redo()

    def test_push_after_undo_discards_redo_branch(self):
        self.manager.push("item1")
        self.manager.push("item2")
        self.manager.undo()

        self.manager.push("item3")
        assert self.manager.get_history() == ["item1", "item3"]
        assert self.manager.get_cursor() == 1
        assert not self.manager.can_redo()

    def test_push_after_undoing_everything_replaces_history(self):
        self.manager.push("item1")
        self.manager.push("item2")
        self.manager.undo()
        self.manager.undo()

        self.manager.push("item3")
        assert self.manager.get_history() == ["item3"]
        assert self.manager.get_cursor() == 0

    def test_respects_max_history_length(self):
        for i in range(1, 8):
            self.manager.push(f"item{i}")
        assert self.manager.get_history() == ["item3", "item4", "item5", "item6", "item7"]
        assert self.manager.get_cursor() == 4

    def test_undo_on_empty_history_is_noop(self):
        store_listener = Mock()
        self.manager.store.subscribe(store_listener)

        assert self.manager.undo() is None
        assert self.manager.redo() is None
        assert self.manager.get_history() == []
        assert self.manager.get_cursor() == -1
        store_listener.assert_not_called()

    def test_clear_keeps_current_entry(self):
        self.manager.push("item1")
        self.manager.push("item2")
        self.manager.undo()

        self.manager.clear()
        assert self.manager.get_history() == ["item1"]
        assert self.manager.get_cursor() == 0
        assert not self.manager.can_undo()
        assert not self.manager.can_redo()
        assert self.manager.undo() is None

    def test_clear_with_nothing_current_empties_history(self):
        self.manager.push("item1")
        self.manager.undo()

        self.manager.clear()
        assert self.manager.get_history() == []
        assert self.manager.get_cursor() == -1
        assert not self.manager.can_undo()
        assert not self.manager.can_redo()

    def test_reset_without_seed_empties_history(self):
        self.manager.push("item1")
        self.manager.push("item2")

        assert self.manager.reset() is None
        assert self.manager.get_history() == []
        assert self.manager.get_cursor() == -1
        assert not self.manager.can_undo()
        assert not self.manager.can_redo()

    def test_reset_after_clear_restores_undo_floor(self):
        """reset() goes back to floor -1 even after clear() raised it."""
        self.manager.push("item1")
        self.manager.clear()
        self.manager.reset()

        self.manager.push("item2")
        assert self.manager.can_undo()


class TestSeededHistory:
    """History with an initial state that acts as a permanent floor."""

    def setup_method(self):
        self.manager = make_manager(initial_state="initial")

    def test_starts_with_seed(self):
        assert self.manager.get_history() == ["initial"]
        assert self.manager.get_cursor() == 0
        assert self.manager.get_current() == "initial"
        assert not self.manager.can_undo()
        assert not self.manager.can_redo()

    def test_push_after_seed(self):
        self.manager.push("item1")
        self.manager.push("item2")
        assert self.manager.get_history() == ["initial", "item1", "item2"]
        assert self.manager.get_cursor() == 2

    def test_cannot_undo_past_seed(self):
        self.manager.push("item1")
        assert self.manager.undo() == "initial"
        assert self.manager.get_cursor() == 0
        assert not self.manager.can_undo()
        assert self.manager.undo() is None
        assert self.manager.get_cursor() == 0

    def test_seed_participates_in_bound(self):
        for i in range(1, 8):
            self.manager.push(f"item{i}")
        assert self.manager.get_history() == ["item3", "item4", "item5", "item6", "item7"]
        assert self.manager.get_cursor() == 4

    def test_bound_of_two_keeps_latest_pair(self):
        manager = make_manager(max_history_length=2, initial_state="s")
        manager.push("a")
        manager.push("b")
        manager.push("c")
        assert manager.get_history() == ["b", "c"]
        assert manager.get_cursor() == 1
        assert manager.undo() == "b"
        assert manager.undo() is None

    def test_redo_moves_forward(self):
        self.manager.push("item1")
        self.manager.push("item2")
        self.manager.undo()

        assert self.manager.redo() == "item2"
        assert self.manager.get_cursor() == 2
        assert self.manager.can_undo()
        assert not self.manager.can_redo()

    def test_redo_at_tail_returns_none(self):
        self.manager.push("item1")
        assert self.manager.redo() is None
        assert self.manager.get_cursor() == 1

    def test_clear_keeps_current_not_seed(self):
        self.manager.push("item1")
        self.manager.push("item2")

        self.manager.clear()
        assert self.manager.get_history() == ["item2"]
        assert self.manager.get_cursor() == 0
        assert not self.manager.can_undo()
        assert not self.manager.can_redo()

    def test_reset_restores_seed(self):
        self.manager.push("item1")
        self.manager.push("item2")
        self.manager.undo()

        assert self.manager.reset() == "initial"
        assert self.manager.get_history() == ["initial"]
        assert self.manager.get_cursor() == 0
        assert not self.manager.can_undo()
        assert not self.manager.can_redo()

    def test_reset_after_seed_evicted(self):
        manager = make_manager(max_history_length=2, initial_state="s")
        manager.push("a")
        manager.push("b")
        assert "s" not in manager.get_history()

        manager.reset()
        assert manager.get_history() == ["s"]

    def test_round_trip(self):
        self.manager.push("a")
        cursor = self.manager.get_cursor()
        self.manager.undo()
        self.manager.redo()
        assert self.manager.get_current() == "a"
        assert self.manager.get_cursor() == cursor


class TestPredicatesMatchMoves:
    """can_undo/can_redo agree with whether undo/redo move the cursor."""

    @pytest.mark.parametrize("initial_state", [None, "seed"])
    def test_predicates_agree_with_moves(self, initial_state):
        manager = make_manager(max_history_length=3, initial_state=initial_state)
        script = ["push", "push", "undo", "undo", "undo", "redo", "push", "push",
                  "push", "undo", "undo", "undo", "redo", "redo", "redo", "redo"]
        for n, step in enumerate(script):
            can_undo = manager.can_undo()
            can_redo = manager.can_redo()
            before = manager.get_cursor()
            if step == "push":
                manager.push(f"item{n}")
                continue
            if step == "undo":
                manager.undo()
                assert (manager.get_cursor() != before) == can_undo
            else:
                manager.redo()
                assert (manager.get_cursor() != before) == can_redo

    def test_retained_length_is_min_of_pushes_and_bound(self):
        manager = make_manager(max_history_length=4)
        pushed = []
        for i in range(10):
            pushed.append(i)
            manager.push(i)
            assert len(manager.get_history()) == min(len(pushed), 4)
            assert manager.get_history() == pushed[-4:]


class TestStoreIntegration:
    """The manager writes through whichever store it was given."""

    def test_uses_supplied_store(self):
        store = SimpleHistoryStore()
        manager = make_manager(initial_state="initial", store=store)
        assert manager.store is store
        assert store.get_state() == HistoryState(sequence=("initial",), cursor=0)

    def test_one_notification_per_operation(self):
        manager = make_manager()
        listener = Mock()
        manager.store.subscribe(listener)

        manager.push("a")
        assert listener.call_count == 1
        manager.push("b")
        assert listener.call_count == 2
        manager.undo()
        assert listener.call_count == 3
        manager.redo()
        assert listener.call_count == 4
        manager.redo()  # no-op
        assert listener.call_count == 4
        manager.clear()
        assert listener.call_count == 5

    def test_push_does_not_mutate_previous_state(self):
        manager = make_manager()
        manager.push("a")
        before = manager.store.get_state()
        manager.push("b")
        assert before.sequence == ("a",)
        assert before.cursor == 0

    def test_bound_methods_work_as_callbacks(self):
        manager = make_manager()
        push, undo = manager.push, manager.undo
        push("a")
        push("b")
        assert undo() == "a"


class TestConfiguration:
    """Options and their validation."""

    def test_default_max_length(self):
        manager = HistoryManager()
        assert manager.get_max_length() == HistoryConstants.DEFAULT_MAX_HISTORY_LENGTH == 100

    def test_custom_max_length(self):
        assert make_manager(max_history_length=2).get_max_length() == 2

    @pytest.mark.parametrize("bad", [0, -1, 2.5, "10", True, None])
    def test_invalid_max_length_fails_fast(self, bad):
        with pytest.raises(HistoryConfigError):
            make_manager(max_history_length=bad)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            make_manager(max_history_length=0)

    def test_initial_state_accessor(self):
        assert make_manager(initial_state="seed").get_initial_state() == "seed"
        assert make_manager().get_initial_state() is None
