"""
Tests for movement.py - same-column reorder and cross-column transfer.
"""

import pytest

from errors import InvalidStatusError, NotFoundError
from models import DONE, TODO, Task
from movement import resolve_move


def ids(tasks):
    return [t.id for t in tasks]


class TestSameColumn:
    """Case A: the dropped task stays in its column."""

    def test_move_down_adjusts_for_removal(self, t1, t2, t3):
        result = resolve_move([t1, t2, t3], [], t1, TODO, 2)

        assert ids(result.todo) == ["T2", "T1", "T3"]
        assert result.done == ()
        assert result.index == 1

    def test_move_to_end(self, t1, t2, t3):
        result = resolve_move([t1, t2, t3], [], t1, TODO, 3)

        assert ids(result.todo) == ["T2", "T3", "T1"]

    def test_move_up(self, t1, t2, t3):
        result = resolve_move([t1, t2, t3], [], t3, TODO, 0)

        assert ids(result.todo) == ["T3", "T1", "T2"]

    @pytest.mark.parametrize("source", [0, 1, 2])
    def test_drop_on_own_index_is_noop(self, t1, t2, t3, source):
        todo = [t1, t2, t3]
        result = resolve_move(todo, [], todo[source], TODO, source)

        assert ids(result.todo) == ["T1", "T2", "T3"]
        assert result.index == source

    def test_drop_on_next_slot_is_noop(self, t1, t2, t3):
        # the slot right below a card is still its own position after removal
        result = resolve_move([t1, t2, t3], [], t1, TODO, 1)

        assert ids(result.todo) == ["T1", "T2", "T3"]

    def test_out_of_range_index_is_clamped(self, t1, t2, t3):
        result = resolve_move([t1, t2, t3], [], t2, TODO, 99)

        assert ids(result.todo) == ["T1", "T3", "T2"]
        assert result.index == 2

    def test_negative_index_is_clamped(self, t1, t2, t3):
        result = resolve_move([t1, t2, t3], [], t3, TODO, -5)

        assert ids(result.todo) == ["T3", "T1", "T2"]

    def test_status_unchanged(self, t1, t2):
        result = resolve_move([t1, t2], [], t2, TODO, 0)

        assert all(t.status == TODO for t in result.todo)
        assert result.moved.status == TODO

    def test_task_missing_from_claimed_column(self, t1, t2, d1):
        stale = d1.copy(status=TODO)

        with pytest.raises(NotFoundError) as exc:
            resolve_move([t1, t2], [d1], stale, TODO, 0)
        assert exc.value.task_id == "D1"
        assert exc.value.searched == (TODO,)


class TestCrossColumn:
    """Case B: the dropped task changes column."""

    def test_todo_to_empty_done(self, t1, t2):
        result = resolve_move([t1, t2], [], t1, DONE, 0)

        assert ids(result.todo) == ["T2"]
        assert ids(result.done) == ["T1"]
        assert result.done[0].status == DONE
        assert result.done[0].to_dict()["status"] == "Done"

    def test_insert_at_index(self, t1, t2, d1):
        result = resolve_move([t1, t2], [d1], t2, DONE, 1)

        assert ids(result.done) == ["D1", "T2"]
        assert result.index == 1

    def test_index_clamped_to_target_length(self, t1, d1):
        result = resolve_move([t1], [d1], t1, DONE, 7)

        assert ids(result.done) == ["D1", "T1"]
        assert result.index == 1

    def test_done_to_todo(self, t1, t2, d1):
        result = resolve_move([t1, t2], [d1], d1, TODO, 1)

        assert ids(result.todo) == ["T1", "D1", "T2"]
        assert result.done == ()
        assert result.moved.status == TODO

    def test_searches_both_columns(self, t1, d1):
        # snapshot claims done, task actually sits in todo
        stale = t1.copy(status=DONE)
        result = resolve_move([t1], [d1], stale, TODO, 0)

        assert ids(result.todo) == ["T1"]
        assert ids(result.done) == ["D1"]

    def test_uses_stored_task_fields(self, t1):
        snapshot = t1.copy(title="edited in flight")
        result = resolve_move([t1], [], snapshot, DONE, 0)

        assert result.done[0].title == "Task 1"

    def test_unknown_id(self, t1, t2, d1):
        ghost = Task(id="ghost", title="?", status=TODO)

        with pytest.raises(NotFoundError):
            resolve_move([t1, t2], [d1], ghost, DONE, 0)


class TestPurity:
    """The resolver never mutates its inputs."""

    def test_inputs_untouched(self, t1, t2, d1):
        todo = [t1, t2]
        done = [d1]
        resolve_move(todo, done, t1, DONE, 0)

        assert ids(todo) == ["T1", "T2"]
        assert ids(done) == ["D1"]
        assert t1.status == TODO

    def test_invalid_target_status(self, t1):
        with pytest.raises(InvalidStatusError):
            resolve_move([t1], [], t1, "archive", 0)

    def test_count_and_membership_preserved(self, t1, t2, t3, d1):
        todo, done = [t1, t2, t3], [d1]
        moves = [(t2, DONE, 0), (d1, TODO, 3), (t1, TODO, 2), (t3, DONE, 5)]
        for task, target, index in moves:
            status = TODO if task.id in ids(todo) else DONE
            result = resolve_move(todo, done, task.copy(status=status), target, index)
            todo, done = list(result.todo), list(result.done)

            assert len(todo) + len(done) == 4
            assert all(t.status == TODO for t in todo)
            assert all(t.status == DONE for t in done)
            assert not set(ids(todo)) & set(ids(done))
