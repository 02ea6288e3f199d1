"""Tests for resolving drag gestures into orderings."""

import pytest

from tasky.model.moves import (
    AREA,
    COLUMN,
    TASK,
    ColumnMove,
    DropTarget,
    TaskMove,
    column_positions,
    find_task,
    resolve_column_move,
    resolve_move,
    resolve_task_move,
    task_positions,
)

LAYOUT = [
    ("work", ["T1", "T2", "T3"]),
    ("backlog", ["T5"]),
    ("done", ["D1", "D2"]),
]


def _order(move, column_id):
    return dict(move.layout)[column_id]


def test_drop_target_rejects_unknown_kind():
    with pytest.raises(ValueError, match="unknown drop target kind"):
        DropTarget("header", "c1")


def test_find_task():
    assert find_task(LAYOUT, "T3") == (0, 2)
    assert find_task(LAYOUT, "nope") is None


# --- columns ---


def test_column_move_forward_takes_target_slot():
    layout = [("A", []), ("B", []), ("C", [])]
    move = resolve_column_move(layout, "A", DropTarget(COLUMN, "C"))
    assert move == ColumnMove("A", 0, 2, ["B", "C", "A"])
    assert column_positions(move) == {"B": 0, "C": 1, "A": 2}


def test_column_move_backward():
    layout = [("A", []), ("B", []), ("C", [])]
    move = resolve_column_move(layout, "C", DropTarget(COLUMN, "A"))
    assert move.order == ["C", "A", "B"]


@pytest.mark.parametrize(
    "target",
    [None, DropTarget(COLUMN, "A"), DropTarget(COLUMN, "missing"), DropTarget(TASK, "T1")],
)
def test_column_move_noops(target):
    layout = [("A", ["T1"]), ("B", [])]
    assert resolve_column_move(layout, "A", target) is None


# --- tasks within a column ---


def test_forward_drop_on_task_lands_after_it():
    move = resolve_task_move(LAYOUT, "T1", DropTarget(TASK, "T3"))
    assert _order(move, "work") == ["T2", "T3", "T1"]
    assert move.source == 0
    assert move.destination == 2
    assert move.touched_columns == ["work"]


def test_forward_drop_on_next_task_swaps():
    move = resolve_task_move(LAYOUT, "T1", DropTarget(TASK, "T2"))
    assert _order(move, "work") == ["T2", "T1", "T3"]


def test_backward_drop_on_task_lands_before_it():
    move = resolve_task_move(LAYOUT, "T3", DropTarget(TASK, "T1"))
    assert _order(move, "work") == ["T3", "T1", "T2"]


def test_drop_on_own_column_area_moves_to_end():
    move = resolve_task_move(LAYOUT, "T1", DropTarget(AREA, "work"))
    assert _order(move, "work") == ["T2", "T3", "T1"]
    assert move.destination == 2


def test_last_task_onto_own_column_is_noop():
    assert resolve_task_move(LAYOUT, "T3", DropTarget(AREA, "work")) is None
    assert resolve_task_move(LAYOUT, "T3", DropTarget(COLUMN, "work")) is None


@pytest.mark.parametrize(
    "target",
    [
        None,
        DropTarget(TASK, "T2"),
        DropTarget(TASK, "missing"),
        DropTarget(AREA, "missing"),
    ],
)
def test_task_move_noops(target):
    assert resolve_task_move(LAYOUT, "T2", target) is None


def test_unknown_task_is_noop():
    assert resolve_task_move(LAYOUT, "ghost", DropTarget(AREA, "done")) is None


# --- tasks across columns ---


def test_drop_on_empty_area_of_other_column_appends():
    move = resolve_task_move(LAYOUT, "T5", DropTarget(AREA, "done"))
    assert _order(move, "done") == ["D1", "D2", "T5"]
    assert _order(move, "backlog") == []
    assert move.destination == 2
    assert move.touched_columns == ["backlog", "done"]


def test_drop_on_column_header_appends():
    move = resolve_task_move(LAYOUT, "T2", DropTarget(COLUMN, "done"))
    assert _order(move, "done") == ["D1", "D2", "T2"]
    assert _order(move, "work") == ["T1", "T3"]


def test_drop_on_task_in_other_column_takes_its_slot():
    move = resolve_task_move(LAYOUT, "T3", DropTarget(TASK, "D1"))
    assert _order(move, "done") == ["T3", "D1", "D2"]
    assert _order(move, "work") == ["T1", "T2"]


def test_task_positions_cover_every_column_by_default():
    move = resolve_task_move(LAYOUT, "T5", DropTarget(AREA, "done"))
    positions = task_positions(move)
    assert positions == {
        "T1": ("work", 0),
        "T2": ("work", 1),
        "T3": ("work", 2),
        "D1": ("done", 0),
        "D2": ("done", 1),
        "T5": ("done", 2),
    }


def test_task_positions_limited_to_touched_columns():
    move = resolve_task_move(LAYOUT, "T5", DropTarget(AREA, "done"))
    positions = task_positions(move, move.touched_columns)
    assert set(positions) == {"D1", "D2", "T5"}


def test_resolution_does_not_mutate_layout():
    layout = [(col_id, list(tasks)) for col_id, tasks in LAYOUT]
    resolve_task_move(layout, "T1", DropTarget(TASK, "D2"))
    assert layout == LAYOUT


# --- dispatch ---


def test_resolve_move_dispatches_by_kind():
    assert isinstance(resolve_move(LAYOUT, TASK, "T1", DropTarget(AREA, "done")), TaskMove)
    assert isinstance(resolve_move(LAYOUT, COLUMN, "work", DropTarget(COLUMN, "done")), ColumnMove)


def test_resolve_move_rejects_unknown_kind():
    with pytest.raises(ValueError, match="unknown drag kind"):
        resolve_move(LAYOUT, "comment", "x", DropTarget(AREA, "done"))
