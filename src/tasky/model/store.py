"""Optimistic client copy of a board.

Moves are applied to the local tree as soon as they are resolved, before
the server has seen them. The server copy stays authoritative: after
each sync the whole board is reloaded and merged back in place with
``reconcile``, so mounted watchers keep working.
"""

from __future__ import annotations

from tasky.model.moves import ColumnMove, TaskMove, column_positions, task_positions
from tasky.model.node import Node
from tasky.model.position import check_dense

# Client-only keys that survive a reconcile.
TRANSIENT_KEYS = ("sync",)


def init_sync_state(board: Node) -> Node:
    """Attach transient sync status to a board if it has none."""
    if not board.sync:
        board.sync = Node(status="idle", pending=0)
    return board.sync


def apply_column_move(board: Node, move: ColumnMove) -> None:
    """Reorder board.columns and renumber every column."""
    board.columns.reorder(move.order)
    for column_id, position in column_positions(move).items():
        board.columns[column_id].position = position
    check_dense([c.position for c in board.columns], "column")


def apply_task_move(board: Node, move: TaskMove) -> None:
    """Move the task Node between columns and renumber the touched columns."""
    source = board.columns[move.source_column]
    target = board.columns[move.target_column]
    task = source.tasks[move.task_id]

    if source is target:
        new_order = dict(move.layout)[move.target_column]
        source.tasks.reorder(new_order)
    else:
        source.tasks[move.task_id] = None
        target.tasks.insert(move.destination, move.task_id, task)
        task.column_id = target.id

    for task_id, (column_id, position) in task_positions(move, move.touched_columns).items():
        board.columns[column_id].tasks[task_id].position = position
    for column_id in move.touched_columns:
        check_dense([t.position for t in board.columns[column_id].tasks], f"task ({column_id})")


def apply_move(board: Node, move: ColumnMove | TaskMove) -> None:
    """Apply a resolved move to the local tree immediately."""
    if isinstance(move, ColumnMove):
        apply_column_move(board, move)
    elif isinstance(move, TaskMove):
        apply_task_move(board, move)
    else:
        raise TypeError(f"not a move: {move!r}")


def reconcile(board: Node, fresh: Node) -> None:
    """Replace local state with the server's, in place."""
    board.update(fresh, keep=TRANSIENT_KEYS)
