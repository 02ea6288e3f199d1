"""Board ordering engine: positions, move resolution, reactive board tree."""

from tasky.model.board import board_from_payload, board_layout, board_to_payload, find_task_column
from tasky.model.moves import (
    ColumnMove,
    DropTarget,
    TaskMove,
    column_positions,
    resolve_column_move,
    resolve_move,
    resolve_task_move,
    task_positions,
)
from tasky.model.node import ListNode, Node
from tasky.model.position import check_dense, is_dense, renumber
from tasky.model.store import apply_move, init_sync_state, reconcile

__all__ = [
    "ColumnMove",
    "DropTarget",
    "ListNode",
    "Node",
    "TaskMove",
    "apply_move",
    "board_from_payload",
    "board_layout",
    "board_to_payload",
    "check_dense",
    "column_positions",
    "find_task_column",
    "init_sync_state",
    "is_dense",
    "reconcile",
    "renumber",
    "resolve_column_move",
    "resolve_move",
    "resolve_task_move",
    "task_positions",
]
