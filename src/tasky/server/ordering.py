"""Atomic position updates for columns and tasks.

Nothing here commits. Callers run each operation inside one session
transaction and commit only when it returns; any ``OrderingError`` means
the caller must roll back, so a half-applied ordering is never visible.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable

from sqlalchemy import func
from sqlalchemy.orm import Session

from tasky.model.position import is_dense, renumber
from tasky.server.models import Board, BoardColumn, Task
from tasky.server.schemas import ColumnOrderItem, TaskOrderItem

logger = logging.getLogger(__name__)


class OrderingError(Exception):
    """A reorder request that must be rejected as a whole."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _check_unique(ids: list[str], what: str) -> None:
    if len(set(ids)) != len(ids):
        raise OrderingError(f"Duplicate {what} id in payload")


def _columns_of(db: Session, board_id: str) -> list[BoardColumn]:
    return db.query(BoardColumn).filter(BoardColumn.board_id == board_id).order_by(BoardColumn.position).all()


def _tasks_of(db: Session, column_id: str) -> list[Task]:
    return db.query(Task).filter(Task.column_id == column_id).order_by(Task.position, Task.created_at).all()


def append_position(db: Session, model, **filters) -> int:
    """Position for a new child: the current sibling count."""
    query = db.query(func.count(model.id))
    for name, value in filters.items():
        query = query.filter(getattr(model, name) == value)
    return query.scalar() or 0


def renumber_columns(db: Session, board_id: str, exclude: Iterable[str] = ()) -> None:
    """Rewrite column positions of a board to 0..n-1 in current order."""
    skip = set(exclude)
    columns = [c for c in _columns_of(db, board_id) if c.id not in skip]
    by_id = {c.id: c for c in columns}
    for column_id, position in renumber(by_id).items():
        by_id[column_id].position = position


def renumber_tasks(db: Session, column_id: str, exclude: Iterable[str] = ()) -> None:
    """Rewrite task positions of a column to 0..n-1 in current order."""
    skip = set(exclude)
    tasks = [t for t in _tasks_of(db, column_id) if t.id not in skip]
    by_id = {t.id: t for t in tasks}
    for task_id, position in renumber(by_id).items():
        by_id[task_id].position = position


def reorder_columns(db: Session, board: Board, items: list[ColumnOrderItem]) -> None:
    """Apply a full column ordering to one board."""
    ids = [item.id for item in items]
    _check_unique(ids, "column")

    columns = {c.id: c for c in db.query(BoardColumn).filter(BoardColumn.id.in_(ids))}
    for column_id in ids:
        column = columns.get(column_id)
        if column is None or column.board_id != board.id:
            raise OrderingError("Column not found", status_code=404)

    for item in items:
        columns[item.id].position = item.position
    db.flush()

    positions = [c.position for c in _columns_of(db, board.id)]
    if not is_dense(positions):
        raise OrderingError("Column positions must run 0..n-1 without gaps or duplicates")
    logger.debug("reordered %d columns on board %s", len(items), board.id)


def reorder_tasks(db: Session, board: Board, items: list[TaskOrderItem]) -> None:
    """Apply a task ordering, possibly moving tasks between columns of one board."""
    ids = [item.id for item in items]
    _check_unique(ids, "task")

    board_columns = {c.id for c in _columns_of(db, board.id)}
    for item in items:
        if item.column_id not in board_columns:
            raise OrderingError("Column not found", status_code=404)

    tasks = {t.id: t for t in db.query(Task).filter(Task.id.in_(ids))}
    for task_id in ids:
        task = tasks.get(task_id)
        if task is None or task.board_id != board.id:
            raise OrderingError("Task not found", status_code=404)

    for item in items:
        task = tasks[item.id]
        task.column_id = item.column_id
        task.position = item.position
    db.flush()

    by_column: dict[str, list[int]] = defaultdict(list)
    rows = db.query(Task.column_id, Task.position).filter(Task.board_id == board.id)
    for column_id, position in rows:
        by_column[column_id].append(position)
    for column_id, positions in by_column.items():
        if not is_dense(positions):
            raise OrderingError("Task positions must run 0..n-1 within each column")
    logger.debug("reordered %d tasks on board %s", len(items), board.id)


def move_task(db: Session, task: Task, column: BoardColumn, position: int | None) -> None:
    """Move one task to position in column and renumber both columns.

    Position is the task's final index, clamped to the end of the column.
    """
    source_id = task.column_id
    source = [t for t in _tasks_of(db, source_id) if t.id != task.id]
    target = source if column.id == source_id else _tasks_of(db, column.id)

    insert_pos = min(position, len(target)) if position is not None else len(target)
    target.insert(insert_pos, task)
    task.column_id = column.id

    for siblings in (source, target) if target is not source else (target,):
        by_id = {t.id: t for t in siblings}
        for task_id, new_position in renumber(by_id).items():
            by_id[task_id].position = new_position
