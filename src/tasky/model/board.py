"""Build the reactive board tree from API payloads, and back."""

from __future__ import annotations

from typing import Any

from tasky.model.moves import Layout
from tasky.model.node import ListNode, Node

BOARD_FIELDS = ("id", "title", "description", "owner_id", "is_archived", "created_at", "updated_at")
COLUMN_FIELDS = ("id", "name", "position", "board_id", "created_at", "updated_at")
TASK_FIELDS = (
    "id",
    "title",
    "description",
    "due_date",
    "position",
    "column_id",
    "board_id",
    "assignee_id",
    "created_at",
    "updated_at",
)
COMMENT_FIELDS = ("id", "content", "author_id", "task_id", "created_at")


def _pick(data: dict, fields: tuple[str, ...]) -> dict:
    return {k: data.get(k) for k in fields}


def _by_position(items: list[dict]) -> list[dict]:
    return sorted(items, key=lambda item: item.get("position", 0))


def _comments_from_payload(items: list[dict]) -> ListNode:
    comments = ListNode()
    for comment in sorted(items, key=lambda c: c.get("created_at") or ""):
        comments[comment["id"]] = Node(**_pick(comment, COMMENT_FIELDS))
    return comments


def task_from_payload(data: dict, column_id: str | None = None) -> Node:
    """Build a task Node. column_id overrides the payload's own."""
    task = Node(**_pick(data, TASK_FIELDS))
    if column_id is not None:
        task.column_id = column_id
    task.comments = _comments_from_payload(data.get("comments") or [])
    return task


def column_from_payload(data: dict) -> Node:
    column = Node(**_pick(data, COLUMN_FIELDS))
    tasks = ListNode()
    for task in _by_position(data.get("tasks") or []):
        tasks[task["id"]] = task_from_payload(task, column_id=data["id"])
    column.tasks = tasks
    return column


def board_from_payload(data: dict) -> Node:
    """Build a board tree with columns and tasks in position order."""
    board = Node(**_pick(data, BOARD_FIELDS))
    columns = ListNode()
    for column in _by_position(data.get("columns") or []):
        columns[column["id"]] = column_from_payload(column)
    board.columns = columns
    return board


def _fields(node: Node, fields: tuple[str, ...]) -> dict[str, Any]:
    return {k: getattr(node, k) for k in fields}


def board_to_payload(board: Node) -> dict:
    """Inverse of board_from_payload."""
    data = _fields(board, BOARD_FIELDS)
    data["is_archived"] = bool(board.is_archived)
    data["columns"] = []
    for column in board.columns:
        col_data = _fields(column, COLUMN_FIELDS)
        col_data["tasks"] = []
        for task in column.tasks:
            task_data = _fields(task, TASK_FIELDS)
            task_data["comments"] = [_fields(c, COMMENT_FIELDS) for c in task.comments]
            col_data["tasks"].append(task_data)
        data["columns"].append(col_data)
    return data


def board_layout(board: Node) -> Layout:
    """Ordered (column_id, [task_id, ...]) pairs for the move resolver."""
    return [(column.id, column.tasks.keys()) for column in board.columns]


def find_task_column(board: Node, task_id: str) -> Node | None:
    """Find the column containing a task."""
    for column in board.columns:
        if task_id in column.tasks:
            return column
    return None
