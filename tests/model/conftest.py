"""Shared test helpers for model tests."""

import pytest

from tasky.model.board import board_from_payload


def _make_payload(columns, board_id="b1", title="Test Board"):
    """Board payload from [(column_id, name, [task_id, ...]), ...]."""
    return {
        "id": board_id,
        "title": title,
        "description": None,
        "owner_id": "alice",
        "is_archived": False,
        "columns": [
            {
                "id": col_id,
                "name": name,
                "position": col_pos,
                "board_id": board_id,
                "tasks": [
                    {
                        "id": task_id,
                        "title": f"Task {task_id}",
                        "position": task_pos,
                        "column_id": col_id,
                        "board_id": board_id,
                        "comments": [],
                    }
                    for task_pos, task_id in enumerate(task_ids)
                ],
            }
            for col_pos, (col_id, name, task_ids) in enumerate(columns)
        ],
    }


def _make_board(columns, **kwargs):
    """Helper to build a board tree from column specs."""
    return board_from_payload(_make_payload(columns, **kwargs))


@pytest.fixture
def board():
    """Three columns: Todo [T1, T2, T3], Doing [T4], Done []."""
    return _make_board(
        [
            ("c1", "Todo", ["T1", "T2", "T3"]),
            ("c2", "Doing", ["T4"]),
            ("c3", "Done", []),
        ]
    )
