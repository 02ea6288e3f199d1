"""Shared helpers for CLI command handlers."""

import json
import sys

import httpx

from tasky.client import ApiError, TaskyClient
from tasky.model.board import board_from_payload, find_task_column
from tasky.model.node import Node


def make_client(args) -> TaskyClient:
    """Client for the server and user named on the command line."""
    return TaskyClient(base_url=args.url, user=args.user)


def call_or_die(fn, *args, json_mode: bool = False, **kwargs):
    """Call a client method, exiting 1 with the server's message on failure."""
    try:
        return fn(*args, **kwargs)
    except ApiError as e:
        error(e.message, json_mode)
    except httpx.HTTPError as e:
        error(f"could not reach server: {e}", json_mode)


def require_board_id(args) -> str:
    if not args.board:
        error("no board given (use --board or TASKY_BOARD)", args.json)
    return args.board


def load_board_or_die(client: TaskyClient, board_id: str, json_mode: bool) -> Node:
    """Fetch a board and build its tree. Exit 1 with message if not found."""
    data = call_or_die(client.get_board, board_id, json_mode=json_mode)
    return board_from_payload(data)


def find_column(board: Node, col_id: str, json_mode: bool) -> Node:
    """Lookup column by id. Exit 1 listing available columns if not found."""
    col = board.columns[col_id]
    if col is not None:
        return col
    available = [f"  {c.id}  {c.name}" for c in board.columns]
    msg = f"Column '{col_id}' not found. Available:\n" + "\n".join(available)
    error(msg, json_mode)


def find_task(board: Node, task_id: str, json_mode: bool) -> Node:
    """Lookup task by id anywhere on the board. Exit 1 if not found."""
    column = find_task_column(board, task_id)
    if column is not None:
        return column.tasks[task_id]
    error(f"Task '{task_id}' not found.", json_mode)


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2, default=str))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def build_column_summaries(board: Node) -> list[dict]:
    """Build column summary dicts from board."""
    return [
        {
            "id": col.id,
            "name": col.name,
            "position": col.position,
            "tasks": len(col.tasks),
        }
        for col in board.columns
    ]


def format_column_line(c: dict, indent: str = "") -> str:
    """Format a column summary dict as a text line."""
    tasks = "task" if c["tasks"] == 1 else "tasks"
    return f"{indent}{c['position']}  {c['id']}  {c['name']:<16} {c['tasks']} {tasks}"


def task_summary(task: Node) -> dict:
    return {
        "id": task.id,
        "title": task.title,
        "column_id": task.column_id,
        "position": task.position,
        "due_date": task.due_date,
        "comments": len(task.comments) if task.comments else 0,
    }


def format_task_line(t: dict, indent: str = "") -> str:
    due = f"  due {t['due_date']}" if t["due_date"] else ""
    notes = f"  ({t['comments']} comments)" if t["comments"] else ""
    return f"{indent}{t['position']}  {t['id']}  {t['title']}{due}{notes}"
