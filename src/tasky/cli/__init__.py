"""CLI argument parser and dispatch for tasky."""

import argparse
import logging
import os
import sys

from tasky.cli.board import board_add, board_delete, board_list, board_set, board_show
from tasky.cli.column import column_add, column_delete, column_list, column_move, column_rename
from tasky.cli.comment import comment_add, comment_delete, comment_list
from tasky.cli.serve import serve
from tasky.cli.task import task_add, task_delete, task_list, task_move, task_set, task_show
from tasky.cli.web import web
from tasky.client import DEFAULT_URL


def common_parser() -> argparse.ArgumentParser:
    """Options shared by every command, the TUI included."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--url",
        default=os.environ.get("TASKY_URL", DEFAULT_URL),
        help=f"API server URL (default: $TASKY_URL or {DEFAULT_URL})",
    )
    common.add_argument("--user", default=os.environ.get("TASKY_USER"), help="User id (default: $TASKY_USER)")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    return common


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = common_parser()

    scoped = argparse.ArgumentParser(add_help=False, parents=[common])
    scoped.add_argument("--board", default=os.environ.get("TASKY_BOARD"), help="Board id (default: $TASKY_BOARD)")

    parser = argparse.ArgumentParser(
        prog="tasky",
        description="Collaborative kanban board",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- serve ---
    serve_p = nouns.add_parser("serve", help="Run the API server", parents=[common])
    serve_p.add_argument("--host", help="Bind address (default: $TASKY_HOST or localhost)")
    serve_p.add_argument("--port", type=int, help="Port (default: $TASKY_PORT or 8617)")
    serve_p.add_argument("--database", help="SQLAlchemy database URL (default: $TASKY_DATABASE_URL)")
    serve_p.set_defaults(func=serve)

    # --- web ---
    web_p = nouns.add_parser("web", help="Serve the board TUI in a browser", parents=[scoped])
    web_p.add_argument("--host", default="localhost", help="Bind address (default: localhost)")
    web_p.add_argument("--port", type=int, default=8618, help="Port (default: 8618)")
    web_p.set_defaults(func=web)

    # --- board ---
    board_p = nouns.add_parser("board", help="Board operations", parents=[common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_list_p = board_verbs.add_parser("list", help="List your boards", parents=[common])
    board_list_p.set_defaults(func=board_list)

    board_show_p = board_verbs.add_parser("show", help="Show a board", parents=[common])
    board_show_p.add_argument("id", help="Board ID")
    board_show_p.set_defaults(func=board_show)

    board_add_p = board_verbs.add_parser("add", help="Create a board", parents=[common])
    board_add_p.add_argument("title", help="Board title")
    board_add_p.add_argument("--description", help="Board description")
    board_add_p.set_defaults(func=board_add)

    board_set_p = board_verbs.add_parser("set", help="Update a board", parents=[common])
    board_set_p.add_argument("id", help="Board ID")
    board_set_p.add_argument("--title", help="New title")
    board_set_p.add_argument("--description", help="New description")
    archive = board_set_p.add_mutually_exclusive_group()
    archive.add_argument("--archive", dest="archived", action="store_const", const=True, help="Archive the board")
    archive.add_argument("--unarchive", dest="archived", action="store_const", const=False, help="Unarchive the board")
    board_set_p.set_defaults(func=board_set, archived=None)

    board_delete_p = board_verbs.add_parser("delete", help="Delete a board", parents=[common])
    board_delete_p.add_argument("id", help="Board ID")
    board_delete_p.set_defaults(func=board_delete)

    # board with no verb = list
    board_p.set_defaults(func=board_list)

    # --- column ---
    col_p = nouns.add_parser("column", help="Column operations", parents=[scoped])
    col_verbs = col_p.add_subparsers(dest="verb")

    col_list_p = col_verbs.add_parser("list", help="List columns", parents=[scoped])
    col_list_p.set_defaults(func=column_list)

    col_add_p = col_verbs.add_parser("add", help="Create a column", parents=[scoped])
    col_add_p.add_argument("name", help="Column name")
    col_add_p.set_defaults(func=column_add)

    col_rename_p = col_verbs.add_parser("rename", help="Rename a column", parents=[scoped])
    col_rename_p.add_argument("id", help="Column ID")
    col_rename_p.add_argument("new_name", help="New column name")
    col_rename_p.set_defaults(func=column_rename)

    col_move_p = col_verbs.add_parser("move", help="Move a column", parents=[scoped])
    col_move_p.add_argument("id", help="Column ID")
    col_move_p.add_argument("--onto", required=True, help="Column whose slot it takes")
    col_move_p.set_defaults(func=column_move)

    col_delete_p = col_verbs.add_parser("delete", help="Delete a column", parents=[scoped])
    col_delete_p.add_argument("id", help="Column ID")
    col_delete_p.set_defaults(func=column_delete)

    # column with no verb = list
    col_p.set_defaults(func=column_list)

    # --- task ---
    task_p = nouns.add_parser("task", help="Task operations", parents=[scoped])
    task_verbs = task_p.add_subparsers(dest="verb")

    task_list_p = task_verbs.add_parser("list", help="List tasks", parents=[scoped])
    task_list_p.add_argument("--column", dest="column", help="Filter by column ID")
    task_list_p.set_defaults(func=task_list)

    task_show_p = task_verbs.add_parser("show", help="Show a task and its comments", parents=[scoped])
    task_show_p.add_argument("id", help="Task ID")
    task_show_p.set_defaults(func=task_show)

    task_add_p = task_verbs.add_parser("add", help="Create a task", parents=[scoped])
    task_add_p.add_argument("title", help="Task title")
    task_add_p.add_argument("--column", dest="column", required=True, help="Target column ID")
    task_add_p.add_argument("--description", help="Task description")
    task_add_p.add_argument("--due", help="Due date (ISO 8601)")
    task_add_p.set_defaults(func=task_add)

    task_set_p = task_verbs.add_parser("set", help="Update a task", parents=[scoped])
    task_set_p.add_argument("id", help="Task ID")
    task_set_p.add_argument("--title", help="New title")
    task_set_p.add_argument("--description", help="New description")
    task_set_p.add_argument("--due", help="Due date (ISO 8601, empty to clear)")
    task_set_p.add_argument("--assignee", help="Assignee user id (empty to clear)")
    task_set_p.set_defaults(func=task_set)

    task_move_p = task_verbs.add_parser("move", help="Move a task", parents=[scoped])
    task_move_p.add_argument("id", help="Task ID")
    where = task_move_p.add_mutually_exclusive_group(required=True)
    where.add_argument("--onto", help="Drop onto this task")
    where.add_argument("--column", dest="column", help="Drop at the end of this column")
    task_move_p.set_defaults(func=task_move)

    task_delete_p = task_verbs.add_parser("delete", help="Delete a task", parents=[scoped])
    task_delete_p.add_argument("id", help="Task ID")
    task_delete_p.set_defaults(func=task_delete)

    # task with no verb = list
    task_p.set_defaults(func=task_list, column=None)

    # --- comment ---
    comment_p = nouns.add_parser("comment", help="Comment operations", parents=[scoped])
    comment_verbs = comment_p.add_subparsers(dest="verb")

    comment_list_p = comment_verbs.add_parser("list", help="List comments on a task", parents=[scoped])
    comment_list_p.add_argument("task", help="Task ID")
    comment_list_p.set_defaults(func=comment_list)

    comment_add_p = comment_verbs.add_parser("add", help="Comment on a task", parents=[scoped])
    comment_add_p.add_argument("task", help="Task ID")
    comment_add_p.add_argument("content", help="Comment text")
    comment_add_p.set_defaults(func=comment_add)

    comment_delete_p = comment_verbs.add_parser("delete", help="Delete a comment", parents=[scoped])
    comment_delete_p.add_argument("id", help="Comment ID")
    comment_delete_p.set_defaults(func=comment_delete)

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
    )


def configure_tui_logging(verbose: bool) -> None:
    """Route log records to the textual devtools console instead of the terminal."""
    from textual.logging import TextualHandler

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, handlers=[TextualHandler()])
