"""Push resolved moves to the server and pull the authoritative board back.

Runs: push → load, reporting progress on ``board.sync.status``. A move is
already visible locally before ``run_sync`` starts. A failed push is
logged and reported, never retried, and not rolled back by hand: the
reload that follows every push brings the local tree back in line with
whatever the server holds.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from tasky.client import ApiError, TaskyClient
from tasky.model.board import board_from_payload, board_layout
from tasky.model.moves import ColumnMove, DropTarget, TaskMove, column_positions, resolve_move, task_positions
from tasky.model.node import Node
from tasky.model.store import apply_move, init_sync_state, reconcile

logger = logging.getLogger(__name__)

SYNC_ERRORS = (ApiError, httpx.HTTPError)


def build_request(board: Node, move: ColumnMove | TaskMove) -> tuple[str, dict]:
    """Return (kind, payload) carrying the complete new ordering.

    Column moves send every column of the board; task moves send every
    task of every column, not just the touched ones.
    """
    if isinstance(move, ColumnMove):
        columns = [{"id": col_id, "position": pos} for col_id, pos in column_positions(move).items()]
        return "columns", {"board_id": board.id, "columns": columns}
    tasks = [
        {"id": task_id, "column_id": column_id, "position": position}
        for task_id, (column_id, position) in task_positions(move).items()
    ]
    return "tasks", {"board_id": board.id, "tasks": tasks}


def _describe(exc: Exception) -> str:
    if isinstance(exc, ApiError):
        return exc.message
    return str(exc) or exc.__class__.__name__


async def reload_board(board: Node, client: TaskyClient) -> bool:
    """Fetch the board and merge it into the local tree. Returns success."""
    sync = init_sync_state(board)
    sync.status = "load"
    try:
        data = await asyncio.to_thread(client.get_board, board.id)
    except SYNC_ERRORS as exc:
        logger.warning("reload of board %s failed: %s", board.id, exc)
        sync.error = f"Could not reload board: {_describe(exc)}"
        return False
    reconcile(board, board_from_payload(data))
    return True


async def run_sync(board: Node, client: TaskyClient, move: ColumnMove | TaskMove) -> bool:
    """Send one move's ordering, then reload. Returns True if the push succeeded.

    The error is only cleared when no other sync is in flight, so a
    failure stays reported until every overlapping sync has finished.
    """
    sync = init_sync_state(board)
    if not sync.pending:
        sync.error = None
    sync.pending = (sync.pending or 0) + 1
    sync.status = "push"
    pushed = False

    kind, payload = build_request(board, move)
    send = client.reorder_columns if kind == "columns" else client.reorder_tasks

    try:
        try:
            await asyncio.to_thread(send, payload)
            pushed = True
        except SYNC_ERRORS as exc:
            logger.warning("reorder of %s on board %s failed: %s", kind, board.id, exc)
            sync.error = f"Failed to reorder {kind}: {_describe(exc)}"

        await reload_board(board, client)
    except asyncio.CancelledError:
        raise
    except Exception:
        logger.exception("sync of board %s failed", board.id)
        sync.error = f"Failed to reorder {kind}"
    finally:
        sync.pending = max((sync.pending or 1) - 1, 0)
        if not sync.pending:
            sync.status = "error" if sync.error else "idle"
    return pushed


def apply_gesture(board: Node, kind: str, dragged_id: str, target: DropTarget | None) -> ColumnMove | TaskMove | None:
    """Resolve a finished drag and apply it locally. None means nothing moved."""
    move = resolve_move(board_layout(board), kind, dragged_id, target)
    if move is not None:
        apply_move(board, move)
    return move


async def move_and_sync(
    board: Node,
    client: TaskyClient,
    kind: str,
    dragged_id: str,
    target: DropTarget | None,
) -> ColumnMove | TaskMove | None:
    """Full gesture pipeline: resolve, apply optimistically, push, reload."""
    move = apply_gesture(board, kind, dragged_id, target)
    if move is None:
        return None
    await run_sync(board, client, move)
    return move
