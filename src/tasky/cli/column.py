"""Handlers for 'tasky column' commands."""

import asyncio

from tasky.cli._common import (
    build_column_summaries,
    call_or_die,
    error,
    find_column,
    format_column_line,
    load_board_or_die,
    make_client,
    output_json,
    output_result,
    require_board_id,
)
from tasky.model.moves import COLUMN, DropTarget
from tasky.sync import move_and_sync


def column_list(args) -> int:
    """List all columns of a board."""
    with make_client(args) as client:
        board = load_board_or_die(client, require_board_id(args), args.json)

        items = build_column_summaries(board)

        if args.json:
            output_json(items)
        else:
            for c in items:
                print(format_column_line(c))

        return 0


def column_add(args) -> int:
    """Append a new column to a board."""
    with make_client(args) as client:
        board_id = require_board_id(args)
        col = call_or_die(client.create_column, board_id, args.name, json_mode=args.json)
        output_result(
            {"id": col["id"], "name": col["name"], "position": col["position"]},
            f'Created column "{col["name"]}" (id {col["id"]})',
            args.json,
        )
        return 0


def column_rename(args) -> int:
    """Rename a column."""
    with make_client(args) as client:
        col = call_or_die(client.update_column, args.id, args.new_name, json_mode=args.json)
        output_result(
            {"id": col["id"], "name": col["name"]},
            f'Renamed column {col["id"]} to "{col["name"]}"',
            args.json,
        )
        return 0


def column_move(args) -> int:
    """Move a column into the slot of another column."""
    with make_client(args) as client:
        board = load_board_or_die(client, require_board_id(args), args.json)
        find_column(board, args.id, args.json)
        find_column(board, args.onto, args.json)

        move = asyncio.run(move_and_sync(board, client, COLUMN, args.id, DropTarget(COLUMN, args.onto)))
        if board.sync is not None and board.sync.error:
            error(board.sync.error, args.json)

        order = [col.id for col in board.columns]
        if move is None:
            output_result({"id": args.id, "moved": False, "order": order}, "Nothing to move", args.json)
        else:
            output_result(
                {"id": args.id, "moved": True, "position": move.destination, "order": order},
                f"Moved column {args.id} to position {move.destination}",
                args.json,
            )
        return 0


def column_delete(args) -> int:
    """Delete a column and its tasks."""
    with make_client(args) as client:
        call_or_die(client.delete_column, args.id, json_mode=args.json)
        output_result({"id": args.id, "deleted": True}, f"Deleted column {args.id}", args.json)
        return 0
