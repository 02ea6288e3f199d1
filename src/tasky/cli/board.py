"""Handlers for 'tasky board' commands."""

from tasky.cli._common import (
    build_column_summaries,
    call_or_die,
    format_column_line,
    format_task_line,
    load_board_or_die,
    make_client,
    output_json,
    output_result,
    task_summary,
)


def board_list(args) -> int:
    """List the caller's boards."""
    with make_client(args) as client:
        boards = call_or_die(client.list_boards, json_mode=args.json)

        if args.json:
            output_json(boards)
        else:
            for b in boards:
                archived = "  (archived)" if b["is_archived"] else ""
                print(f"{b['id']}  {b['title']}{archived}")

        return 0


def board_show(args) -> int:
    """Show a board with its columns and tasks."""
    with make_client(args) as client:
        board = load_board_or_die(client, args.id, args.json)

        columns = build_column_summaries(board)
        for summary, column in zip(columns, board.columns):
            summary["task_list"] = [task_summary(t) for t in column.tasks]

        if args.json:
            output_json({"id": board.id, "title": board.title, "description": board.description, "columns": columns})
            return 0

        print(f"# {board.title}")
        if board.description:
            print(f"\n{board.description}")
        print()
        for c in columns:
            print(format_column_line(c))
            for t in c["task_list"]:
                print(format_task_line(t, indent="    "))

        return 0


def board_add(args) -> int:
    """Create a board with the default columns."""
    with make_client(args) as client:
        board = call_or_die(client.create_board, args.title, args.description, json_mode=args.json)
        output_result(board, f'Created board "{board["title"]}" (id {board["id"]})', args.json)
        return 0


def board_set(args) -> int:
    """Update board title, description or archive flag."""
    with make_client(args) as client:
        fields = {}
        if args.title is not None:
            fields["title"] = args.title
        if args.description is not None:
            fields["description"] = args.description
        if args.archived is not None:
            fields["is_archived"] = args.archived
        board = call_or_die(client.update_board, args.id, json_mode=args.json, **fields)
        output_result(board, f"Updated board {board['id']}", args.json)
        return 0


def board_delete(args) -> int:
    """Delete a board and everything on it."""
    with make_client(args) as client:
        call_or_die(client.delete_board, args.id, json_mode=args.json)
        output_result({"id": args.id, "deleted": True}, f"Deleted board {args.id}", args.json)
        return 0
