"""Handlers for 'tasky task' commands."""

import asyncio

from tasky.cli._common import (
    call_or_die,
    error,
    find_column,
    find_task,
    format_task_line,
    load_board_or_die,
    make_client,
    output_json,
    output_result,
    require_board_id,
    task_summary,
)
from tasky.model.moves import AREA, TASK, DropTarget
from tasky.sync import move_and_sync


def task_list(args) -> int:
    """List tasks, optionally filtered to one column."""
    with make_client(args) as client:
        board = load_board_or_die(client, require_board_id(args), args.json)

        columns = list(board.columns)
        if args.column:
            columns = [find_column(board, args.column, args.json)]

        if args.json:
            output_json([task_summary(t) for col in columns for t in col.tasks])
            return 0

        for col in columns:
            print(f"{col.id}  {col.name}")
            for t in col.tasks:
                print(format_task_line(task_summary(t), indent="    "))

        return 0


def task_show(args) -> int:
    """Show one task with its comments."""
    with make_client(args) as client:
        board = load_board_or_die(client, require_board_id(args), args.json)
        task = find_task(board, args.id, args.json)

        comments = [
            {"id": c.id, "author_id": c.author_id, "content": c.content, "created_at": c.created_at}
            for c in task.comments
        ]

        if args.json:
            output_json({**task_summary(task), "description": task.description, "comment_list": comments})
            return 0

        print(f"# {task.title}")
        column = board.columns[task.column_id]
        print(f"column: {column.name if column else task.column_id}  position: {task.position}")
        if task.due_date:
            print(f"due: {task.due_date}")
        if task.description:
            print(f"\n{task.description}")
        for c in comments:
            print(f"\n[{c['id']}] {c['author_id']} at {c['created_at']}:\n{c['content']}")

        return 0


def task_add(args) -> int:
    """Create a task at the end of a column."""
    with make_client(args) as client:
        board_id = require_board_id(args)
        task = call_or_die(
            client.create_task,
            board_id,
            args.column,
            args.title,
            args.description,
            args.due,
            json_mode=args.json,
        )
        output_result(
            {"id": task["id"], "title": task["title"], "column_id": task["column_id"], "position": task["position"]},
            f'Created task "{task["title"]}" (id {task["id"]})',
            args.json,
        )
        return 0


def task_set(args) -> int:
    """Update task fields."""
    with make_client(args) as client:
        fields = {}
        if args.title is not None:
            fields["title"] = args.title
        if args.description is not None:
            fields["description"] = args.description
        if args.due is not None:
            fields["due_date"] = args.due or None
        if args.assignee is not None:
            fields["assignee_id"] = args.assignee or None
        if not fields:
            error("nothing to update", args.json)

        task = call_or_die(client.update_task, args.id, json_mode=args.json, **fields)
        output_result(task, f"Updated task {task['id']}", args.json)
        return 0


def task_move(args) -> int:
    """Drop a task onto another task or at the end of a column."""
    with make_client(args) as client:
        board = load_board_or_die(client, require_board_id(args), args.json)
        find_task(board, args.id, args.json)

        if args.onto:
            find_task(board, args.onto, args.json)
            target = DropTarget(TASK, args.onto)
        else:
            find_column(board, args.column, args.json)
            target = DropTarget(AREA, args.column)

        move = asyncio.run(move_and_sync(board, client, TASK, args.id, target))
        if board.sync is not None and board.sync.error:
            error(board.sync.error, args.json)

        if move is None:
            output_result({"id": args.id, "moved": False}, "Nothing to move", args.json)
            return 0

        task = find_task(board, args.id, args.json)
        column = board.columns[task.column_id]
        output_result(
            {"id": args.id, "moved": True, "column_id": task.column_id, "position": task.position},
            f'Moved task {args.id} to "{column.name}" position {task.position}',
            args.json,
        )
        return 0


def task_delete(args) -> int:
    """Delete a task."""
    with make_client(args) as client:
        call_or_die(client.delete_task, args.id, json_mode=args.json)
        output_result({"id": args.id, "deleted": True}, f"Deleted task {args.id}", args.json)
        return 0
