"""Handlers for 'tasky comment' commands."""

from tasky.cli._common import (
    call_or_die,
    find_task,
    load_board_or_die,
    make_client,
    output_json,
    output_result,
    require_board_id,
)


def comment_list(args) -> int:
    """List comments on a task, oldest first."""
    with make_client(args) as client:
        board = load_board_or_die(client, require_board_id(args), args.json)
        task = find_task(board, args.task, args.json)

        items = [
            {"id": c.id, "author_id": c.author_id, "content": c.content, "created_at": c.created_at}
            for c in task.comments
        ]

        if args.json:
            output_json(items)
        else:
            for c in items:
                print(f"{c['id']}  {c['author_id']}: {c['content']}")

        return 0


def comment_add(args) -> int:
    with make_client(args) as client:
        comment = call_or_die(client.create_comment, args.task, args.content, json_mode=args.json)
        output_result(comment, f"Added comment {comment['id']}", args.json)
        return 0


def comment_delete(args) -> int:
    with make_client(args) as client:
        call_or_die(client.delete_comment, args.id, json_mode=args.json)
        output_result({"id": args.id, "deleted": True}, f"Deleted comment {args.id}", args.json)
        return 0
