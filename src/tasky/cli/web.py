"""Handlers for 'tasky web' command."""

import shlex
import shutil
import sys

from textual_serve.server import Server

from tasky.cli._common import require_board_id


def web(args) -> int:
    board_id = require_board_id(args)

    tasky = shutil.which("tasky")
    if tasky is None:
        print("error: tasky not found on PATH", file=sys.stderr)
        return 1

    parts = [tasky, "--url", args.url]
    if args.user:
        parts += ["--user", args.user]
    parts.append(board_id)
    command = shlex.join(parts)

    server = Server(command, host=args.host, port=args.port, title="tasky")

    print(f"serving board {board_id} at http://{args.host}:{args.port}")
    server.serve()
    return 0
