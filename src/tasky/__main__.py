"""Entry point for tasky CLI."""

import sys

NOUNS = {"serve", "web", "board", "column", "task", "comment"}
VALUE_OPTIONS = {"--url", "--user"}


def _first_positional(argv: list[str]) -> str | None:
    skip = False
    for arg in argv:
        if skip:
            skip = False
        elif arg in VALUE_OPTIONS:
            skip = True
        elif not arg.startswith("-"):
            return arg
    return None


def main():
    argv = sys.argv[1:]
    first = _first_positional(argv)

    # Board id instead of a noun = TUI mode
    if first is not None and first not in NOUNS:
        import argparse

        from tasky.cli import common_parser, configure_tui_logging

        parser = argparse.ArgumentParser(prog="tasky", parents=[common_parser()])
        parser.add_argument("board", help="Board ID to open")
        args = parser.parse_args(argv)
        configure_tui_logging(args.verbose)

        from tasky.client import TaskyClient
        from tasky.ui import TaskyApp

        app = TaskyApp(TaskyClient(base_url=args.url, user=args.user), args.board)
        app.run()
        sys.exit(app.return_code or 0)

    from tasky.cli import build_parser, configure_logging

    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    configure_logging(args.verbose)
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
