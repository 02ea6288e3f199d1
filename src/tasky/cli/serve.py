"""Handler for 'tasky serve' command."""

from tasky.server.app import serve as run_server
from tasky.server.config import Settings


def serve(args) -> int:
    """Run the API server until interrupted."""
    overrides = {}
    if args.host:
        overrides["HOST"] = args.host
    if args.port:
        overrides["PORT"] = args.port
    if args.database:
        overrides["DATABASE_URL"] = args.database
    if args.verbose:
        overrides["LOG_LEVEL"] = "debug"
    settings = Settings(**overrides)

    print(f"serving tasky API at http://{settings.HOST}:{settings.PORT}")
    run_server(settings)
    return 0
