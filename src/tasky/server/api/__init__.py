"""HTTP routers."""

from tasky.server.api import boards, columns, comments, tasks

routers = [boards.router, columns.router, tasks.router, comments.router]

__all__ = ["routers"]
