"""HTTP API server: authorization gate, atomic ordering, CRUD."""

from tasky.server.app import create_app
from tasky.server.config import Settings

__all__ = ["Settings", "create_app"]
