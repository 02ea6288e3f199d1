"""Shared fixtures for CLI tests."""

import pytest
from fastapi.testclient import TestClient

from tasky.client import TaskyClient
from tasky.server.app import create_app
from tasky.server.config import Settings

CLI_MODULES = ("tasky.cli.board", "tasky.cli.column", "tasky.cli.task", "tasky.cli.comment")


@pytest.fixture
def handler_clients():
    """Every client a CLI handler opened during the test."""
    return []


@pytest.fixture
def api(monkeypatch, handler_clients):
    """Point every CLI handler at an in-memory server, acting as alice."""
    app = create_app(Settings(DATABASE_URL="sqlite://"))

    def make_client(args):
        client = TaskyClient(http=TestClient(app), user="alice")
        handler_clients.append(client)
        return client

    for module in CLI_MODULES:
        monkeypatch.setattr(f"{module}.make_client", make_client)
    client = TaskyClient(http=TestClient(app), user="alice")
    yield client
    client.close()


@pytest.fixture
def board_id(api):
    """A board with Backlog [First task, Second task] and empty Done."""
    board = api.create_board("Test Board", "A test board.")
    columns = api.get_board(board["id"])["columns"]
    api.create_task(board["id"], columns[0]["id"], "First task")
    api.create_task(board["id"], columns[0]["id"], "Second task")
    return board["id"]


@pytest.fixture
def columns(api, board_id):
    return api.get_board(board_id)["columns"]
