"""Shared fixtures for API tests: one in-memory database per test."""

import pytest
from fastapi.testclient import TestClient

from tasky.server.app import create_app
from tasky.server.config import Settings


@pytest.fixture
def app():
    return create_app(Settings(DATABASE_URL="sqlite://"))


@pytest.fixture
def client(app):
    """Client acting as alice."""
    return TestClient(app, headers={"X-User-Id": "alice"})


@pytest.fixture
def bob(app):
    """Client acting as bob, who owns nothing of alice's."""
    return TestClient(app, headers={"X-User-Id": "bob"})


@pytest.fixture
def anonymous(app):
    return TestClient(app)


def _create_board(client, title="Roadmap"):
    """Create a board and return its full payload (with default columns)."""
    response = client.post("/api/boards", json={"title": title})
    assert response.status_code == 201
    return client.get(f"/api/boards/{response.json()['id']}").json()


def _create_task(client, board, column, title):
    response = client.post(
        f"/api/boards/{board['id']}/tasks",
        json={"title": title, "column_id": column["id"]},
    )
    assert response.status_code == 201
    return response.json()


def _column_ids(client, board_id):
    return [c["id"] for c in client.get(f"/api/boards/{board_id}").json()["columns"]]


def _task_layout(client, board_id):
    """{column name: [(task title, position), ...]} in server order."""
    board = client.get(f"/api/boards/{board_id}").json()
    return {c["name"]: [(t["title"], t["position"]) for t in c["tasks"]] for c in board["columns"]}


@pytest.fixture
def board(client):
    """Alice's board: Backlog [A, B, C], Done [D]."""
    board = _create_board(client)
    backlog, done = board["columns"][0], board["columns"][3]
    for title in ("A", "B", "C"):
        _create_task(client, board, backlog, title)
    _create_task(client, board, done, "D")
    return client.get(f"/api/boards/{board['id']}").json()
