"""Tests for task endpoints."""

from .conftest import _create_board, _create_task, _task_layout


def test_create_task_appends(client, board):
    task = _create_task(client, board, board["columns"][0], "E")
    assert task["position"] == 3
    assert task["column_id"] == board["columns"][0]["id"]


def test_create_task_in_foreign_column_is_404(client, bob, board):
    other = _create_board(bob)
    response = client.post(
        f"/api/boards/{board['id']}/tasks",
        json={"title": "sneaky", "column_id": other["columns"][0]["id"]},
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Column not found"}


def test_create_task_validates_title_length(client, board):
    response = client.post(
        f"/api/boards/{board['id']}/tasks",
        json={"title": "x" * 141, "column_id": board["columns"][0]["id"]},
    )
    assert response.status_code == 400
    assert response.json()["error"].startswith("title:")


def test_update_task_fields(client, board):
    task = board["columns"][0]["tasks"][0]
    response = client.patch(
        f"/api/tasks/{task['id']}",
        json={"title": "Renamed", "description": "details", "due_date": "2026-11-01T00:00:00"},
    )
    data = response.json()
    assert data["title"] == "Renamed"
    assert data["description"] == "details"
    assert data["due_date"].startswith("2026-11-01")
    assert data["position"] == 0


def test_update_task_moves_between_columns(client, board):
    task = board["columns"][0]["tasks"][0]
    done = board["columns"][3]
    response = client.patch(f"/api/tasks/{task['id']}", json={"column_id": done["id"], "position": 0})
    assert response.status_code == 200

    layout = _task_layout(client, board["id"])
    assert layout["Backlog"] == [("B", 0), ("C", 1)]
    assert layout["Done"] == [("A", 0), ("D", 1)]


def test_update_task_position_within_column(client, board):
    task = board["columns"][0]["tasks"][0]
    client.patch(f"/api/tasks/{task['id']}", json={"position": 2})
    assert _task_layout(client, board["id"])["Backlog"] == [("B", 0), ("C", 1), ("A", 2)]


def test_update_task_position_is_clamped(client, board):
    task = board["columns"][0]["tasks"][0]
    client.patch(f"/api/tasks/{task['id']}", json={"position": 99})
    assert _task_layout(client, board["id"])["Backlog"] == [("B", 0), ("C", 1), ("A", 2)]


def test_update_task_into_other_board_column_is_rejected(client, board):
    other = _create_board(client, "Other")
    task = board["columns"][0]["tasks"][0]
    response = client.patch(f"/api/tasks/{task['id']}", json={"column_id": other["columns"][0]["id"]})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid column"}


def test_update_task_assigns_known_user(client, bob, board):
    bob.get("/api/boards")
    task = board["columns"][0]["tasks"][0]
    response = client.patch(f"/api/tasks/{task['id']}", json={"assignee_id": "bob"})
    assert response.status_code == 200
    assert response.json()["assignee_id"] == "bob"


def test_update_task_rejects_unknown_assignee(client, board):
    task = board["columns"][0]["tasks"][0]
    response = client.patch(f"/api/tasks/{task['id']}", json={"assignee_id": "nobody"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid assignee"}
    assert client.get(f"/api/boards/{board['id']}").status_code == 200


def test_update_task_rejects_negative_position(client, board):
    task = board["columns"][0]["tasks"][0]
    response = client.patch(f"/api/tasks/{task['id']}", json={"position": -1})
    assert response.status_code == 400


def test_delete_task_renumbers_column(client, board):
    task = board["columns"][0]["tasks"][1]
    assert client.delete(f"/api/tasks/{task['id']}").json() == {"ok": True}
    assert _task_layout(client, board["id"])["Backlog"] == [("A", 0), ("C", 1)]


def test_other_users_task_is_404(client, bob, board):
    task = board["columns"][0]["tasks"][0]
    assert bob.delete(f"/api/tasks/{task['id']}").status_code == 404
    assert bob.patch(f"/api/tasks/{task['id']}", json={"title": "mine"}).status_code == 404
