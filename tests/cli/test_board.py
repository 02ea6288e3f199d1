"""Tests for 'tasky board' commands."""

import json
from argparse import Namespace

import pytest

from tasky.cli.board import board_add, board_delete, board_list, board_set, board_show


def _args(**kwargs):
    return Namespace(url="http://testserver", user="alice", json=False, **kwargs)


def test_board_list(api, board_id, capsys):
    assert board_list(_args()) == 0
    out = capsys.readouterr().out
    assert board_id in out
    assert "Test Board" in out


def test_board_show(board_id, capsys):
    assert board_show(_args(id=board_id)) == 0
    out = capsys.readouterr().out
    assert "# Test Board" in out
    assert "A test board." in out
    assert "Backlog" in out
    assert "2 tasks" in out
    assert "First task" in out


def test_board_show_json(board_id, capsys):
    args = _args(id=board_id)
    args.json = True
    assert board_show(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["title"] == "Test Board"
    assert [c["name"] for c in data["columns"]] == ["Backlog", "In Progress", "Review", "Done"]
    assert [t["title"] for t in data["columns"][0]["task_list"]] == ["First task", "Second task"]


def test_board_show_not_found(api, capsys):
    with pytest.raises(SystemExit, match="1"):
        board_show(_args(id="missing"))
    assert "Board not found" in capsys.readouterr().err


def test_board_add(api, capsys):
    assert board_add(_args(title="Launch", description=None)) == 0
    assert 'Created board "Launch"' in capsys.readouterr().out
    assert [b["title"] for b in api.list_boards()] == ["Launch"]


def test_board_add_rejects_short_title(api, capsys):
    with pytest.raises(SystemExit, match="1"):
        board_add(_args(title="ab", description=None))
    assert "title" in capsys.readouterr().err


def test_board_set(api, board_id):
    assert board_set(_args(id=board_id, title="Renamed", description=None, archived=True)) == 0
    board = api.get_board(board_id)
    assert board["title"] == "Renamed"
    assert board["is_archived"] is True
    assert board["description"] == "A test board."


def test_board_delete(api, board_id):
    assert board_delete(_args(id=board_id)) == 0
    assert api.list_boards() == []


def test_handlers_close_their_client(board_id, handler_clients, capsys):
    board_list(_args())
    with pytest.raises(SystemExit):
        board_show(_args(id="missing"))

    assert len(handler_clients) == 2
    assert all(c.is_closed for c in handler_clients)
