"""Tests for argument parsing and entry-point dispatch."""

import sys

import pytest

from tasky.__main__ import _first_positional, main
from tasky.cli import build_parser
from tasky.cli.column import column_move
from tasky.cli.task import task_move


def test_task_move_requires_a_target():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["task", "move", "T1"])


def test_task_move_onto():
    args = build_parser().parse_args(["task", "move", "T1", "--onto", "T2", "--board", "b1"])
    assert args.func is task_move
    assert args.onto == "T2"
    assert args.board == "b1"


def test_column_move():
    args = build_parser().parse_args(["column", "move", "c1", "--onto", "c3"])
    assert args.func is column_move


def test_board_defaults_from_environment(monkeypatch):
    monkeypatch.setenv("TASKY_BOARD", "env-board")
    monkeypatch.setenv("TASKY_USER", "carol")
    args = build_parser().parse_args(["column", "list"])
    assert args.board == "env-board"
    assert args.user == "carol"


def test_board_archive_flags():
    assert build_parser().parse_args(["board", "set", "b1", "--archive"]).archived is True
    assert build_parser().parse_args(["board", "set", "b1", "--unarchive"]).archived is False
    assert build_parser().parse_args(["board", "set", "b1"]).archived is None


@pytest.mark.parametrize(
    "argv, expected",
    [
        ([], None),
        (["board", "list"], "board"),
        (["--url", "http://x", "abc123"], "abc123"),
        (["--user", "alice", "--json", "task"], "task"),
    ],
)
def test_first_positional(argv, expected):
    assert _first_positional(argv) == expected


def test_main_without_command_prints_help(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["tasky"])
    with pytest.raises(SystemExit, match="1"):
        main()
    assert "usage: tasky" in capsys.readouterr().out
