"""Pilot tests for the board screen: keyboard moves go through the resolver and sync."""

import asyncio

import httpx
import pytest

from tasky.ui import TaskyApp
from tasky.ui.board import BoardScreen
from tasky.ui.column import ColumnWidget
from tasky.ui.task import TaskWidget


async def _settle(pilot):
    """Wait for the board to load, let pending syncs finish and widgets catch up."""
    for _ in range(100):
        if isinstance(pilot.app.screen, BoardScreen):
            break
        await asyncio.sleep(0.01)
    screen = pilot.app.screen
    await pilot.pause()
    if isinstance(screen, BoardScreen) and screen._sync_tasks:
        await asyncio.gather(*screen._sync_tasks)
    await pilot.pause()
    await pilot.pause()


def _column(app, column_id) -> ColumnWidget:
    return next(w for w in app.screen.query(ColumnWidget) if w.column.id == column_id)


def _task_ids(app, column_id):
    return [w.task_id for w in _column(app, column_id).query(TaskWidget)]


def _focus(app, task_id):
    next(w for w in app.screen.query(TaskWidget) if w.task_id == task_id).focus()


@pytest.mark.asyncio
async def test_board_renders_columns_and_tasks(fake_client):
    app = TaskyApp(fake_client, "b1")
    async with app.run_test() as pilot:
        await _settle(pilot)
        assert [w.column.id for w in app.screen.query(ColumnWidget)] == ["c1", "c2", "c3"]
        assert _task_ids(app, "c1") == ["T1", "T2", "T3"]


@pytest.mark.asyncio
async def test_task_widgets_hold_their_task_nodes(fake_client):
    app = TaskyApp(fake_client, "b1")
    async with app.run_test() as pilot:
        await _settle(pilot)
        column = app.board.columns["c1"]
        widgets = list(_column(app, "c1").query(TaskWidget))
        assert [w.task_id for w in widgets] == ["T1", "T2", "T3"]
        assert all(w.task_node is column.tasks[w.task_id] for w in widgets)
        assert widgets[0].query_one("#task-title").content == "Task T1"


@pytest.mark.asyncio
async def test_task_title_follows_node(fake_client):
    app = TaskyApp(fake_client, "b1")
    async with app.run_test() as pilot:
        await _settle(pilot)
        app.board.columns["c1"].tasks["T2"].title = "Renamed"
        await pilot.pause()
        widget = next(w for w in app.screen.query(TaskWidget) if w.task_id == "T2")
        assert widget.query_one("#task-title").content == "Renamed"


@pytest.mark.asyncio
async def test_shift_down_moves_task_and_syncs(fake_client):
    app = TaskyApp(fake_client, "b1")
    async with app.run_test() as pilot:
        await _settle(pilot)
        _focus(app, "T1")
        await pilot.press("shift+down")
        await _settle(pilot)

        assert _task_ids(app, "c1") == ["T2", "T1", "T3"]
        kind, payload = fake_client.sent[-1]
        assert kind == "tasks"
        assert len(payload["tasks"]) == 4
        assert app.board.sync.status == "idle"


@pytest.mark.asyncio
async def test_shift_right_moves_task_to_next_column(fake_client):
    app = TaskyApp(fake_client, "b1")
    async with app.run_test() as pilot:
        await _settle(pilot)
        _focus(app, "T2")
        await pilot.press("shift+right")
        await _settle(pilot)

        assert _task_ids(app, "c1") == ["T1", "T3"]
        assert _task_ids(app, "c2") == ["T4", "T2"]


@pytest.mark.asyncio
async def test_ctrl_right_moves_column(fake_client):
    app = TaskyApp(fake_client, "b1")
    async with app.run_test() as pilot:
        await _settle(pilot)
        _focus(app, "T1")
        await pilot.press("ctrl+right")
        await _settle(pilot)

        assert [w.column.id for w in app.screen.query(ColumnWidget)] == ["c2", "c1", "c3"]
        assert fake_client.sent[-1][0] == "columns"


@pytest.mark.asyncio
async def test_shift_up_on_first_task_sends_nothing(fake_client):
    app = TaskyApp(fake_client, "b1")
    async with app.run_test() as pilot:
        await _settle(pilot)
        _focus(app, "T1")
        await pilot.press("shift+up")
        await _settle(pilot)

        assert fake_client.sent == []


@pytest.mark.asyncio
async def test_failed_sync_reverts_and_shows_error(fake_client):
    fake_client.fail_with = httpx.ConnectError("server down")
    app = TaskyApp(fake_client, "b1")
    async with app.run_test() as pilot:
        await _settle(pilot)
        _focus(app, "T1")
        await pilot.press("shift+down")
        await _settle(pilot)

        assert _task_ids(app, "c1") == ["T1", "T2", "T3"]
        assert app.board.sync.status == "error"
        assert "server down" in app.board.sync.error
        assert app.screen.query_one("#sync-status").has_class("error")
