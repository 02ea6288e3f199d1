"""Board screen showing columns and tasks."""

import asyncio
import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Static

from tasky.client import TaskyClient
from tasky.model.moves import DropTarget
from tasky.model.node import Node
from tasky.model.store import init_sync_state
from tasky.sync import apply_gesture, reload_board, run_sync
from tasky.ui.column import ColumnWidget
from tasky.ui.sync_widget import SyncWidget
from tasky.ui.task import TaskWidget
from tasky.ui.watcher import NodeWatcherMixin

logger = logging.getLogger(__name__)


class BoardScreen(NodeWatcherMixin, Screen):
    """Main board screen showing all columns."""

    DEFAULT_CSS = """
    BoardScreen {
        layers: base overlay;
    }
    #board-header {
        height: 1;
        padding: 0 1;
        background: $panel;
    }
    #board-title {
        width: 1fr;
        text-style: bold;
    }
    #columns {
        height: 1fr;
        overflow-x: auto;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel_drag", "Cancel drag", show=False),
        ("r", "reload", "Reload"),
    ]

    def __init__(self, board: Node, client: TaskyClient):
        self._init_watcher()
        super().__init__()
        self.board = board
        self.client = client
        self._active_draggable = None
        self._sync_tasks: set[asyncio.Task] = set()
        init_sync_state(board)

    def compose(self) -> ComposeResult:
        with Horizontal(id="board-header"):
            yield Static(self.board.title or "", id="board-title")
            yield SyncWidget(self.board, id="sync-status")

        with Horizontal(id="columns"):
            for column in self.board.columns:
                yield ColumnWidget(column, self.board)

        yield Footer()

    def on_mount(self) -> None:
        self.node_watch(self.board, "title", self._on_title_changed)
        self.node_watch(self.board, "columns", self._on_columns_changed)
        self.call_after_refresh(self._focus_first_task)

    def _focus_first_task(self) -> None:
        tasks = list(self.query(TaskWidget))
        if tasks:
            tasks[0].focus()

    def _on_title_changed(self, node, key, old, new) -> None:
        self.query_one("#board-title", Static).update(self.board.title or "")

    def _on_columns_changed(self, node, key, old, new) -> None:
        self.call_later(self._sync_columns)

    def _sync_columns(self) -> None:
        """Make column widgets match board.columns, reusing widgets by id."""
        container = self.query_one("#columns", Horizontal)
        existing = {w.column.id: w for w in self.query(ColumnWidget)}
        wanted = self.board.columns.keys()

        for col_id, widget in list(existing.items()):
            if col_id not in wanted or widget.column is not self.board.columns[col_id]:
                widget.remove()
                existing.pop(col_id)

        previous = None
        for col_id in wanted:
            widget = existing.get(col_id)
            if widget is None:
                widget = ColumnWidget(self.board.columns[col_id], self.board)
                if previous is None:
                    container.mount(widget, before=0)
                else:
                    container.mount(widget, after=previous)
            elif previous is None:
                container.move_child(widget, before=0)
            else:
                container.move_child(widget, after=previous)
            previous = widget

    # -- Thin delegation: screen routes mouse events to active draggable --

    def on_mouse_move(self, event) -> None:
        if self._active_draggable is not None:
            self._active_draggable._drag_move(event.screen_x, event.screen_y)

    def on_mouse_up(self, event) -> None:
        if self._active_draggable is not None:
            self._active_draggable._drag_finish(event.screen_x, event.screen_y)

    def action_cancel_drag(self) -> None:
        if self._active_draggable is not None:
            self._active_draggable._drag_cancel()

    # -- Moves --

    def request_move(self, kind: str, dragged_id: str, target: DropTarget | None) -> None:
        """Resolve a gesture, show it at once, and sync it in the background."""
        move = apply_gesture(self.board, kind, dragged_id, target)
        if move is None:
            return
        logger.debug("moved %s %s onto %s", kind, dragged_id, target)
        self._spawn(run_sync(self.board, self.client, move))

    def refocus_task(self, task_id: str) -> None:
        """Focus a task by id once the widgets have caught up with the model."""

        def focus() -> None:
            for widget in self.query(TaskWidget):
                if widget.task_id == task_id:
                    widget.focus()
                    return

        self.call_after_refresh(focus)

    def action_reload(self) -> None:
        """Fetch the board from the server."""
        self._spawn(self._reload())

    async def _reload(self) -> None:
        sync = init_sync_state(self.board)
        sync.error = None
        await reload_board(self.board, self.client)
        if not sync.pending:
            sync.status = "error" if sync.error else "idle"

    def _spawn(self, coro) -> None:
        task = asyncio.create_task(coro)
        self._sync_tasks.add(task)
        task.add_done_callback(self._sync_tasks.discard)

    def cancel_sync(self) -> None:
        for task in list(self._sync_tasks):
            task.cancel()
