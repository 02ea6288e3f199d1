"""Sync status indicator widget for the board header."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import Static

from tasky.model.node import Node
from tasky.ui.watcher import NodeWatcherMixin

ICON_SYNC_IDLE = "✓"
ICON_SYNC_ACTIVE = "⟳"
ICON_SYNC_ERROR = "⚠"


def _current_icon(sync: Node | None) -> str:
    """Return the icon for the current sync state."""
    if sync is None:
        return ICON_SYNC_IDLE
    if sync.status == "error":
        return ICON_SYNC_ERROR
    if sync.status and sync.status != "idle":
        return ICON_SYNC_ACTIVE
    return ICON_SYNC_IDLE


class SyncWidget(NodeWatcherMixin, Container):
    """Sync status indicator. Hover shows the last error; click reloads."""

    DEFAULT_CSS = """
    SyncWidget {
        width: 3;
        height: 1;
    }
    SyncWidget.error .sync-icon {
        color: $error;
    }
    """

    def __init__(self, board: Node, **kwargs) -> None:
        self._init_watcher()
        super().__init__(**kwargs)
        self.board = board

    def compose(self) -> ComposeResult:
        yield Static(_current_icon(self.board.sync), classes="sync-icon")

    def on_mount(self) -> None:
        for key in ("status", "error"):
            self.node_watch(self.board.sync, key, self._on_sync_changed)
        self._update_display()

    def _on_sync_changed(self, node, key, old, new) -> None:
        self.call_later(self._update_display)

    def _update_display(self) -> None:
        sync = self.board.sync
        self.query_one(".sync-icon", Static).update(_current_icon(sync))
        self.set_class(sync is not None and sync.status == "error", "error")
        self.tooltip = sync.error if sync is not None else None

    def on_click(self, event) -> None:
        event.stop()
        self.screen.action_reload()
