"""Main Textual application for tasky."""

import asyncio

import httpx
from textual.app import App

from tasky.client import ApiError, TaskyClient
from tasky.model.board import board_from_payload
from tasky.model.node import Node
from tasky.ui.board import BoardScreen


class TaskyApp(App):
    """Kanban board TUI backed by the tasky API."""

    CSS = """
    Tooltip {
        padding: 0 1;
        margin: 0;
    }
    """

    TITLE = "tasky"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, client: TaskyClient, board_id: str):
        super().__init__()
        self.client = client
        self.board_id = board_id
        self.board: Node | None = None

    async def on_mount(self) -> None:
        await self._load_board()

    async def _load_board(self) -> None:
        """Fetch the board and show it."""
        try:
            data = await asyncio.to_thread(self.client.get_board, self.board_id)
        except ApiError as e:
            self.exit(return_code=1, message=f"error: {e.message}")
            return
        except httpx.HTTPError as e:
            self.exit(return_code=1, message=f"error: could not reach server: {e}")
            return

        self.board = board_from_payload(data)
        self.push_screen(BoardScreen(self.board, self.client))

    def action_quit(self) -> None:
        """Cancel pending syncs and quit."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.cancel_sync()
        self.exit()
