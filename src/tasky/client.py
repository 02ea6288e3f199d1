"""HTTP client for the tasky API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

USER_HEADER = "X-User-Id"
DEFAULT_URL = "http://localhost:8617"

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """The server answered with a non-success status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class TaskyClient:
    """Thin wrapper over the tasky HTTP API.

    Pass ``http`` to reuse an existing ``httpx.Client`` (for example a
    FastAPI ``TestClient``); otherwise one is created for ``base_url``.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_URL,
        user: str | None = None,
        http: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.user = user
        self._http = http if http is not None else httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        self._http.close()

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    def __enter__(self) -> TaskyClient:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _request(self, method: str, path: str, json: Any = None) -> Any:
        headers = {USER_HEADER: self.user} if self.user else {}
        response = self._http.request(method, path, json=json, headers=headers)
        if response.is_success:
            return response.json()
        try:
            message = response.json().get("error") or response.text
        except ValueError:
            message = response.text or response.reason_phrase
        logger.debug("%s %s -> %s %s", method, path, response.status_code, message)
        raise ApiError(response.status_code, message)

    # --- boards ---

    def list_boards(self) -> list[dict]:
        return self._request("GET", "/api/boards")

    def create_board(self, title: str, description: str | None = None) -> dict:
        return self._request("POST", "/api/boards", {"title": title, "description": description})

    def get_board(self, board_id: str) -> dict:
        return self._request("GET", f"/api/boards/{board_id}")

    def update_board(self, board_id: str, **fields: Any) -> dict:
        return self._request("PATCH", f"/api/boards/{board_id}", fields)

    def delete_board(self, board_id: str) -> dict:
        return self._request("DELETE", f"/api/boards/{board_id}")

    # --- columns ---

    def create_column(self, board_id: str, name: str) -> dict:
        return self._request("POST", f"/api/boards/{board_id}/columns", {"name": name})

    def update_column(self, column_id: str, name: str) -> dict:
        return self._request("PATCH", f"/api/columns/{column_id}", {"name": name})

    def delete_column(self, column_id: str) -> dict:
        return self._request("DELETE", f"/api/columns/{column_id}")

    def reorder_columns(self, payload: dict) -> dict:
        return self._request("POST", "/api/columns/reorder", payload)

    # --- tasks ---

    def create_task(
        self,
        board_id: str,
        column_id: str,
        title: str,
        description: str | None = None,
        due_date: str | None = None,
    ) -> dict:
        body = {"title": title, "column_id": column_id, "description": description, "due_date": due_date}
        return self._request("POST", f"/api/boards/{board_id}/tasks", body)

    def update_task(self, task_id: str, **fields: Any) -> dict:
        return self._request("PATCH", f"/api/tasks/{task_id}", fields)

    def delete_task(self, task_id: str) -> dict:
        return self._request("DELETE", f"/api/tasks/{task_id}")

    def reorder_tasks(self, payload: dict) -> dict:
        return self._request("POST", "/api/tasks/reorder", payload)

    # --- comments ---

    def create_comment(self, task_id: str, content: str) -> dict:
        return self._request("POST", f"/api/tasks/{task_id}/comments", {"content": content})

    def delete_comment(self, comment_id: str) -> dict:
        return self._request("DELETE", f"/api/comments/{comment_id}")
