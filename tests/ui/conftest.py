"""Fixtures for UI tests."""

import pytest

from tests.model.conftest import _make_payload


class FakeClient:
    """In-memory stand-in for TaskyClient that applies reorders to its own copy."""

    def __init__(self, payload):
        self.payload = payload
        self.sent = []
        self.fail_with = None

    def get_board(self, board_id):
        return self.payload

    def _maybe_fail(self):
        if self.fail_with is not None:
            raise self.fail_with

    def reorder_columns(self, payload):
        self.sent.append(("columns", payload))
        self._maybe_fail()
        positions = {item["id"]: item["position"] for item in payload["columns"]}
        for column in self.payload["columns"]:
            column["position"] = positions.get(column["id"], column["position"])
        return {"ok": True}

    def reorder_tasks(self, payload):
        self.sent.append(("tasks", payload))
        self._maybe_fail()
        tasks = {t["id"]: t for c in self.payload["columns"] for t in c["tasks"]}
        for item in payload["tasks"]:
            tasks[item["id"]].update(column_id=item["column_id"], position=item["position"])
        for column in self.payload["columns"]:
            column["tasks"] = [t for t in tasks.values() if t["column_id"] == column["id"]]
        return {"ok": True}


@pytest.fixture
def fake_client():
    """Todo [T1, T2, T3], Doing [T4], Done []."""
    return FakeClient(
        _make_payload(
            [
                ("c1", "Todo", ["T1", "T2", "T3"]),
                ("c2", "Doing", ["T4"]),
                ("c3", "Done", []),
            ]
        )
    )
