"""Tests for NodeWatcherMixin."""

from tasky.model.node import ListNode, Node
from tasky.ui.watcher import NodeWatcherMixin


class FakeWidget(NodeWatcherMixin):
    """Minimal stand-in for a Textual widget."""

    def __init__(self):
        self._init_watcher()


def test_watch_fires_callback():
    widget = FakeWidget()
    task = Node(title="draft")
    calls = []
    widget.node_watch(task, "title", lambda src, key, old, new: calls.append((old, new)))

    task.title = "final"
    assert calls == [("draft", "final")]


def test_on_unmount_drops_every_watch():
    widget = FakeWidget()
    column = Node(name="Todo", tasks=ListNode())
    calls = []
    widget.node_watch(column, "name", lambda *a: calls.append("name"))
    widget.node_watch(column.tasks, "*", lambda *a: calls.append("order"))

    widget.on_unmount()
    column.name = "Doing"
    column.tasks["T1"] = {"title": "one"}
    column.tasks.insert(0, "T2", {"title": "two"})

    assert calls == []
    assert widget._watches == []
