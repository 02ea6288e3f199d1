"""Column widgets for the board UI."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Rule, Static

from tasky.model.moves import AREA, COLUMN, TASK, DropTarget
from tasky.model.node import Node
from tasky.ui.drag import DraggableMixin, DropZone
from tasky.ui.task import TaskWidget
from tasky.ui.watcher import NodeWatcherMixin

MOVE_KEYS = ("shift+up", "shift+down", "shift+left", "shift+right", "ctrl+left", "ctrl+right")
NAV_KEYS = ("up", "down", "left", "right")


class ColumnWidget(NodeWatcherMixin, DraggableMixin, DropZone, Vertical):
    """A single column on the board."""

    DEFAULT_CSS = """
    ColumnWidget {
        width: 1fr;
        height: 100%;
        min-width: 25;
        max-width: 30;
        padding: 0 1;
        border-right: tall $surface-lighten-1;
    }
    ColumnWidget.dragging {
        opacity: 0.4;
    }
    ColumnWidget.drop-hover {
        background: $boost;
    }
    ColumnWidget > #column-title {
        width: 100%;
        text-align: center;
        text-style: bold;
    }
    ColumnWidget > Rule.-horizontal {
        margin: 0;
    }
    """

    DRAG_KIND = COLUMN
    HORIZONTAL_ONLY = True

    def __init__(self, column: Node, board: Node):
        self._init_watcher()
        Vertical.__init__(self)
        self._init_draggable()
        self.column = column
        self.board = board

    @property
    def drag_id(self) -> str:
        return self.column.id

    def compose(self) -> ComposeResult:
        yield Static(self.column.name or "", id="column-title")
        yield Rule()
        for task in self.column.tasks:
            yield TaskWidget(task, self.board)

    def on_mount(self) -> None:
        self.node_watch(self.column, "name", self._on_name_changed)
        self.node_watch(self.column, "tasks", self._on_tasks_changed)

    def _on_name_changed(self, node, key, old, new) -> None:
        self.query_one("#column-title", Static).update(self.column.name or "")

    def _on_tasks_changed(self, node, key, old, new) -> None:
        self.call_later(self.sync_tasks)

    def sync_tasks(self) -> None:
        """Make task children match column.tasks, reusing widgets by id."""
        if not self.is_mounted:
            return
        existing = {w.task_id: w for w in self.query(TaskWidget)}
        wanted = self.column.tasks.keys()

        for task_id, widget in list(existing.items()):
            if task_id not in wanted or widget.task_node is not self.column.tasks[task_id]:
                widget.remove()
                existing.pop(task_id)

        after = self.query_one(Rule)
        for task_id in wanted:
            widget = existing.get(task_id)
            if widget is None:
                widget = TaskWidget(self.column.tasks[task_id], self.board)
                self.mount(widget, after=after)
            else:
                self.move_child(widget, after=after)
            after = widget

    def task_widget(self, task_id: str) -> TaskWidget | None:
        for widget in self.query(TaskWidget):
            if widget.task_id == task_id:
                return widget
        return None

    # -- DraggableMixin --

    def draggable_label(self) -> str:
        return self.column.name or self.column.id

    # -- DropZone: columns take this slot, tasks append here --

    def drop_target(self, draggable) -> DropTarget | None:
        if isinstance(draggable, ColumnWidget):
            return None if draggable is self else DropTarget(COLUMN, self.column.id)
        if isinstance(draggable, TaskWidget):
            return DropTarget(AREA, self.column.id)
        return None

    # -- Keyboard --

    def on_key(self, event) -> None:
        """Arrow key navigation, shift+arrow task moves, ctrl+arrow column moves."""
        if event.key not in NAV_KEYS + MOVE_KEYS:
            return

        focused = self.screen.focused
        tasks = list(self.query(TaskWidget))
        if focused not in tasks:
            return
        idx = tasks.index(focused)

        if event.key == "up" and idx > 0:
            tasks[idx - 1].focus()
        elif event.key == "down" and idx < len(tasks) - 1:
            tasks[idx + 1].focus()
        elif event.key in ("left", "right"):
            neighbour = self._neighbour(-1 if event.key == "left" else 1)
            if neighbour is not None:
                targets = list(neighbour.query(TaskWidget))
                if targets:
                    targets[min(idx, len(targets) - 1)].focus()
        elif event.key in ("ctrl+left", "ctrl+right"):
            neighbour = self._neighbour(-1 if event.key == "ctrl+left" else 1)
            if neighbour is not None:
                self.screen.request_move(COLUMN, self.column.id, DropTarget(COLUMN, neighbour.column.id))
                self.screen.refocus_task(focused.task_id)
        else:
            target = self._keyboard_target(idx, tasks, event.key)
            if target is not None:
                self.screen.request_move(TASK, focused.task_id, target)
                self.screen.refocus_task(focused.task_id)

        event.prevent_default()
        event.stop()

    def _keyboard_target(self, idx: int, tasks: list[TaskWidget], key: str) -> DropTarget | None:
        """The drop a shift+arrow stands for."""
        if key == "shift+up":
            return DropTarget(TASK, tasks[idx - 1].task_id) if idx > 0 else None
        if key == "shift+down":
            return DropTarget(TASK, tasks[idx + 1].task_id) if idx < len(tasks) - 1 else None
        neighbour = self._neighbour(-1 if key == "shift+left" else 1)
        if neighbour is None:
            return None
        return DropTarget(AREA, neighbour.column.id)

    def _neighbour(self, direction: int) -> "ColumnWidget | None":
        siblings = [w for w in self.parent.children if isinstance(w, ColumnWidget)]
        new_idx = siblings.index(self) + direction
        if 0 <= new_idx < len(siblings):
            return siblings[new_idx]
        return None
