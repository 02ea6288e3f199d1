"""Task widgets for the board UI."""

from textual.app import ComposeResult
from textual.widgets import Static

from tasky.model.moves import TASK, DropTarget
from tasky.model.node import Node
from tasky.ui.drag import DraggableMixin, DropZone
from tasky.ui.watcher import NodeWatcherMixin


def task_footer(task: Node) -> str:
    """Due date and comment count, shown under the title."""
    parts = []
    if task.due_date:
        parts.append(f"due {str(task.due_date)[:10]}")
    count = len(task.comments) if task.comments else 0
    if count:
        parts.append(f"{count} comment{'s' if count != 1 else ''}")
    return "  ".join(parts)


class TaskWidget(NodeWatcherMixin, DraggableMixin, DropZone, Static, can_focus=True):
    """A single task in a column."""

    DRAG_KIND = TASK

    DEFAULT_CSS = """
    TaskWidget {
        width: 100%;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        background: $surface;
    }
    TaskWidget:focus {
        background: $primary;
    }
    TaskWidget.dragging {
        opacity: 0.4;
    }
    TaskWidget.drop-hover {
        border-top: heavy $accent;
    }
    TaskWidget #task-footer {
        width: 100%;
        height: auto;
        color: $text-muted;
    }
    """

    def __init__(self, task_node: Node, board: Node):
        self._init_watcher()
        Static.__init__(self)
        self._init_draggable()
        self.task_node = task_node
        self.board = board

    @property
    def task_id(self) -> str:
        return self.task_node.id

    @property
    def drag_id(self) -> str:
        return self.task_node.id

    def compose(self) -> ComposeResult:
        yield Static(self.task_node.title or self.task_node.id, id="task-title")
        yield Static(task_footer(self.task_node), id="task-footer")

    def on_mount(self) -> None:
        for key in ("title", "due_date", "comments"):
            self.node_watch(self.task_node, key, self._on_task_changed)

    def _on_task_changed(self, node, key, old, new) -> None:
        self.query_one("#task-title", Static).update(self.task_node.title or self.task_node.id)
        self.query_one("#task-footer", Static).update(task_footer(self.task_node))

    # -- DraggableMixin --

    def draggable_label(self) -> str:
        return self.task_node.title or self.task_node.id

    def draggable_clicked(self) -> None:
        self.focus()

    # -- DropZone: tasks dropped on a task take its slot --

    def drop_target(self, draggable) -> DropTarget | None:
        if isinstance(draggable, TaskWidget) and draggable is not self:
            return DropTarget(TASK, self.task_node.id)
        return None
