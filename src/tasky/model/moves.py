"""Resolve drag gestures into new column and task orders.

Everything here is pure: functions take a layout, the ordered list of
``(column_id, [task_id, ...])`` pairs of a board, and return a move
describing the complete new order, or None when the gesture changes
nothing.
"""

from __future__ import annotations

from dataclasses import dataclass

from tasky.model.position import renumber

Layout = list[tuple[str, list[str]]]

COLUMN = "column"
TASK = "task"
AREA = "area"
TARGET_KINDS = (COLUMN, TASK, AREA)


@dataclass(frozen=True)
class DropTarget:
    """What was under the pointer when a drag ended.

    ``kind`` is ``"column"`` for a column header, ``"task"`` for a task,
    or ``"area"`` for the empty drop area of column ``id``.
    """

    kind: str
    id: str

    def __post_init__(self) -> None:
        if self.kind not in TARGET_KINDS:
            raise ValueError(f"unknown drop target kind: {self.kind!r}")


@dataclass(frozen=True)
class ColumnMove:
    column_id: str
    source: int
    destination: int
    order: list[str]


@dataclass(frozen=True)
class TaskMove:
    task_id: str
    source_column: str
    target_column: str
    source: int
    destination: int
    layout: Layout

    @property
    def touched_columns(self) -> list[str]:
        if self.source_column == self.target_column:
            return [self.source_column]
        return [self.source_column, self.target_column]


def find_task(layout: Layout, task_id: str) -> tuple[int, int] | None:
    """Return (column index, task index) for task_id, or None."""
    for col_index, (_, task_ids) in enumerate(layout):
        if task_id in task_ids:
            return col_index, task_ids.index(task_id)
    return None


def _column_index(layout: Layout, column_id: str) -> int | None:
    for index, (col_id, _) in enumerate(layout):
        if col_id == column_id:
            return index
    return None


def resolve_column_move(layout: Layout, column_id: str, target: DropTarget | None) -> ColumnMove | None:
    """Move column_id to the slot of the target column.

    Splice semantics: the column is removed from its slot and reinserted
    at the target's index, shifting everything in between by one.
    """
    if target is None or target.kind != COLUMN:
        return None
    source = _column_index(layout, column_id)
    destination = _column_index(layout, target.id)
    if source is None or destination is None or source == destination:
        return None

    order = [col_id for col_id, _ in layout]
    order.insert(destination, order.pop(source))
    return ColumnMove(column_id, source, destination, order)


def resolve_task_move(layout: Layout, task_id: str, target: DropTarget | None) -> TaskMove | None:
    """Move task_id onto a task or into a column.

    Dropping on a task takes that task's column and slot: a forward drag
    within one column lands just after the task it was dropped on, any
    other drag just before it. Dropping on a column (its header or its
    empty area) appends at the end. Indices are counted before the dragged
    task is taken out, so a forward move within one column is shifted
    back by one for the slot it vacates.
    """
    if target is None or (target.kind == TASK and target.id == task_id):
        return None
    found = find_task(layout, task_id)
    if found is None:
        return None
    source_col_index, source = found

    if target.kind == TASK:
        target_found = find_task(layout, target.id)
        if target_found is None:
            return None
        target_col_index, destination = target_found
        if target_col_index == source_col_index and source < destination:
            destination += 1
    else:
        target_col_index = _column_index(layout, target.id)
        if target_col_index is None:
            return None
        destination = len(layout[target_col_index][1])

    if source_col_index == target_col_index and source < destination:
        destination -= 1
    destination = max(destination, 0)

    if source_col_index == target_col_index and source == destination:
        return None

    new_layout = [(col_id, list(task_ids)) for col_id, task_ids in layout]
    new_layout[source_col_index][1].pop(source)
    new_layout[target_col_index][1].insert(destination, task_id)

    return TaskMove(
        task_id=task_id,
        source_column=layout[source_col_index][0],
        target_column=layout[target_col_index][0],
        source=source,
        destination=destination,
        layout=new_layout,
    )


def resolve_move(layout: Layout, kind: str, dragged_id: str, target: DropTarget | None):
    """Dispatch a finished drag of kind ``"column"`` or ``"task"``."""
    if kind == COLUMN:
        return resolve_column_move(layout, dragged_id, target)
    if kind == TASK:
        return resolve_task_move(layout, dragged_id, target)
    raise ValueError(f"unknown drag kind: {kind!r}")


def column_positions(move: ColumnMove) -> dict[str, int]:
    """New position of every column on the board."""
    return renumber(move.order)


def task_positions(move: TaskMove, columns: list[str] | None = None) -> dict[str, tuple[str, int]]:
    """New (column_id, position) of every task in the given columns.

    Defaults to every column in the layout.
    """
    wanted = set(columns) if columns is not None else None
    result: dict[str, tuple[str, int]] = {}
    for col_id, task_ids in move.layout:
        if wanted is not None and col_id not in wanted:
            continue
        for task_id, position in renumber(task_ids).items():
            result[task_id] = (col_id, position)
    return result
