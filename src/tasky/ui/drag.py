"""Drag-and-drop infrastructure for the board UI.

Two mixins:
- DraggableMixin: on dragged widgets, owns the "flying" phase
- DropZone: on widgets that can be dropped on, names the drop target

A finished drag never edits the model directly. It hands the gesture
(kind, dragged id, target) to the screen's ``request_move``, which runs
it through the move resolver.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.geometry import Offset
from textual.widgets import Static

from tasky.model.moves import DropTarget

if TYPE_CHECKING:
    from textual.widget import Widget


class DropZone:
    """Mixin for widgets that accept drops.

    ``drop_target`` returns None to ignore a draggable (the search moves
    on to the parent), or the target the drop should resolve against.
    """

    def drop_target(self, draggable: DraggableMixin) -> DropTarget | None:
        return None


class DraggableMixin:
    """Mixin for widgets that can be dragged.

    Subclasses should:
    - Call _init_draggable() in __init__
    - Set DRAG_KIND and implement the ``drag_id`` property
    - Implement draggable_label() for the ghost text
    - Optionally override draggable_clicked(), DRAG_THRESHOLD and HORIZONTAL_ONLY
    """

    DRAG_THRESHOLD = 2
    HORIZONTAL_ONLY = False
    DRAG_KIND = ""

    def _init_draggable(self) -> None:
        self._drag_start_pos: Offset | None = None
        self._dragging = False
        self._ghost: Widget | None = None
        self._drag_offset: Offset = Offset(0, 0)
        self._hovered: Widget | None = None

    @property
    def is_dragging(self) -> bool:
        return self._dragging

    @property
    def drag_id(self) -> str:
        raise NotImplementedError

    def on_mouse_down(self, event) -> None:
        if event.button != 1:
            return
        event.stop()
        event.prevent_default()
        self._drag_start_pos = Offset(event.screen_x, event.screen_y)
        self.capture_mouse()

    def on_mouse_move(self, event) -> None:
        if self._drag_start_pos is None:
            return
        event.stop()
        event.prevent_default()
        dx = abs(event.screen_x - self._drag_start_pos.x)
        dy = abs(event.screen_y - self._drag_start_pos.y)
        threshold_exceeded = (
            dx > self.DRAG_THRESHOLD if self.HORIZONTAL_ONLY else (dx > self.DRAG_THRESHOLD or dy > self.DRAG_THRESHOLD)
        )
        if threshold_exceeded:
            self.release_mouse()
            mouse_pos = self._drag_start_pos
            self._drag_start_pos = None
            self._drag_start(mouse_pos)

    def on_mouse_up(self, event) -> None:
        event.stop()
        event.prevent_default()
        self.release_mouse()
        if self._drag_start_pos is not None:
            self._drag_start_pos = None
            self.draggable_clicked()

    def _drag_start(self, mouse_pos: Offset) -> None:
        """Begin drag: mount ghost, add .dragging class, register on screen."""
        self._dragging = True
        self.add_class("dragging")
        self.screen.set_focus(None)

        region = self.region
        self._drag_offset = Offset(mouse_pos.x - region.x, mouse_pos.y - region.y)

        self._ghost = DragGhost(self.draggable_label())
        self._ghost.styles.width = region.width
        self._ghost.styles.offset = (region.x, region.y)
        self.screen.mount(self._ghost)

        self.screen._active_draggable = self
        self.screen.capture_mouse()

    def _drag_move(self, x: int, y: int) -> None:
        """Called by screen on mouse move during drag."""
        if self._ghost is not None:
            self._ghost.styles.offset = (x - self._drag_offset.x, y - self._drag_offset.y)
        zone, _ = self._find_drop(x, y)
        if zone is not self._hovered:
            if self._hovered is not None:
                self._hovered.remove_class("drop-hover")
            if zone is not None:
                zone.add_class("drop-hover")
            self._hovered = zone

    def _drag_finish(self, x: int, y: int) -> None:
        """Called by screen on mouse-up. Hand the gesture to the screen."""
        self.screen.release_mouse()
        _, target = self._find_drop(x, y)
        screen = self.screen
        self._drag_cleanup()
        if target is not None:
            screen.request_move(self.DRAG_KIND, self.drag_id, target)

    def _drag_cancel(self) -> None:
        """Cancel drag: nothing moves."""
        self.screen.release_mouse()
        self._drag_cleanup()

    def _drag_cleanup(self) -> None:
        """Remove ghost and hover state, deregister from screen."""
        if self._ghost is not None:
            self._ghost.remove()
        self._ghost = None
        if self._hovered is not None:
            self._hovered.remove_class("drop-hover")
        self._hovered = None
        self._dragging = False
        self._drag_offset = Offset(0, 0)
        self.remove_class("dragging")
        if hasattr(self.screen, "_active_draggable"):
            self.screen._active_draggable = None

    def _find_drop(self, x: int, y: int) -> tuple[Widget | None, DropTarget | None]:
        """Innermost DropZone at screen position that accepts this draggable."""
        for widget, _region in self.screen.get_widgets_at(x, y):
            if self._ghost is not None and (widget is self._ghost or self._ghost in widget.ancestors):
                continue
            candidate = widget
            while candidate is not None:
                if isinstance(candidate, DropZone):
                    target = candidate.drop_target(self)
                    if target is not None:
                        return candidate, target
                candidate = candidate.parent
            return None, None
        return None, None

    def draggable_label(self) -> str:
        raise NotImplementedError

    def draggable_clicked(self) -> None:
        """Called when mouse released without dragging."""


class DragGhost(Static):
    """Floating overlay following the pointer during a drag."""

    DEFAULT_CSS = """
    DragGhost {
        layer: overlay;
        height: 3;
        padding: 0 1;
        border: solid $primary;
        background: $surface;
    }
    """
