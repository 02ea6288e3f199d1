"""Mixin that manages Node watches with auto-cleanup."""

from __future__ import annotations

from tasky.model.node import Callback, ListNode, Node


class NodeWatcherMixin:
    """Mixin for widgets that watch Node keys.

    Subclasses should:
    - Call ``_init_watcher()`` in ``__init__``
    - Use ``self.node_watch(node, key, callback)`` instead of ``node.watch(...)``
    - Skip writing ``on_unmount`` -- the mixin handles cleanup
    """

    def _init_watcher(self) -> None:
        self._watches: list = []

    def node_watch(self, node: Node | ListNode, key: str, callback: Callback) -> None:
        """Register a watch that is dropped when the widget unmounts."""
        self._watches.append(node.watch(key, callback))

    def on_unmount(self) -> None:
        for unwatch in self._watches:
            unwatch()
        self._watches.clear()
