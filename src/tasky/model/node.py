"""Reactive tree nodes with change notification and bubbling."""

from __future__ import annotations

from typing import Any, Callable, Iterable

Callback = Callable[["Node | ListNode", str, Any, Any], None]


def _wrap(value: Any, parent: Node | ListNode, key: str) -> Any:
    """Auto-wrap dicts as Nodes. Reparent existing Nodes/ListNodes."""
    if isinstance(value, dict):
        return Node(_parent=parent, _key=key, **value)
    if isinstance(value, (Node, ListNode)):
        object.__setattr__(value, "_parent", parent)
        object.__setattr__(value, "_key", key)
    return value


def _emit(node: Node | ListNode, key: str, old: Any, new: Any) -> None:
    """Fire local watchers for key, then bubble up the parent chain."""
    for cb in list(node._watchers.get(key, ())):
        cb(node, key, old, new)
    child = node
    while child._parent is not None:
        parent = child._parent
        for cb in list(parent._watchers.get(child._key, ())):
            cb(node, key, old, new)
        child = parent


def _path(node: Node | ListNode) -> str:
    parts: list[str] = []
    current: Node | ListNode | None = node
    while current is not None and current._key is not None:
        parts.append(current._key)
        current = current._parent
    return ".".join(reversed(parts))


def _unwatcher(watchers: dict, key: str, callback: Callback) -> Callable[[], None]:
    def unwatch() -> None:
        callbacks = watchers.get(key)
        if callbacks and callback in callbacks:
            callbacks.remove(callback)

    return unwatch


class Node:
    """Reactive dict-like tree node.

    Stores data in an internal dict, accessed via attribute syntax.
    Setting a value to None deletes the key. Dict values are
    auto-wrapped as child Nodes. Changes fire watchers and bubble
    up through the parent chain.
    """

    def __init__(
        self,
        _parent: Node | ListNode | None = None,
        _key: str | None = None,
        **data: Any,
    ) -> None:
        object.__setattr__(self, "_children", {})
        object.__setattr__(self, "_watchers", {})
        object.__setattr__(self, "_parent", None)
        object.__setattr__(self, "_key", _key)
        object.__setattr__(self, "_version", 0)
        for k, v in data.items():
            setattr(self, k, v)
        object.__setattr__(self, "_parent", _parent)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._children.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        old = self._children.get(name)
        if value is None:
            self._children.pop(name, None)
        else:
            value = _wrap(value, parent=self, key=name)
            self._children[name] = value
        if old != value:
            self._version += 1
            _emit(self, name, old, value)

    def __contains__(self, key: str) -> bool:
        return key in self._children

    def watch(self, key: str, callback: Callback) -> Callable[[], None]:
        """Watch a key for changes. Returns an unwatch callable."""
        self._watchers.setdefault(key, []).append(callback)
        return _unwatcher(self._watchers, key, callback)

    def keys(self):
        return self._children.keys()

    def items(self):
        return self._children.items()

    def values(self):
        return self._children.values()

    @property
    def path(self) -> str:
        """Dotted path from root to this node."""
        return _path(self)

    def update(self, other: Node, keep: Iterable[str] = ()) -> None:
        """Update this node in-place to match other, preserving watchers.

        Keys listed in ``keep`` are left alone even when other lacks them.
        """
        keep = set(keep)
        for key in set(self.keys()) - set(other.keys()) - keep:
            setattr(self, key, None)
        for key, new_value in other.items():
            if key in keep:
                continue
            old_value = self._children.get(key)
            if isinstance(old_value, Node) and isinstance(new_value, Node):
                old_value.update(new_value)
            elif isinstance(old_value, ListNode) and isinstance(new_value, ListNode):
                old_value.update(new_value)
            elif old_value != new_value:
                setattr(self, key, new_value)

    def __repr__(self) -> str:
        p = self.path
        keys = ", ".join(self._children.keys())
        label = f"Node({p})" if p else "Node"
        return f"<{label} [{keys}]>"


class ListNode:
    """Ordered, id-keyed collection with change notification.

    Items are looked up by string id and iterate in display order.
    Setting an id to None deletes it. Dicts are auto-wrapped as Nodes.
    Whole-list reorders fire the ``"*"`` watchers with the old and new
    key orders.
    """

    def __init__(
        self,
        _parent: Node | None = None,
        _key: str | None = None,
    ) -> None:
        object.__setattr__(self, "_by_id", {})
        object.__setattr__(self, "_watchers", {})
        object.__setattr__(self, "_parent", _parent)
        object.__setattr__(self, "_key", _key)
        object.__setattr__(self, "_version", 0)

    def __getitem__(self, key: str) -> Any:
        return self._by_id.get(str(key))

    def __setitem__(self, key: str, value: Any) -> None:
        key = str(key)
        old = self._by_id.get(key)
        if value is None:
            if key not in self._by_id:
                return
            del self._by_id[key]
            self._version += 1
            _emit(self, key, old, None)
            return
        value = _wrap(value, parent=self, key=key)
        self._by_id[key] = value
        if old != value:
            self._version += 1
            _emit(self, key, old, value)

    def __iter__(self):
        return iter(list(self._by_id.values()))

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, key: str) -> bool:
        return str(key) in self._by_id

    def watch(self, key: str, callback: Callback) -> Callable[[], None]:
        """Watch an item id (or ``"*"`` for reorders). Returns an unwatch callable."""
        key = str(key)
        self._watchers.setdefault(key, []).append(callback)
        return _unwatcher(self._watchers, key, callback)

    @property
    def path(self) -> str:
        """Dotted path from root to this node."""
        return _path(self)

    def keys(self) -> list[str]:
        """Return ordered keys."""
        return list(self._by_id.keys())

    def items(self) -> list[tuple[str, Any]]:
        """Return ordered (key, value) pairs."""
        return list(self._by_id.items())

    def index(self, key: str) -> int:
        """Position of key in display order."""
        return self.keys().index(str(key))

    def insert(self, index: int, key: str, value: Any) -> None:
        """Add value under key at index, shifting later items down."""
        key = str(key)
        self[key] = value
        order = [k for k in self.keys() if k != key]
        order.insert(index, key)
        self.reorder(order)

    def reorder(self, keys: list[str]) -> None:
        """Rearrange items to match keys, which must name every item."""
        old_keys = self.keys()
        new_keys = [str(k) for k in keys]
        assert sorted(new_keys) == sorted(old_keys), f"reorder of {self.path or 'list'} must keep the same ids"
        if old_keys == new_keys:
            return
        object.__setattr__(self, "_by_id", {k: self._by_id[k] for k in new_keys})
        self._version += 1
        _emit(self, "*", old_keys, new_keys)

    def update(self, other: ListNode) -> None:
        """Update this list in-place to match other, preserving watchers."""
        for key in set(self._by_id) - set(other._by_id):
            self[key] = None
        for key, new_value in other.items():
            old_value = self._by_id.get(key)
            if old_value is None:
                self[key] = new_value
            elif isinstance(old_value, Node) and isinstance(new_value, Node):
                old_value.update(new_value)
            elif isinstance(old_value, ListNode) and isinstance(new_value, ListNode):
                old_value.update(new_value)
            elif old_value != new_value:
                self[key] = new_value
        self.reorder(other.keys())

    def __repr__(self) -> str:
        p = self.path
        ids = ", ".join(self._by_id.keys())
        label = f"ListNode({p})" if p else "ListNode"
        return f"<{label} [{ids}]>"
