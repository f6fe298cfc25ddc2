"""A lazily built tree of items over the nodes of an XML document."""

from __future__ import annotations

from xml.dom.minidom import Node

__all__ = ["DomItem"]


class DomItem:
    """Wraps a DOM node and remembers its place under its parent item.

    Child items are created on first access and cached.
    """

    def __init__(self, node: Node, row: int, parent: DomItem | None = None) -> None:
        self._node = node
        self._row = row
        self._parent = parent
        self._children: dict[int, DomItem] = {}

    def child(self, i: int) -> DomItem | None:
        """Return the item for the ``i``-th child node, or None if there is none."""
        cached = self._children.get(i)
        if cached is not None:
            return cached
        child_nodes = self._node.childNodes
        if 0 <= i < len(child_nodes):
            item = DomItem(child_nodes[i], i, self)
            self._children[i] = item
            return item
        return None

    def parent(self) -> DomItem | None:
        """Return the parent item, or None for the root."""
        return self._parent

    def node(self) -> Node:
        """Return the wrapped DOM node."""
        return self._node

    def row(self) -> int:
        """Return this item's position under its parent."""
        return self._row