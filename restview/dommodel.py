"""A three-column tree model over an XML document: name, attributes, value."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any
from xml.dom.minidom import Document, Node, parseString
from xml.parsers.expat import ExpatError

from .domitem import DomItem

__all__ = ["Role", "ModelIndex", "DomModel"]

_NO_FLAGS: frozenset[str] = frozenset()
_DEFAULT_FLAGS: frozenset[str] = frozenset({"selectable", "enabled"})

_HEADERS = ("Name", "Attributes", "Value")
_COLUMN_COLORS = {1: "#FFAA2C", 2: "#5293D8"}


class Role(Enum):
    """What kind of data is asked of a cell."""

    DISPLAY = "display"
    FONT = "font"
    TEXT_COLOR = "text_color"


@dataclass(frozen=True)
class ModelIndex:
    """The position of a cell in the model; without an item it is invalid."""

    row: int = -1
    column: int = -1
    item: DomItem | None = None

    def is_valid(self) -> bool:
        """Return True if the index points at an item."""
        return self.item is not None


_INVALID = ModelIndex()


def _strip_blank_text(node: Node) -> None:
    for child in list(node.childNodes):
        if child.nodeType == Node.TEXT_NODE and not child.data.strip():
            node.removeChild(child)
        else:
            _strip_blank_text(child)


class DomModel:
    """Shows the nodes of an XML document as a tree with three columns."""

    def __init__(self) -> None:
        self._document: Document = Document()
        self._root = DomItem(self._document, 0)

    def load_xml(self, xml: bytes | str) -> bool:
        """Replace the document with the parsed ``xml``.

        Whitespace-only text nodes are dropped. Returns False, leaving an
        empty document, if the text is not well-formed XML.
        """
        ok = True
        try:
            document = parseString(xml)
        except ExpatError:
            document = Document()
            ok = False
        else:
            _strip_blank_text(document)
        self._document = document
        self._root = DomItem(document, 0)
        return ok

    def _item(self, index: ModelIndex | None) -> DomItem:
        if index is None or not index.is_valid():
            return self._root
        return index.item  # type: ignore[return-value]

    def column_count(self, parent: ModelIndex | None = None) -> int:
        """Return the number of columns: one per header, three in all."""
        return len(_HEADERS)

    def row_count(self, parent: ModelIndex | None = None) -> int:
        """Return the number of child nodes under ``parent`` (the document if None)."""
        if parent is not None and parent.column > 0:
            return 0
        return len(self._item(parent).node().childNodes)

    def _has_index(self, row: int, column: int, parent: ModelIndex | None) -> bool:
        return 0 <= row < self.row_count(parent) and 0 <= column < self.column_count(parent)

    def index(
        self, row: int, column: int, parent: ModelIndex | None = None
    ) -> ModelIndex:
        """Return the index of a cell, or an invalid index if there is none."""
        if not self._has_index(row, column, parent):
            return _INVALID
        child = self._item(parent).child(row)
        if child is None:
            return _INVALID
        return ModelIndex(row, column, child)

    def parent(self, child: ModelIndex) -> ModelIndex:
        """Return the index of the parent of ``child``; invalid at the top level."""
        if not child.is_valid():
            return _INVALID
        parent_item = child.item.parent()  # type: ignore[union-attr]
        if parent_item is None or parent_item is self._root:
            return _INVALID
        return ModelIndex(parent_item.row(), 0, parent_item)

    def data(self, index: ModelIndex, role: Role = Role.DISPLAY) -> Any:
        """Return what ``role`` asks of a cell, or None."""
        if not index.is_valid():
            return None

        if role is Role.DISPLAY:
            node = index.item.node()  # type: ignore[union-attr]
            if index.column == 0:
                return node.nodeName
            if index.column == 1:
                attributes = node.attributes
                if not attributes:
                    return ""
                return " ".join(
                    f'{attr.nodeName}="{attr.nodeValue}"'
                    for attr in attributes.values()
                )
            if index.column == 2:
                return " ".join((node.nodeValue or "").split("\n"))
            return None

        if role is Role.FONT:
            return {"bold": index.column == 0}

        if role is Role.TEXT_COLOR:
            return _COLUMN_COLORS.get(index.column)

        return None

    def flags(self, index: ModelIndex) -> frozenset[str]:
        """Return the item flags: none for an invalid index."""
        if not index.is_valid():
            return _NO_FLAGS
        return _DEFAULT_FLAGS

    def header_data(
        self, section: int, horizontal: bool = True, role: Role = Role.DISPLAY
    ) -> str | None:
        """Return the caption of a horizontal header section, or None."""
        if horizontal and role is Role.DISPLAY and 0 <= section < len(_HEADERS):
            return _HEADERS[section]
        return None