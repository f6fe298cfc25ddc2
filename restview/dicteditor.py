"""A two-column table of key/value pairs, kept in insertion order."""

from __future__ import annotations

from typing import Any, Iterable

__all__ = ["DictEditorModel"]


class DictEditorModel:
    """An ordered list of key/value rows, shown as a two-column table.

    Keys may repeat. Each row is addressed by its position.
    """

    COLUMNS = 2

    def __init__(self) -> None:
        self._rows: list[tuple[str, Any]] = []
        self.headers: list[str] = []

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self):
        return iter(self._rows)

    def row_count(self) -> int:
        """Return the number of rows."""
        return len(self._rows)

    def column_count(self) -> int:
        """Return the number of columns, always two."""
        return self.COLUMNS

    def header_data(self, section: int, horizontal: bool = True) -> str | None:
        """Return the caption of a column header, or None.

        Only horizontal headers carry a caption.
        """
        if section < 0 or section > self.column_count():
            return None
        if horizontal:
            return "test"
        return None

    def data(self, row: int, column: int) -> Any:
        """Return the key (column 0) or value (column 1) of a row.

        None is returned for a cell outside the table.
        """
        if not 0 <= row < len(self._rows):
            return None
        key, value = self._rows[row]
        if column == 0:
            return key
        if column == 1:
            return value
        return None

    def _checked(self, row: int) -> tuple[str, Any]:
        if not 0 <= row < len(self._rows):
            raise IndexError(f"row {row} out of range")
        return self._rows[row]

    def key(self, row: int) -> str:
        """Return the key of a row. Raises IndexError if there is no such row."""
        return self._checked(row)[0]

    def value(self, row: int) -> Any:
        """Return the value of a row. Raises IndexError if there is no such row."""
        return self._checked(row)[1]

    def set_headers(self, headers: Iterable[str]) -> None:
        """Store the header captions."""
        self.headers = list(headers)

    def clear(self) -> None:
        """Remove every row."""
        self._rows.clear()

    def insert(self, key: str, value: Any) -> None:
        """Append a row at the end."""
        self._rows.append((key, value))

    def remove(self, row: int) -> None:
        """Remove a row. Raises IndexError if there is no such row."""
        self._checked(row)
        del self._rows[row]