from __future__ import annotations

from datetime import date, datetime
from typing import Any, Callable, List, Optional


def _display(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return str(value)


class InMemoryTable:
    """Grid of cells with notes, kept in process memory.

    Used for development and tests. Rows and columns grow on write.
    """

    def __init__(self):
        self._cells: List[List[Any]] = []
        self._notes: List[List[str]] = []

    def _ensure(self, row: int, col: int) -> None:
        if row < 1 or col < 1:
            raise IndexError(f"Invalid cell ({row}, {col})")
        while len(self._cells) < row:
            self._cells.append([])
            self._notes.append([])
        for r in range(len(self._cells)):
            while len(self._cells[r]) < col:
                self._cells[r].append(None)
                self._notes[r].append("")

    def _width(self) -> int:
        return max((len(r) for r in self._cells), default=0)

    def get_value(self, row: int, col: int) -> Any:
        if row > len(self._cells) or col > len(self._cells[row - 1]):
            return None
        return self._cells[row - 1][col - 1]

    def get_display(self, row: int, col: int) -> str:
        return _display(self.get_value(row, col))

    def set_value(self, row: int, col: int, value: Any) -> None:
        self._ensure(row, col)
        self._cells[row - 1][col - 1] = value

    def get_note(self, row: int, col: int) -> str:
        if row > len(self._notes) or col > len(self._notes[row - 1]):
            return ""
        return self._notes[row - 1][col - 1]

    def set_note(self, row: int, col: int, note: str) -> None:
        self._ensure(row, col)
        self._notes[row - 1][col - 1] = note

    def insert_row_before(self, row: int) -> None:
        width = self._width()
        self._ensure(max(row - 1, 1), max(width, 1))
        self._cells.insert(row - 1, [None] * width)
        self._notes.insert(row - 1, [""] * width)

    def insert_column_before(self, col: int) -> None:
        self._ensure(max(len(self._cells), 1), max(col - 1, 1))
        for cells, notes in zip(self._cells, self._notes):
            cells.insert(col - 1, None)
            notes.insert(col - 1, "")

    def last_row(self) -> int:
        for r in range(len(self._cells), 0, -1):
            if any(v not in (None, "") for v in self._cells[r - 1]):
                return r
        return 0

    def last_column(self) -> int:
        last = 0
        for cells in self._cells:
            for c in range(len(cells), last, -1):
                if cells[c - 1] not in (None, ""):
                    last = c
                    break
        return last

    def sort_rows(
        self,
        *,
        col: int,
        first_row: int,
        descending: bool = False,
        key: Optional[Callable[[str], Any]] = None,
    ) -> None:
        last = self.last_row()
        if last <= first_row:
            return
        start = first_row - 1
        sort_key = key or (lambda text: text)
        pairs = list(zip(self._cells[start:last], self._notes[start:last]))
        pairs.sort(
            key=lambda p: sort_key(_display(p[0][col - 1] if col <= len(p[0]) else None)),
            reverse=descending,
        )
        self._cells[start:last] = [p[0] for p in pairs]
        self._notes[start:last] = [p[1] for p in pairs]

    def get_column(self, col: int, first_row: int) -> List[str]:
        return [self.get_display(r, col) for r in range(first_row, self.last_row() + 1)]

    def get_row(self, row: int, first_col: int) -> List[str]:
        return [self.get_display(row, c) for c in range(first_col, self.last_column() + 1)]

    def snapshot(self) -> List[List[str]]:
        """Display values of the used range (debug/test helper)."""
        return [
            [self.get_display(r, c) for c in range(1, self.last_column() + 1)]
            for r in range(1, self.last_row() + 1)
        ]
