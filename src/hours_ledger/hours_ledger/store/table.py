from __future__ import annotations

from typing import Any, Callable, List, Optional, Protocol


class TabularStore(Protocol):
    """Minimal spreadsheet contract the ledger needs.

    Coordinates are 1-based (row, column). Only single-cell operations are
    atomic.
    """

    def get_value(self, row: int, col: int) -> Any:
        raise NotImplementedError

    def get_display(self, row: int, col: int) -> str:
        raise NotImplementedError

    def set_value(self, row: int, col: int, value: Any) -> None:
        raise NotImplementedError

    def get_note(self, row: int, col: int) -> str:
        raise NotImplementedError

    def set_note(self, row: int, col: int, note: str) -> None:
        raise NotImplementedError

    def insert_row_before(self, row: int) -> None:
        raise NotImplementedError

    def insert_column_before(self, col: int) -> None:
        raise NotImplementedError

    def last_row(self) -> int:
        raise NotImplementedError

    def last_column(self) -> int:
        raise NotImplementedError

    def sort_rows(
        self,
        *,
        col: int,
        first_row: int,
        descending: bool = False,
        key: Optional[Callable[[str], Any]] = None,
    ) -> None:
        """Sort rows ``first_row..last_row`` by the display value of ``col``.

        ``key`` maps display text to a sortable value where the backend sorts
        in process; sheet-native backends may ignore it.
        """

        raise NotImplementedError

    def get_column(self, col: int, first_row: int) -> List[str]:
        """Display values of ``col`` from ``first_row`` to the last used row."""

        raise NotImplementedError

    def get_row(self, row: int, first_col: int) -> List[str]:
        """Display values of ``row`` from ``first_col`` to the last used column."""

        raise NotImplementedError
