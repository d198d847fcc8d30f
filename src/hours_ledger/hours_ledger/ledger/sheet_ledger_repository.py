from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional, Sequence, Tuple

from ..common.datetime_utils import format_check_in, format_week_label, parse_check_in, parse_week_label
from ..common.duration import ZERO, format_duration, parse_duration
from ..core.constants import (
    ADDRESS_COL,
    CHECK_IN_COL,
    CURRENT_WEEK_COL,
    FIRST_DATA_ROW,
    HEADER_ROW,
    HEADERS,
    HOUR_REQUIREMENT_COL,
    MISSED_HOURS_COL,
    TIMEOUT_COL,
    TOTAL_HOURS_COL,
)
from ..core.exceptions import InvalidDuration, MemberNotFound
from ..store.table import TabularStore
from .model import MemberRow, WeekEntry
from .repository import LedgerRepository

ZERO_TEXT = format_duration(ZERO)


def _duration_sort_key(text: str) -> timedelta:
    try:
        return parse_duration(text)
    except InvalidDuration:
        return ZERO


class SheetLedgerRepository(LedgerRepository):
    """Ledger rows laid out on a spreadsheet-like table.

    Columns 1-6 are fixed (address, total, missed, requirement, check-in,
    timeouts); column 7 is the current week with older weeks to its right.
    """

    def __init__(self, store: TabularStore):
        self._store = store

    def ensure_layout(self) -> None:
        if self._store.get_display(HEADER_ROW, ADDRESS_COL):
            return
        for col, title in enumerate(HEADERS, start=1):
            self._store.set_value(HEADER_ROW, col, title)

    def addresses(self) -> List[str]:
        return [a.strip() for a in self._store.get_column(ADDRESS_COL, FIRST_DATA_ROW)]

    def _locate(self, address: str) -> Optional[int]:
        for i, value in enumerate(self.addresses()):
            if value and value == address:
                return FIRST_DATA_ROW + i
        return None

    def _require(self, address: str) -> int:
        row = self._locate(address)
        if row is None:
            raise MemberNotFound(f"Address '{address}' not found")
        return row

    def _has_week(self) -> bool:
        return self._store.last_column() >= CURRENT_WEEK_COL

    def exists(self, address: str) -> bool:
        return self._locate(address) is not None

    def find_by_prefix(self, text: str) -> Optional[str]:
        addresses = [a for a in self.addresses() if a]
        if text in addresses:
            return text
        return next((a for a in addresses if a.startswith(text)), None)

    def create_member(self, address: str, *, hour_requirement: str) -> None:
        self.ensure_layout()
        has_week = self._has_week()

        self._store.insert_row_before(FIRST_DATA_ROW)
        self._store.set_value(FIRST_DATA_ROW, ADDRESS_COL, address)
        self._store.set_value(FIRST_DATA_ROW, TOTAL_HOURS_COL, ZERO_TEXT)
        self._store.set_value(FIRST_DATA_ROW, MISSED_HOURS_COL, ZERO_TEXT)
        self._store.set_value(FIRST_DATA_ROW, HOUR_REQUIREMENT_COL, hour_requirement)
        self._store.set_value(FIRST_DATA_ROW, TIMEOUT_COL, 0)
        if has_week:
            self._store.set_value(FIRST_DATA_ROW, CURRENT_WEEK_COL, ZERO_TEXT)

        self._store.sort_rows(col=TOTAL_HOURS_COL, first_row=FIRST_DATA_ROW, descending=True, key=_duration_sort_key)

    def _weekly_log(self, row: int) -> Tuple[WeekEntry, ...]:
        labels = self._store.get_row(HEADER_ROW, CURRENT_WEEK_COL)
        cells = self._store.get_row(row, CURRENT_WEEK_COL)
        entries = []
        for offset, text in enumerate(cells):
            if not text.strip():
                continue
            col = CURRENT_WEEK_COL + offset
            label = labels[offset] if offset < len(labels) else ""
            entries.append(
                WeekEntry(
                    week_label=parse_week_label(label),
                    logged=parse_duration(text),
                    notes=self._store.get_note(row, col),
                )
            )
        entries.reverse()
        return tuple(entries)

    def _read_row(self, address: str, row: int) -> MemberRow:
        timeouts = self._store.get_display(row, TIMEOUT_COL).strip()
        return MemberRow(
            address=address,
            row_index=row,
            hour_requirement=parse_duration(self._store.get_display(row, HOUR_REQUIREMENT_COL)),
            check_in_time=parse_check_in(self._store.get_value(row, CHECK_IN_COL)),
            timeout_count=int(timeouts or 0),
            weekly_log=self._weekly_log(row),
        )

    def get_row(self, address: str) -> Optional[MemberRow]:
        row = self._locate(address)
        if row is None:
            return None
        return self._read_row(address, row)

    def list_rows(self) -> Sequence[MemberRow]:
        return [
            self._read_row(address, FIRST_DATA_ROW + i)
            for i, address in enumerate(self.addresses())
            if address
        ]

    def read_check_in(self, address: str) -> Optional[datetime]:
        return parse_check_in(self._store.get_value(self._require(address), CHECK_IN_COL))

    def write_check_in(self, address: str, moment: datetime) -> None:
        self._store.set_value(self._require(address), CHECK_IN_COL, format_check_in(moment))

    def clear_check_in(self, address: str) -> None:
        self._store.set_value(self._require(address), CHECK_IN_COL, "")

    def checked_in(self) -> List[Tuple[str, datetime]]:
        addresses = self.addresses()
        result = []
        for i, address in enumerate(addresses):
            moment = parse_check_in(self._store.get_value(FIRST_DATA_ROW + i, CHECK_IN_COL))
            if address and moment is not None:
                result.append((address, moment))
        return result

    def increment_timeouts(self, address: str) -> int:
        row = self._require(address)
        count = int(self._store.get_display(row, TIMEOUT_COL).strip() or 0) + 1
        self._store.set_value(row, TIMEOUT_COL, count)
        return count

    def read_current_week(self, address: str) -> Tuple[str, str]:
        row = self._require(address)
        return (
            self._store.get_display(row, CURRENT_WEEK_COL),
            self._store.get_note(row, CURRENT_WEEK_COL),
        )

    def write_current_week(self, address: str, *, logged: str, note: str) -> None:
        row = self._require(address)
        self._store.set_value(row, CURRENT_WEEK_COL, logged)
        self._store.set_note(row, CURRENT_WEEK_COL, note)

    def read_hour_requirement(self, address: str) -> str:
        return self._store.get_display(self._require(address), HOUR_REQUIREMENT_COL)

    def write_hour_requirement(self, address: str, requirement: str) -> None:
        self._store.set_value(self._require(address), HOUR_REQUIREMENT_COL, requirement)

    def refresh_total(self, address: str) -> None:
        row = self._require(address)
        total = sum((w.logged for w in self._weekly_log(row)), ZERO)
        self._store.set_value(row, TOTAL_HOURS_COL, format_duration(total))

    def write_missed_hours(self, address: str, missed: str) -> None:
        self._store.set_value(self._require(address), MISSED_HOURS_COL, missed)

    def read_week_marker(self) -> Optional[datetime]:
        if not self._has_week():
            return None
        return parse_week_label(self._store.get_display(HEADER_ROW, CURRENT_WEEK_COL))

    def open_week(self, monday: datetime) -> None:
        self.ensure_layout()
        rows = len(self.addresses())
        self._store.insert_column_before(CURRENT_WEEK_COL)
        self._store.set_value(HEADER_ROW, CURRENT_WEEK_COL, format_week_label(monday))
        for row in range(FIRST_DATA_ROW, FIRST_DATA_ROW + rows):
            self._store.set_value(row, CURRENT_WEEK_COL, ZERO_TEXT)
