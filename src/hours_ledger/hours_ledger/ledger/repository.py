from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Protocol, Sequence, Tuple

from .model import MemberRow


class LedgerRepository(Protocol):
    """Address-keyed access to ledger rows.

    Row positions are resolved on every call, so callers never hold a row
    index across operations.
    """

    def ensure_layout(self) -> None:
        raise NotImplementedError

    def addresses(self) -> List[str]:
        raise NotImplementedError

    def exists(self, address: str) -> bool:
        raise NotImplementedError

    def find_by_prefix(self, text: str) -> Optional[str]:
        raise NotImplementedError

    def create_member(self, address: str, *, hour_requirement: str) -> None:
        raise NotImplementedError

    def get_row(self, address: str) -> Optional[MemberRow]:
        raise NotImplementedError

    def list_rows(self) -> Sequence[MemberRow]:
        raise NotImplementedError

    def read_check_in(self, address: str) -> Optional[datetime]:
        raise NotImplementedError

    def write_check_in(self, address: str, moment: datetime) -> None:
        raise NotImplementedError

    def clear_check_in(self, address: str) -> None:
        raise NotImplementedError

    def checked_in(self) -> List[Tuple[str, datetime]]:
        raise NotImplementedError

    def increment_timeouts(self, address: str) -> int:
        raise NotImplementedError

    def read_current_week(self, address: str) -> Tuple[str, str]:
        """Display text and note of the member's current-week cell."""

        raise NotImplementedError

    def write_current_week(self, address: str, *, logged: str, note: str) -> None:
        raise NotImplementedError

    def read_hour_requirement(self, address: str) -> str:
        raise NotImplementedError

    def write_hour_requirement(self, address: str, requirement: str) -> None:
        raise NotImplementedError

    def refresh_total(self, address: str) -> None:
        raise NotImplementedError

    def write_missed_hours(self, address: str, missed: str) -> None:
        raise NotImplementedError

    def read_week_marker(self) -> Optional[datetime]:
        raise NotImplementedError

    def open_week(self, monday: datetime) -> None:
        """Insert a new current-week column with zeroed cells for every row."""

        raise NotImplementedError
