from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Tuple

from ..common.duration import ZERO
from ..core.enums import CheckState


@dataclass(frozen=True)
class WeekEntry:
    """One weekly log cell: Monday label, logged duration, audit trail."""

    week_label: Optional[datetime]
    logged: timedelta
    notes: str = ""


@dataclass(frozen=True)
class MemberRow:
    """Read-model snapshot of a member's ledger row.

    ``weekly_log`` is ordered oldest to newest; the last entry is the
    current week.
    """

    address: str
    row_index: int
    hour_requirement: timedelta
    check_in_time: Optional[datetime]
    timeout_count: int
    weekly_log: Tuple[WeekEntry, ...] = ()

    @property
    def state(self) -> CheckState:
        return CheckState.CHECKED_IN if self.check_in_time is not None else CheckState.CHECKED_OUT

    @property
    def total_hours(self) -> timedelta:
        return sum((w.logged for w in self.weekly_log), ZERO)

    @property
    def current_week(self) -> Optional[WeekEntry]:
        return self.weekly_log[-1] if self.weekly_log else None

    @property
    def history(self) -> Tuple[WeekEntry, ...]:
        """Closed weeks, oldest first."""
        return self.weekly_log[:-1]
