from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import List

from ..attendance.service import AttendanceService
from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_TIMEOUT_THRESHOLD_MINUTES
from ..core.exceptions import DomainError
from ..ledger.repository import LedgerRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SweepOutcome:
    timed_out: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)


class TimeoutScanner:
    """Periodic sweep that times out members checked in for too long.

    Rows are handled one at a time; a row already checked out by the time
    it is reached is skipped, and a row that cannot be timed out is logged
    and left for the next sweep.
    """

    def __init__(
        self,
        ledger: LedgerRepository,
        attendance: AttendanceService,
        *,
        threshold: timedelta = timedelta(minutes=DEFAULT_TIMEOUT_THRESHOLD_MINUTES),
    ):
        self._ledger = ledger
        self._attendance = attendance
        self._threshold = threshold

    def due(self, now: datetime) -> List[str]:
        return [
            address
            for address, check_in_time in self._ledger.checked_in()
            if now - check_in_time > self._threshold
        ]

    def sweep(self, *, now: datetime | None = None) -> SweepOutcome:
        now = now or now_local()
        timed_out = []
        failed = []
        for address in self.due(now):
            try:
                if not self._attendance.is_checked_in(address):
                    continue
                self._attendance.timeout(address, now=now)
            except DomainError as e:
                logger.warning("Timeout of %s failed: %s", address, e)
                failed.append(address)
                continue
            timed_out.append(address)

        if timed_out:
            logger.info("Timeout sweep: %d member(s) timed out", len(timed_out))
        return SweepOutcome(timed_out=timed_out, failed=failed)
