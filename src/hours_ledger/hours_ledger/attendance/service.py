from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List

from ..common.datetime_utils import human_check_in, now_local
from ..common.duration import ZERO, format_duration, parse_duration, truncate
from ..common.validators import format_metadata
from ..core.constants import (
    DEFAULT_HOUR_REQUIREMENT,
    DEFAULT_TIMEOUT_RETURN_MINUTES,
    TIMEOUT_METADATA,
    TIMEOUT_RESET_METADATA,
)
from ..core.exceptions import InvalidAccrual, InvalidDuration, NotCheckedIn
from ..ledger.repository import LedgerRepository
from ..weeks.service import WeekRolloverService

logger = logging.getLogger(__name__)


def checkin_source(check_in_time: datetime) -> str:
    return "checkin " + human_check_in(check_in_time)


def audit_entry(elapsed: timedelta, source: str, metadata: str) -> str:
    return f"Logged {format_duration(elapsed)} from {source} for: {format_metadata(metadata)}"


def _require_after(check_in_time: datetime, now: datetime) -> None:
    if now < check_in_time:
        raise InvalidAccrual("Check-out precedes check-in")


@dataclass(frozen=True)
class AccrualOutcome:
    address: str
    elapsed: timedelta
    logged: timedelta


class AttendanceService:
    """Check-in / check-out state machine over the ledger.

    Each transition re-reads the cells it updates from the repository; no
    member state is cached between calls.
    """

    def __init__(
        self,
        ledger: LedgerRepository,
        weeks: WeekRolloverService,
        *,
        timeout_return: timedelta = timedelta(minutes=DEFAULT_TIMEOUT_RETURN_MINUTES),
        default_hour_requirement: str = DEFAULT_HOUR_REQUIREMENT,
    ):
        self._ledger = ledger
        self._weeks = weeks
        self._timeout_return = timeout_return
        self._default_requirement = default_hour_requirement

    def ensure_member(self, address: str) -> bool:
        """Create the member row on first sight. Returns True when created."""
        if self._ledger.exists(address):
            return False
        self._ledger.create_member(address, hour_requirement=self._default_requirement)
        logger.info("Added member %s", address)
        return True

    def is_checked_in(self, address: str) -> bool:
        return self._ledger.read_check_in(address) is not None

    def add_hours(
        self,
        address: str,
        elapsed: timedelta,
        *,
        source: str,
        metadata: str,
        now: datetime | None = None,
    ) -> AccrualOutcome:
        """Add ``elapsed`` (possibly negative) to the member's current week.

        Raises InvalidAccrual when the stored week is malformed or the result
        would be negative; nothing is written in that case.
        """
        now = now or now_local()
        elapsed = truncate(elapsed)
        self._weeks.ensure_current_week(now)

        current_text, note = self._ledger.read_current_week(address)
        try:
            current = parse_duration(current_text)
        except InvalidDuration as exc:
            raise InvalidAccrual(f"Invalid logged hours for {address}: {current_text!r}") from exc

        logged = current + elapsed
        if logged < ZERO:
            raise InvalidAccrual("Cannot log a negative number of hours")

        entry = audit_entry(elapsed, source, metadata)
        self._ledger.write_current_week(
            address,
            logged=format_duration(logged),
            note=f"{note}\n\n{entry}" if note else entry,
        )
        self._ledger.refresh_total(address)
        logger.info("Logged %s for %s from %s", format_duration(elapsed), address, source)
        return AccrualOutcome(address=address, elapsed=elapsed, logged=logged)

    def check_out(self, address: str, metadata: str = "", *, now: datetime | None = None) -> bool:
        """Credit time since check-in and clear it. No-op when checked out.

        Raises InvalidAccrual, writing nothing, when ``now`` precedes the check-in.
        """
        now = now or now_local()
        check_in_time = self._ledger.read_check_in(address)
        if check_in_time is None:
            return False
        _require_after(check_in_time, now)

        self.add_hours(
            address,
            now - check_in_time,
            source=checkin_source(check_in_time),
            metadata=metadata,
            now=now,
        )
        self._ledger.clear_check_in(address)
        return True

    def check_in(self, address: str, metadata: str = "", *, now: datetime | None = None) -> None:
        """Check in at ``now``; an existing check-in is first checked out with ``metadata``."""
        now = now or now_local()
        self.check_out(address, metadata, now=now)
        self._ledger.write_check_in(address, now)
        logger.info("Checked in %s", address)

    def timeout(self, address: str, metadata: str = TIMEOUT_METADATA, *, now: datetime | None = None) -> int:
        """Force a checked-in member out, crediting the fixed timeout return.

        Returns the new timeout count.
        """
        now = now or now_local()
        check_in_time = self._ledger.read_check_in(address)
        if check_in_time is None:
            raise NotCheckedIn(f"Member {address} is not checked in")
        _require_after(check_in_time, now)

        self.add_hours(
            address,
            self._timeout_return,
            source=checkin_source(check_in_time),
            metadata=metadata,
            now=now,
        )
        self._ledger.clear_check_in(address)
        count = self._ledger.increment_timeouts(address)
        logger.info("Timed out %s (timeouts=%d)", address, count)
        return count

    def reset_timeouts(self, *, now: datetime | None = None) -> List[str]:
        """Check out and immediately re-check in every checked-in member."""
        now = now or now_local()
        resets = []
        for address, _ in self._ledger.checked_in():
            self.check_in(address, TIMEOUT_RESET_METADATA, now=now)
            resets.append(address)
        return resets
