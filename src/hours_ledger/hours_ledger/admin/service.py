from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import List, Optional

from ..attendance.service import AttendanceService
from ..common.datetime_utils import now_local
from ..common.duration import ZERO, format_duration, format_signed, parse_duration
from ..common.validators import format_metadata
from ..core.constants import ADMIN_SOURCE, EXEMPT_SOURCE
from ..core.enums import AdminAction
from ..core.exceptions import InvalidDuration, MemberNotFound, NotCheckedIn, OperationCanceled
from ..ledger.repository import LedgerRepository
from ..prompts.prompter import Prompter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminReceipt:
    action: AdminAction
    message: str
    addresses: List[str] = field(default_factory=list)


class AdminService:
    """Editor menu commands.

    Every prompt is answered before the ledger is touched, so a cancelled
    prompt leaves no partial change behind.
    """

    def __init__(self, ledger: LedgerRepository, attendance: AttendanceService):
        self._ledger = ledger
        self._attendance = attendance

    def _ask_member(self, prompter: Prompter) -> str:
        text = prompter.ask("member", "Select Member: start of address").strip()
        if text == "":
            raise OperationCanceled()
        return text

    def _select_member(self, prompter: Prompter) -> str:
        text = self._ask_member(prompter)
        address = self._ledger.find_by_prefix(text)
        if address is None:
            raise MemberNotFound(f"Address '{text}' not found")
        return address

    def _notes(self, prompter: Prompter, label: str, prefix: str) -> str:
        return prefix + format_metadata(prompter.ask("notes", label))

    def _modifier(self, prompter: Prompter, label: str) -> timedelta:
        text = prompter.ask("hours", label).strip()
        if text == "":
            raise OperationCanceled()
        return parse_duration(text)

    def _require_checked_in(self, address: str) -> None:
        if not self._attendance.is_checked_in(address):
            raise NotCheckedIn(f"Member {address} is not checked in")

    def run(self, action: AdminAction, prompter: Prompter, *, now: Optional[datetime] = None) -> AdminReceipt:
        handlers = {
            AdminAction.CHECK_IN: self.check_in,
            AdminAction.CHECK_OUT: self.check_out,
            AdminAction.MODIFY_HOURS: self.modify_hours,
            AdminAction.RESET_TIMEOUTS: self.reset_timeouts,
            AdminAction.TIMEOUT_MEMBER: self.timeout_member,
            AdminAction.EXEMPT_FROM_WEEK: self.exempt_from_week,
            AdminAction.SET_REQUIREMENT: self.set_requirement,
        }
        return handlers[action](prompter, now=now or now_local())

    def check_in(self, prompter: Prompter, *, now: datetime) -> AdminReceipt:
        """Check in a member by address prefix; an unknown full address gets a new row."""
        text = self._ask_member(prompter)
        address = self._ledger.find_by_prefix(text)
        if address is None:
            address = text
            self._attendance.ensure_member(address)

        metadata = ""
        if self._attendance.is_checked_in(address):
            metadata = self._notes(prompter, "Re-check in notes: projects/tasks worked on", "Admin nt: ")

        self._attendance.check_in(address, metadata, now=now)
        return AdminReceipt(AdminAction.CHECK_IN, f"{address} checked in", [address])

    def check_out(self, prompter: Prompter, *, now: datetime) -> AdminReceipt:
        address = self._select_member(prompter)
        self._require_checked_in(address)
        metadata = self._notes(prompter, "Check out notes: projects/tasks worked on", "Admin nt: ")

        self._attendance.check_out(address, metadata, now=now)
        return AdminReceipt(AdminAction.CHECK_OUT, f"{address} checked out", [address])

    def modify_hours(self, prompter: Prompter, *, now: datetime) -> AdminReceipt:
        address = self._select_member(prompter)
        modifier = self._modifier(prompter, "Amend Hours: time modifier [+/-H:M:S]")
        metadata = self._notes(prompter, "Modification notes: projects/tasks worked on", "Admin nt: ")

        self._attendance.add_hours(address, modifier, source=ADMIN_SOURCE, metadata=metadata, now=now)
        logger.info("Admin modified %s by %s", address, format_signed(modifier))
        return AdminReceipt(AdminAction.MODIFY_HOURS, f"{address} modified by {format_signed(modifier)}", [address])

    def reset_timeouts(self, prompter: Prompter, *, now: datetime) -> AdminReceipt:
        resets = self._attendance.reset_timeouts(now=now)
        message = f"{len(resets)} members have been re-checked in"
        if resets:
            message += ":\n" + ",\n".join(resets)
        return AdminReceipt(AdminAction.RESET_TIMEOUTS, message, resets)

    def timeout_member(self, prompter: Prompter, *, now: datetime) -> AdminReceipt:
        address = self._select_member(prompter)
        self._require_checked_in(address)
        metadata = self._notes(prompter, "Timeout notes: reason for timeout", "Admin timeout nt: ")

        self._attendance.timeout(address, metadata, now=now)
        return AdminReceipt(AdminAction.TIMEOUT_MEMBER, f"{address} timed out", [address])

    def exempt_from_week(self, prompter: Prompter, *, now: datetime) -> AdminReceipt:
        address = self._select_member(prompter)
        credit = self._modifier(prompter, "Exempt from week: credited time [+/-H:M:S]")
        metadata = self._notes(prompter, "Exemption notes: reason", "Exempt nt: ")

        self._attendance.add_hours(address, credit, source=EXEMPT_SOURCE, metadata=metadata, now=now)
        return AdminReceipt(AdminAction.EXEMPT_FROM_WEEK, f"{address} exempted by {format_signed(credit)}", [address])

    def set_requirement(self, prompter: Prompter, *, now: datetime) -> AdminReceipt:
        address = self._select_member(prompter)
        requirement = self._modifier(prompter, "Weekly hour requirement [H:M:S]")
        if requirement < ZERO:
            raise InvalidDuration("Hour requirement cannot be negative")

        self._ledger.write_hour_requirement(address, format_duration(requirement))
        logger.info("Hour requirement for %s set to %s", address, format_duration(requirement))
        return AdminReceipt(
            AdminAction.SET_REQUIREMENT,
            f"{address} requirement set to {format_duration(requirement)}",
            [address],
        )
