from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from .admin.service import AdminReceipt, AdminService
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .common.validators import require_non_empty
from .core.enums import AdminAction, Direction
from .core.exceptions import DomainError
from .core.result import Result
from .missed.service import MissedHoursService
from .prompts.prompter import Prompter
from .timeouts.scanner import TimeoutScanner


@dataclass(frozen=True)
class FormSubmission:
    timestamp: datetime
    address: str
    direction: Direction
    metadata: str = ""


@dataclass(frozen=True)
class AdminCommand:
    action: AdminAction
    prompter: Prompter
    now: Optional[datetime] = None


@dataclass(frozen=True)
class PeriodicTick:
    now: Optional[datetime] = None


@dataclass(frozen=True)
class TickReport:
    timed_out: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    missed_hours: Dict[str, str] = field(default_factory=dict)


Event = Union[FormSubmission, AdminCommand, PeriodicTick]


class EventDispatcher:
    """Single entry point for inbound events.

    Dispatches are serialized with a process-local lock so week rollovers
    never race each other within one worker. Domain errors come back as
    failed Results; anything else (store I/O) propagates.
    """

    def __init__(
        self,
        attendance: AttendanceService,
        admin: AdminService,
        scanner: TimeoutScanner,
        missed: MissedHoursService,
    ):
        self._attendance = attendance
        self._admin = admin
        self._scanner = scanner
        self._missed = missed
        self._lock = threading.Lock()

    def dispatch(self, event: Event) -> Result[Any]:
        with self._lock:
            try:
                if isinstance(event, FormSubmission):
                    return Result.success(self._on_form(event))
                if isinstance(event, AdminCommand):
                    receipt = self._on_admin(event)
                    return Result.success(receipt, receipt.message)
                if isinstance(event, PeriodicTick):
                    return Result.success(self._on_tick(event))
            except DomainError as exc:
                return Result.from_error(exc)
        raise TypeError(f"Unsupported event: {type(event).__name__}")

    def _on_form(self, event: FormSubmission) -> str:
        address = require_non_empty(event.address, "address")
        self._attendance.ensure_member(address)
        if event.direction == Direction.IN:
            self._attendance.check_in(address, event.metadata, now=event.timestamp)
        else:
            self._attendance.check_out(address, event.metadata, now=event.timestamp)
        return address

    def _on_admin(self, event: AdminCommand) -> AdminReceipt:
        return self._admin.run(event.action, event.prompter, now=event.now)

    def _on_tick(self, event: PeriodicTick) -> TickReport:
        now = event.now or now_local()
        sweep = self._scanner.sweep(now=now)
        return TickReport(
            timed_out=sweep.timed_out,
            failed=sweep.failed,
            missed_hours=self._missed.refresh_all(),
        )

    def missed_hours(self, address: str) -> Result[str]:
        """Derived-value query. Read-only and lock-free."""
        try:
            return Result.success(self._missed.missed_hours(address))
        except DomainError as exc:
            return Result.from_error(exc)
