from __future__ import annotations

from dataclasses import dataclass

import pytest

from src.hours_ledger.hours_ledger.admin.service import AdminService
from src.hours_ledger.hours_ledger.attendance.service import AttendanceService
from src.hours_ledger.hours_ledger.ledger.sheet_ledger_repository import SheetLedgerRepository
from src.hours_ledger.hours_ledger.missed.service import MissedHoursService
from src.hours_ledger.hours_ledger.store.memory_table import InMemoryTable
from src.hours_ledger.hours_ledger.timeouts.scanner import TimeoutScanner
from src.hours_ledger.hours_ledger.weeks.service import WeekRolloverService


@dataclass
class Ledger:
    store: InMemoryTable
    repo: SheetLedgerRepository
    weeks: WeekRolloverService
    attendance: AttendanceService
    scanner: TimeoutScanner
    missed: MissedHoursService
    admin: AdminService


def make_ledger() -> Ledger:
    store = InMemoryTable()
    repo = SheetLedgerRepository(store)
    repo.ensure_layout()
    weeks = WeekRolloverService(repo)
    attendance = AttendanceService(repo, weeks)
    return Ledger(
        store=store,
        repo=repo,
        weeks=weeks,
        attendance=attendance,
        scanner=TimeoutScanner(repo, attendance),
        missed=MissedHoursService(repo),
        admin=AdminService(repo, attendance),
    )


@pytest.fixture
def ledger() -> Ledger:
    return make_ledger()


@pytest.fixture
def ledger_factory():
    return make_ledger
