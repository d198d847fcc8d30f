from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, List, Optional

from .admin.service import AdminService
from .attendance.service import AttendanceService
from .core.constants import (
    DEFAULT_HOUR_REQUIREMENT,
    DEFAULT_MISSED_TIME_MULTIPLIER,
    DEFAULT_TIMEOUT_RETURN_MINUTES,
    DEFAULT_TIMEOUT_THRESHOLD_MINUTES,
)
from .events import EventDispatcher
from .ledger.sheet_ledger_repository import SheetLedgerRepository
from .missed.calculator.standard_calculator import StandardMissedHoursCalculator
from .missed.service import MissedHoursService
from .store.memory_table import InMemoryTable
from .store.table import TabularStore
from .timeouts.scanner import TimeoutScanner
from .weeks.service import WeekRolloverService


@dataclass(frozen=True)
class LedgerConfig:
    store_backend: str = "memory"
    gsheet: dict = field(default_factory=dict)
    timeout_threshold_minutes: int = DEFAULT_TIMEOUT_THRESHOLD_MINUTES
    timeout_return_minutes: int = DEFAULT_TIMEOUT_RETURN_MINUTES
    default_hour_requirement: str = DEFAULT_HOUR_REQUIREMENT
    missed_time_multiplier: int = DEFAULT_MISSED_TIME_MULTIPLIER
    editors: List[str] = field(default_factory=list)

    @classmethod
    def from_settings(cls, settings: Any) -> "LedgerConfig":
        return cls(
            store_backend=str(getattr(settings, "STORE_BACKEND", "memory")).lower(),
            gsheet=dict(getattr(settings, "GSHEET_CONFIG", {}) or {}),
            timeout_threshold_minutes=int(getattr(settings, "TIMEOUT_THRESHOLD_MINUTES", DEFAULT_TIMEOUT_THRESHOLD_MINUTES)),
            timeout_return_minutes=int(getattr(settings, "TIMEOUT_RETURN_MINUTES", DEFAULT_TIMEOUT_RETURN_MINUTES)),
            default_hour_requirement=str(getattr(settings, "DEFAULT_HOUR_REQUIREMENT", DEFAULT_HOUR_REQUIREMENT)),
            missed_time_multiplier=int(getattr(settings, "MISSED_TIME_MULTIPLIER", DEFAULT_MISSED_TIME_MULTIPLIER)),
            editors=[e for e in (getattr(settings, "EDITORS", []) or []) if e],
        )


@dataclass(frozen=True)
class Container:
    config: LedgerConfig
    store: TabularStore

    ledger_repo: SheetLedgerRepository

    week_service: WeekRolloverService
    attendance_service: AttendanceService
    timeout_scanner: TimeoutScanner
    missed_hours_service: MissedHoursService
    admin_service: AdminService
    dispatcher: EventDispatcher


def build_store(config: LedgerConfig) -> TabularStore:
    if config.store_backend == "gsheet":
        from .store.gsheet_table import GSheetConfig, GSheetTable

        return GSheetTable.open(
            GSheetConfig(
                spreadsheet_id=str(config.gsheet["spreadsheet_id"]),
                worksheet=str(config.gsheet.get("worksheet", "Result Sheet")),
                credentials_file=str(config.gsheet["credentials_file"]),
            )
        )
    if config.store_backend == "memory":
        return InMemoryTable()
    raise ValueError(f"Unknown STORE_BACKEND: {config.store_backend!r}")


def build_container(*, config: LedgerConfig, store: Optional[TabularStore] = None) -> Container:
    store = store if store is not None else build_store(config)

    ledger_repo = SheetLedgerRepository(store)
    ledger_repo.ensure_layout()

    week_service = WeekRolloverService(ledger_repo)
    attendance_service = AttendanceService(
        ledger_repo,
        week_service,
        timeout_return=timedelta(minutes=config.timeout_return_minutes),
        default_hour_requirement=config.default_hour_requirement,
    )
    timeout_scanner = TimeoutScanner(
        ledger_repo,
        attendance_service,
        threshold=timedelta(minutes=config.timeout_threshold_minutes),
    )
    missed_hours_service = MissedHoursService(
        ledger_repo,
        StandardMissedHoursCalculator(multiplier=config.missed_time_multiplier),
    )
    admin_service = AdminService(ledger_repo, attendance_service)
    dispatcher = EventDispatcher(attendance_service, admin_service, timeout_scanner, missed_hours_service)

    return Container(
        config=config,
        store=store,
        ledger_repo=ledger_repo,
        week_service=week_service,
        attendance_service=attendance_service,
        timeout_scanner=timeout_scanner,
        missed_hours_service=missed_hours_service,
        admin_service=admin_service,
        dispatcher=dispatcher,
    )
