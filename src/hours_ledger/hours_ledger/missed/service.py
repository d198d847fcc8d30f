from __future__ import annotations

import logging
from datetime import timedelta
from typing import Dict

from ..common.duration import ZERO, format_duration
from ..core.exceptions import DomainError, MemberNotFound
from ..ledger.model import MemberRow
from ..ledger.repository import LedgerRepository
from .calculator.base import MissedHoursCalculator
from .calculator.standard_calculator import StandardMissedHoursCalculator

logger = logging.getLogger(__name__)


class MissedHoursService:
    def __init__(self, ledger: LedgerRepository, calculator: MissedHoursCalculator | None = None):
        self._ledger = ledger
        self._calculator = calculator or StandardMissedHoursCalculator()

    def missed_for_row(self, row: MemberRow) -> timedelta:
        current = row.current_week
        return self._calculator.missed(
            [w.logged for w in row.history],
            current.logged if current else ZERO,
            row.hour_requirement,
        )

    def missed_hours(self, address: str) -> str:
        """Formatted debt for a member. Read-only."""
        row = self._ledger.get_row(address)
        if row is None:
            raise MemberNotFound(f"Address '{address}' not found")
        return format_duration(self.missed_for_row(row))

    def refresh_all(self) -> Dict[str, str]:
        """Rewrite the missed-hours display column for every readable row."""
        values = {}
        for address in self._ledger.addresses():
            if not address:
                continue
            try:
                row = self._ledger.get_row(address)
            except DomainError as e:
                logger.warning("Skipped missed hours for %s: %s", address, e)
                continue
            if row is None:
                continue
            text = format_duration(self.missed_for_row(row))
            self._ledger.write_missed_hours(address, text)
            values[address] = text
        return values
