from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import week_start
from ..core.constants import WEEK_LENGTH
from ..ledger.repository import LedgerRepository

logger = logging.getLogger(__name__)


class WeekRolloverService:
    """Opens a new weekly log column once the current one is over a week old.

    Only one week is opened per check even after a longer idle period;
    intermediate weeks are not backfilled. The check-and-insert is not
    atomic, so callers serialize rollover-triggering operations.
    """

    def __init__(self, ledger: LedgerRepository):
        self._ledger = ledger

    def is_due(self, now: datetime) -> bool:
        marker = self._ledger.read_week_marker()
        return marker is None or now - marker > WEEK_LENGTH

    def ensure_current_week(self, now: datetime) -> Optional[datetime]:
        """Return the Monday of a newly opened week, or None when none was due."""
        if not self.is_due(now):
            return None

        monday = week_start(now)
        self._ledger.open_week(monday)
        logger.info("Opened week of %s", monday.date().isoformat())
        return monday
