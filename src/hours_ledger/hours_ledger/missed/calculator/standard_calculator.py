from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Sequence

from ...common.duration import from_millis, to_millis
from ...core.constants import DEFAULT_MISSED_TIME_MULTIPLIER
from .base import MissedHoursCalculator


@dataclass(frozen=True)
class StandardMissedHoursCalculator(MissedHoursCalculator):
    """Shortfalls cost ``multiplier`` times; surplus pays debt down to zero."""

    multiplier: int = DEFAULT_MISSED_TIME_MULTIPLIER

    def missed(self, history: Sequence[timedelta], current: timedelta, requirement: timedelta) -> timedelta:
        required_ms = to_millis(requirement)
        debt = 0

        for logged in history:
            delta = to_millis(logged) - required_ms
            if delta < 0:
                debt += -delta * self.multiplier
            elif debt > 0:
                debt -= min(delta, debt)

        surplus = to_millis(current) - required_ms
        if surplus > 0:
            debt -= min(surplus, debt)

        return from_millis(debt)
