from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Sequence


class MissedHoursCalculator(ABC):
    """Strategy Pattern: compute make-up debt from weekly logged durations."""

    @abstractmethod
    def missed(self, history: Sequence[timedelta], current: timedelta, requirement: timedelta) -> timedelta:
        """``history`` is oldest to newest and excludes the current week."""

        raise NotImplementedError
