from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Optional

from ..core.constants import CHECK_IN_FORMAT, HUMAN_CHECK_IN_FORMAT, WEEK_LABEL_FORMAT


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def week_start(moment: datetime) -> datetime:
    """Monday 00:00 of the week containing ``moment`` (Monday=1..Sunday=7)."""
    day_num = moment.isoweekday()
    monday = moment.date() - timedelta(days=day_num - 1)
    return datetime.combine(monday, datetime.min.time())


def format_check_in(moment: datetime) -> str:
    return moment.strftime(CHECK_IN_FORMAT)


def parse_check_in(value: Any) -> Optional[datetime]:
    """Read a check-in cell; blank means checked out."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.strptime(str(value).strip(), CHECK_IN_FORMAT)


def human_check_in(moment: datetime) -> str:
    """Legible form used in audit notes, e.g. ``Mon 09:05:00 AM``."""
    return moment.strftime(HUMAN_CHECK_IN_FORMAT)


def format_week_label(monday: datetime) -> str:
    return monday.strftime(WEEK_LABEL_FORMAT)


def parse_week_label(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    return datetime.strptime(str(value).strip()[:10], WEEK_LABEL_FORMAT)
