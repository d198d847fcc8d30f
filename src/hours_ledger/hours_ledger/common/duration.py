"""Duration codec.

Durations are ``timedelta`` values truncated to whole milliseconds. Their
canonical text is ``[-]HH:MM:SS``: hours unbounded and padded to at least
two digits, minutes and seconds always two digits.
"""

from __future__ import annotations

from datetime import timedelta

from ..core.exceptions import InvalidDuration

ZERO = timedelta(0)


def to_millis(value: timedelta) -> int:
    return (value.days * 86_400 + value.seconds) * 1000 + value.microseconds // 1000


def from_millis(millis: int) -> timedelta:
    return timedelta(milliseconds=int(millis))


def truncate(value: timedelta) -> timedelta:
    """Drop sub-millisecond precision (elapsed times come from datetimes)."""
    return from_millis(to_millis(value))


def parse_duration(text: str) -> timedelta:
    """Parse ``[+/-]H:M:S`` into a signed duration.

    Raises InvalidDuration when the text is not three colon-separated
    numeric components.
    """
    if text is None:
        raise InvalidDuration("Missing duration")

    raw = str(text).strip()
    sign = 1
    if raw[:1] in {"+", "-"}:
        sign = -1 if raw[0] == "-" else 1
        raw = raw[1:]

    parts = raw.split(":")
    if len(parts) != 3 or not all(p.strip().isdecimal() for p in parts):
        raise InvalidDuration(f"Invalid duration: {text!r}")

    hours, minutes, seconds = (int(p) for p in parts)
    millis = hours * 3_600_000 + minutes * 60_000 + seconds * 1_000
    return from_millis(sign * millis)


def format_duration(value: timedelta) -> str:
    millis = to_millis(value)
    sign = "-" if millis < 0 else ""
    total_seconds = abs(millis) // 1000
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_signed(value: timedelta) -> str:
    """Format with an explicit ``+`` for non-negative values (confirmations)."""
    text = format_duration(value)
    return text if text.startswith("-") else "+" + text
