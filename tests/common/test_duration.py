from datetime import timedelta

import pytest

from src.hours_ledger.hours_ledger.common.duration import format_duration, format_signed, parse_duration, truncate
from src.hours_ledger.hours_ledger.core.exceptions import InvalidDuration


def test_parse_accepts_unpadded_components():
    assert parse_duration("0:0:0") == timedelta(0)
    assert parse_duration("6:00:00") == timedelta(hours=6)
    assert parse_duration("125:7:9") == timedelta(hours=125, minutes=7, seconds=9)


def test_parse_signed_modifiers():
    assert parse_duration("-1:30:00") == -timedelta(hours=1, minutes=30)
    assert parse_duration("+0:45:00") == timedelta(minutes=45)


@pytest.mark.parametrize("text", ["", "abc", "1:30", "1:x:00", "1:2:3:4", "-", "1.5:00:00"])
def test_parse_rejects_malformed_text(text):
    with pytest.raises(InvalidDuration):
        parse_duration(text)


def test_format_pads_minutes_seconds_and_hours():
    assert format_duration(timedelta(hours=5)) == "05:00:00"
    assert format_duration(timedelta(hours=1, minutes=2, seconds=3)) == "01:02:03"
    assert format_duration(timedelta(hours=123, seconds=59)) == "123:00:59"


def test_format_negative_duration_has_leading_minus():
    assert format_duration(-timedelta(hours=2, minutes=5)) == "-02:05:00"
    assert format_signed(timedelta(minutes=30)) == "+00:30:00"
    assert format_signed(-timedelta(minutes=30)) == "-00:30:00"


def test_round_trip_for_whole_second_durations():
    for seconds in (0, 1, 59, 60, 3599, 3600, 86_399, 86_400, 360_000 + 61):
        d = timedelta(seconds=seconds)
        assert parse_duration(format_duration(d)) == d


def test_truncate_drops_sub_millisecond_precision():
    assert truncate(timedelta(seconds=1, microseconds=1999)) == timedelta(seconds=1, milliseconds=1)
