from datetime import datetime

import pytest

from src.hours_ledger.hours_ledger.common.datetime_utils import human_check_in, week_start
from src.hours_ledger.hours_ledger.common.validators import format_metadata


@pytest.mark.parametrize("raw", ["", "n/a", " N/A ", "   ", None])
def test_empty_or_na_metadata_normalizes_to_na(raw):
    assert format_metadata(raw) == "N/A"


def test_line_breaks_become_semicolons():
    assert format_metadata("a\nb\r\nc") == "a; b; c"
    assert format_metadata("  wiring\rsoldering  ") == "wiring; soldering"


def test_week_start_is_monday_midnight():
    # 2025-03-05 is a Wednesday
    assert week_start(datetime(2025, 3, 5, 14, 30)) == datetime(2025, 3, 3)
    # Sunday belongs to the week that started the previous Monday
    assert week_start(datetime(2025, 3, 9, 23, 59)) == datetime(2025, 3, 3)
    assert week_start(datetime(2025, 3, 3, 0, 0)) == datetime(2025, 3, 3)


def test_human_check_in_format():
    assert human_check_in(datetime(2025, 3, 3, 15, 4, 5)) == "Mon 03:04:05 PM"
