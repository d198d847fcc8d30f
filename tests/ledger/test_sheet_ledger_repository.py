from datetime import datetime, timedelta

import pytest

from src.hours_ledger.hours_ledger.core.constants import ADDRESS_COL, CURRENT_WEEK_COL, HEADER_ROW
from src.hours_ledger.hours_ledger.core.enums import CheckState
from src.hours_ledger.hours_ledger.core.exceptions import MemberNotFound
from src.hours_ledger.hours_ledger.ledger.sheet_ledger_repository import SheetLedgerRepository
from src.hours_ledger.hours_ledger.store.memory_table import InMemoryTable


def _repo():
    store = InMemoryTable()
    repo = SheetLedgerRepository(store)
    repo.ensure_layout()
    return store, repo


def test_new_member_row_defaults():
    _, repo = _repo()
    repo.create_member("alice@club.org", hour_requirement="6:00:00")

    row = repo.get_row("alice@club.org")
    assert row is not None
    assert row.state == CheckState.CHECKED_OUT
    assert row.timeout_count == 0
    assert row.hour_requirement == timedelta(hours=6)
    assert row.weekly_log == ()


def test_rows_are_located_by_address_after_sorting():
    store, repo = _repo()
    repo.open_week(datetime(2025, 3, 3))
    repo.create_member("alice@club.org", hour_requirement="6:00:00")
    repo.write_current_week("alice@club.org", logged="03:00:00", note="")
    repo.refresh_total("alice@club.org")
    repo.create_member("bob@club.org", hour_requirement="6:00:00")

    # sorted by total hours descending, so alice stays on top
    assert repo.addresses() == ["alice@club.org", "bob@club.org"]
    assert store.get_display(2, ADDRESS_COL) == "alice@club.org"
    assert repo.read_current_week("bob@club.org") == ("00:00:00", "")


def test_find_by_prefix_prefers_exact_match():
    _, repo = _repo()
    repo.create_member("sam@club.org", hour_requirement="6:00:00")
    repo.create_member("sam", hour_requirement="6:00:00")

    assert repo.find_by_prefix("sam") == "sam"
    assert repo.find_by_prefix("sam@") == "sam@club.org"
    assert repo.find_by_prefix("zed") is None


def test_unknown_address_raises_member_not_found():
    _, repo = _repo()
    with pytest.raises(MemberNotFound):
        repo.read_check_in("ghost@club.org")


def test_open_week_inserts_new_current_column_and_keeps_history():
    store, repo = _repo()
    repo.create_member("alice@club.org", hour_requirement="6:00:00")
    repo.open_week(datetime(2025, 3, 3))
    repo.write_current_week("alice@club.org", logged="02:00:00", note="Logged 02:00:00 from admin for: N/A")

    repo.open_week(datetime(2025, 3, 10))

    assert store.get_display(HEADER_ROW, CURRENT_WEEK_COL) == "2025-03-10"
    assert repo.read_week_marker() == datetime(2025, 3, 10)

    row = repo.get_row("alice@club.org")
    assert [w.logged for w in row.weekly_log] == [timedelta(hours=2), timedelta(0)]
    assert row.weekly_log[0].week_label == datetime(2025, 3, 3)
    assert row.weekly_log[0].notes == "Logged 02:00:00 from admin for: N/A"
    assert row.current_week.notes == ""


def test_member_added_later_has_no_older_weeks():
    _, repo = _repo()
    repo.create_member("alice@club.org", hour_requirement="6:00:00")
    repo.open_week(datetime(2025, 3, 3))
    repo.open_week(datetime(2025, 3, 10))
    repo.create_member("bob@club.org", hour_requirement="6:00:00")

    assert len(repo.get_row("alice@club.org").weekly_log) == 2
    assert len(repo.get_row("bob@club.org").weekly_log) == 1


def test_check_in_cell_round_trip_and_checked_in_listing():
    _, repo = _repo()
    repo.create_member("alice@club.org", hour_requirement="6:00:00")
    repo.create_member("bob@club.org", hour_requirement="6:00:00")
    moment = datetime(2025, 3, 3, 15, 0, 0)

    repo.write_check_in("bob@club.org", moment)

    assert repo.read_check_in("bob@club.org") == moment
    assert repo.checked_in() == [("bob@club.org", moment)]

    repo.clear_check_in("bob@club.org")
    assert repo.checked_in() == []


def test_increment_timeouts():
    _, repo = _repo()
    repo.create_member("alice@club.org", hour_requirement="6:00:00")
    assert repo.increment_timeouts("alice@club.org") == 1
    assert repo.increment_timeouts("alice@club.org") == 2
    assert repo.get_row("alice@club.org").timeout_count == 2
