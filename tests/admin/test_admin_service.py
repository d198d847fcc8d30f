from datetime import datetime, timedelta

import pytest

from src.hours_ledger.hours_ledger.core.enums import AdminAction
from src.hours_ledger.hours_ledger.core.exceptions import (
    InvalidAccrual,
    InvalidDuration,
    MemberNotFound,
    NotCheckedIn,
    OperationCanceled,
)
from src.hours_ledger.hours_ledger.prompts.prompter import MappingPrompter

ADDRESS = "alice@club.org"
T0 = datetime(2025, 3, 3, 15, 0, 0)


def _with_logged_hour(ledger):
    ledger.attendance.ensure_member(ADDRESS)
    ledger.attendance.add_hours(ADDRESS, timedelta(hours=1), source="admin", metadata="seed", now=T0)


def test_select_member_by_address_prefix(ledger):
    _with_logged_hour(ledger)
    receipt = ledger.admin.run(AdminAction.CHECK_IN, MappingPrompter({"member": "ali"}), now=T0)

    assert receipt.message == f"{ADDRESS} checked in"
    assert ledger.repo.read_check_in(ADDRESS) == T0


def test_admin_check_in_creates_unknown_member(ledger):
    _with_logged_hour(ledger)

    receipt = ledger.admin.run(AdminAction.CHECK_IN, MappingPrompter({"member": "newbie@club.org"}), now=T0)

    assert receipt.message == "newbie@club.org checked in"
    assert ledger.repo.exists("newbie@club.org")
    assert ledger.repo.read_check_in("newbie@club.org") == T0
    assert ledger.repo.read_check_in(ADDRESS) is None


def test_unknown_member_prefix_for_other_commands(ledger):
    _with_logged_hour(ledger)
    with pytest.raises(MemberNotFound):
        ledger.admin.run(AdminAction.CHECK_OUT, MappingPrompter({"member": "zed"}), now=T0)
    with pytest.raises(MemberNotFound):
        ledger.admin.run(AdminAction.MODIFY_HOURS, MappingPrompter({"member": "zed", "hours": "1:00:00"}), now=T0)
    assert not ledger.repo.exists("zed")


def test_empty_member_selection_cancels(ledger):
    _with_logged_hour(ledger)
    with pytest.raises(OperationCanceled):
        ledger.admin.run(AdminAction.CHECK_IN, MappingPrompter({"member": ""}), now=T0)


def test_admin_re_check_in_uses_admin_notes(ledger):
    _with_logged_hour(ledger)
    ledger.attendance.check_in(ADDRESS, now=T0)

    ledger.admin.run(
        AdminAction.CHECK_IN,
        MappingPrompter({"member": "alice", "notes": "forgot to check out"}),
        now=T0 + timedelta(hours=1),
    )

    week_text, note = ledger.repo.read_current_week(ADDRESS)
    assert week_text == "02:00:00"
    assert note.endswith("for: Admin nt: forgot to check out")
    assert ledger.repo.read_check_in(ADDRESS) == T0 + timedelta(hours=1)


def test_cancelled_re_check_in_notes_leave_no_change(ledger):
    _with_logged_hour(ledger)
    ledger.attendance.check_in(ADDRESS, now=T0)
    before = ledger.store.snapshot()

    with pytest.raises(OperationCanceled):
        ledger.admin.run(AdminAction.CHECK_IN, MappingPrompter({"member": "alice"}), now=T0 + timedelta(hours=1))

    assert ledger.store.snapshot() == before


def test_admin_check_out_requires_check_in(ledger):
    _with_logged_hour(ledger)
    with pytest.raises(NotCheckedIn):
        ledger.admin.run(AdminAction.CHECK_OUT, MappingPrompter({"member": "alice", "notes": "x"}), now=T0)


def test_admin_check_out(ledger):
    _with_logged_hour(ledger)
    ledger.attendance.check_in(ADDRESS, now=T0)

    receipt = ledger.admin.run(
        AdminAction.CHECK_OUT,
        MappingPrompter({"member": "alice", "notes": "n/a"}),
        now=T0 + timedelta(minutes=45),
    )

    assert receipt.message == f"{ADDRESS} checked out"
    week_text, note = ledger.repo.read_current_week(ADDRESS)
    assert week_text == "01:45:00"
    assert note.endswith("for: Admin nt: N/A")


def test_modify_hours_positive_and_negative(ledger):
    _with_logged_hour(ledger)

    receipt = ledger.admin.run(
        AdminAction.MODIFY_HOURS,
        MappingPrompter({"member": "alice", "hours": "-0:30:00", "notes": "double counted"}),
        now=T0,
    )

    assert receipt.message == f"{ADDRESS} modified by -00:30:00"
    week_text, note = ledger.repo.read_current_week(ADDRESS)
    assert week_text == "00:30:00"
    assert note.endswith("Logged -00:30:00 from admin for: Admin nt: double counted")


def test_modify_hours_cannot_go_below_zero(ledger):
    _with_logged_hour(ledger)
    with pytest.raises(InvalidAccrual):
        ledger.admin.run(
            AdminAction.MODIFY_HOURS,
            MappingPrompter({"member": "alice", "hours": "-2:00:00", "notes": ""}),
            now=T0,
        )
    assert ledger.repo.read_current_week(ADDRESS)[0] == "01:00:00"


def test_modify_hours_rejects_malformed_modifier_before_mutation(ledger):
    _with_logged_hour(ledger)
    before = ledger.store.snapshot()
    with pytest.raises(InvalidDuration):
        ledger.admin.run(
            AdminAction.MODIFY_HOURS,
            MappingPrompter({"member": "alice", "hours": "1h30", "notes": ""}),
            now=T0,
        )
    assert ledger.store.snapshot() == before


def test_modify_hours_cancelled_notes_leave_no_change(ledger):
    _with_logged_hour(ledger)
    before = ledger.store.snapshot()
    with pytest.raises(OperationCanceled):
        ledger.admin.run(AdminAction.MODIFY_HOURS, MappingPrompter({"member": "alice", "hours": "1:00:00"}), now=T0)
    assert ledger.store.snapshot() == before


def test_timeout_member(ledger):
    _with_logged_hour(ledger)
    ledger.attendance.check_in(ADDRESS, now=T0)

    ledger.admin.run(
        AdminAction.TIMEOUT_MEMBER,
        MappingPrompter({"member": "alice", "notes": "left without checking out"}),
        now=T0 + timedelta(hours=4),
    )

    row = ledger.repo.get_row(ADDRESS)
    assert row.timeout_count == 1
    assert row.check_in_time is None
    assert row.current_week.logged == timedelta(hours=1, minutes=30)
    assert row.current_week.notes.endswith("for: Admin timeout nt: left without checking out")


def test_timeout_member_requires_check_in(ledger):
    _with_logged_hour(ledger)
    with pytest.raises(NotCheckedIn):
        ledger.admin.run(AdminAction.TIMEOUT_MEMBER, MappingPrompter({"member": "alice", "notes": ""}), now=T0)


def test_reset_timeouts_reports_members(ledger):
    _with_logged_hour(ledger)
    ledger.attendance.check_in(ADDRESS, now=T0)

    receipt = ledger.admin.run(AdminAction.RESET_TIMEOUTS, MappingPrompter(), now=T0 + timedelta(hours=1))

    assert receipt.addresses == [ADDRESS]
    assert receipt.message == f"1 members have been re-checked in:\n{ADDRESS}"


def test_exempt_from_week_credits_current_week(ledger):
    _with_logged_hour(ledger)

    ledger.admin.run(
        AdminAction.EXEMPT_FROM_WEEK,
        MappingPrompter({"member": "alice", "hours": "5:00:00", "notes": "competition travel"}),
        now=T0,
    )

    week_text, note = ledger.repo.read_current_week(ADDRESS)
    assert week_text == "06:00:00"
    assert note.endswith("Logged 05:00:00 from exempt for: Exempt nt: competition travel")


def test_set_requirement(ledger):
    _with_logged_hour(ledger)

    ledger.admin.run(AdminAction.SET_REQUIREMENT, MappingPrompter({"member": "alice", "hours": "4:30:00"}), now=T0)

    assert ledger.repo.get_row(ADDRESS).hour_requirement == timedelta(hours=4, minutes=30)


def test_set_requirement_rejects_negative(ledger):
    _with_logged_hour(ledger)
    with pytest.raises(InvalidDuration):
        ledger.admin.run(AdminAction.SET_REQUIREMENT, MappingPrompter({"member": "alice", "hours": "-1:00:00"}), now=T0)
