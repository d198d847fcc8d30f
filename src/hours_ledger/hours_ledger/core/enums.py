from __future__ import annotations

from enum import Enum


class CheckState(str, Enum):
    """Trạng thái check-in của một dòng sổ giờ."""

    CHECKED_OUT = "CHECKED_OUT"
    CHECKED_IN = "CHECKED_IN"


class Direction(str, Enum):
    """Hướng gửi từ biểu mẫu (form)."""

    IN = "In"
    OUT = "Out"


class AdminAction(str, Enum):
    CHECK_IN = "check-in"
    CHECK_OUT = "check-out"
    MODIFY_HOURS = "modify-hours"
    RESET_TIMEOUTS = "reset-timeouts"
    TIMEOUT_MEMBER = "timeout-member"
    EXEMPT_FROM_WEEK = "exempt-from-week"
    SET_REQUIREMENT = "set-requirement"


class ErrorKind(str, Enum):
    """Loại lỗi nghiệp vụ trả về trong Result."""

    OPERATION_CANCELED = "OPERATION_CANCELED"
    MEMBER_NOT_FOUND = "MEMBER_NOT_FOUND"
    INVALID_DURATION = "INVALID_DURATION"
    INVALID_ACCRUAL = "INVALID_ACCRUAL"
    NOT_CHECKED_IN = "NOT_CHECKED_IN"
    VALIDATION = "VALIDATION"
