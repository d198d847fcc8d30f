from .enums import ErrorKind


class DomainError(Exception):
    """Base exception for business rule violations."""

    kind = ErrorKind.VALIDATION


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class OperationCanceled(DomainError):
    """Raised when an interactive prompt is cancelled before any mutation."""

    kind = ErrorKind.OPERATION_CANCELED

    def __init__(self, message: str = "Operation canceled"):
        super().__init__(message)


class MemberNotFound(DomainError):
    """Raised when a selector matches no member address."""

    kind = ErrorKind.MEMBER_NOT_FOUND


class InvalidDuration(ValidationError):
    """Raised when duration text is not H:M:S with numeric components."""

    kind = ErrorKind.INVALID_DURATION


class InvalidAccrual(ValidationError):
    """Raised when an hours adjustment would leave a malformed or negative week."""

    kind = ErrorKind.INVALID_ACCRUAL


class NotCheckedIn(DomainError):
    """Raised when an admin path requires a checked-in member."""

    kind = ErrorKind.NOT_CHECKED_IN


class AuthorizationError(Exception):
    """Raised when an actor is not on the editor list."""
