from __future__ import annotations

import logging
from typing import Any

from flask import jsonify

from ..core.enums import ErrorKind
from ..core.result import Result

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    ErrorKind.OPERATION_CANCELED: 200,
    ErrorKind.MEMBER_NOT_FOUND: 404,
    ErrorKind.INVALID_DURATION: 400,
    ErrorKind.INVALID_ACCRUAL: 400,
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_CHECKED_IN: 409,
}


def result_response(result: Result[Any], **payload: Any):
    """Render a Result as ``(json, status)``; cancellation is informational."""
    if result.ok:
        return jsonify({"success": True, "message": result.message, **payload}), 200

    if not result.canceled:
        logger.warning("Rejected: %s (%s)", result.message, result.error.value)
    return (
        jsonify(
            {
                "success": False,
                "canceled": result.canceled,
                "error": result.error.value,
                "message": result.message,
            }
        ),
        STATUS_BY_ERROR.get(result.error, 400),
    )
