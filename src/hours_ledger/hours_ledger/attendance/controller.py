from __future__ import annotations

from datetime import datetime

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_check_in, format_week_label, now_local
from ..common.duration import format_duration
from ..common.http import result_response
from ..core.enums import Direction
from ..core.exceptions import DomainError
from ..core.result import Result
from ..container import Container
from ..events import FormSubmission, PeriodicTick

# Google Forms response timestamps, then ISO 8601
_FORM_TIMESTAMP_FORMATS = ("%m/%d/%Y %H:%M:%S", "%Y-%m-%d %H:%M:%S")


def _parse_timestamp(value) -> datetime:
    if not value:
        return now_local()
    for fmt in _FORM_TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(str(value).strip(), fmt)
        except ValueError:
            continue
    return datetime.fromisoformat(str(value).strip())


def register(app: Flask, container: Container) -> None:
    dispatcher = container.dispatcher

    @app.post("/forms/submit")
    def form_submit():
        data = request.get_json(silent=True) or {}
        try:
            event = FormSubmission(
                timestamp=_parse_timestamp(data.get("timestamp")),
                address=str(data.get("address", "")).strip(),
                direction=Direction(str(data.get("direction", "")).strip().title()),
                metadata=str(data.get("metadata") or ""),
            )
        except ValueError as e:
            return jsonify({"success": False, "message": f"Invalid form submission: {e}"}), 400

        result = dispatcher.dispatch(event)
        return result_response(result, address=result.value)

    @app.post("/tick")
    def tick():
        result = dispatcher.dispatch(PeriodicTick())
        report = result.value
        return result_response(
            result,
            timed_out=report.timed_out if report else [],
            failed=report.failed if report else [],
            missed_hours=report.missed_hours if report else {},
        )

    @app.get("/members/<path:address>/missed-hours")
    def missed_hours(address: str):
        result = dispatcher.missed_hours(address)
        return result_response(result, address=address, missed_hours=result.value)

    @app.get("/members/<path:address>")
    def member(address: str):
        try:
            row = container.ledger_repo.get_row(address)
        except DomainError as e:
            return result_response(Result.from_error(e), address=address)
        if row is None:
            return jsonify({"success": False, "message": f"Address '{address}' not found"}), 404

        return jsonify(
            {
                "success": True,
                "address": row.address,
                "state": row.state.value,
                "check_in_time": format_check_in(row.check_in_time) if row.check_in_time else None,
                "hour_requirement": format_duration(row.hour_requirement),
                "timeout_count": row.timeout_count,
                "total_hours": format_duration(row.total_hours),
                "weeks": [
                    {
                        "week": format_week_label(w.week_label) if w.week_label else None,
                        "logged": format_duration(w.logged),
                        "notes": w.notes,
                    }
                    for w in reversed(row.weekly_log)
                ],
            }
        )
