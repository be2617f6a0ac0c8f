from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, today_local
from ..common.logger import get_logger
from ..container import Container
from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.exceptions import DomainError, NotFoundError, RepositoryUnavailable, ValidationError

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.attendance_report_service

    def _error(e: DomainError):
        if isinstance(e, ValidationError):
            status = 400
        elif isinstance(e, NotFoundError):
            status = 404
        elif isinstance(e, RepositoryUnavailable):
            logger.error("Repository unavailable: %s", e)
            status = 503
        else:
            status = 500
        return jsonify({"success": False, "message": str(e)}), status

    def _date_arg(name: str):
        value = (request.args.get(name) or "").strip()
        if not value:
            return today_local()
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError(f"{name} must be YYYY-MM-DD")

    @app.route("/api/employees/<int:employee_id>/attendance", methods=["GET"], endpoint="api_attendance_report")
    def api_attendance_report(employee_id: int):
        try:
            start = _date_arg("start")
            end = _date_arg("end")
            report = service.report(employee_id, start, end)
        except DomainError as e:
            return _error(e)
        return jsonify({"success": True, "report": report.to_dict()}), 200

    @app.route(
        "/api/employees/<int:employee_id>/attendance/recent", methods=["GET"], endpoint="api_attendance_recent"
    )
    def api_attendance_recent(employee_id: int):
        default_days = int(app.config.get("REPORT_DEFAULT_DAYS", DEFAULT_REPORT_DAYS))
        try:
            try:
                days = int(request.args.get("days") or default_days)
            except ValueError:
                raise ValidationError("days must be an integer")
            report = service.recent_days(employee_id, days)
        except DomainError as e:
            return _error(e)
        return jsonify({"success": True, "report": report.to_dict()}), 200

    @app.route(
        "/api/employees/<int:employee_id>/access-points/<day>", methods=["GET"], endpoint="api_access_point_details"
    )
    def api_access_point_details(employee_id: int, day: str):
        try:
            try:
                work_date = parse_iso_date(day)
            except ValueError:
                raise ValidationError("date must be YYYY-MM-DD")
            segments = service.access_point_details(employee_id, work_date)
        except DomainError as e:
            return _error(e)

        rows = [
            {
                "access_point": s.category.value,
                "time_in": str(s.time_in),
                "time_out": str(s.time_out) if s.time_out.is_present else None,
                "time_spend": str(s.time_spend),
            }
            for s in segments
        ]
        return jsonify({"success": True, "date": work_date.strftime("%Y-%m-%d"), "segments": rows}), 200
