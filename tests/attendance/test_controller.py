from __future__ import annotations

from datetime import date, datetime
from types import SimpleNamespace

import pytest
from flask import Flask

from swipe_attendance.access_events.model import AccessEvent
from swipe_attendance.attendance.controller import register
from swipe_attendance.attendance.service import AttendanceReportService
from swipe_attendance.core.enums import AccessPointCategory, Departments
from swipe_attendance.core.exceptions import RepositoryUnavailable, UnknownDepartment
from swipe_attendance.database.memory import (
    InMemoryAccessEvents,
    InMemoryDepartments,
    InMemoryEmployees,
    InMemoryLeaves,
    InMemoryRegularizations,
)
from swipe_attendance.employees.model import Employee


class DownAccessEvents(InMemoryAccessEvents):
    def get_for_day(self, employee_id, work_date):
        raise RepositoryUnavailable("database is down")


class UnlistedDepartmentEmployees(InMemoryEmployees):
    def get_by_id(self, employee_id):
        raise UnknownDepartment("HR")


def make_client(events=None, employees=None):
    events = events if events is not None else InMemoryAccessEvents(
        [
            AccessEvent(666, datetime(2019, 2, 2, 12, 10), AccessPointCategory.MAIN),
            AccessEvent(666, datetime(2019, 2, 2, 16, 11), AccessPointCategory.MAIN),
            AccessEvent(666, datetime(2019, 2, 2, 13, 0), AccessPointCategory.GYMNASIUM),
        ]
    )
    service = AttendanceReportService(
        events,
        employees or InMemoryEmployees({666: Employee(employee_id=666, department=Departments.SOFTWARE)}),
        InMemoryDepartments.with_defaults(),
        InMemoryRegularizations(),
        InMemoryLeaves(),
    )
    app = Flask(__name__)
    app.config["REPORT_DEFAULT_DAYS"] = 3
    register(app, SimpleNamespace(attendance_report_service=service))
    return app.test_client()


def test_report_endpoint_returns_records():
    resp = make_client().get("/api/employees/666/attendance?start=2019-02-01&end=2019-02-03")

    assert resp.status_code == 200
    body = resp.get_json()
    records = body["report"]["records"]
    assert [r["date"] for r in records] == ["2019-02-01", "2019-02-02", "2019-02-03"]
    assert records[1]["working_hours"] == "04:01"
    assert records[1]["over_time"] == "04:01"
    assert records[1]["day_status"] == "NonWorkingDay"
    assert records[0]["time_in"] is None


def test_report_endpoint_rejects_reversed_range():
    resp = make_client().get("/api/employees/666/attendance?start=2019-02-05&end=2019-02-01")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_report_endpoint_rejects_bad_date():
    resp = make_client().get("/api/employees/666/attendance?start=02/01/2019&end=2019-02-01")

    assert resp.status_code == 400


def test_unknown_employee_is_404():
    resp = make_client().get("/api/employees/1/attendance?start=2019-02-01&end=2019-02-01")

    assert resp.status_code == 404


def test_employee_in_unlisted_department_is_404():
    resp = make_client(employees=UnlistedDepartmentEmployees()).get(
        "/api/employees/5/attendance?start=2019-02-01&end=2019-02-01"
    )

    assert resp.status_code == 404
    assert "HR" in resp.get_json()["message"]


def test_repository_outage_is_503():
    resp = make_client(DownAccessEvents()).get("/api/employees/666/attendance?start=2019-02-01&end=2019-02-01")

    assert resp.status_code == 503
    assert "2019-02-01" in resp.get_json()["message"]


def test_recent_uses_configured_default_days(monkeypatch):
    monkeypatch.setattr("swipe_attendance.attendance.service.today_local", lambda: date(2019, 2, 3))

    resp = make_client().get("/api/employees/666/attendance/recent")

    assert resp.status_code == 200
    assert len(resp.get_json()["report"]["records"]) == 3


@pytest.mark.parametrize("days", ["0", "abc"])
def test_recent_rejects_bad_days(days):
    resp = make_client().get(f"/api/employees/666/attendance/recent?days={days}")

    assert resp.status_code == 400


def test_access_point_details_endpoint():
    resp = make_client().get("/api/employees/666/access-points/2019-02-02")

    assert resp.status_code == 200
    segments = resp.get_json()["segments"]
    assert [s["access_point"] for s in segments] == ["Main", "Gymnasium"]
    assert segments[0]["time_spend"] == "04:01"
    assert segments[1]["time_out"] is None
    assert segments[1]["time_spend"] == "00:00"
