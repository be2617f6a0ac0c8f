"""Example: run the report service directly (no Flask, no MySQL).

Controllers stay thin; all the attendance rules live in the service layer.
"""

from datetime import date, datetime

from swipe_attendance.access_events.model import AccessEvent
from swipe_attendance.attendance.service import AttendanceReportService
from swipe_attendance.core.enums import AccessPointCategory, Departments
from swipe_attendance.database.memory import (
    InMemoryAccessEvents,
    InMemoryDepartments,
    InMemoryEmployees,
    InMemoryLeaves,
    InMemoryRegularizations,
)
from swipe_attendance.employees.model import Employee


def main():
    events = InMemoryAccessEvents(
        [
            AccessEvent(666, datetime(2019, 2, 2, 12, 10), AccessPointCategory.MAIN),
            AccessEvent(666, datetime(2019, 2, 2, 16, 11), AccessPointCategory.MAIN),
        ]
    )
    service = AttendanceReportService(
        events,
        InMemoryEmployees({666: Employee(employee_id=666, department=Departments.SOFTWARE)}),
        InMemoryDepartments.with_defaults(),
        InMemoryRegularizations(),
        InMemoryLeaves(),
    )
    report = service.report(666, date(2019, 2, 1), date(2019, 2, 3))
    for row in report.to_dict()["records"]:
        print(row)


if __name__ == "__main__":
    main()
