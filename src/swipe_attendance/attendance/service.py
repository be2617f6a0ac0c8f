from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator, Optional, Sequence

from ..access_events.model import AccessPointSegment
from ..access_events.pairer import pair_access_events
from ..access_events.repository import AccessEventRepository
from ..common.datetime_utils import iter_dates, today_local
from ..common.logger import get_logger
from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.exceptions import InvalidRange, RepositoryUnavailable, UnknownDepartment, UnknownEmployee, ValidationError
from ..employees.department_model import Department
from ..employees.department_repository import DepartmentRepository
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..leaves.model import Leave
from ..leaves.repository import LeaveRepository
from ..regularizations.model import Regularization
from ..regularizations.repository import RegularizationRepository
from .aggregator import DailyAggregator
from .model import AttendanceReport, PerDayAttendanceRecord

logger = get_logger(__name__)


@dataclass(frozen=True)
class _EmployeeContext:
    employee: Employee
    department: Department
    leaves: Sequence[Leave]
    regularizations: Sequence[Regularization]


class AttendanceReportService:
    """Builds day-by-day attendance reports from the repository collaborators."""

    def __init__(
        self,
        access_events: AccessEventRepository,
        employees: EmployeeRepository,
        departments: DepartmentRepository,
        regularizations: RegularizationRepository,
        leaves: LeaveRepository,
        *,
        aggregator: DailyAggregator | None = None,
    ):
        self._access_events = access_events
        self._employees = employees
        self._departments = departments
        self._regularizations = regularizations
        self._leaves = leaves
        self._aggregator = aggregator or DailyAggregator()

    def _load_context(self, employee_id: int) -> _EmployeeContext:
        try:
            employee = self._employees.get_by_id(employee_id)
            if not employee:
                raise UnknownEmployee(employee_id)

            department = self._departments.get_by_id(employee.department)
            if not department:
                raise UnknownDepartment(employee.department.value)

            leaves = list(self._leaves.list_for_employee(employee_id) or [])
            regularizations = list(self._regularizations.get_for_employee(employee_id) or [])
        except RepositoryUnavailable as e:
            raise RepositoryUnavailable(str(e.args[0]), employee_id=employee_id) from e

        return _EmployeeContext(
            employee=employee,
            department=department,
            leaves=leaves,
            regularizations=regularizations,
        )

    def _fetch_segments(self, employee_id: int, work_date: date) -> list[AccessPointSegment]:
        try:
            events = self._access_events.get_for_day(employee_id, work_date) or []
        except RepositoryUnavailable as e:
            raise e.for_day(employee_id=employee_id, work_date=work_date) from e
        return pair_access_events(events)

    def iter_days(
        self,
        employee_id: int,
        start: date,
        end: date,
        *,
        cancel: Optional[threading.Event] = None,
    ) -> Iterator[PerDayAttendanceRecord]:
        """Validate, then lazily yield one record per date in [start, end].

        When ``cancel`` is set, iteration stops before the next day is fetched.
        """
        if start > end:
            raise InvalidRange(start, end)
        context = self._load_context(employee_id)
        return self._iter_days(context, start, end, cancel)

    def _iter_days(
        self,
        context: _EmployeeContext,
        start: date,
        end: date,
        cancel: Optional[threading.Event] = None,
    ) -> Iterator[PerDayAttendanceRecord]:
        employee_id = context.employee.employee_id
        for work_date in iter_dates(start, end):
            if cancel is not None and cancel.is_set():
                logger.warning("Attendance cancelled employee=%s before %s", employee_id, work_date)
                return
            segments = self._fetch_segments(employee_id, work_date)
            logger.debug("employee=%s date=%s segments=%d", employee_id, work_date, len(segments))
            yield self._aggregator.aggregate(
                employee_id=employee_id,
                work_date=work_date,
                department=context.department,
                segments=segments,
                leaves=context.leaves,
                regularizations=context.regularizations,
            )

    def report(
        self,
        employee_id: int,
        start: date,
        end: date,
        *,
        cancel: Optional[threading.Event] = None,
    ) -> AttendanceReport:
        logger.info("Building attendance report employee=%s range=%s..%s", employee_id, start, end)

        records = list(self.iter_days(employee_id, start, end, cancel=cancel))
        complete = len(records) == (end - start).days + 1

        logger.info("Attendance report ready employee=%s days=%d complete=%s", employee_id, len(records), complete)
        return AttendanceReport(
            employee_id=employee_id,
            start=start,
            end=end,
            records=tuple(records),
            complete=complete,
        )

    def recent_days(self, employee_id: int, days: int = DEFAULT_REPORT_DAYS, *, today: date | None = None) -> AttendanceReport:
        """Report for the last ``days`` calendar days ending today."""
        if int(days) < 1:
            raise ValidationError("days must be at least 1")
        end = today or today_local()
        start = end - timedelta(days=int(days) - 1)
        return self.report(employee_id, start, end)

    def access_point_details(self, employee_id: int, work_date: date) -> list[AccessPointSegment]:
        """Per-category in/out segments for a single day."""
        return self._fetch_segments(employee_id, work_date)
