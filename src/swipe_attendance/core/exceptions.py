from __future__ import annotations

from datetime import date
from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidRange(ValidationError):
    """Raised when a report is requested with start > end."""

    def __init__(self, start: date, end: date):
        super().__init__(f"Invalid date range: {start.isoformat()} is after {end.isoformat()}")
        self.start = start
        self.end = end


class NotFoundError(DomainError):
    """Raised when a required reference cannot be found."""


class UnknownEmployee(NotFoundError):
    def __init__(self, employee_id: int):
        super().__init__(f"Employee {employee_id} does not exist")
        self.employee_id = employee_id


class UnknownDepartment(NotFoundError):
    def __init__(self, department: str):
        super().__init__(f"Department {department!r} does not exist")
        self.department = department


class RepositoryUnavailable(DomainError):
    """Transient failure of a repository call.

    Carries the employee/day being processed so callers can retry just that day.
    """

    def __init__(self, message: str, *, employee_id: Optional[int] = None, work_date: Optional[date] = None):
        super().__init__(message)
        self.employee_id = employee_id
        self.work_date = work_date

    def for_day(self, *, employee_id: int, work_date: date) -> "RepositoryUnavailable":
        return RepositoryUnavailable(str(self.args[0]), employee_id=employee_id, work_date=work_date)

    def __str__(self) -> str:
        message = str(self.args[0]) if self.args else ""
        if self.employee_id is None and self.work_date is None:
            return message
        day = self.work_date.isoformat() if self.work_date else "-"
        return f"{message} (employee={self.employee_id}, date={day})"
