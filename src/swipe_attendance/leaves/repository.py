from __future__ import annotations

from typing import Protocol, Sequence

from .model import Leave


class LeaveRepository(Protocol):
    def list_for_employee(self, employee_id: int) -> Sequence[Leave]:
        """All leaves of the employee, any status; callers filter on ``excuses_attendance``."""

        raise NotImplementedError
