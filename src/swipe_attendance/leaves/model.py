from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class Leave:
    leave_id: int
    employee_id: int
    leave_date: date
    status: LeaveStatus
    reason: Optional[str] = None

    @property
    def excuses_attendance(self) -> bool:
        return self.status in (LeaveStatus.APPROVED, LeaveStatus.REALISED)
