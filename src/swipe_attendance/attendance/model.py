from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Tuple

from ..common.time_value import ZERO, Time
from ..core.enums import DayStatus


@dataclass(frozen=True)
class PerDayAttendanceRecord:
    """Domain entity: attendance outcome for one employee on one date."""

    work_date: date
    time_in: Time
    time_out: Time
    working_hours: Time
    over_time: Time
    late_by: Time
    day_status: DayStatus
    on_leave: bool = False
    regularized: bool = False

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.strftime("%Y-%m-%d"),
            "time_in": str(self.time_in) if self.time_in.is_present else None,
            "time_out": str(self.time_out) if self.time_out.is_present else None,
            "working_hours": str(self.working_hours),
            "over_time": str(self.over_time),
            "late_by": str(self.late_by),
            "day_status": self.day_status.value,
            "on_leave": self.on_leave,
            "regularized": self.regularized,
        }


@dataclass(frozen=True)
class AttendanceReport:
    """Ordered per-day records for one employee over [start, end].

    ``complete`` is False when the report was cancelled before reaching ``end``;
    the records present are still one per day, ascending, starting at ``start``.
    """

    employee_id: int
    start: date
    end: date
    records: Tuple[PerDayAttendanceRecord, ...]
    complete: bool = True

    def total_working_hours(self) -> Time:
        return sum((r.working_hours for r in self.records), ZERO)

    def total_overtime(self) -> Time:
        return sum((r.over_time for r in self.records), ZERO)

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "start": self.start.strftime("%Y-%m-%d"),
            "end": self.end.strftime("%Y-%m-%d"),
            "complete": self.complete,
            "total_working_hours": str(self.total_working_hours()),
            "total_overtime": str(self.total_overtime()),
            "records": [r.to_dict() for r in self.records],
        }
