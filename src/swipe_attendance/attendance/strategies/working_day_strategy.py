from __future__ import annotations

from ...common.time_value import ZERO, Time
from ...employees.department_model import Department
from .base import DayDecision, DayStrategy


class WorkingDayStrategy(DayStrategy):
    """Lateness against shift start, overtime past shift end (both floored at zero)."""

    def decide(self, *, time_in: Time, time_out: Time, working_hours: Time, department: Department) -> DayDecision:
        late_by = ZERO
        if department.shift_start is not None and time_in.is_present:
            late_by = Time.subtract(time_in, department.shift_start)

        over_time = ZERO
        if department.shift_end is not None and time_out.is_present:
            over_time = Time.subtract(time_out, department.shift_end)

        return DayDecision(late_by=late_by, over_time=over_time)
