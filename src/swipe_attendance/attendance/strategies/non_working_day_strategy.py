from __future__ import annotations

from ...common.time_value import ZERO, Time
from ...employees.department_model import Department
from .base import DayDecision, DayStrategy


class NonWorkingDayStrategy(DayStrategy):
    """No shift expected: everything worked is overtime, nobody is late."""

    def decide(self, *, time_in: Time, time_out: Time, working_hours: Time, department: Department) -> DayDecision:
        return DayDecision(late_by=ZERO, over_time=working_hours)
