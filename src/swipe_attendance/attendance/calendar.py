from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.enums import DayStatus
from ..employees.department_model import Department
from ..regularizations.model import Regularization

SATURDAY = 5
SUNDAY = 6


def saturday_ordinal(day: date) -> int:
    """Which Saturday of the month ``day`` is (1-indexed)."""
    return (day.day - 1) // 7 + 1


def classify(day: date, department: Department, regularization: Optional[Regularization] = None) -> DayStatus:
    """WorkingDay/NonWorkingDay under the department's calendar.

    A regularization only overrides times, it never changes the label.
    """
    # TODO: decide whether a regularization may promote a NonWorkingDay to WorkingDay.
    weekday = day.weekday()
    if weekday == SUNDAY:
        return DayStatus.NON_WORKING_DAY
    if weekday == SATURDAY:
        if saturday_ordinal(day) in department.working_saturdays:
            return DayStatus.WORKING_DAY
        return DayStatus.NON_WORKING_DAY
    return DayStatus.WORKING_DAY
