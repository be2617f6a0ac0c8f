from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..access_events.model import AccessPointSegment
from ..access_events.pairer import main_entry_times
from ..common.time_value import ZERO, Time
from ..employees.department_model import Department
from ..leaves.model import Leave
from ..regularizations.model import Regularization
from .calendar import classify
from .factory import DayStrategyFactory
from .model import PerDayAttendanceRecord


def find_regularization(
    regularizations: Iterable[Regularization], *, employee_id: int, work_date: date
) -> Optional[Regularization]:
    for r in regularizations:
        if r.employee_id == employee_id and r.work_date == work_date:
            return r
    return None


def is_on_leave(leaves: Iterable[Leave], *, employee_id: int, work_date: date) -> bool:
    return any(
        lv.employee_id == employee_id and lv.leave_date == work_date and lv.excuses_attendance for lv in leaves
    )


class DailyAggregator:
    """Folds one day's segments, leaves and regularizations into a PerDayAttendanceRecord.

    Stateless: the same inputs always give the same record.
    """

    def __init__(self, *, strategy_factory: DayStrategyFactory | None = None):
        self._factory = strategy_factory or DayStrategyFactory()

    def aggregate(
        self,
        *,
        employee_id: int,
        work_date: date,
        department: Department,
        segments: Sequence[AccessPointSegment],
        leaves: Sequence[Leave] = (),
        regularizations: Sequence[Regularization] = (),
    ) -> PerDayAttendanceRecord:
        regularization = find_regularization(regularizations, employee_id=employee_id, work_date=work_date)
        day_status = classify(work_date, department, regularization)

        time_in, time_out = main_entry_times(segments)
        if regularization is not None:
            if regularization.time_in is not None:
                time_in = regularization.time_in
            if regularization.time_out is not None:
                time_out = regularization.time_out

        working_hours = ZERO
        if time_in.is_present and time_out.is_present:
            working_hours = Time.subtract(time_out, time_in)

        decision = self._factory.for_status(day_status).decide(
            time_in=time_in,
            time_out=time_out,
            working_hours=working_hours,
            department=department,
        )

        return PerDayAttendanceRecord(
            work_date=work_date,
            time_in=time_in,
            time_out=time_out,
            working_hours=working_hours,
            over_time=decision.over_time,
            late_by=decision.late_by,
            day_status=day_status,
            on_leave=is_on_leave(leaves, employee_id=employee_id, work_date=work_date),
            regularized=regularization is not None,
        )
