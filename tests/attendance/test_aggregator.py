from datetime import date, datetime

from swipe_attendance.access_events.model import AccessEvent
from swipe_attendance.access_events.pairer import pair_access_events
from swipe_attendance.attendance.aggregator import DailyAggregator
from swipe_attendance.common.time_value import ZERO, Time
from swipe_attendance.core.enums import AccessPointCategory, DayStatus, Departments, LeaveStatus
from swipe_attendance.employees.department_model import Department
from swipe_attendance.leaves.model import Leave
from swipe_attendance.regularizations.model import Regularization

MAIN = AccessPointCategory.MAIN


def main_segments(day: date, *hhmm: str):
    events = [
        AccessEvent(employee_id=1, timestamp=datetime.combine(day, datetime.strptime(v, "%H:%M").time()), category=MAIN)
        for v in hhmm
    ]
    return pair_access_events(events)


def aggregate(day: date, department: Department, segments, **kwargs):
    return DailyAggregator().aggregate(employee_id=1, work_date=day, department=department, segments=segments, **kwargs)


def test_non_working_day_counts_everything_as_overtime():
    day = date(2019, 2, 2)
    record = aggregate(day, Department.with_default_policy(Departments.SOFTWARE), main_segments(day, "12:10", "16:11"))

    assert record.time_in == Time(12, 10)
    assert record.time_out == Time(16, 11)
    assert record.working_hours == Time(4, 1)
    assert record.over_time == Time(4, 1)
    assert record.late_by == ZERO
    assert record.day_status == DayStatus.NON_WORKING_DAY


def test_working_day_late_and_overtime_against_shift():
    day = date(2019, 2, 4)
    department = Department(department=Departments.SOFTWARE, shift_start=Time(9, 0), shift_end=Time(18, 0))

    record = aggregate(day, department, main_segments(day, "09:25", "19:10"))

    assert record.day_status == DayStatus.WORKING_DAY
    assert record.working_hours == Time(9, 45)
    assert record.late_by == Time(0, 25)
    assert record.over_time == Time(1, 10)


def test_working_day_early_arrival_and_early_exit_floor_at_zero():
    day = date(2019, 2, 4)
    department = Department(department=Departments.SOFTWARE, shift_start=Time(9, 0), shift_end=Time(18, 0))

    record = aggregate(day, department, main_segments(day, "08:40", "17:00"))

    assert record.late_by == ZERO
    assert record.over_time == ZERO


def test_working_day_without_configured_shift_has_no_late_or_overtime():
    day = date(2019, 2, 4)
    record = aggregate(day, Department.with_default_policy(Departments.DESIGN), main_segments(day, "11:00", "22:00"))

    assert record.working_hours == Time(11, 0)
    assert record.late_by == ZERO
    assert record.over_time == ZERO


def test_day_without_swipes_is_all_zero():
    day = date(2019, 2, 4)
    record = aggregate(day, Department.with_default_policy(Departments.SERVICE), [])

    assert (record.time_in, record.time_out, record.working_hours) == (ZERO, ZERO, ZERO)
    assert record.time_in.is_present is False
    assert record.day_status == DayStatus.WORKING_DAY


def test_open_main_segment_gives_zero_working_hours():
    day = date(2019, 2, 2)
    record = aggregate(day, Department.with_default_policy(Departments.SOFTWARE), main_segments(day, "12:10"))

    assert record.time_in == Time(12, 10)
    assert record.time_out.is_present is False
    assert record.working_hours == ZERO
    assert record.over_time == ZERO


def test_regularization_overrides_swiped_times():
    day = date(2019, 2, 4)
    department = Department(department=Departments.SOFTWARE, shift_start=Time(9, 0), shift_end=Time(18, 0))
    reg = Regularization(employee_id=1, work_date=day, time_in=Time(9, 0), time_out=Time(18, 0))

    record = aggregate(day, department, main_segments(day, "10:30", "15:00"), regularizations=[reg])

    assert record.regularized is True
    assert (record.time_in, record.time_out) == (Time(9, 0), Time(18, 0))
    assert record.working_hours == Time(9, 0)
    assert record.late_by == ZERO


def test_partial_regularization_keeps_swiped_side():
    day = date(2019, 2, 4)
    reg = Regularization(employee_id=1, work_date=day, time_out=Time(19, 0))

    record = aggregate(
        day, Department.with_default_policy(Departments.SOFTWARE), main_segments(day, "10:30"), regularizations=[reg]
    )

    assert (record.time_in, record.time_out) == (Time(10, 30), Time(19, 0))
    assert record.working_hours == Time(8, 30)


def test_regularization_for_another_day_is_ignored():
    day = date(2019, 2, 4)
    reg = Regularization(employee_id=1, work_date=date(2019, 2, 5), time_in=Time(9, 0), time_out=Time(18, 0))

    record = aggregate(
        day, Department.with_default_policy(Departments.SOFTWARE), main_segments(day, "10:00", "16:00"), regularizations=[reg]
    )

    assert record.regularized is False
    assert record.working_hours == Time(6, 0)


def test_approved_leave_flags_the_day_without_touching_numbers():
    day = date(2019, 2, 4)
    leaves = [
        Leave(leave_id=1, employee_id=1, leave_date=day, status=LeaveStatus.APPROVED),
        Leave(leave_id=2, employee_id=1, leave_date=date(2019, 2, 5), status=LeaveStatus.CANCELLED),
    ]
    department = Department.with_default_policy(Departments.SOFTWARE)

    on_leave = aggregate(day, department, [], leaves=leaves)
    cancelled = aggregate(date(2019, 2, 5), department, [], leaves=leaves)

    assert on_leave.on_leave is True
    assert on_leave.day_status == DayStatus.WORKING_DAY
    assert on_leave.working_hours == ZERO
    assert cancelled.on_leave is False


def test_reversed_regularization_never_goes_negative():
    day = date(2019, 2, 2)
    reg = Regularization(employee_id=1, work_date=day, time_in=Time(18, 0), time_out=Time(9, 0))

    record = aggregate(day, Department.with_default_policy(Departments.SOFTWARE), [], regularizations=[reg])

    assert record.working_hours == ZERO
    assert record.over_time == ZERO
    assert record.late_by == ZERO
