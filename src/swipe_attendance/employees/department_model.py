from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from ..common.time_value import Time
from ..core.constants import DEFAULT_WORKING_SATURDAYS
from ..core.enums import Departments
from ..core.exceptions import UnknownDepartment


def department_from_name(name) -> Departments:
    """Map a stored department name onto ``Departments``; unknown names raise UnknownDepartment."""
    try:
        return Departments(name)
    except ValueError:
        raise UnknownDepartment(str(name)) from None


@dataclass(frozen=True)
class Department:
    """Department calendar policy.

    ``working_saturdays`` lists the ordinal Saturdays (1st, 2nd, ...) of a month that
    are working days. ``shift_start``/``shift_end`` are optional; when missing no
    lateness/overtime is derived on working days.
    """

    department: Departments
    working_saturdays: FrozenSet[int] = field(default_factory=frozenset)
    shift_start: Optional[Time] = None
    shift_end: Optional[Time] = None

    @classmethod
    def with_default_policy(
        cls,
        department: Departments,
        *,
        shift_start: Optional[Time] = None,
        shift_end: Optional[Time] = None,
    ) -> "Department":
        return cls(
            department=department,
            working_saturdays=DEFAULT_WORKING_SATURDAYS.get(department, frozenset()),
            shift_start=shift_start,
            shift_end=shift_end,
        )
