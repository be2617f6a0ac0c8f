from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...common.time_value import Time
from ...employees.department_model import Department


@dataclass(frozen=True)
class DayDecision:
    late_by: Time
    over_time: Time


class DayStrategy(ABC):
    """Strategy Pattern: encapsulate how lateness/overtime is derived for a day."""

    @abstractmethod
    def decide(self, *, time_in: Time, time_out: Time, working_hours: Time, department: Department) -> DayDecision:
        raise NotImplementedError
