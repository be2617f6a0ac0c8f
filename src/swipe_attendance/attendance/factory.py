from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import DayStatus
from .strategies.base import DayStrategy
from .strategies.non_working_day_strategy import NonWorkingDayStrategy
from .strategies.working_day_strategy import WorkingDayStrategy


@dataclass
class DayStrategyFactory:
    """Factory Pattern: choose the lateness/overtime rules for a day status."""

    def for_status(self, status: DayStatus) -> DayStrategy:
        if status == DayStatus.NON_WORKING_DAY:
            return NonWorkingDayStrategy()
        return WorkingDayStrategy()
