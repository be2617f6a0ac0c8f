from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AccessEvent


class AccessEventRepository(Protocol):
    """Read-only source of raw swipes.

    Returns an empty sequence (never None) when nothing was swiped.
    """

    def get_for_date_range(self, employee_id: int, start: date, end: date) -> Sequence[AccessEvent]:
        raise NotImplementedError

    def get_for_day(self, employee_id: int, work_date: date) -> Sequence[AccessEvent]:
        raise NotImplementedError
