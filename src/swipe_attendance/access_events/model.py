from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.time_value import Time
from ..core.enums import AccessPointCategory


@dataclass(frozen=True)
class AccessEvent:
    """Domain entity: a single raw swipe, as delivered by the access-control system."""

    employee_id: int
    timestamp: datetime
    category: AccessPointCategory


@dataclass(frozen=True)
class AccessPointSegment:
    """Paired time-in/time-out for one access point category.

    ``time_out`` and ``time_spend`` are ``Time.absent()`` when the swipe had no pair.
    """

    category: AccessPointCategory
    time_in: Time
    time_out: Time
    time_spend: Time

    @property
    def is_complete(self) -> bool:
        return self.time_out.is_present
