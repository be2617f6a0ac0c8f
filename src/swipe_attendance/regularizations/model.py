from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.time_value import Time


@dataclass(frozen=True)
class Regularization:
    """Manually corrected time-in/time-out for one employee-date.

    Either side may be missing, in which case the swiped value is kept.
    """

    employee_id: int
    work_date: date
    time_in: Optional[Time] = None
    time_out: Optional[Time] = None
    remarks: Optional[str] = None
