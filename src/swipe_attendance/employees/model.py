from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Departments


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: read-only reference data, only used to pick the calendar policy.
    """

    employee_id: int
    department: Departments
    full_name: Optional[str] = None
