from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import Departments
from .department_model import Department


class DepartmentRepository(Protocol):
    def get_by_id(self, department: Departments) -> Optional[Department]:
        raise NotImplementedError
