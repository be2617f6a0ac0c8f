"""In-memory repositories.

Same Protocols as the MySQL repositories; used by tests and the examples.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..access_events.model import AccessEvent
from ..core.enums import Departments
from ..employees.department_model import Department
from ..employees.model import Employee
from ..leaves.model import Leave
from ..regularizations.model import Regularization


@dataclass
class InMemoryAccessEvents:
    events: list[AccessEvent] = field(default_factory=list)

    def get_for_date_range(self, employee_id: int, start: date, end: date) -> Sequence[AccessEvent]:
        return [e for e in self.events if e.employee_id == employee_id and start <= e.timestamp.date() <= end]

    def get_for_day(self, employee_id: int, work_date: date) -> Sequence[AccessEvent]:
        return self.get_for_date_range(employee_id, work_date, work_date)


@dataclass
class InMemoryEmployees:
    employees_by_id: dict[int, Employee] = field(default_factory=dict)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.employees_by_id.get(employee_id)


@dataclass
class InMemoryDepartments:
    departments: dict[Departments, Department] = field(default_factory=dict)

    @classmethod
    def with_defaults(cls) -> "InMemoryDepartments":
        return cls({d: Department.with_default_policy(d) for d in Departments})

    def get_by_id(self, department: Departments) -> Optional[Department]:
        return self.departments.get(department)


@dataclass
class InMemoryLeaves:
    leaves: list[Leave] = field(default_factory=list)

    def list_for_employee(self, employee_id: int) -> Sequence[Leave]:
        return [lv for lv in self.leaves if lv.employee_id == employee_id]


@dataclass
class InMemoryRegularizations:
    regularizations: list[Regularization] = field(default_factory=list)

    def get_for_employee(self, employee_id: int) -> Sequence[Regularization]:
        return [r for r in self.regularizations if r.employee_id == employee_id]
