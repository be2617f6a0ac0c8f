from __future__ import annotations

from typing import Optional

from ..core.constants import DEFAULT_WORKING_SATURDAYS
from ..core.enums import Departments
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, normalize_mysql_time
from .department_model import Department, department_from_name
from .department_repository import DepartmentRepository


def _parse_saturdays(value: Optional[str], department: Departments) -> frozenset[int]:
    # NULL column means "use the built-in table"; '' means no working Saturdays.
    if value is None:
        return DEFAULT_WORKING_SATURDAYS.get(department, frozenset())
    return frozenset(int(part) for part in value.split(",") if part.strip())


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _to_department(row: dict) -> Department:
        department = department_from_name(row["dept_name"])
        return Department(
            department=department,
            working_saturdays=_parse_saturdays(row.get("working_saturdays"), department),
            shift_start=normalize_mysql_time(row.get("shift_start")),
            shift_end=normalize_mysql_time(row.get("shift_end")),
        )

    def get_by_id(self, department: Departments) -> Optional[Department]:
        name = department_from_name(department).value
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT dept_name, working_saturdays, shift_start, shift_end
                FROM departments
                WHERE dept_name=%s
                """,
                (name,),
            )
            row = fetchone(cur)
        return self._to_department(row) if row else None
