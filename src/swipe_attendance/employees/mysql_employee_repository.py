from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .department_model import department_from_name
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, full_name, dept_name
                FROM employees
                WHERE employee_id=%s
                """,
                (int(employee_id),),
            )
            row = fetchone(cur)
        if not row:
            return None
        return Employee(
            employee_id=int(row["employee_id"]),
            department=department_from_name(row["dept_name"]),
            full_name=row.get("full_name"),
        )
