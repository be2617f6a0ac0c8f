from __future__ import annotations

from typing import Sequence

from ..core.enums import LeaveStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Leave
from .repository import LeaveRepository


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int) -> Sequence[Leave]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT leave_id, employee_id, leave_date, status, reason
                FROM leaves
                WHERE employee_id=%s
                ORDER BY leave_date ASC
                """,
                (int(employee_id),),
            )
            rows = fetchall(cur)
            return [
                Leave(
                    leave_id=int(r["leave_id"]),
                    employee_id=int(r["employee_id"]),
                    leave_date=r["leave_date"],
                    status=LeaveStatus(r["status"]),
                    reason=r.get("reason"),
                )
                for r in rows
            ]

