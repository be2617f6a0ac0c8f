from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from .model import Regularization
from .repository import RegularizationRepository


class MySQLRegularizationRepository(RegularizationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee(self, employee_id: int) -> Sequence[Regularization]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, work_date, time_in, time_out, remarks
                FROM attendance_regularizations
                WHERE employee_id=%s
                ORDER BY work_date ASC
                """,
                (int(employee_id),),
            )
            rows = fetchall(cur)
            return [
                Regularization(
                    employee_id=int(r["employee_id"]),
                    work_date=r["work_date"],
                    time_in=normalize_mysql_time(r.get("time_in")),
                    time_out=normalize_mysql_time(r.get("time_out")),
                    remarks=r.get("remarks"),
                )
                for r in rows
            ]
