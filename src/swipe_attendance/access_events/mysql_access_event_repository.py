from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Sequence

from ..core.enums import AccessPointCategory
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AccessEvent
from .repository import AccessEventRepository


class MySQLAccessEventRepository(AccessEventRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_date_range(self, employee_id: int, start: date, end: date) -> Sequence[AccessEvent]:
        # [start 00:00, end+1 00:00) so the whole last day is included
        range_start = datetime.combine(start, time.min)
        range_end = datetime.combine(end + timedelta(days=1), time.min)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, event_time, access_point
                FROM access_events
                WHERE employee_id=%s AND event_time >= %s AND event_time < %s
                ORDER BY event_time ASC
                """,
                (int(employee_id), range_start, range_end),
            )
            rows = fetchall(cur)
            return [
                AccessEvent(
                    employee_id=int(r["employee_id"]),
                    timestamp=r["event_time"],
                    category=AccessPointCategory(r["access_point"]),
                )
                for r in rows
            ]

    def get_for_day(self, employee_id: int, work_date: date) -> Sequence[AccessEvent]:
        return self.get_for_date_range(employee_id, work_date, work_date)
