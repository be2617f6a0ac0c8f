from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List, Optional

import mysql.connector

from ..common.time_value import Time
from ..core.exceptions import RepositoryUnavailable
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Read-only cursor; connector failures surface as RepositoryUnavailable."""
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise RepositoryUnavailable(f"Database connection failed: {e}") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
        finally:
            cur.close()
    except mysql.connector.Error as e:
        raise RepositoryUnavailable(f"Database query failed: {e}") from e
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def normalize_mysql_time(value: Any) -> Optional[Time]:
    """Normalize MySQL TIME values across connector implementations.

    mysql-connector can return TIME as:
    - datetime.time
    - datetime.timedelta
    - string (e.g. '08:30:00')
    """

    if value is None:
        return None

    if isinstance(value, time):
        return Time.from_datetime(value)

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        return Time(total_seconds // 3600, (total_seconds % 3600) // 60)

    if isinstance(value, str):
        return Time.parse(value)

    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")
