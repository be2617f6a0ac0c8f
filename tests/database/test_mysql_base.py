from datetime import time, timedelta

import mysql.connector
import pytest

from swipe_attendance.common.time_value import Time
from swipe_attendance.core.exceptions import RepositoryUnavailable
from swipe_attendance.database.bootstrap import iter_sql_statements
from swipe_attendance.database.mysql_base import db_cursor, normalize_mysql_time


class FakeCursor:
    def __init__(self, error=None):
        self.error = error
        self.closed = False

    def execute(self, sql, params=None):
        if self.error:
            raise self.error

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, conn=None, error=None):
        self.conn = conn
        self.error = error

    def connect(self):
        if self.error:
            raise self.error
        return self.conn


@pytest.mark.parametrize(
    "value, expected",
    [
        (time(8, 30), Time(8, 30)),
        (timedelta(hours=17, minutes=45), Time(17, 45)),
        ("09:05:00", Time(9, 5)),
    ],
)
def test_normalize_mysql_time(value, expected):
    assert normalize_mysql_time(value) == expected


def test_normalize_mysql_time_none():
    assert normalize_mysql_time(None) is None


def test_query_errors_become_repository_unavailable_and_connection_closes():
    cursor = FakeCursor(error=mysql.connector.Error("lost connection"))
    conn = FakeConnection(cursor)

    with pytest.raises(RepositoryUnavailable):
        with db_cursor(FakeConnFactory(conn)) as (_, cur):
            cur.execute("SELECT 1")

    assert cursor.closed is True
    assert conn.closed is True


def test_connect_errors_become_repository_unavailable():
    factory = FakeConnFactory(error=mysql.connector.Error("refused"))

    with pytest.raises(RepositoryUnavailable):
        with db_cursor(factory):
            pass


def test_sql_splitter_ignores_semicolons_in_strings():
    sql = "INSERT INTO t VALUES ('a;b');\nCREATE TABLE x (id INT);\n"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", "CREATE TABLE x (id INT)"]
