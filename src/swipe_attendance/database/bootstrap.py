from __future__ import annotations

import re
from contextlib import closing
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import mysql.connector

from ..common.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DBTarget:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_config(cls, db_config: dict) -> "DBTarget":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "swipe_attendance")),
        )

    def connect(self, *, with_database: bool = True):
        kwargs = dict(host=self.host, port=self.port, user=self.user, password=self.password, use_pure=True)
        if with_database:
            kwargs["database"] = self.database
        return mysql.connector.connect(**kwargs)


def _strip_create_db_and_use(sql: str) -> str:
    # schema.sql must work whatever DB name the settings point at
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_comments(sql: str) -> str:
    return "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))


def iter_sql_statements(sql: str) -> Iterable[str]:
    """Split a script on ';' outside of quoted strings."""
    buf: list[str] = []
    quote: str | None = None
    escape = False

    for ch in sql:
        buf.append(ch)
        if escape:
            escape = False
        elif ch == "\\":
            escape = True
        elif quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            buf.pop()
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    target = DBTarget.from_config(db_config)
    with closing(target.connect(with_database=False)) as conn:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()


def run_sql_file(db_config: dict, *, path: str | Path) -> int:
    """Execute every statement of an SQL file; returns the statement count."""
    target = DBTarget.from_config(db_config)
    path = Path(path)
    sql = _strip_comments(_strip_create_db_and_use(path.read_text(encoding="utf-8")))

    count = 0
    with closing(target.connect()) as conn:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
    logger.info("Applied %s to %s (%d statements)", path.name, target.database, count)
    return count


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    run_sql_file(db_config, path=schema_path)


def list_tables(db_config: dict) -> list[str]:
    target = DBTarget.from_config(db_config)
    with closing(target.connect()) as conn:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
