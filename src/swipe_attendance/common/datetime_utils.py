from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Every calendar date in [start, end], ascending."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
