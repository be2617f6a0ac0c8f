from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time
from functools import total_ordering


@total_ordering
@dataclass(frozen=True, eq=False)
class Time:
    """Clock time or duration as (hour, minute).

    Zero doubles as "absent" for unmatched swipes. ``Time.absent()`` is still equal
    to ``Time(0, 0)`` but keeps ``is_present=False`` so a real midnight swipe is
    never mistaken for a missing one.
    """

    hour: int = 0
    minute: int = 0
    is_present: bool = field(default=True, repr=False)

    def __post_init__(self):
        if self.hour < 0 or not 0 <= self.minute < 60:
            raise ValueError(f"Invalid time value: {self.hour}:{self.minute}")

    @classmethod
    def absent(cls) -> "Time":
        return cls(0, 0, is_present=False)

    @classmethod
    def from_minutes(cls, minutes: int) -> "Time":
        minutes = max(int(minutes), 0)
        return cls(minutes // 60, minutes % 60)

    @classmethod
    def from_datetime(cls, value: datetime | time) -> "Time":
        return cls(value.hour, value.minute)

    @classmethod
    def parse(cls, value: str) -> "Time":
        """Parse an ``HH:MM`` string."""
        parts = value.strip().split(":")
        if len(parts) < 2:
            raise ValueError(f"Invalid time string: {value!r}")
        return cls(int(parts[0]), int(parts[1]))

    @property
    def total_minutes(self) -> int:
        return self.hour * 60 + self.minute

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.total_minutes == other.total_minutes

    def __lt__(self, other: "Time") -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.total_minutes < other.total_minutes

    def __hash__(self) -> int:
        return hash(self.total_minutes)

    def __add__(self, other: "Time") -> "Time":
        if not isinstance(other, Time):
            return NotImplemented
        return Time.from_minutes(self.total_minutes + other.total_minutes)

    def __sub__(self, other: "Time") -> "Time":
        if not isinstance(other, Time):
            return NotImplemented
        return Time.subtract(self, other)

    @staticmethod
    def subtract(a: "Time", b: "Time") -> "Time":
        """a - b, floored at zero."""
        return Time.from_minutes(max(a.total_minutes - b.total_minutes, 0))

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


ZERO = Time(0, 0)
