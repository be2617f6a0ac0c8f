"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import Departments

DEFAULT_REPORT_DAYS = 7

# Ordinal Saturdays (1-indexed within the month) that count as working days.
DEFAULT_WORKING_SATURDAYS = {
    Departments.SOFTWARE: frozenset(),
    Departments.DESIGN: frozenset(),
    Departments.SERVICE: frozenset({1, 3, 5}),
}
