from __future__ import annotations

from enum import Enum


class AccessPointCategory(str, Enum):
    """Where a swipe happened."""

    MAIN = "Main"
    RECREATION = "Recreation"
    GYMNASIUM = "Gymnasium"


class DayStatus(str, Enum):
    WORKING_DAY = "WorkingDay"
    NON_WORKING_DAY = "NonWorkingDay"


class Departments(str, Enum):
    """Closed set of departments with their own calendar policy."""

    SOFTWARE = "Software"
    DESIGN = "Design"
    SERVICE = "Service"


class LeaveStatus(str, Enum):
    APPROVED = "Approved"
    CANCELLED = "Cancelled"
    REALISED = "Realised"
