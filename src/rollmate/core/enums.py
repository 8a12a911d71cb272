from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for login and permission checks."""

    TEACHER = "teacher"
    STUDENT = "student"


class AttendanceStatus(str, Enum):
    """Attendance status as stored on a record."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    LEFT_EARLY = "left_early"


class EventType(str, Enum):
    ASSIGNMENT = "assignment"
    EVENT = "event"


class Weekday(int, Enum):
    """Python weekday numbering (Monday == 0)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6
