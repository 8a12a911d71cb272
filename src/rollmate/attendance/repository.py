from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, Location


class AttendanceRepository(Protocol):
    def create(
        self,
        *,
        student_id: int,
        class_id: int,
        date: datetime,
        status: AttendanceStatus,
        note: Optional[str] = None,
        location: Optional[Location] = None,
    ) -> AttendanceRecord:
        """Store a new record. No (student, class, day) uniqueness is enforced."""

        raise NotImplementedError

    def update(self, attendance_id: int, changes: dict[str, Any]) -> AttendanceRecord:
        """Shallow-merge ``changes``; None values keep the stored value.

        Raises NotFoundError when the id is unknown.
        """

        raise NotImplementedError

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_by_class_and_date(self, class_id: int, day: date | datetime) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        """Newest date first."""

        raise NotImplementedError

    def list_by_class(self, class_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
