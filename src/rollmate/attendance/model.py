from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Location:
    """Where the student was when the record was taken."""

    lat: float
    lng: float

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark of a student in a class.

    ``date`` keeps the full timestamp; queries compare its calendar day only.
    """

    attendance_id: int
    student_id: int
    class_id: int
    date: datetime
    status: AttendanceStatus
    note: Optional[str] = None
    location: Optional[Location] = None

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "studentId": self.student_id,
            "classId": self.class_id,
            "date": self.date.isoformat(),
            "status": self.status.value,
            "note": self.note,
            "location": self.location.to_dict() if self.location else None,
        }
