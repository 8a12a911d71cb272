from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import same_calendar_day, to_local_naive
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..storage.memory_store import MemoryStore
from .model import AttendanceRecord, Location
from .repository import AttendanceRepository

_UPDATABLE = {"student_id", "class_id", "date", "status", "note", "location"}


class MemoryAttendanceRepository(AttendanceRepository):
    TABLE = "attendance"

    def __init__(self, store: MemoryStore):
        self._store = store

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
        attendance_id = self._store.next_id(self.TABLE)
        record = AttendanceRecord(
            attendance_id=attendance_id,
            student_id=int(student_id),
            class_id=int(class_id),
            date=to_local_naive(date),
            status=AttendanceStatus(status),
            note=note,
            location=location,
        )
        self._store.table(self.TABLE)[attendance_id] = record
        return record

    def update(self, attendance_id: int, changes: dict[str, Any]) -> AttendanceRecord:
        existing = self.get_by_id(attendance_id)
        if not existing:
            raise NotFoundError("Attendance record not found")

        unknown = set(changes) - _UPDATABLE
        if unknown:
            raise ValueError(f"Unknown attendance fields: {sorted(unknown)}")

        merged = {k: v for k, v in changes.items() if v is not None}
        if "date" in merged:
            merged["date"] = to_local_naive(merged["date"])
        if "status" in merged:
            merged["status"] = AttendanceStatus(merged["status"])

        updated = replace(existing, **merged)
        self._store.table(self.TABLE)[existing.attendance_id] = updated
        return updated

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return self._store.table(self.TABLE).get(int(attendance_id))

    def get_by_class_and_date(self, class_id: int, day: date | datetime) -> Sequence[AttendanceRecord]:
        return [
            r
            for r in self._store.rows(self.TABLE)
            if r.class_id == class_id and same_calendar_day(r.date, day)
        ]

    def get_by_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        items = [r for r in self._store.rows(self.TABLE) if r.student_id == student_id]
        items.sort(key=lambda r: r.date, reverse=True)
        return items

    def list_by_class(self, class_id: int) -> Sequence[AttendanceRecord]:
        return [r for r in self._store.rows(self.TABLE) if r.class_id == class_id]
