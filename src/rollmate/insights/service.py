from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import local_day, week_days
from ..core.enums import AttendanceStatus
from ..users.repository import UserRepository


def status_counts(records: Iterable[AttendanceRecord]) -> dict[str, int]:
    counts = {s.value: 0 for s in AttendanceStatus}
    for r in records:
        counts[r.status.value] += 1
    return counts


def attendance_rate(records: Iterable[AttendanceRecord]) -> float:
    """Share of ``present`` records in percent, 0 when there are none."""
    records = list(records)
    if not records:
        return 0.0
    present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)
    return round(present / len(records) * 100, 1)


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


class InsightsService:
    """Dashboard numbers computed from the attendance store."""

    def __init__(self, attendance: AttendanceRepository, users: UserRepository):
        self._attendance = attendance
        self._users = users

    def day_breakdown(self, *, class_id: int, day: date) -> dict:
        records = self._attendance.get_by_class_and_date(class_id, day)
        total_students = len(self._users.list_students(class_id))
        counts = status_counts(records)
        present_share = round(counts["present"] / total_students * 100, 1) if total_students else 0.0
        return {
            "date": day.isoformat(),
            "totalStudents": total_students,
            "counts": counts,
            "presentShare": present_share,
        }

    def week_breakdown(self, *, class_id: int, day: date) -> list[dict]:
        records = self._attendance.list_by_class(class_id)
        by_day: dict[date, list[AttendanceRecord]] = {}
        for r in records:
            by_day.setdefault(local_day(r.date), []).append(r)

        return [
            {"date": d.isoformat(), "label": d.strftime("%a"), **status_counts(by_day.get(d, []))}
            for d in week_days(day)
        ]

    def student_rates(self, *, class_id: int) -> list[dict]:
        records = self._attendance.list_by_class(class_id)
        out = []
        for student in self._users.list_students(class_id):
            mine = [r for r in records if r.student_id == student.user_id]
            out.append(
                {
                    "studentId": student.user_id,
                    "name": student.name,
                    "presentDays": sum(1 for r in mine if r.status == AttendanceStatus.PRESENT),
                    "totalDays": len(mine),
                    "attendanceRate": attendance_rate(mine),
                }
            )
        return out

    def class_overview(self, *, class_id: int, day: date) -> dict:
        return {
            "classId": class_id,
            "today": self.day_breakdown(class_id=class_id, day=day),
            "week": self.week_breakdown(class_id=class_id, day=day),
            "students": self.student_rates(class_id=class_id),
        }

    def student_summary(self, *, student_id: int) -> dict:
        records = self._attendance.get_by_student(student_id)
        return {
            "studentId": student_id,
            "counts": status_counts(records),
            "totalDays": len(records),
            "attendanceRate": attendance_rate(records),
        }

    def build_class_report(self, *, class_id: int, start: date, end: date, student_id: Optional[int] = None) -> ReportData:
        """Rows for CSV export, newest day first, plus a per-student summary."""
        names = {s.user_id: s.name for s in self._users.list_students()}

        selected = [
            r
            for r in self._attendance.list_by_class(class_id)
            if start <= local_day(r.date) <= end and (student_id is None or r.student_id == student_id)
        ]
        selected.sort(key=lambda r: (r.date, r.student_id), reverse=True)

        rows = [
            {
                "date": local_day(r.date).isoformat(),
                "time": r.date.strftime("%H:%M"),
                "student_id": r.student_id,
                "student_name": names.get(r.student_id, "-"),
                "status": r.status.value,
                "note": r.note or "",
            }
            for r in selected
        ]

        grouped: dict[int, list[AttendanceRecord]] = {}
        for r in selected:
            grouped.setdefault(r.student_id, []).append(r)
        summary = [
            {
                "student_id": sid,
                "student_name": names.get(sid, "-"),
                "total": len(items),
                "attendance_rate": attendance_rate(items),
            }
            for sid, items in grouped.items()
        ]
        summary.sort(key=lambda x: x["attendance_rate"], reverse=True)
        return ReportData(rows=rows, summary=summary)
