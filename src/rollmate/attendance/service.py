from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..classes.repository import ClassRepository
from ..common.datetime_utils import local_day, now_local, to_local_naive
from ..core.constants import DEFAULT_CHECKIN_GRACE_MINUTES
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import NotFoundError, ValidationError
from ..geofence.geometry import contains
from ..users.repository import UserRepository
from .factory import CheckInStrategyFactory
from .model import AttendanceRecord, Location
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _location(value: Any) -> Optional[Location]:
    if value is None or isinstance(value, Location):
        return value
    if isinstance(value, dict):
        return Location(lat=float(value["lat"]), lng=float(value["lng"]))
    return Location(lat=float(value.lat), lng=float(value.lng))


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        classes: ClassRepository,
        *,
        strategy_factory: CheckInStrategyFactory | None = None,
        grace_minutes: int = DEFAULT_CHECKIN_GRACE_MINUTES,
    ):
        self._attendance = attendance
        self._users = users
        self._classes = classes
        self._factory = strategy_factory or CheckInStrategyFactory()
        self._grace_minutes = int(grace_minutes)

    def mark(
        self,
        *,
        student_id: int,
        class_id: int,
        date: datetime,
        status: AttendanceStatus,
        note: Optional[str] = None,
        location: Any = None,
    ) -> AttendanceRecord:
        """Record a mark as given. Repeated marks for the same day are all kept."""
        return self._attendance.create(
            student_id=student_id,
            class_id=class_id,
            date=date,
            status=AttendanceStatus(status),
            note=note,
            location=_location(location),
        )

    def update(self, attendance_id: int, changes: dict[str, Any]) -> AttendanceRecord:
        changes = dict(changes)
        if "location" in changes:
            changes["location"] = _location(changes["location"])
        return self._attendance.update(attendance_id, changes)

    def for_class_and_date(self, class_id: int, day: date | datetime) -> Sequence[AttendanceRecord]:
        return self._attendance.get_by_class_and_date(class_id, day)

    def for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        return self._attendance.get_by_student(student_id)

    def my_attendance(self, user_id: int) -> Sequence[AttendanceRecord]:
        user = self._users.get_by_id(user_id)
        if not user or not user.class_id:
            raise ValidationError("No class assigned")
        return self._attendance.get_by_student(user.user_id)

    def check_in(self, student_id: int, *, lat: float, lng: float, now: datetime | None = None) -> AttendanceRecord:
        """Student self check-in from inside the class geofence."""
        now = to_local_naive(now or now_local())

        student = self._users.get_by_id(student_id)
        if not student or student.role != Role.STUDENT:
            raise NotFoundError("Student not found")
        if not student.class_id:
            raise ValidationError("No class assigned")

        cls = self._classes.get_by_id(student.class_id)
        if not cls:
            raise NotFoundError("Class not found")
        if not cls.geofence:
            raise ValidationError("No geofence has been set for this class")
        if not contains(cls.geofence, lat, lng):
            logger.info("check-in refused for student %s: outside class %s geofence", student_id, cls.class_id)
            raise ValidationError("You are outside the class area")

        today = local_day(now)
        already = [r for r in self._attendance.get_by_class_and_date(cls.class_id, today) if r.student_id == student_id]
        if already:
            raise ValidationError("Already checked in today")

        slot = cls.slot_for(now)
        strategy = self._factory.for_checkin(now=now, slot=slot, grace_minutes=self._grace_minutes)
        decision = strategy.decide_checkin(now=now, slot=slot, grace_minutes=self._grace_minutes)

        return self._attendance.create(
            student_id=student_id,
            class_id=cls.class_id,
            date=now,
            status=decision.status,
            note=decision.note,
            location=Location(lat=lat, lng=lng),
        )
