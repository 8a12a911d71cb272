from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Sequence

from ..common.validators import require_non_empty
from ..core.enums import Role, Weekday
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..geofence.model import Geofence, parse_geofence
from .model import Class, TimeSlot
from .repository import ClassRepository

logger = logging.getLogger(__name__)


def parse_weekday(value: Any) -> Weekday:
    """Accept ``0``-``6`` (Monday first) or a day name such as ``"mon"``/``"Monday"``."""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid weekday: {value!r}")
    if isinstance(value, int):
        try:
            return Weekday(value)
        except ValueError:
            raise ValidationError(f"Invalid weekday: {value!r}")

    text = str(value).strip().lower()
    for day in Weekday:
        name = day.name.lower()
        if text == name or (len(text) >= 3 and name.startswith(text)):
            return day
    raise ValidationError(f"Invalid weekday: {value!r}")


def build_schedule(slots: Iterable[Any]) -> tuple[TimeSlot, ...]:
    schedule = []
    for slot in slots:
        data = slot if isinstance(slot, dict) else slot.model_dump()
        start, end = data["start"], data["end"]
        if end <= start:
            raise ValidationError("Time slot must end after it starts")
        schedule.append(TimeSlot(weekday=parse_weekday(data["day"]), start_time=start, end_time=end))
    return tuple(schedule)


class ClassService:
    """Use cases: manage classes and their geofences (teacher only)."""

    def __init__(self, classes: ClassRepository):
        self._classes = classes

    @staticmethod
    def _require_teacher(current_role: Optional[Role]) -> None:
        if current_role != Role.TEACHER:
            raise AuthorizationError("Teacher access required")

    def list_classes(self) -> Sequence[Class]:
        return self._classes.list_all()

    def get_class(self, class_id: int) -> Class:
        cls = self._classes.get_by_id(class_id)
        if not cls:
            raise NotFoundError("Class not found")
        return cls

    def create_class(
        self,
        *,
        current_role: Optional[Role],
        teacher_id: Optional[int],
        name: str,
        description: Optional[str] = None,
        schedule: Iterable[Any] = (),
        geofence: Any = None,
    ) -> Class:
        self._require_teacher(current_role)
        name = require_non_empty(name, "Class name")

        return self._classes.create(
            name=name,
            description=description,
            teacher_id=teacher_id,
            schedule=build_schedule(schedule),
            geofence=parse_geofence(geofence) if geofence is not None else None,
        )

    def update_class(self, *, current_role: Optional[Role], class_id: int, changes: dict[str, Any]) -> Class:
        self._require_teacher(current_role)

        changes = dict(changes)
        if "name" in changes:
            changes["name"] = require_non_empty(changes["name"] or "", "Class name")
        if "schedule" in changes:
            changes["schedule"] = build_schedule(changes["schedule"] or ())
        if "geofence" in changes and changes["geofence"] is not None:
            changes["geofence"] = parse_geofence(changes["geofence"])

        updated = self._classes.update(class_id, changes)
        logger.info("class %s updated (%s)", class_id, ", ".join(sorted(changes)) or "no fields")
        return updated

    def set_geofence(self, *, current_role: Optional[Role], class_id: int, geofence: Any) -> Class:
        return self.update_class(current_role=current_role, class_id=class_id, changes={"geofence": geofence})

    def get_geofence(self, class_id: int) -> Optional[Geofence]:
        return self.get_class(class_id).geofence

    def delete_class(self, *, current_role: Optional[Role], class_id: int) -> None:
        self._require_teacher(current_role)
        if not self._classes.delete(class_id):
            logger.info("delete of unknown class %s ignored", class_id)
