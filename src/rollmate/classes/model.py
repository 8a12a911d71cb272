from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time
from typing import Optional, Tuple

from ..core.enums import Weekday
from ..geofence.model import Geofence


@dataclass(frozen=True)
class TimeSlot:
    """Domain entity: one weekly meeting of a class."""

    weekday: Weekday
    start_time: time
    end_time: time

    def to_dict(self) -> dict:
        return {
            "day": self.weekday.name.lower(),
            "start": self.start_time.strftime("%H:%M"),
            "end": self.end_time.strftime("%H:%M"),
        }


@dataclass(frozen=True)
class Class:
    """Domain entity: a class taught by a teacher.

    The geofence is optional; ``schedule`` keeps the order it was given in.
    """

    class_id: int
    name: str
    description: Optional[str] = None
    teacher_id: Optional[int] = None
    schedule: Tuple[TimeSlot, ...] = field(default_factory=tuple)
    geofence: Optional[Geofence] = None

    def slot_for(self, moment: datetime) -> Optional[TimeSlot]:
        """Slot a check-in at ``moment`` belongs to.

        The running slot wins, then the latest one already started that day,
        then the next one to come.
        """
        slots = sorted(
            (s for s in self.schedule if s.weekday == moment.weekday()),
            key=lambda s: s.start_time,
        )
        clock = moment.time()
        for slot in slots:
            if slot.start_time <= clock <= slot.end_time:
                return slot
        started = [s for s in slots if s.start_time <= clock]
        if started:
            return started[-1]
        return slots[0] if slots else None

    def to_dict(self) -> dict:
        return {
            "id": self.class_id,
            "name": self.name,
            "description": self.description,
            "teacherId": self.teacher_id,
            "schedule": [s.to_dict() for s in self.schedule],
            "geofence": self.geofence.to_dict() if self.geofence else None,
        }
