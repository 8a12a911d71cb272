from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import EventType


@dataclass(frozen=True)
class Event:
    """Domain entity: an assignment or event posted to a class."""

    event_id: int
    class_id: int
    title: str
    due_date: datetime
    type: EventType
    description: Optional[str] = None
    location: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.event_id,
            "classId": self.class_id,
            "title": self.title,
            "description": self.description,
            "dueDate": self.due_date.isoformat(),
            "type": self.type.value,
            "location": self.location,
        }
