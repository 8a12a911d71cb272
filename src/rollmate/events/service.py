from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..classes.repository import ClassRepository
from ..common.validators import require_non_empty
from ..core.enums import EventType, Role
from ..core.exceptions import AuthorizationError, NotFoundError
from .model import Event
from .repository import EventRepository


class EventService:
    def __init__(self, events: EventRepository, classes: ClassRepository):
        self._events = events
        self._classes = classes

    def list_events(self, class_id: Optional[int] = None) -> Sequence[Event]:
        return self._events.list(class_id)

    def create_event(
        self,
        *,
        current_role: Optional[Role],
        class_id: int,
        title: str,
        due_date: datetime,
        type: EventType = EventType.EVENT,
        description: Optional[str] = None,
        location: Optional[str] = None,
    ) -> Event:
        if current_role != Role.TEACHER:
            raise AuthorizationError("Teacher access required")
        if not self._classes.get_by_id(class_id):
            raise NotFoundError("Class not found")

        return self._events.create(
            class_id=class_id,
            title=require_non_empty(title, "Title"),
            due_date=due_date,
            type=type,
            description=description.strip() if description else None,
            location=location.strip() if location else None,
        )
