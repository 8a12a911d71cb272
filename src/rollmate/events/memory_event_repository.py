from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import to_local_naive
from ..core.enums import EventType
from ..storage.memory_store import MemoryStore
from .model import Event
from .repository import EventRepository


class MemoryEventRepository(EventRepository):
    TABLE = "events"

    def __init__(self, store: MemoryStore):
        self._store = store

    def list(self, class_id: Optional[int] = None) -> Sequence[Event]:
        events = self._store.rows(self.TABLE)
        if class_id:
            events = [e for e in events if e.class_id == class_id]
        return sorted(events, key=lambda e: e.due_date)

    def create(
        self,
        *,
        class_id: int,
        title: str,
        due_date: datetime,
        type: EventType,
        description: Optional[str] = None,
        location: Optional[str] = None,
    ) -> Event:
        event_id = self._store.next_id(self.TABLE)
        event = Event(
            event_id=event_id,
            class_id=int(class_id),
            title=title,
            due_date=to_local_naive(due_date),
            type=type,
            description=description,
            location=location,
        )
        self._store.table(self.TABLE)[event_id] = event
        return event
