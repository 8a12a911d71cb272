from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import EventType
from .model import Event


class EventRepository(Protocol):
    def list(self, class_id: Optional[int] = None) -> Sequence[Event]:
        raise NotImplementedError

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
        raise NotImplementedError
