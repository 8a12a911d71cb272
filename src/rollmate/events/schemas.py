from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import EventType


class EventPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    class_id: int = Field(..., ge=1, alias="classId")
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    due_date: datetime = Field(..., alias="dueDate")
    type: EventType = EventType.EVENT
    location: Optional[str] = None
