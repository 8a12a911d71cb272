from __future__ import annotations

from datetime import time
from typing import Any, Optional, Union

from pydantic import BaseModel, Field


class TimeSlotPayload(BaseModel):
    day: Union[int, str]
    start: time
    end: time


class ClassPayload(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    schedule: list[TimeSlotPayload] = Field(default_factory=list)
    geofence: Optional[dict[str, Any]] = None


class ClassPatchPayload(BaseModel):
    """Partial class update; only fields sent by the client are applied."""

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    schedule: Optional[list[TimeSlotPayload]] = None
    geofence: Optional[dict[str, Any]] = None
