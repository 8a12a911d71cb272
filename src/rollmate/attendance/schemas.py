from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import AttendanceStatus


class LocationPayload(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class AttendancePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    student_id: int = Field(..., ge=1, alias="studentId")
    class_id: int = Field(..., ge=1, alias="classId")
    date: datetime
    status: AttendanceStatus
    note: Optional[str] = None
    location: Optional[LocationPayload] = None


class AttendancePatchPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    student_id: Optional[int] = Field(default=None, ge=1, alias="studentId")
    class_id: Optional[int] = Field(default=None, ge=1, alias="classId")
    date: Optional[datetime] = None
    status: Optional[AttendanceStatus] = None
    note: Optional[str] = None
    location: Optional[LocationPayload] = None


class CheckInPayload(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
