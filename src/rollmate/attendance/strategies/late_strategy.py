from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...classes.model import TimeSlot
from ...core.enums import AttendanceStatus
from .base import CheckInStrategy, StatusDecision


class LateStrategy(CheckInStrategy):
    """Check-in after the slot start plus grace."""

    def decide_checkin(self, *, now: datetime, slot: Optional[TimeSlot], grace_minutes: int) -> StatusDecision:
        note = None
        if slot is not None:
            started = datetime.combine(now.date(), slot.start_time)
            note = f"Checked in {int((now - started).total_seconds() // 60)} min after start"
        return StatusDecision(status=AttendanceStatus.LATE, note=note)
