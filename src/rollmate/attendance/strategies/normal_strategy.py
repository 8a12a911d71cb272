from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...classes.model import TimeSlot
from ...core.enums import AttendanceStatus
from .base import CheckInStrategy, StatusDecision


class NormalStrategy(CheckInStrategy):
    """On-time check-in (or no slot scheduled that day)."""

    def decide_checkin(self, *, now: datetime, slot: Optional[TimeSlot], grace_minutes: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)
