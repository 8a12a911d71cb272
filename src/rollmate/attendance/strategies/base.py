from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...classes.model import TimeSlot
from ...core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    note: Optional[str] = None


class CheckInStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a check-in status."""

    @abstractmethod
    def decide_checkin(self, *, now: datetime, slot: Optional[TimeSlot], grace_minutes: int) -> StatusDecision:
        raise NotImplementedError
