from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ..classes.model import TimeSlot
from .strategies.base import CheckInStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class CheckInStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on the class slot."""

    def for_checkin(self, *, now: datetime, slot: Optional[TimeSlot], grace_minutes: int) -> CheckInStrategy:
        if not slot:
            return NormalStrategy()

        slot_start = datetime.combine(now.date(), slot.start_time)
        if now <= slot_start + timedelta(minutes=grace_minutes):
            return NormalStrategy()
        return LateStrategy()
