from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from .model import AttendanceSettings
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_checkin(self, *, check_in: Optional[time], settings: AttendanceSettings) -> AttendanceStrategy:
        if check_in is None:
            return AbsentStrategy()

        # Seconds are ignored: 09:15:59 is still on time for a 09:15 threshold.
        if (check_in.hour, check_in.minute) > (settings.late_threshold_hour, settings.late_threshold_minute):
            return LateStrategy()
        return PresentStrategy()
