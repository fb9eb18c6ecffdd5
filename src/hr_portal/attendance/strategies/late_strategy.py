from __future__ import annotations

from datetime import time
from typing import Optional

from ...core.enums import AttendanceStatus
from ..model import AttendanceSettings
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Check-in after the late threshold."""

    def decide(self, *, check_in: Optional[time], settings: AttendanceSettings) -> StatusDecision:
        note = None
        if check_in is not None:
            minutes = (check_in.hour * 60 + check_in.minute) - (
                settings.late_threshold_hour * 60 + settings.late_threshold_minute
            )
            note = f"Late by {minutes} min"
        return StatusDecision(status=AttendanceStatus.LATE, note=note)
