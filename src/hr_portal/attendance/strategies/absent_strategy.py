from __future__ import annotations

from datetime import time
from typing import Optional

from ...core.enums import AttendanceStatus
from ..model import AttendanceSettings
from .base import AttendanceStrategy, StatusDecision


class AbsentStrategy(AttendanceStrategy):
    """No check-in for the day."""

    def decide(self, *, check_in: Optional[time], settings: AttendanceSettings) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ABSENT)
