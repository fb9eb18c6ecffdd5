"""Pure helpers behind the attendance views: status label and working hours."""

from __future__ import annotations

from datetime import datetime, time, timedelta
from typing import Optional

from ..common.datetime_utils import parse_clock_time
from ..core.constants import NOT_CHECKED_OUT
from ..core.enums import AttendanceStatus
from .factory import AttendanceStrategyFactory
from .model import AttendanceSettings
from .strategies.base import StatusDecision

_factory = AttendanceStrategyFactory()


def get_status_decision(check_in_time: Optional[str], settings: Optional[AttendanceSettings] = None) -> StatusDecision:
    """Status plus the strategy's note (e.g. "Late by 25 min")."""
    settings = settings or AttendanceSettings()
    check_in = parse_clock_time(check_in_time) if check_in_time else None
    strategy = _factory.for_checkin(check_in=check_in, settings=settings)
    return strategy.decide(check_in=check_in, settings=settings)


def get_attendance_status(check_in_time: Optional[str], settings: Optional[AttendanceSettings] = None) -> AttendanceStatus:
    return get_status_decision(check_in_time, settings).status


def _seconds_of_day(value: time) -> int:
    return value.hour * 3600 + value.minute * 60 + value.second


def calculate_working_hours(check_in_time: str, check_out_time: Optional[str]) -> str:
    if not check_out_time:
        return NOT_CHECKED_OUT

    diff = _seconds_of_day(parse_clock_time(check_out_time)) - _seconds_of_day(parse_clock_time(check_in_time))
    if diff < 0:
        # checkout on the next day
        diff += 24 * 3600

    return f"{diff // 3600}h {(diff % 3600) // 60}m"


def elapsed_hours(check_in_time: str, now: datetime) -> float:
    """Hours between today's check-in and `now`."""
    started = datetime.combine(now.date(), parse_clock_time(check_in_time))
    return (now - started) / timedelta(hours=1)


def is_auto_checkout_due(now: datetime, settings: AttendanceSettings) -> bool:
    # 00:00 is the "disabled" default
    if settings.auto_checkout == time(0, 0):
        return False
    return (now.hour, now.minute) >= (settings.auto_checkout_hour, settings.auto_checkout_minute)
