from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_range
from ..core.constants import (
    DEFAULT_AUTO_CHECKOUT_HOUR,
    DEFAULT_AUTO_CHECKOUT_MINUTE,
    DEFAULT_LATE_THRESHOLD_HOUR,
    DEFAULT_LATE_THRESHOLD_MINUTE,
)


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance record (one employee, one day).

    Check-in/out times stay as the backend's HH:MM:SS strings.
    """

    record_id: str
    employee_id: str
    work_date: date
    check_in_time: Optional[str]
    check_out_time: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    manually_added: bool = False
    manually_edited: bool = False
    auto_checkout: bool = False
    late_checkout_reason: Optional[str] = None
    employee_name: Optional[str] = None
    department: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return bool(self.check_in_time) and not self.check_out_time

    @property
    def is_complete(self) -> bool:
        return bool(self.check_in_time) and bool(self.check_out_time)

    @classmethod
    def from_api(cls, row: dict) -> "AttendanceRecord":
        employee = row.get("employee") or {}
        return cls(
            record_id=str(row.get("id", "")),
            employee_id=str(row.get("employeeId") or employee.get("id") or ""),
            work_date=parse_iso_date(row["date"]),
            check_in_time=row.get("checkInTime") or None,
            check_out_time=row.get("checkOutTime") or None,
            latitude=row.get("latitude"),
            longitude=row.get("longitude"),
            manually_added=bool(row.get("manuallyAdded", False)),
            manually_edited=bool(row.get("manuallyEdited", False)),
            auto_checkout=bool(row.get("autoCheckout", False)),
            late_checkout_reason=row.get("lateCheckoutReason"),
            employee_name=employee.get("fullName"),
            department=employee.get("department"),
        )


@dataclass(frozen=True)
class AttendanceSettings:
    """Admin-configurable thresholds (late check-in and auto checkout)."""

    late_threshold_hour: int = DEFAULT_LATE_THRESHOLD_HOUR
    late_threshold_minute: int = DEFAULT_LATE_THRESHOLD_MINUTE
    auto_checkout_hour: int = DEFAULT_AUTO_CHECKOUT_HOUR
    auto_checkout_minute: int = DEFAULT_AUTO_CHECKOUT_MINUTE

    @property
    def late_threshold(self) -> time:
        return time(self.late_threshold_hour, self.late_threshold_minute)

    @property
    def auto_checkout(self) -> time:
        return time(self.auto_checkout_hour, self.auto_checkout_minute)

    def to_dict(self) -> dict:
        return {
            "lateThresholdHour": self.late_threshold_hour,
            "lateThresholdMinute": self.late_threshold_minute,
            "autoCheckoutHour": self.auto_checkout_hour,
            "autoCheckoutMinute": self.auto_checkout_minute,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceSettings":
        """Build from camelCase keys; missing keys keep the defaults.

        Raises ValidationError for values outside a clock's range.
        """
        values = cls().to_dict()
        values.update({k: v for k, v in data.items() if k in values})
        return cls(
            late_threshold_hour=require_range(values["lateThresholdHour"], "Late threshold hour", 0, 23),
            late_threshold_minute=require_range(values["lateThresholdMinute"], "Late threshold minute", 0, 59),
            auto_checkout_hour=require_range(values["autoCheckoutHour"], "Auto checkout hour", 0, 23),
            auto_checkout_minute=require_range(values["autoCheckoutMinute"], "Auto checkout minute", 0, 59),
        )
