from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from ..attendance.model import AttendanceRecord
from ..attendance.service import AttendanceService
from ..attendance.status import elapsed_hours
from ..common.datetime_utils import now_local
from ..core.constants import EXTENDED_HOURS_THRESHOLD
from ..core.enums import ScanOutcome
from ..core.exceptions import AuthenticationError, ValidationError
from ..geofences.model import GeoLocation
from ..geofences.service import GeoFenceService
from .scanner import ScannerRegistry

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanResult:
    outcome: ScanOutcome
    message: str
    record: Optional[AttendanceRecord] = None
    hours_worked: Optional[float] = None


class QrScanService:
    """Turns a scanned employee QR code into a check-in or check-out.

    The checks run in a fixed order and the first failing one wins:
    login, scanner slot, QR payload, location, office zone, extended hours.
    """

    def __init__(
        self,
        attendance_service: AttendanceService,
        geofence_service: GeoFenceService,
        scanners: ScannerRegistry,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance_service
        self._geofences = geofence_service
        self._scanners = scanners
        self._clock = clock

    def scan(
        self,
        *,
        user_id: Optional[str],
        is_wfh_enabled: bool,
        decoded_text: str,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        late_checkout_reason: Optional[str] = None,
    ) -> ScanResult:
        if not user_id:
            raise AuthenticationError("Please log in to mark attendance")

        with self._scanners.slot(user_id):
            if (decoded_text or "").strip() != str(user_id):
                raise ValidationError("This QR code doesn't match your employee ID")

            location = self._resolve_location(is_wfh_enabled, latitude, longitude)
            if location is None:
                raise ValidationError("Please capture your location first before scanning")

            if not is_wfh_enabled:
                location = self._geofences.check_location(location.latitude, location.longitude)
                if not location.is_within_fence:
                    raise ValidationError("You are not within the authorized office zone")

            return self._process(location, late_checkout_reason)

    def _resolve_location(self, is_wfh_enabled: bool, latitude, longitude) -> Optional[GeoLocation]:
        if is_wfh_enabled:
            office = self._geofences.wfh_location()
            if office:
                return office
        if latitude is None or longitude is None:
            return None
        return GeoLocation(float(latitude), float(longitude), is_within_fence=True if is_wfh_enabled else None)

    def _process(self, location: GeoLocation, late_checkout_reason: Optional[str]) -> ScanResult:
        now = self._clock()
        today = self._attendance.get_today_record()

        if today is None or not today.check_in_time:
            record = self._attendance.check_in(latitude=location.latitude, longitude=location.longitude)
            _logger.info("QR check-in for employee %s", record.employee_id)
            return ScanResult(ScanOutcome.CHECKED_IN, f"You checked in at {now:%H:%M:%S}", record)

        if today.is_complete:
            return ScanResult(ScanOutcome.COMPLETE, "Attendance already complete for today", today)

        hours = elapsed_hours(today.check_in_time, now)
        reason = ""
        if hours > EXTENDED_HOURS_THRESHOLD:
            if late_checkout_reason is None:
                return ScanResult(
                    ScanOutcome.NEEDS_REASON,
                    f"You have been checked in for more than {EXTENDED_HOURS_THRESHOLD} hours. "
                    "Please provide a reason for the late checkout.",
                    today,
                    hours_worked=round(hours, 2),
                )
            reason = late_checkout_reason.strip()
            if not reason:
                raise ValidationError("Please provide a reason for the late checkout")

        record = self._attendance.check_out(
            latitude=location.latitude,
            longitude=location.longitude,
            late_checkout_reason=reason,
        )
        _logger.info("QR check-out for employee %s after %.2fh", record.employee_id, hours)
        return ScanResult(ScanOutcome.CHECKED_OUT, f"You checked out at {now:%H:%M:%S}", record)
