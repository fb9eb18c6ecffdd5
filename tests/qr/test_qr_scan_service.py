from datetime import date, datetime

import pytest

from hr_portal.attendance.model import AttendanceRecord
from hr_portal.attendance.service import AttendanceService
from hr_portal.core.enums import ScanOutcome
from hr_portal.core.exceptions import AuthenticationError, ScannerBusyError, ValidationError
from hr_portal.geofences.model import GeoFence
from hr_portal.geofences.service import GeoFenceService
from hr_portal.qr.scanner import ScannerRegistry
from hr_portal.qr.service import QrScanService


class FakeAttendanceRepo:
    def __init__(self, today=None):
        self.today = today
        self.check_ins = []
        self.check_outs = []

    def get_today(self):
        return self.today

    def check_in(self, *, latitude, longitude):
        self.check_ins.append((latitude, longitude))
        self.today = AttendanceRecord("r1", "emp-7", date(2025, 3, 12), "10:30:00")
        return self.today

    def check_out(self, *, latitude, longitude, late_checkout_reason=""):
        self.check_outs.append((latitude, longitude, late_checkout_reason))
        return AttendanceRecord("r1", "emp-7", date(2025, 3, 12), self.today.check_in_time, "10:30:00")


class FakeGeoFenceRepo:
    def __init__(self, inside=True, fences=()):
        self.inside = inside
        self.fences = list(fences)
        self.checked = []

    def list_all(self):
        return self.fences

    def is_within_fence(self, latitude, longitude):
        self.checked.append((latitude, longitude))
        return self.inside


OFFICE = GeoFence("f1", "HQ", 10.7769, 106.7009, 150, active=True)


def _service(fixed_now, *, today=None, inside=True, fences=(OFFICE,), scanners=None):
    attendance_repo = FakeAttendanceRepo(today)
    fence_repo = FakeGeoFenceRepo(inside, fences)
    service = QrScanService(
        AttendanceService(attendance_repo, users=None, settings_store=None),
        GeoFenceService(fence_repo),
        scanners or ScannerRegistry(),
        clock=lambda: fixed_now,
    )
    return service, attendance_repo, fence_repo


def _scan(service, **overrides):
    kwargs = dict(user_id="emp-7", is_wfh_enabled=False, decoded_text="emp-7", latitude=10.0, longitude=106.0)
    kwargs.update(overrides)
    return service.scan(**kwargs)


def test_first_scan_checks_in(fixed_now):
    service, repo, _ = _service(fixed_now)

    result = _scan(service)

    assert result.outcome == ScanOutcome.CHECKED_IN
    assert result.message == "You checked in at 10:30:00"
    assert repo.check_ins == [(10.0, 106.0)]


def test_open_record_checks_out(fixed_now):
    today = AttendanceRecord("r1", "emp-7", date(2025, 3, 12), "09:00:00")
    service, repo, _ = _service(fixed_now, today=today)

    result = _scan(service)

    assert result.outcome == ScanOutcome.CHECKED_OUT
    assert repo.check_outs == [(10.0, 106.0, "")]


def test_completed_record_is_not_touched(fixed_now):
    today = AttendanceRecord("r1", "emp-7", date(2025, 3, 12), "09:00:00", "10:00:00")
    service, repo, _ = _service(fixed_now, today=today)

    result = _scan(service)

    assert result.outcome == ScanOutcome.COMPLETE
    assert repo.check_ins == [] and repo.check_outs == []


def test_not_logged_in():
    service, _, _ = _service(datetime(2025, 3, 12, 10, 30))

    with pytest.raises(AuthenticationError):
        _scan(service, user_id=None)


def test_foreign_qr_code_rejected(fixed_now):
    service, repo, _ = _service(fixed_now)

    with pytest.raises(ValidationError, match="doesn't match your employee ID"):
        _scan(service, decoded_text="emp-8")
    assert repo.check_ins == []


def test_location_required_after_code_check(fixed_now):
    service, _, _ = _service(fixed_now)

    with pytest.raises(ValidationError, match="capture your location"):
        _scan(service, latitude=None, longitude=None)

    # A wrong code is reported before a missing location.
    with pytest.raises(ValidationError, match="employee ID"):
        _scan(service, decoded_text="x", latitude=None, longitude=None)


def test_outside_office_zone(fixed_now):
    service, repo, fences = _service(fixed_now, inside=False)

    with pytest.raises(ValidationError, match="authorized office zone"):
        _scan(service)
    assert fences.checked == [(10.0, 106.0)]
    assert repo.check_ins == []


def test_wfh_uses_office_centre_and_skips_fence_check(fixed_now):
    service, repo, fences = _service(fixed_now, inside=False)

    result = _scan(service, is_wfh_enabled=True, latitude=None, longitude=None)

    assert result.outcome == ScanOutcome.CHECKED_IN
    assert repo.check_ins == [(OFFICE.center_latitude, OFFICE.center_longitude)]
    assert fences.checked == []


def test_extended_shift_asks_for_reason(fixed_now):
    today = AttendanceRecord("r1", "emp-7", date(2025, 3, 12), "01:00:00")
    service, repo, _ = _service(fixed_now, today=today)

    result = _scan(service)

    assert result.outcome == ScanOutcome.NEEDS_REASON
    assert result.hours_worked == pytest.approx(9.5)
    assert repo.check_outs == []


def test_extended_shift_blank_reason_rejected(fixed_now):
    today = AttendanceRecord("r1", "emp-7", date(2025, 3, 12), "01:00:00")
    service, repo, _ = _service(fixed_now, today=today)

    with pytest.raises(ValidationError):
        _scan(service, late_checkout_reason="   ")
    assert repo.check_outs == []


def test_extended_shift_checkout_with_reason(fixed_now):
    today = AttendanceRecord("r1", "emp-7", date(2025, 3, 12), "01:00:00")
    service, repo, _ = _service(fixed_now, today=today)

    result = _scan(service, late_checkout_reason=" Release night ")

    assert result.outcome == ScanOutcome.CHECKED_OUT
    assert repo.check_outs == [(10.0, 106.0, "Release night")]


def test_second_scan_while_busy_is_rejected(fixed_now):
    scanners = ScannerRegistry()
    service, _, _ = _service(fixed_now, scanners=scanners)
    scanners.acquire("emp-7")

    with pytest.raises(ScannerBusyError):
        _scan(service)


def test_scanner_slot_released_after_failure(fixed_now):
    scanners = ScannerRegistry()
    service, _, _ = _service(fixed_now, scanners=scanners)

    with pytest.raises(ValidationError):
        _scan(service, decoded_text="nope")

    assert not scanners.is_busy("emp-7")
    assert _scan(service).outcome == ScanOutcome.CHECKED_IN
