from datetime import date, datetime

import pytest

from hr_portal.attendance.model import AttendanceRecord, AttendanceSettings
from hr_portal.attendance.service import REPORT_COLUMNS, AttendanceService
from hr_portal.core.enums import Role
from hr_portal.core.exceptions import AuthorizationError, ValidationError
from hr_portal.users.model import User


def _record(rid, emp, day, check_in="09:00:00", check_out="17:00:00", name=None, dept=None):
    return AttendanceRecord(
        record_id=rid,
        employee_id=emp,
        work_date=day,
        check_in_time=check_in,
        check_out_time=check_out,
        employee_name=name,
        department=dept,
    )


class FakeAttendanceRepo:
    def __init__(self, records=()):
        self.records = list(records)
        self.upserts = []
        self.deleted = []

    def get_today(self):
        return None

    def get_my_history(self):
        return [r for r in self.records if r.employee_id == "u1"]

    def list_all(self):
        return list(self.records)

    def list_for_employee(self, employee_id):
        return [r for r in self.records if r.employee_id == employee_id]

    def list_for_date(self, work_date):
        return [r for r in self.records if r.work_date == work_date]

    def manual_upsert(self, **kwargs):
        self.upserts.append(kwargs)
        return True

    def delete(self, record_id):
        self.deleted.append(record_id)
        return True


class FakeUsersRepo:
    def list_all(self):
        return [
            User(user_id="u1", first_name="Ana", last_name="Lee", email="ana@x.io", role=Role.EMPLOYEE,
                 full_name="Ana Lee", department="Engineering"),
            User(user_id="u2", first_name="Bo", last_name="Kim", email="bo@x.io", role=Role.EMPLOYEE,
                 full_name="Bo Kim", department="Sales"),
        ]


@pytest.fixture
def records():
    return [
        _record("r1", "u1", date(2025, 3, 10), "09:10:00", "17:00:00"),
        _record("r2", "u2", date(2025, 3, 10), "09:30:00", None),
        _record("r3", "u1", date(2025, 2, 28), "08:55:00", "18:00:00"),
    ]


@pytest.fixture
def service(records, settings_store):
    return AttendanceService(FakeAttendanceRepo(records), FakeUsersRepo(), settings_store)


def test_history_rows_carry_status_and_hours(service):
    rows = service.get_history_ui()

    assert [r["date"] for r in rows] == ["2025-03-10", "2025-02-28"]
    assert rows[0]["status"] == "present"
    assert rows[0]["working_hours"] == "7h 50m"


def test_log_fills_names_from_users(service):
    rows = service.get_log_ui(date_filter="2025-03-10")

    names = {r["employee_name"] for r in rows}
    assert names == {"Ana Lee", "Bo Kim"}
    late = next(r for r in rows if r["employee_id"] == "u2")
    assert late["status"] == "late"
    assert late["working_hours"] == "Not checked out"


def test_month_filter_wins_over_date_filter(service):
    rows = service.get_log_ui(date_filter="2025-03-10", month_filter="2025-02")

    assert [r["id"] for r in rows] == ["r3"]


def test_department_filter(service):
    rows = service.get_log_ui(department="Sales")

    assert [r["id"] for r in rows] == ["r2"]


def test_report_rows_use_export_columns(service):
    rows = service.report_rows(month_filter="2025-03")

    assert len(rows) == 2
    assert list(rows[0].keys()) == REPORT_COLUMNS


def test_settings_default_then_saved(service, settings_store):
    assert service.get_settings() == AttendanceSettings()

    service.update_settings(current_role=Role.ADMIN, data={"lateThresholdHour": 10, "lateThresholdMinute": 5})

    assert settings_store.load().late_threshold_hour == 10
    assert settings_store.load().late_threshold_minute == 5


@pytest.mark.parametrize(
    "data",
    [{"lateThresholdHour": 24}, {"lateThresholdMinute": 60}, {"autoCheckoutHour": -1}, {"autoCheckoutMinute": "x"}],
)
def test_settings_out_of_range_rejected(service, data):
    with pytest.raises(ValidationError):
        service.update_settings(current_role=Role.ADMIN, data=data)


def test_settings_require_admin(service):
    with pytest.raises(AuthorizationError):
        service.update_settings(current_role=Role.EMPLOYEE, data={})


def test_manual_update_normalizes_times(service):
    service.manual_update(
        current_role=Role.ADMIN,
        employee_id="u1",
        work_date="2025-03-11",
        check_in_time="09:05",
        check_out_time="",
    )

    upsert = service._attendance.upserts[0]
    assert upsert["work_date"] == date(2025, 3, 11)
    assert upsert["check_in_time"] == "09:05:00"
    assert upsert["check_out_time"] is None


def test_manual_update_rejects_bad_time(service):
    with pytest.raises(ValidationError):
        service.manual_update(
            current_role=Role.ADMIN,
            employee_id="u1",
            work_date="2025-03-11",
            check_in_time="25:00",
        )


def test_unreadable_settings_file_falls_back_to_defaults(settings_store, tmp_path):
    (tmp_path / "attendance_settings.json").write_text("{not json", encoding="utf-8")

    assert settings_store.load() == AttendanceSettings()


def test_late_rows_carry_the_late_note(service):
    rows = service.get_log_ui(date_filter="2025-03-10")

    by_id = {r["id"]: r for r in rows}
    assert by_id["r2"]["status_note"] == "Late by 15 min"
    assert by_id["r1"]["status_note"] == ""


def test_auto_checkout_due_only_for_open_record_past_the_time(service, settings_store, records):
    settings_store.save(AttendanceSettings(auto_checkout_hour=18, auto_checkout_minute=0))
    open_record, closed_record = records[1], records[0]

    assert service.auto_checkout_due(open_record, now=datetime(2025, 3, 10, 18, 5)) is True
    assert service.auto_checkout_due(open_record, now=datetime(2025, 3, 10, 17, 59)) is False
    assert service.auto_checkout_due(closed_record, now=datetime(2025, 3, 10, 18, 5)) is False
    assert service.auto_checkout_due(None, now=datetime(2025, 3, 10, 18, 5)) is False


def test_auto_checkout_disabled_by_default(service, records):
    assert service.auto_checkout_due(records[1], now=datetime(2025, 3, 10, 23, 59)) is False


@pytest.mark.parametrize(
    "content",
    ["[1, 2, 3]", '"09:15"', '{"lateThresholdHour": 30}', '{"autoCheckoutMinute": "soon"}'],
)
def test_malformed_settings_file_falls_back_to_defaults(settings_store, tmp_path, content):
    (tmp_path / "attendance_settings.json").write_text(content, encoding="utf-8")

    assert settings_store.load() == AttendanceSettings()


def test_partial_settings_file_keeps_defaults_for_missing_keys(settings_store, tmp_path):
    (tmp_path / "attendance_settings.json").write_text('{"autoCheckoutHour": 19}', encoding="utf-8")

    settings = settings_store.load()
    assert settings.auto_checkout_hour == 19
    assert settings.late_threshold == AttendanceSettings().late_threshold
