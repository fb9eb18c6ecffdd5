from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import format_clock_time, now_local, parse_clock_time, parse_iso_date
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..users.repository import UserRepository
from .model import AttendanceRecord, AttendanceSettings
from .repository import AttendanceRepository
from .settings_store import JsonSettingsStore
from .status import calculate_working_hours, get_status_decision, is_auto_checkout_due

_logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "Date",
    "Employee Name",
    "Department",
    "Check-in Time",
    "Check-out Time",
    "Working Hours",
    "Status",
]


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        settings_store: JsonSettingsStore,
    ):
        self._attendance = attendance
        self._users = users
        self._settings = settings_store

    # Settings

    def get_settings(self) -> AttendanceSettings:
        return self._settings.load()

    def update_settings(self, *, current_role: Role, data: dict) -> AttendanceSettings:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")

        settings = AttendanceSettings.from_dict({**self._settings.load().to_dict(), **data})
        self._settings.save(settings)
        _logger.info("Attendance settings updated: %s", settings.to_dict())
        return settings

    # Employee

    def get_today_record(self) -> Optional[AttendanceRecord]:
        return self._attendance.get_today()

    def auto_checkout_due(self, record: Optional[AttendanceRecord], now: Optional[datetime] = None) -> bool:
        """True when `record` is still open past the configured auto checkout time."""

        if record is None or not record.is_open:
            return False
        return is_auto_checkout_due(now or now_local(), self._settings.load())

    def check_in(self, *, latitude: float, longitude: float) -> AttendanceRecord:
        record = self._attendance.check_in(latitude=latitude, longitude=longitude)
        if not record:
            raise ValidationError("Unable to check in. Please try again.")
        return record

    def check_out(self, *, latitude: float, longitude: float, late_checkout_reason: str = "") -> AttendanceRecord:
        record = self._attendance.check_out(
            latitude=latitude,
            longitude=longitude,
            late_checkout_reason=(late_checkout_reason or "").strip(),
        )
        if not record:
            raise ValidationError("Unable to check out. Please try again.")
        return record

    def get_history_ui(self, *, date_filter: str = "", month_filter: str = "") -> list[dict]:
        settings = self._settings.load()
        rows = self._filter(self._attendance.get_my_history(), date_filter=date_filter, month_filter=month_filter)
        return [self.to_ui(r, settings) for r in rows]

    # Admin

    def get_log_ui(
        self,
        *,
        date_filter: str = "",
        month_filter: str = "",
        employee_id: str = "",
        department: str = "",
    ) -> list[dict]:
        settings = self._settings.load()
        return [
            self.to_ui(r, settings)
            for r in self._log_records(
                date_filter=date_filter,
                month_filter=month_filter,
                employee_id=employee_id,
                department=department,
            )
        ]

    def report_rows(self, **filters) -> list[dict]:
        """Rows for the CSV export, keyed by REPORT_COLUMNS."""

        out = []
        for row in self.get_log_ui(**filters):
            out.append(
                {
                    "Date": row["date"],
                    "Employee Name": row["employee_name"],
                    "Department": row["department"],
                    "Check-in Time": row["check_in"],
                    "Check-out Time": row["check_out"],
                    "Working Hours": row["working_hours"],
                    "Status": row["status"],
                }
            )
        return out

    def manual_update(
        self,
        *,
        current_role: Role,
        employee_id: str,
        work_date: str,
        check_in_time: str,
        check_out_time: str = "",
    ) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")
        if not employee_id:
            raise ValidationError("Employee is required")

        day = parse_iso_date(work_date)
        check_in = format_clock_time(parse_clock_time(check_in_time))
        check_out = format_clock_time(parse_clock_time(check_out_time)) if (check_out_time or "").strip() else None

        ok = self._attendance.manual_upsert(
            employee_id=str(employee_id),
            work_date=day,
            check_in_time=check_in,
            check_out_time=check_out,
        )
        if not ok:
            raise ValidationError("Updating attendance failed")

    def delete_record(self, *, current_role: Role, record_id: str) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")
        if not self._attendance.delete(record_id):
            raise ValidationError("Deleting attendance failed")

    # Helpers

    @staticmethod
    def _filter(records: Sequence[AttendanceRecord], *, date_filter: str, month_filter: str) -> list[AttendanceRecord]:
        # Month filter takes priority over date filter.
        if month_filter:
            records = [r for r in records if r.work_date.strftime("%Y-%m") == month_filter]
        elif date_filter:
            day = parse_iso_date(date_filter)
            records = [r for r in records if r.work_date == day]
        return sorted(records, key=lambda r: r.work_date, reverse=True)

    def _log_records(self, *, date_filter: str, month_filter: str, employee_id: str, department: str):
        if employee_id:
            records = self._attendance.list_for_employee(employee_id)
        elif date_filter and not month_filter:
            records = self._attendance.list_for_date(parse_iso_date(date_filter))
        else:
            records = self._attendance.list_all()

        employees = {u.user_id: u for u in self._users.list_all()}
        enriched = []
        for r in records:
            emp = employees.get(r.employee_id)
            name = r.employee_name or (emp.full_name if emp else None) or "Unknown"
            dept = r.department or (emp.department if emp else None) or "Unknown"
            if department and dept != department:
                continue
            enriched.append((r, name, dept))

        kept = {id(r) for r in self._filter([e[0] for e in enriched], date_filter=date_filter, month_filter=month_filter)}
        rows = [e for e in enriched if id(e[0]) in kept]
        rows.sort(key=lambda e: e[0].work_date, reverse=True)
        return [
            replace(r, employee_name=name, department=dept)
            for r, name, dept in rows
        ]

    def to_ui(self, r: AttendanceRecord, settings: Optional[AttendanceSettings] = None) -> dict:
        settings = settings or self._settings.load()
        decision = get_status_decision(r.check_in_time, settings)
        status = decision.status
        css = {
            AttendanceStatus.PRESENT: "bg-success",
            AttendanceStatus.LATE: "bg-warning text-dark",
            AttendanceStatus.ABSENT: "bg-danger",
        }.get(status, "bg-secondary")

        return {
            "id": r.record_id,
            "employee_id": r.employee_id,
            "employee_name": r.employee_name or "",
            "department": r.department or "",
            "date": r.work_date.strftime("%Y-%m-%d"),
            "check_in": r.check_in_time or "N/A",
            "check_out": r.check_out_time or "N/A",
            "working_hours": calculate_working_hours(r.check_in_time, r.check_out_time) if r.check_in_time else "-",
            "status": status.value,
            "status_note": decision.note or "",
            "css_class": css,
            "late_checkout_reason": r.late_checkout_reason or "",
        }
