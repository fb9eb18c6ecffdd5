from __future__ import annotations

import csv
import io
from datetime import date

from flask import Flask, request

from ..common.web import admin_required, current_role, handle_errors, login_required, ok
from ..container import Container
from .service import REPORT_COLUMNS


def _filters_from_args() -> dict:
    return {
        "date_filter": request.args.get("date", ""),
        "month_filter": request.args.get("month", ""),
        "employee_id": request.args.get("employeeId", ""),
        "department": request.args.get("department", ""),
    }


def register(app: Flask, container: Container) -> None:
    def _write_report_csv(*, rows, filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=REPORT_COLUMNS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/attendance/today", endpoint="attendance_today")
    @login_required
    @handle_errors("Failed to load today's attendance")
    def attendance_today():
        record = container.attendance_service.get_today_record()
        if not record:
            return ok(record=None, autoCheckoutDue=False)
        return ok(
            record=container.attendance_service.to_ui(record),
            autoCheckoutDue=container.attendance_service.auto_checkout_due(record),
        )

    @app.route("/api/attendance/history", endpoint="attendance_history")
    @login_required
    @handle_errors("Failed to load attendance history")
    def attendance_history():
        rows = container.attendance_service.get_history_ui(
            date_filter=request.args.get("date", ""),
            month_filter=request.args.get("month", ""),
        )
        return ok(records=rows)

    @app.route("/api/admin/attendance", endpoint="admin_attendance")
    @admin_required
    @handle_errors("Failed to load attendance log")
    def admin_attendance():
        return ok(records=container.attendance_service.get_log_ui(**_filters_from_args()))

    @app.route("/api/admin/attendance/report.csv", endpoint="admin_attendance_csv")
    @admin_required
    @handle_errors("Failed to export attendance")
    def admin_attendance_csv():
        rows = container.attendance_service.report_rows(**_filters_from_args())
        filename = f"attendance_report_{date.today().strftime('%Y-%m-%d')}.csv"
        return _write_report_csv(rows=rows, filename=filename)

    @app.route("/api/admin/attendance/manual", methods=["POST"], endpoint="admin_attendance_manual")
    @admin_required
    @handle_errors("Failed to update attendance")
    def admin_attendance_manual():
        data = request.get_json(silent=True) or {}
        container.attendance_service.manual_update(
            current_role=current_role(),
            employee_id=str(data.get("employeeId", "")),
            work_date=data.get("date", ""),
            check_in_time=data.get("checkInTime", ""),
            check_out_time=data.get("checkOutTime", ""),
        )
        return ok("Attendance updated")

    @app.route("/api/admin/attendance/<record_id>", methods=["DELETE"], endpoint="admin_attendance_delete")
    @admin_required
    @handle_errors("Failed to delete attendance")
    def admin_attendance_delete(record_id: str):
        container.attendance_service.delete_record(current_role=current_role(), record_id=record_id)
        return ok("Attendance record deleted")

    @app.route("/api/settings/attendance", endpoint="attendance_settings")
    @admin_required
    @handle_errors("Failed to load settings")
    def attendance_settings():
        return ok(settings=container.attendance_service.get_settings().to_dict())

    @app.route("/api/settings/attendance", methods=["PUT"], endpoint="update_attendance_settings")
    @admin_required
    @handle_errors("Failed to save settings")
    def update_attendance_settings():
        settings = container.attendance_service.update_settings(
            current_role=current_role(),
            data=request.get_json(silent=True) or {},
        )
        return ok("Settings saved", settings=settings.to_dict())
