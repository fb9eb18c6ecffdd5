from __future__ import annotations

from flask import Flask, request

from ..common.web import admin_required, current_role, handle_errors, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/holidays", endpoint="holidays")
    @login_required
    @handle_errors("Failed to load holidays")
    def holidays():
        year = request.args.get("year", type=int)
        rows = container.holiday_service.list_holidays(year=year)
        return ok(holidays=[h.to_dict() for h in rows])

    @app.route("/api/holidays/<holiday_id>", endpoint="holiday_detail")
    @login_required
    @handle_errors("Failed to load holiday")
    def holiday_detail(holiday_id: str):
        return ok(holiday=container.holiday_service.get_holiday(holiday_id).to_dict())

    @app.route("/api/admin/holidays", methods=["POST"], endpoint="create_holiday")
    @admin_required
    @handle_errors("Failed to add holiday")
    def create_holiday():
        holiday = container.holiday_service.save_holiday(
            current_role=current_role(),
            data=request.get_json(silent=True) or {},
        )
        return ok("Holiday added", 201, holiday=holiday.to_dict())

    @app.route("/api/admin/holidays/<holiday_id>", methods=["PUT"], endpoint="update_holiday")
    @admin_required
    @handle_errors("Failed to update holiday")
    def update_holiday(holiday_id: str):
        holiday = container.holiday_service.save_holiday(
            current_role=current_role(),
            data=request.get_json(silent=True) or {},
            holiday_id=holiday_id,
        )
        return ok("Holiday updated", holiday=holiday.to_dict())

    @app.route("/api/admin/holidays/<holiday_id>", methods=["DELETE"], endpoint="delete_holiday")
    @admin_required
    @handle_errors("Failed to delete holiday")
    def delete_holiday(holiday_id: str):
        container.holiday_service.delete_holiday(current_role=current_role(), holiday_id=holiday_id)
        return ok("Holiday deleted")
