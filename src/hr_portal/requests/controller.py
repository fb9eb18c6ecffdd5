from __future__ import annotations

from flask import Flask, request

from ..common.web import admin_required, current_role, handle_errors, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/requests", endpoint="my_manual_requests")
    @login_required
    @handle_errors("Failed to load requests")
    def my_manual_requests():
        rows = container.manual_request_service.my_requests()
        return ok(requests=[r.to_dict() for r in rows])

    @app.route("/api/requests", methods=["POST"], endpoint="submit_manual_request")
    @login_required
    @handle_errors("Failed to submit request")
    def submit_manual_request():
        data = request.get_json(silent=True) or {}
        req = container.manual_request_service.submit(
            work_date=data.get("date", ""),
            check_in_time=data.get("checkInTime", ""),
            check_out_time=data.get("checkOutTime", ""),
            reason=data.get("reason", ""),
        )
        return ok("Request submitted", 201, request=req.to_dict())

    @app.route("/api/requests/<request_id>", methods=["DELETE"], endpoint="cancel_manual_request")
    @login_required
    @handle_errors("Failed to cancel request")
    def cancel_manual_request(request_id: str):
        container.manual_request_service.cancel(request_id)
        return ok("Request cancelled")

    @app.route("/api/admin/requests", endpoint="admin_manual_requests")
    @admin_required
    @handle_errors("Failed to load attendance requests")
    def admin_manual_requests():
        pending_only = request.args.get("status") == "pending"
        rows = container.manual_request_service.list_all(pending_only=pending_only)
        return ok(requests=[r.to_dict() for r in rows])

    @app.route("/api/admin/requests/<request_id>/process", methods=["PUT"], endpoint="process_manual_request")
    @admin_required
    @handle_errors("Failed to process request")
    def process_manual_request(request_id: str):
        data = request.get_json(silent=True) or {}
        status = data.get("status", "")
        container.manual_request_service.process(
            current_role=current_role(),
            request_id=request_id,
            status=status,
            remarks=data.get("remarks", ""),
        )
        return ok(f"Request {status} successfully")
