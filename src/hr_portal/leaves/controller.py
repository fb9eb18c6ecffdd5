from __future__ import annotations

from flask import Flask, request

from ..common.web import admin_required, current_role, current_user_id, handle_errors, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leaves", endpoint="my_leaves")
    @login_required
    @handle_errors("Failed to load leave requests")
    def my_leaves():
        leaves = container.leave_service.my_leaves()
        balance = container.leave_service.balance(leaves, employee_id=current_user_id())
        return ok(leaves=[l.to_dict() for l in leaves], balance=balance.to_dict())

    @app.route("/api/leaves", methods=["POST"], endpoint="apply_leave")
    @login_required
    @handle_errors("Failed to submit leave request")
    def apply_leave():
        data = request.get_json(silent=True) or {}
        leave = container.leave_service.apply(
            start_date=data.get("startDate", ""),
            end_date=data.get("endDate", ""),
            leave_type=data.get("type", ""),
            reason=data.get("reason", ""),
        )
        return ok("Leave request submitted", 201, leave=leave.to_dict())

    @app.route("/api/leaves/<leave_id>", methods=["DELETE"], endpoint="cancel_leave")
    @login_required
    @handle_errors("Failed to cancel leave request")
    def cancel_leave(leave_id: str):
        container.leave_service.cancel(leave_id)
        return ok("Leave request cancelled")

    @app.route("/api/leaves/balance", endpoint="leave_balance")
    @login_required
    @handle_errors("Failed to load leave balance")
    def leave_balance():
        return ok(balance=container.leave_service.balance(employee_id=current_user_id()).to_dict())

    @app.route("/api/admin/leaves", endpoint="admin_leaves")
    @admin_required
    @handle_errors("Failed to load leave requests")
    def admin_leaves():
        rows = container.leave_service.list_all(status=request.args.get("status", ""))
        return ok(leaves=[l.to_dict() for l in rows])

    @app.route("/api/admin/leaves/<leave_id>/status", methods=["PUT"], endpoint="decide_leave")
    @admin_required
    @handle_errors("Failed to update leave request")
    def decide_leave(leave_id: str):
        data = request.get_json(silent=True) or {}
        status = data.get("status", "")
        container.leave_service.decide(
            current_role=current_role(),
            leave_id=leave_id,
            status=status,
            remarks=data.get("remarks", ""),
        )
        return ok(f"Leave request {status}")
