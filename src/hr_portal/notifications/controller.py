from __future__ import annotations

from flask import Flask, request

from ..common.web import admin_required, current_role, handle_errors, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/notifications", endpoint="notifications")
    @login_required
    @handle_errors("Failed to load notifications")
    def notifications():
        rows = container.notification_service.my_notifications()
        return ok(notifications=[n.to_dict() for n in rows])

    @app.route("/api/notifications/unread-count", endpoint="notifications_unread_count")
    @login_required
    @handle_errors("Failed to load notifications")
    def notifications_unread_count():
        return ok(count=container.notification_service.unread_count())

    @app.route("/api/notifications/poll", endpoint="notifications_poll")
    @login_required
    @handle_errors("Failed to load notifications")
    def notifications_poll():
        latest = container.notification_service.poll_latest()
        return ok(notification=latest.to_dict() if latest else None)

    @app.route("/api/notifications/<notification_id>/read", methods=["PATCH"], endpoint="notification_read")
    @login_required
    @handle_errors("Failed to update notification")
    def notification_read(notification_id: str):
        container.notification_service.mark_read(notification_id)
        return ok("Notification marked as read")

    @app.route("/api/notifications/read-all", methods=["PATCH"], endpoint="notifications_read_all")
    @login_required
    @handle_errors("Failed to update notifications")
    def notifications_read_all():
        container.notification_service.mark_all_read()
        return ok("All notifications marked as read")

    @app.route("/api/notifications/<notification_id>", methods=["DELETE"], endpoint="notification_delete")
    @login_required
    @handle_errors("Failed to delete notification")
    def notification_delete(notification_id: str):
        container.notification_service.delete(notification_id)
        return ok("Notification deleted")

    @app.route("/api/notifications/read", methods=["DELETE"], endpoint="notifications_delete_read")
    @login_required
    @handle_errors("Failed to delete notifications")
    def notifications_delete_read():
        container.notification_service.delete_all_read()
        return ok("Read notifications deleted")

    @app.route("/api/admin/notifications", methods=["POST"], endpoint="send_notification")
    @admin_required
    @handle_errors("Failed to send notification")
    def send_notification():
        count = container.notification_service.send(
            current_role=current_role(),
            data=request.get_json(silent=True) or {},
        )
        message = "Notification sent to all users" if count == 0 else f"Notification sent to {count} user(s)"
        return ok(message, 201)
