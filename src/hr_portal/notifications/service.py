from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..api.http_base import compact
from ..common.validators import require_choice, require_min_length
from ..core.enums import NotificationType, Role
from ..core.exceptions import AuthorizationError, ValidationError
from .model import Notification
from .repository import NotificationRepository

_logger = logging.getLogger(__name__)

RECIPIENT_TYPES = ("single", "multiple", "all")


class NotificationService:
    def __init__(self, notifications: NotificationRepository):
        self._notifications = notifications

    def my_notifications(self) -> Sequence[Notification]:
        return self._notifications.list_mine()

    def unread_count(self) -> int:
        return self._notifications.unread_count()

    def poll_latest(self) -> Optional[Notification]:
        """Most recent unread notification, marked read so it shows once."""

        unread = [n for n in self._notifications.list_mine() if not n.is_read]
        if not unread:
            return None
        latest = unread[0]
        self._notifications.mark_read(latest.notification_id)
        return latest

    def mark_read(self, notification_id: str) -> None:
        self._notifications.mark_read(notification_id)

    def mark_all_read(self) -> None:
        self._notifications.mark_all_read()

    def delete(self, notification_id: str) -> None:
        self._notifications.delete(notification_id)

    def delete_all_read(self) -> None:
        self._notifications.delete_all_read()

    def send(self, *, current_role: Role, data: dict) -> int:
        """Send a notification to one user, several users or everyone.

        Returns how many recipients were addressed (0 means "all").
        """

        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")

        recipient_type = data.get("recipientType") or "single"
        if recipient_type not in RECIPIENT_TYPES:
            raise ValidationError("Please select who should receive this notification")

        payload = compact(
            {
                "title": require_min_length((data.get("title") or "").strip(), "Title", 3),
                "message": require_min_length((data.get("message") or "").strip(), "Message", 5),
                "type": require_choice(data.get("type") or "", NotificationType, "Type").value,
                "referenceId": data.get("referenceId") or None,
            }
        )

        if recipient_type == "all":
            self._notifications.create_for_all(payload)
            _logger.info("Notification %r sent to all users", payload["title"])
            return 0

        if recipient_type == "multiple":
            user_ids = [str(u) for u in (data.get("userIds") or []) if u]
            if not user_ids:
                raise ValidationError("Please select at least one recipient")
            self._notifications.create_bulk(user_ids, payload)
            return len(user_ids)

        user_id = data.get("userId")
        if not user_id:
            raise ValidationError("Please select a recipient")
        self._notifications.create_for_user(str(user_id), payload)
        return 1
