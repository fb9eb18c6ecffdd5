from __future__ import annotations

from typing import Sequence

from ..api.client import ApiClient
from ..api.http_base import unwrap_count, unwrap_list
from .model import Notification
from .repository import NotificationRepository


class HttpNotificationRepository(NotificationRepository):
    def __init__(self, api: ApiClient):
        self._api = api

    def list_mine(self) -> Sequence[Notification]:
        return [Notification.from_api(r) for r in unwrap_list(self._api.get("/notifications"), "notifications")]

    def unread_count(self) -> int:
        return unwrap_count(self._api.get("/notifications/unread-count"))

    def mark_read(self, notification_id: str) -> bool:
        self._api.patch(f"/notifications/{notification_id}/read")
        return True

    def mark_all_read(self) -> bool:
        self._api.patch("/notifications/mark-all-read")
        return True

    def delete(self, notification_id: str) -> bool:
        self._api.delete(f"/notifications/{notification_id}")
        return True

    def delete_all_read(self) -> bool:
        self._api.delete("/notifications/delete-all-read")
        return True

    def create_for_user(self, user_id: str, data: dict) -> bool:
        self._api.post("/notifications", {"userId": user_id, **data})
        return True

    def create_bulk(self, user_ids: Sequence[str], data: dict) -> bool:
        self._api.post("/notifications/bulk", {"userIds": list(user_ids), "data": data})
        return True

    def create_for_all(self, data: dict) -> bool:
        self._api.post("/notifications/all", data)
        return True
