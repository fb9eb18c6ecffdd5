from __future__ import annotations

from typing import Protocol, Sequence

from .model import Notification


class NotificationRepository(Protocol):
    def list_mine(self) -> Sequence[Notification]:
        """Newest first."""

        raise NotImplementedError

    def unread_count(self) -> int:
        raise NotImplementedError

    def mark_read(self, notification_id: str) -> bool:
        raise NotImplementedError

    def mark_all_read(self) -> bool:
        raise NotImplementedError

    def delete(self, notification_id: str) -> bool:
        raise NotImplementedError

    def delete_all_read(self) -> bool:
        raise NotImplementedError

    def create_for_user(self, user_id: str, data: dict) -> bool:
        raise NotImplementedError

    def create_bulk(self, user_ids: Sequence[str], data: dict) -> bool:
        raise NotImplementedError

    def create_for_all(self, data: dict) -> bool:
        raise NotImplementedError
