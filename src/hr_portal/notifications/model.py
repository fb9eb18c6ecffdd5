from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import parse_iso_datetime
from ..core.enums import NotificationType, coerce_enum


@dataclass(frozen=True)
class Notification:
    notification_id: str
    user_id: str
    title: str
    message: str
    kind: NotificationType = NotificationType.INFO
    is_read: bool = False
    reference_id: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, row: dict) -> "Notification":
        return cls(
            notification_id=str(row.get("id", "")),
            user_id=str(row.get("userId") or ""),
            title=row.get("title") or "",
            message=row.get("message") or "",
            kind=coerce_enum(NotificationType, row.get("type"), NotificationType.INFO),
            is_read=bool(row.get("isRead", False)),
            reference_id=row.get("referenceId"),
            created_at=parse_iso_datetime(row.get("createdAt")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.notification_id,
            "userId": self.user_id,
            "title": self.title,
            "message": self.message,
            "type": self.kind.value,
            "isRead": self.is_read,
            "referenceId": self.reference_id,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
