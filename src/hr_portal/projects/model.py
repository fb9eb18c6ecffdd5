from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import parse_iso_date, parse_iso_datetime
from ..core.enums import ProjectStatus


@dataclass(frozen=True)
class Project:
    project_id: str
    name: str
    description: str
    start_date: date
    end_date: Optional[date] = None
    status: ProjectStatus = ProjectStatus.ACTIVE
    created_by: Optional[str] = None

    @classmethod
    def from_api(cls, row: dict) -> "Project":
        return cls(
            project_id=str(row.get("id", "")),
            name=row.get("name") or "",
            description=row.get("description") or "",
            start_date=parse_iso_date(row["startDate"]),
            end_date=parse_iso_date(row["endDate"]) if row.get("endDate") else None,
            status=ProjectStatus(row.get("status") or ProjectStatus.ACTIVE.value),
            created_by=row.get("createdBy"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.project_id,
            "name": self.name,
            "description": self.description,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat() if self.end_date else None,
            "status": self.status.value,
            "createdBy": self.created_by,
        }


@dataclass(frozen=True)
class ProjectUpdate:
    update_id: str
    project_id: str
    user_id: str
    content: str
    author_name: Optional[str] = None
    attachments: tuple = ()
    created_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, row: dict) -> "ProjectUpdate":
        user = row.get("user") or {}
        return cls(
            update_id=str(row.get("id", "")),
            project_id=str(row.get("projectId") or ""),
            user_id=str(row.get("userId") or user.get("id") or ""),
            content=row.get("content") or "",
            author_name=user.get("fullName"),
            attachments=tuple(row.get("attachments") or ()),
            created_at=parse_iso_datetime(row.get("createdAt")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.update_id,
            "projectId": self.project_id,
            "userId": self.user_id,
            "content": self.content,
            "authorName": self.author_name,
            "attachments": list(self.attachments),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
