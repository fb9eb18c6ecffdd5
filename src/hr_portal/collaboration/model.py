from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import parse_iso_datetime
from ..core.enums import DocumentAccess


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass(frozen=True)
class DiscussionThread:
    thread_id: str
    project_id: str
    title: str
    created_by: str
    comment_count: int = 0
    author_name: Optional[str] = None
    last_activity: Optional[datetime] = None

    @classmethod
    def from_api(cls, row: dict) -> "DiscussionThread":
        user = row.get("user") or {}
        return cls(
            thread_id=str(row.get("id", "")),
            project_id=str(row.get("projectId") or ""),
            title=row.get("title") or "",
            created_by=str(row.get("createdBy") or user.get("id") or ""),
            comment_count=int(row.get("commentCount") or 0),
            author_name=user.get("fullName"),
            last_activity=parse_iso_datetime(row.get("lastActivity") or row.get("updatedAt")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.thread_id,
            "projectId": self.project_id,
            "title": self.title,
            "createdBy": self.created_by,
            "commentCount": self.comment_count,
            "authorName": self.author_name,
            "lastActivity": _iso(self.last_activity),
        }


@dataclass(frozen=True)
class ThreadComment:
    comment_id: str
    thread_id: str
    user_id: str
    content: str
    author_name: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, row: dict) -> "ThreadComment":
        user = row.get("user") or {}
        return cls(
            comment_id=str(row.get("id", "")),
            thread_id=str(row.get("threadId") or ""),
            user_id=str(row.get("userId") or user.get("id") or ""),
            content=row.get("content") or "",
            author_name=user.get("fullName"),
            created_at=parse_iso_datetime(row.get("createdAt")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.comment_id,
            "threadId": self.thread_id,
            "userId": self.user_id,
            "content": self.content,
            "authorName": self.author_name,
            "createdAt": _iso(self.created_at),
        }


@dataclass(frozen=True)
class Meeting:
    meeting_id: str
    title: str
    start_time: Optional[datetime]
    end_time: Optional[datetime]
    organizer: str
    attendees: tuple = ()
    description: str = ""
    location: str = ""
    is_virtual: bool = False
    meeting_link: Optional[str] = None
    is_recurring: bool = False
    recurring_pattern: Optional[str] = None
    project_id: Optional[str] = None

    @classmethod
    def from_api(cls, row: dict) -> "Meeting":
        project = row.get("project") or {}
        return cls(
            meeting_id=str(row.get("id", "")),
            title=row.get("title") or "",
            start_time=parse_iso_datetime(row.get("startTime")),
            end_time=parse_iso_datetime(row.get("endTime")),
            organizer=str(row.get("organizer") or ""),
            attendees=tuple(str(a) for a in (row.get("attendees") or ())),
            description=row.get("description") or "",
            location=row.get("location") or "",
            is_virtual=bool(row.get("isVirtual", False)),
            meeting_link=row.get("meetingLink"),
            is_recurring=bool(row.get("isRecurring", False)),
            recurring_pattern=row.get("recurringPattern"),
            project_id=row.get("projectId") or project.get("id"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.meeting_id,
            "title": self.title,
            "description": self.description,
            "startTime": _iso(self.start_time),
            "endTime": _iso(self.end_time),
            "location": self.location,
            "isVirtual": self.is_virtual,
            "meetingLink": self.meeting_link,
            "isRecurring": self.is_recurring,
            "recurringPattern": self.recurring_pattern,
            "organizer": self.organizer,
            "attendees": list(self.attendees),
            "projectId": self.project_id,
        }


@dataclass(frozen=True)
class DocumentPermission:
    user_id: str
    access: DocumentAccess

    @classmethod
    def from_api(cls, row: dict) -> "DocumentPermission":
        return cls(user_id=str(row.get("userId") or ""), access=DocumentAccess(row.get("access") or "view"))

    def to_dict(self) -> dict:
        return {"userId": self.user_id, "access": self.access.value}


@dataclass(frozen=True)
class DocumentAttachment:
    document_id: str
    file_name: str
    file_size: int
    file_type: str
    url: str
    uploaded_by: str
    project_id: Optional[str] = None
    permissions: tuple = ()
    uploader_name: Optional[str] = None

    @classmethod
    def from_api(cls, row: dict) -> "DocumentAttachment":
        user = row.get("user") or {}
        return cls(
            document_id=str(row.get("id", "")),
            file_name=row.get("fileName") or "",
            file_size=int(row.get("fileSize") or 0),
            file_type=row.get("fileType") or "",
            url=row.get("url") or "",
            uploaded_by=str(row.get("uploadedBy") or user.get("id") or ""),
            project_id=row.get("projectId"),
            permissions=tuple(DocumentPermission.from_api(p) for p in (row.get("permissions") or ())),
            uploader_name=user.get("fullName"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.document_id,
            "fileName": self.file_name,
            "fileSize": self.file_size,
            "fileType": self.file_type,
            "url": self.url,
            "uploadedBy": self.uploaded_by,
            "projectId": self.project_id,
            "permissions": [p.to_dict() for p in self.permissions],
            "uploaderName": self.uploader_name,
        }
