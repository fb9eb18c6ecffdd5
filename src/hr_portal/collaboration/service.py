from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import BinaryIO, Optional, Sequence

from werkzeug.utils import secure_filename

from ..common.datetime_utils import parse_clock_time, parse_iso_date, parse_iso_datetime
from ..common.validators import require_choice, require_non_empty
from ..core.constants import ALLOWED_DOCUMENT_TYPES, MAX_DOCUMENT_SIZE
from ..core.enums import DocumentAccess
from ..core.exceptions import ValidationError
from .model import DiscussionThread, DocumentAttachment, DocumentPermission, Meeting, ThreadComment
from .repository import CollaborationRepository

_logger = logging.getLogger(__name__)


def _stream_size(stream: BinaryIO) -> int:
    pos = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(pos)
    return size


def validate_document(file_name: str, content_type: str, size: int) -> str:
    """Return a safe file name, or raise for a disallowed or oversized file."""

    safe_name = secure_filename(file_name or "")
    if not safe_name:
        raise ValidationError("Please select a file to upload")
    if content_type not in ALLOWED_DOCUMENT_TYPES:
        raise ValidationError(f'File type "{content_type}" is not allowed')
    if size > MAX_DOCUMENT_SIZE:
        raise ValidationError(f"File size exceeds maximum limit of {MAX_DOCUMENT_SIZE // (1024 * 1024)}MB")
    return safe_name


class CollaborationService:
    def __init__(self, collaboration: CollaborationRepository):
        self._collab = collaboration

    # Threads

    def list_threads(self, project_id: str) -> Sequence[DiscussionThread]:
        if not project_id:
            return []
        return self._collab.list_threads(project_id)

    def create_thread(self, *, project_id: str, title: str, content: str) -> DiscussionThread:
        if not (title or "").strip() or not (content or "").strip() or not project_id:
            raise ValidationError("Please fill in all fields")
        thread = self._collab.create_thread(project_id=str(project_id), title=title.strip(), content=content.strip())
        if not thread:
            raise ValidationError("Failed to create discussion thread. Please try again.")
        return thread

    def list_comments(self, thread_id: str) -> Sequence[ThreadComment]:
        return self._collab.list_comments(thread_id)

    def add_comment(self, *, thread_id: str, content: str) -> ThreadComment:
        if not (content or "").strip():
            raise ValidationError("Please enter a comment")
        comment = self._collab.add_comment(thread_id, content.strip())
        if not comment:
            raise ValidationError("Failed to add comment. Please try again.")
        return comment

    # Meetings

    def list_meetings(self, *, day: str = "", project_id: str = "") -> Sequence[Meeting]:
        params = {}
        if day:
            params["date"] = parse_iso_date(day).isoformat()
        if project_id:
            params["projectId"] = project_id
        return self._collab.list_meetings(params)

    @staticmethod
    def _meeting_time(data: dict, key: str, label: str) -> datetime:
        # Naive inputs are server-local time; the result always carries an offset.
        raw = require_non_empty(data.get(key, ""), label)
        if "T" in raw:
            value = parse_iso_datetime(raw)
            if value is None:
                raise ValidationError(f"{label} is invalid")
            return value if value.tzinfo else value.astimezone()
        day = parse_iso_date(require_non_empty(data.get("date", ""), "Date"))
        return datetime.combine(day, parse_clock_time(raw)).astimezone()

    def _meeting_fields(self, data: dict) -> dict:
        title = require_non_empty(data.get("title", ""), "Title")
        start = self._meeting_time(data, "startTime", "Start time")
        end = self._meeting_time(data, "endTime", "End time")
        if end <= start:
            raise ValidationError("End time must be after start time")

        attendees = [str(a) for a in (data.get("attendees") or []) if a]
        if not attendees:
            raise ValidationError("Select at least one attendee")

        is_virtual = bool(data.get("isVirtual"))
        link = (data.get("meetingLink") or "").strip() or None
        if is_virtual and not link:
            raise ValidationError("Virtual meetings need a meeting link")

        is_recurring = bool(data.get("isRecurring"))
        return {
            "title": title,
            "description": (data.get("description") or "").strip(),
            "startTime": start.isoformat(timespec="seconds"),
            "endTime": end.isoformat(timespec="seconds"),
            "location": (data.get("location") or "").strip(),
            "isVirtual": is_virtual,
            "meetingLink": link,
            "projectId": data.get("projectId") or None,
            "isRecurring": is_recurring,
            "recurringPattern": data.get("recurringPattern") if is_recurring else None,
            "attendees": attendees,
        }

    def save_meeting(self, *, data: dict, meeting_id: str = "") -> Meeting:
        fields = self._meeting_fields(data)
        if meeting_id:
            meeting = self._collab.update_meeting(meeting_id, fields)
        else:
            meeting = self._collab.create_meeting(fields)
        if not meeting:
            raise ValidationError("Failed to save meeting")
        _logger.info("Meeting %s saved with %d attendees", meeting.meeting_id, len(fields["attendees"]))
        return meeting

    def delete_meeting(self, meeting_id: str) -> None:
        self._collab.delete_meeting(meeting_id)

    # Documents

    def list_documents(self, project_id: str) -> Sequence[DocumentAttachment]:
        if not project_id:
            return []
        return self._collab.list_documents(project_id)

    def upload_document(
        self,
        *,
        project_id: str,
        file_name: str,
        content_type: str,
        stream: BinaryIO,
        size: Optional[int] = None,
    ) -> DocumentAttachment:
        if not project_id:
            raise ValidationError("Please select a project")
        size = _stream_size(stream) if size is None else size
        safe_name = validate_document(file_name, content_type, size)

        doc = self._collab.upload_document(
            project_id=str(project_id),
            file_name=safe_name,
            content_type=content_type,
            stream=stream,
        )
        if not doc:
            raise ValidationError(f"Failed to upload: {safe_name}")
        _logger.info("Document %s uploaded to project %s (%d bytes)", safe_name, project_id, size)
        return doc

    def delete_document(self, document_id: str) -> None:
        if not (document_id or "").strip():
            raise ValidationError("Invalid document ID")
        self._collab.delete_document(document_id)

    def update_permissions(self, *, document_id: str, permissions: Sequence[dict]) -> None:
        parsed = []
        for p in permissions or []:
            user_id = str(p.get("userId") or "")
            if not user_id:
                raise ValidationError("Each permission needs a user")
            parsed.append(DocumentPermission(user_id, require_choice(p.get("access"), DocumentAccess, "Access")))
        self._collab.update_permissions(document_id, parsed)
