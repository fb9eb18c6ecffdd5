from __future__ import annotations

import json
from typing import BinaryIO, Optional, Sequence

from ..api.client import ApiClient
from ..api.http_base import unwrap_list, unwrap_one
from .model import DiscussionThread, DocumentAttachment, DocumentPermission, Meeting, ThreadComment
from .repository import CollaborationRepository


class HttpCollaborationRepository(CollaborationRepository):
    def __init__(self, api: ApiClient):
        self._api = api

    def list_threads(self, project_id: str) -> Sequence[DiscussionThread]:
        payload = self._api.get("/collaboration/threads", params={"projectId": project_id})
        return [DiscussionThread.from_api(r) for r in unwrap_list(payload, "threads")]

    def create_thread(self, *, project_id: str, title: str, content: str) -> Optional[DiscussionThread]:
        payload = self._api.post(
            "/collaboration/threads",
            {"projectId": project_id, "title": title, "content": content},
        )
        row = unwrap_one(payload, "thread")
        return DiscussionThread.from_api(row) if row else None

    def list_comments(self, thread_id: str) -> Sequence[ThreadComment]:
        payload = self._api.get(f"/collaboration/threads/{thread_id}/comments")
        return [ThreadComment.from_api(r) for r in unwrap_list(payload, "comments")]

    def add_comment(self, thread_id: str, content: str) -> Optional[ThreadComment]:
        payload = self._api.post(f"/collaboration/threads/{thread_id}/comments", {"content": content})
        row = unwrap_one(payload, "comment")
        return ThreadComment.from_api(row) if row else None

    def list_meetings(self, params: dict) -> Sequence[Meeting]:
        payload = self._api.get("/collaboration/meetings", params=params or None)
        return [Meeting.from_api(r) for r in unwrap_list(payload, "meetings")]

    def create_meeting(self, fields: dict) -> Optional[Meeting]:
        row = unwrap_one(self._api.post("/collaboration/meetings", fields), "meeting")
        return Meeting.from_api(row) if row else None

    def update_meeting(self, meeting_id: str, fields: dict) -> Optional[Meeting]:
        row = unwrap_one(self._api.put(f"/collaboration/meetings/{meeting_id}", fields), "meeting")
        return Meeting.from_api(row) if row else None

    def delete_meeting(self, meeting_id: str) -> bool:
        self._api.delete(f"/collaboration/meetings/{meeting_id}")
        return True

    def list_documents(self, project_id: str) -> Sequence[DocumentAttachment]:
        payload = self._api.get("/collaboration/documents", params={"projectId": project_id})
        return [DocumentAttachment.from_api(r) for r in unwrap_list(payload, "documents")]

    def upload_document(
        self,
        *,
        project_id: str,
        file_name: str,
        content_type: str,
        stream: BinaryIO,
    ) -> Optional[DocumentAttachment]:
        payload = self._api.post(
            "/collaboration/documents/upload",
            data={"projectId": project_id, "permissions": json.dumps([])},
            files={"file": (file_name, stream, content_type)},
        )
        row = unwrap_one(payload, "document")
        return DocumentAttachment.from_api(row) if row else None

    def delete_document(self, document_id: str) -> bool:
        self._api.delete(f"/collaboration/documents/{document_id}")
        return True

    def update_permissions(self, document_id: str, permissions: Sequence[DocumentPermission]) -> bool:
        self._api.put(
            f"/collaboration/documents/{document_id}/permissions",
            {"permissions": [p.to_dict() for p in permissions]},
        )
        return True
