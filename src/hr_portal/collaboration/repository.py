from __future__ import annotations

from typing import BinaryIO, Optional, Protocol, Sequence

from .model import DiscussionThread, DocumentAttachment, DocumentPermission, Meeting, ThreadComment


class CollaborationRepository(Protocol):
    """Threads, meetings and shared documents of a project."""

    def list_threads(self, project_id: str) -> Sequence[DiscussionThread]:
        raise NotImplementedError

    def create_thread(self, *, project_id: str, title: str, content: str) -> Optional[DiscussionThread]:
        raise NotImplementedError

    def list_comments(self, thread_id: str) -> Sequence[ThreadComment]:
        raise NotImplementedError

    def add_comment(self, thread_id: str, content: str) -> Optional[ThreadComment]:
        raise NotImplementedError

    def list_meetings(self, params: dict) -> Sequence[Meeting]:
        raise NotImplementedError

    def create_meeting(self, fields: dict) -> Optional[Meeting]:
        raise NotImplementedError

    def update_meeting(self, meeting_id: str, fields: dict) -> Optional[Meeting]:
        raise NotImplementedError

    def delete_meeting(self, meeting_id: str) -> bool:
        raise NotImplementedError

    def list_documents(self, project_id: str) -> Sequence[DocumentAttachment]:
        raise NotImplementedError

    def upload_document(
        self,
        *,
        project_id: str,
        file_name: str,
        content_type: str,
        stream: BinaryIO,
    ) -> Optional[DocumentAttachment]:
        raise NotImplementedError

    def delete_document(self, document_id: str) -> bool:
        raise NotImplementedError

    def update_permissions(self, document_id: str, permissions: Sequence[DocumentPermission]) -> bool:
        raise NotImplementedError
