from __future__ import annotations

from flask import Flask, request

from ..common.web import fail, handle_errors, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/collaboration/threads", endpoint="threads")
    @login_required
    @handle_errors("Failed to load discussion threads")
    def threads():
        rows = container.collaboration_service.list_threads(request.args.get("projectId", ""))
        return ok(threads=[t.to_dict() for t in rows])

    @app.route("/api/collaboration/threads", methods=["POST"], endpoint="create_thread")
    @login_required
    @handle_errors("Failed to create discussion thread. Please try again.")
    def create_thread():
        data = request.get_json(silent=True) or {}
        thread = container.collaboration_service.create_thread(
            project_id=data.get("projectId", ""),
            title=data.get("title", ""),
            content=data.get("content", ""),
        )
        return ok("Discussion thread created", 201, thread=thread.to_dict())

    @app.route("/api/collaboration/threads/<thread_id>/comments", endpoint="thread_comments")
    @login_required
    @handle_errors("Failed to load comments")
    def thread_comments(thread_id: str):
        rows = container.collaboration_service.list_comments(thread_id)
        return ok(comments=[c.to_dict() for c in rows])

    @app.route("/api/collaboration/threads/<thread_id>/comments", methods=["POST"], endpoint="add_comment")
    @login_required
    @handle_errors("Failed to add comment. Please try again.")
    def add_comment(thread_id: str):
        data = request.get_json(silent=True) or {}
        comment = container.collaboration_service.add_comment(thread_id=thread_id, content=data.get("content", ""))
        return ok("Comment added", 201, comment=comment.to_dict())

    @app.route("/api/collaboration/meetings", endpoint="meetings")
    @login_required
    @handle_errors("Failed to load meetings")
    def meetings():
        rows = container.collaboration_service.list_meetings(
            day=request.args.get("date", ""),
            project_id=request.args.get("projectId", ""),
        )
        return ok(meetings=[m.to_dict() for m in rows])

    @app.route("/api/collaboration/meetings", methods=["POST"], endpoint="create_meeting")
    @login_required
    @handle_errors("Failed to save meeting")
    def create_meeting():
        meeting = container.collaboration_service.save_meeting(data=request.get_json(silent=True) or {})
        return ok("Meeting created successfully", 201, meeting=meeting.to_dict())

    @app.route("/api/collaboration/meetings/<meeting_id>", methods=["PUT"], endpoint="update_meeting")
    @login_required
    @handle_errors("Failed to save meeting")
    def update_meeting(meeting_id: str):
        meeting = container.collaboration_service.save_meeting(
            data=request.get_json(silent=True) or {},
            meeting_id=meeting_id,
        )
        return ok("Meeting updated successfully", meeting=meeting.to_dict())

    @app.route("/api/collaboration/meetings/<meeting_id>", methods=["DELETE"], endpoint="delete_meeting")
    @login_required
    @handle_errors("Failed to delete meeting")
    def delete_meeting(meeting_id: str):
        container.collaboration_service.delete_meeting(meeting_id)
        return ok("Meeting deleted")

    @app.route("/api/collaboration/documents", endpoint="documents")
    @login_required
    @handle_errors("Failed to load documents")
    def documents():
        rows = container.collaboration_service.list_documents(request.args.get("projectId", ""))
        return ok(documents=[d.to_dict() for d in rows])

    @app.route("/api/collaboration/documents", methods=["POST"], endpoint="upload_document")
    @login_required
    @handle_errors("Upload process failed. Please try again.")
    def upload_document():
        if "file" not in request.files:
            return fail("Please select a file to upload")
        file = request.files["file"]
        doc = container.collaboration_service.upload_document(
            project_id=request.form.get("projectId", ""),
            file_name=file.filename or "",
            content_type=file.mimetype or "",
            stream=file.stream,
        )
        return ok("Document uploaded", 201, document=doc.to_dict())

    @app.route("/api/collaboration/documents/<document_id>", methods=["DELETE"], endpoint="delete_document")
    @login_required
    @handle_errors("Failed to delete document")
    def delete_document(document_id: str):
        container.collaboration_service.delete_document(document_id)
        return ok("Document deleted successfully")

    @app.route(
        "/api/collaboration/documents/<document_id>/permissions",
        methods=["PUT"],
        endpoint="document_permissions",
    )
    @login_required
    @handle_errors("Failed to update permissions")
    def document_permissions(document_id: str):
        data = request.get_json(silent=True) or {}
        container.collaboration_service.update_permissions(
            document_id=document_id,
            permissions=data.get("permissions") or [],
        )
        return ok("Permissions updated")
