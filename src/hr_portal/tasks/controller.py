from __future__ import annotations

from flask import Flask, request

from ..common.web import admin_required, current_role, handle_errors, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/tasks", endpoint="my_tasks")
    @login_required
    @handle_errors("Failed to load tasks. Please try again.")
    def my_tasks():
        return ok(tasks=[t.to_dict() for t in container.task_service.my_tasks()])

    @app.route("/api/tasks/<task_id>", endpoint="task_detail")
    @login_required
    @handle_errors("Failed to load task")
    def task_detail(task_id: str):
        return ok(task=container.task_service.get_task(task_id).to_dict())

    @app.route("/api/tasks/<task_id>/status", methods=["PATCH"], endpoint="task_status")
    @login_required
    @handle_errors("Failed to update task status")
    def task_status(task_id: str):
        data = request.get_json(silent=True) or {}
        status = container.task_service.update_status(task_id=task_id, status=data.get("status", ""))
        return ok(f"Task status updated to {status.value}.")

    @app.route("/api/tasks/<task_id>/request-update", methods=["PUT"], endpoint="task_request_update")
    @login_required
    @handle_errors("Failed to submit update request")
    def task_request_update(task_id: str):
        data = request.get_json(silent=True) or {}
        container.task_service.request_update(
            task_id=task_id,
            title=data.get("title", ""),
            description=data.get("description", ""),
        )
        return ok("Update request submitted")

    @app.route("/api/admin/tasks", endpoint="admin_tasks")
    @admin_required
    @handle_errors("Failed to load tasks. Please try again.")
    def admin_tasks():
        rows = container.task_service.list_tasks(
            search=request.args.get("q", ""),
            status=request.args.get("status", ""),
            priority=request.args.get("priority", ""),
            project_id=request.args.get("projectId", ""),
        )
        return ok(tasks=[t.to_dict() for t in rows])

    @app.route("/api/admin/tasks", methods=["POST"], endpoint="create_task")
    @admin_required
    @handle_errors("Failed to create task. Please try again.")
    def create_task():
        task = container.task_service.create_task(
            current_role=current_role(),
            data=request.get_json(silent=True) or {},
        )
        return ok("Task created successfully.", 201, task=task.to_dict())

    @app.route("/api/admin/tasks/<task_id>", methods=["PUT"], endpoint="update_task")
    @admin_required
    @handle_errors("Failed to update task. Please try again.")
    def update_task(task_id: str):
        task = container.task_service.update_task(
            current_role=current_role(),
            task_id=task_id,
            data=request.get_json(silent=True) or {},
        )
        return ok("Task updated successfully.", task=task.to_dict())

    @app.route("/api/admin/tasks/<task_id>", methods=["DELETE"], endpoint="delete_task")
    @admin_required
    @handle_errors("Failed to delete task. Please try again.")
    def delete_task(task_id: str):
        container.task_service.delete_task(current_role=current_role(), task_id=task_id)
        return ok("Task deleted successfully.")
