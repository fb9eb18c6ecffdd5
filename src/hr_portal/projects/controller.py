from __future__ import annotations

from flask import Flask, request

from ..common.web import admin_required, current_role, handle_errors, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/projects", endpoint="projects")
    @login_required
    @handle_errors("Failed to load projects")
    def projects():
        rows = container.project_service.list_projects(status=request.args.get("status", ""))
        return ok(projects=[p.to_dict() for p in rows])

    @app.route("/api/projects/<project_id>", endpoint="project_detail")
    @login_required
    @handle_errors("Failed to load project")
    def project_detail(project_id: str):
        return ok(project=container.project_service.get_project(project_id).to_dict())

    @app.route("/api/projects/<project_id>/updates", endpoint="project_updates")
    @login_required
    @handle_errors("Failed to load project updates")
    def project_updates(project_id: str):
        rows = container.project_service.list_updates(project_id)
        return ok(updates=[u.to_dict() for u in rows])

    @app.route("/api/projects/<project_id>/updates", methods=["POST"], endpoint="post_project_update")
    @login_required
    @handle_errors("Failed to post update")
    def post_project_update(project_id: str):
        data = request.get_json(silent=True) or {}
        update = container.project_service.post_update(
            project_id=project_id,
            content=data.get("content", ""),
            attachments=data.get("attachments"),
        )
        return ok("Update posted", 201, update=update.to_dict())

    @app.route("/api/admin/projects", methods=["POST"], endpoint="create_project")
    @admin_required
    @handle_errors("Failed to create project")
    def create_project():
        project = container.project_service.create_project(
            current_role=current_role(),
            data=request.get_json(silent=True) or {},
        )
        return ok("Project created", 201, project=project.to_dict())

    @app.route("/api/admin/projects/<project_id>", methods=["PUT"], endpoint="update_project")
    @admin_required
    @handle_errors("Failed to update project")
    def update_project(project_id: str):
        project = container.project_service.update_project(
            current_role=current_role(),
            project_id=project_id,
            data=request.get_json(silent=True) or {},
        )
        return ok("Project updated", project=project.to_dict())

    @app.route("/api/admin/projects/<project_id>", methods=["DELETE"], endpoint="delete_project")
    @admin_required
    @handle_errors("Failed to delete project")
    def delete_project(project_id: str):
        container.project_service.delete_project(current_role=current_role(), project_id=project_id)
        return ok("Project deleted")
