from __future__ import annotations

import logging
from typing import Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_choice, require_min_length, require_non_empty
from ..core.enums import ProjectStatus, Role
from ..core.exceptions import AuthorizationError, ValidationError
from .model import Project, ProjectUpdate
from .repository import ProjectRepository

_logger = logging.getLogger(__name__)


class ProjectService:
    def __init__(self, projects: ProjectRepository):
        self._projects = projects

    def list_projects(self, *, status: str = "") -> Sequence[Project]:
        rows = self._projects.list_all()
        if status:
            wanted = require_choice(status, ProjectStatus, "Status")
            rows = [p for p in rows if p.status == wanted]
        return rows

    def get_project(self, project_id: str) -> Project:
        project = self._projects.get_by_id(project_id)
        if not project:
            raise ValidationError("Project not found")
        return project

    @staticmethod
    def _project_fields(data: dict) -> dict:
        name = require_min_length((data.get("name") or "").strip(), "Project name", 3)
        description = require_min_length((data.get("description") or "").strip(), "Description", 10)
        start = parse_iso_date(require_non_empty(data.get("startDate", ""), "Start date"))
        end = parse_iso_date(data["endDate"]) if data.get("endDate") else None
        if end and end < start:
            raise ValidationError("End date cannot be before start date")

        return {
            "name": name,
            "description": description,
            "startDate": start.isoformat(),
            "endDate": end.isoformat() if end else None,
            "status": require_choice(data.get("status") or ProjectStatus.ACTIVE.value, ProjectStatus, "Status").value,
        }

    def create_project(self, *, current_role: Role, data: dict) -> Project:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")
        project = self._projects.create(self._project_fields(data))
        if not project:
            raise ValidationError("Failed to create project")
        _logger.info("Project %s created", project.project_id)
        return project

    def update_project(self, *, current_role: Role, project_id: str, data: dict) -> Project:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")
        project = self._projects.update(project_id, self._project_fields(data))
        if not project:
            raise ValidationError("Failed to update project")
        return project

    def delete_project(self, *, current_role: Role, project_id: str) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")
        self._projects.delete(project_id)

    def list_updates(self, project_id: str) -> Sequence[ProjectUpdate]:
        return self._projects.list_updates(project_id)

    def post_update(self, *, project_id: str, content: str, attachments=None) -> ProjectUpdate:
        text = require_non_empty(content, "Update content")
        fields = {"content": text}
        if attachments:
            fields["attachments"] = list(attachments)
        update = self._projects.add_update(project_id, fields)
        if not update:
            raise ValidationError("Failed to post update")
        return update
