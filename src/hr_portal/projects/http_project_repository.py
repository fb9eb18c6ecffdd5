from __future__ import annotations

from typing import Optional, Sequence

from ..api.client import ApiClient
from ..api.http_base import unwrap_list, unwrap_one
from .model import Project, ProjectUpdate
from .repository import ProjectRepository


class HttpProjectRepository(ProjectRepository):
    def __init__(self, api: ApiClient):
        self._api = api

    @staticmethod
    def _one(payload: dict) -> Optional[Project]:
        row = unwrap_one(payload, "project")
        return Project.from_api(row) if row else None

    def list_all(self) -> Sequence[Project]:
        return [Project.from_api(r) for r in unwrap_list(self._api.get("/projects"), "projects")]

    def get_by_id(self, project_id: str) -> Optional[Project]:
        return self._one(self._api.get(f"/projects/{project_id}"))

    def create(self, fields: dict) -> Optional[Project]:
        return self._one(self._api.post("/projects", fields))

    def update(self, project_id: str, fields: dict) -> Optional[Project]:
        return self._one(self._api.put(f"/projects/{project_id}", fields))

    def delete(self, project_id: str) -> bool:
        self._api.delete(f"/projects/{project_id}")
        return True

    def list_updates(self, project_id: str) -> Sequence[ProjectUpdate]:
        payload = self._api.get(f"/projects/{project_id}/updates")
        return [ProjectUpdate.from_api(r) for r in unwrap_list(payload, "updates")]

    def add_update(self, project_id: str, fields: dict) -> Optional[ProjectUpdate]:
        row = unwrap_one(self._api.post(f"/projects/{project_id}/updates", fields), "update")
        return ProjectUpdate.from_api(row) if row else None
