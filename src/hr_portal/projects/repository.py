from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Project, ProjectUpdate


class ProjectRepository(Protocol):
    def list_all(self) -> Sequence[Project]:
        raise NotImplementedError

    def get_by_id(self, project_id: str) -> Optional[Project]:
        raise NotImplementedError

    def create(self, fields: dict) -> Optional[Project]:
        raise NotImplementedError

    def update(self, project_id: str, fields: dict) -> Optional[Project]:
        raise NotImplementedError

    def delete(self, project_id: str) -> bool:
        raise NotImplementedError

    def list_updates(self, project_id: str) -> Sequence[ProjectUpdate]:
        raise NotImplementedError

    def add_update(self, project_id: str, fields: dict) -> Optional[ProjectUpdate]:
        raise NotImplementedError
