from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import TaskStatus
from .model import Task


class TaskRepository(Protocol):
    def list_all(self) -> Sequence[Task]:
        raise NotImplementedError

    def list_mine(self) -> Sequence[Task]:
        raise NotImplementedError

    def get_by_id(self, task_id: str) -> Optional[Task]:
        raise NotImplementedError

    def create(self, fields: dict) -> Optional[Task]:
        raise NotImplementedError

    def update(self, task_id: str, fields: dict) -> Optional[Task]:
        raise NotImplementedError

    def update_status(self, task_id: str, status: TaskStatus) -> bool:
        raise NotImplementedError

    def delete(self, task_id: str) -> bool:
        raise NotImplementedError

    def request_update(self, task_id: str, *, title: str, description: str) -> bool:
        raise NotImplementedError
