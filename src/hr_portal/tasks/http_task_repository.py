from __future__ import annotations

from typing import Optional, Sequence

from ..api.client import ApiClient
from ..api.http_base import unwrap_list, unwrap_one
from ..core.enums import TaskStatus
from .model import Task
from .repository import TaskRepository


class HttpTaskRepository(TaskRepository):
    def __init__(self, api: ApiClient):
        self._api = api

    @staticmethod
    def _one(payload: dict) -> Optional[Task]:
        row = unwrap_one(payload, "task")
        return Task.from_api(row) if row else None

    def list_all(self) -> Sequence[Task]:
        return [Task.from_api(r) for r in unwrap_list(self._api.get("/tasks"), "tasks")]

    def list_mine(self) -> Sequence[Task]:
        return [Task.from_api(r) for r in unwrap_list(self._api.get("/tasks/my-tasks"), "tasks")]

    def get_by_id(self, task_id: str) -> Optional[Task]:
        return self._one(self._api.get(f"/tasks/{task_id}"))

    def create(self, fields: dict) -> Optional[Task]:
        return self._one(self._api.post("/tasks", fields))

    def update(self, task_id: str, fields: dict) -> Optional[Task]:
        return self._one(self._api.put(f"/tasks/{task_id}", fields))

    def update_status(self, task_id: str, status: TaskStatus) -> bool:
        self._api.patch(f"/tasks/{task_id}/status", {"status": status.value})
        return True

    def delete(self, task_id: str) -> bool:
        self._api.delete(f"/tasks/{task_id}")
        return True

    def request_update(self, task_id: str, *, title: str, description: str) -> bool:
        self._api.put(f"/tasks/request-update/{task_id}", {"title": title, "description": description})
        return True
