from __future__ import annotations

import logging
from typing import Sequence

from ..api.http_base import compact
from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_choice, require_min_length
from ..core.enums import Role, TaskPriority, TaskStatus
from ..core.exceptions import AuthorizationError, ValidationError
from .model import Task
from .repository import TaskRepository

_logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, tasks: TaskRepository):
        self._tasks = tasks

    def list_tasks(self, *, search: str = "", status: str = "", priority: str = "", project_id: str = "") -> Sequence[Task]:
        rows = list(self._tasks.list_all())
        if search:
            needle = search.lower()
            rows = [t for t in rows if needle in t.title.lower() or needle in t.description.lower()]
        if status:
            wanted = require_choice(status, TaskStatus, "Status")
            rows = [t for t in rows if t.status == wanted]
        if priority:
            wanted_p = require_choice(priority, TaskPriority, "Priority")
            rows = [t for t in rows if t.priority == wanted_p]
        if project_id:
            rows = [t for t in rows if t.project_id == str(project_id)]
        return rows

    def my_tasks(self) -> Sequence[Task]:
        return self._tasks.list_mine()

    def get_task(self, task_id: str) -> Task:
        task = self._tasks.get_by_id(task_id)
        if not task:
            raise ValidationError("Task not found")
        return task

    def _task_fields(self, data: dict) -> dict:
        title = (data.get("title") or "").strip()
        description = (data.get("description") or "").strip()
        project_id = data.get("projectId") or ""
        assignee = data.get("assignedTo") or data.get("assigneeId") or ""
        if not title or not description or not project_id or not assignee:
            raise ValidationError("Title, description, project ID, and assignee are required")

        due = data.get("dueDate") or None
        return compact(
            {
                "title": title,
                "description": description,
                "projectId": str(project_id),
                "assigneeId": str(assignee),
                "status": require_choice(data.get("status") or TaskStatus.TODO.value, TaskStatus, "Status").value,
                "priority": require_choice(
                    data.get("priority") or TaskPriority.MEDIUM.value, TaskPriority, "Priority"
                ).value,
                "dueDate": parse_iso_date(due).isoformat() if due else None,
            }
        )

    def create_task(self, *, current_role: Role, data: dict) -> Task:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")
        task = self._tasks.create(self._task_fields(data))
        if not task:
            raise ValidationError("Failed to create task. Please try again.")
        _logger.info("Task %s created for %s", task.task_id, task.assigned_to)
        return task

    def update_task(self, *, current_role: Role, task_id: str, data: dict) -> Task:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")
        task = self._tasks.update(task_id, self._task_fields(data))
        if not task:
            raise ValidationError("Failed to update task. Please try again.")
        return task

    def update_status(self, *, task_id: str, status: str) -> TaskStatus:
        new_status = require_choice(status, TaskStatus, "Status")
        self._tasks.update_status(task_id, new_status)
        return new_status

    def delete_task(self, *, current_role: Role, task_id: str) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")
        self._tasks.delete(task_id)

    def request_update(self, *, task_id: str, title: str, description: str) -> None:
        """Employee asks the admin to change a task's title or description."""

        self._tasks.request_update(
            task_id,
            title=require_min_length((title or "").strip(), "Title", 3),
            description=require_min_length((description or "").strip(), "Description", 10),
        )
