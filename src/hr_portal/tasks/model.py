from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_iso_date
from ..core.enums import TaskPriority, TaskStatus


@dataclass(frozen=True)
class Task:
    task_id: str
    title: str
    description: str
    project_id: str
    assigned_to: str
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[date] = None
    created_by: Optional[str] = None
    is_active: bool = True
    project_name: Optional[str] = None
    assignee_name: Optional[str] = None

    @classmethod
    def from_api(cls, row: dict) -> "Task":
        assignee = row.get("assignee") or {}
        project = row.get("project") or {}
        assignee_name = assignee.get("fullName") or " ".join(
            p for p in (assignee.get("firstName"), assignee.get("lastName")) if p
        )
        return cls(
            task_id=str(row.get("id", "")),
            title=row.get("title") or "",
            description=row.get("description") or "",
            project_id=str(row.get("projectId") or project.get("id") or ""),
            assigned_to=str(row.get("assignedTo") or row.get("assigneeId") or assignee.get("id") or ""),
            status=TaskStatus(row.get("status") or TaskStatus.TODO.value),
            priority=TaskPriority(row.get("priority") or TaskPriority.MEDIUM.value),
            due_date=parse_iso_date(row["dueDate"]) if row.get("dueDate") else None,
            created_by=row.get("createdBy"),
            is_active=bool(row.get("isActive", True)),
            project_name=project.get("name"),
            assignee_name=assignee_name or None,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.task_id,
            "title": self.title,
            "description": self.description,
            "projectId": self.project_id,
            "assignedTo": self.assigned_to,
            "status": self.status.value,
            "priority": self.priority.value,
            "dueDate": self.due_date.isoformat() if self.due_date else None,
            "createdBy": self.created_by,
            "isActive": self.is_active,
            "projectName": self.project_name,
            "assigneeName": self.assignee_name,
        }
