from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for access gates."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Status derived from the check-in time of day."""

    PRESENT = "present"
    LATE = "late"
    ABSENT = "absent"


class LeaveType(str, Enum):
    SICK = "sick"
    VACATION = "vacation"
    PERSONAL = "personal"
    CASUAL = "casual"
    PAID = "paid"
    UNPAID = "unpaid"
    OTHER = "other"


class RequestStatus(str, Enum):
    """Approval state shared by leave and manual attendance requests."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ManualRequestType(str, Enum):
    NEW = "new"
    EDIT = "edit"


class NotificationType(str, Enum):
    LEAVE = "leave"
    TASK = "task"
    HOLIDAY = "holiday"
    SYSTEM = "system"
    INFO = "info"
    MESSAGE = "message"
    WARNING = "warning"
    SUCCESS = "success"
    PROJECT = "project"


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    BLOCKED = "blocked"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ProjectStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    ON_HOLD = "on-hold"


class DocumentAccess(str, Enum):
    VIEW = "view"
    EDIT = "edit"
    DELETE = "delete"


class ScanOutcome(str, Enum):
    """Result of one QR scan."""

    CHECKED_IN = "checked_in"
    CHECKED_OUT = "checked_out"
    NEEDS_REASON = "needs_reason"
    COMPLETE = "complete"


def coerce_enum(enum_cls, value, default):
    """Enum member for `value`, or `default` for a missing or unknown value."""

    try:
        return enum_cls(value) if value else default
    except ValueError:
        return default
