from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_iso_date
from ..core.enums import LeaveType, RequestStatus, coerce_enum


@dataclass(frozen=True)
class LeaveRequest:
    leave_id: str
    employee_id: str
    start_date: date
    end_date: date
    leave_type: LeaveType
    reason: str
    status: RequestStatus = RequestStatus.PENDING
    approved_by: Optional[str] = None
    employee_name: Optional[str] = None
    department: Optional[str] = None

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    @classmethod
    def from_api(cls, row: dict) -> "LeaveRequest":
        employee = row.get("employee") or {}
        return cls(
            leave_id=str(row.get("id", "")),
            employee_id=str(row.get("employeeId") or employee.get("id") or ""),
            start_date=parse_iso_date(row["startDate"]),
            end_date=parse_iso_date(row["endDate"]),
            leave_type=coerce_enum(LeaveType, row.get("type"), LeaveType.OTHER),
            reason=row.get("reason") or "",
            status=coerce_enum(RequestStatus, row.get("status"), RequestStatus.PENDING),
            approved_by=row.get("approvedBy"),
            employee_name=employee.get("fullName"),
            department=employee.get("department"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.leave_id,
            "employeeId": self.employee_id,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "type": self.leave_type.value,
            "reason": self.reason,
            "status": self.status.value,
            "approvedBy": self.approved_by,
            "employeeName": self.employee_name,
            "department": self.department,
        }


@dataclass(frozen=True)
class LeaveBalance:
    total: int
    used: int
    by_type: dict = field(default_factory=dict)
    remaining_by_type: dict = field(default_factory=dict)

    @property
    def remaining(self) -> int:
        return max(0, self.total - self.used)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "used": self.used,
            "remaining": self.remaining,
            "byType": dict(self.by_type),
            "remainingByType": dict(self.remaining_by_type),
        }
