from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_iso_date
from ..core.enums import ManualRequestType, RequestStatus, coerce_enum


@dataclass(frozen=True)
class ManualRequest:
    """Regularization request: an employee asks to add or fix a record."""

    request_id: str
    employee_id: str
    work_date: date
    reason: str
    check_in_time: Optional[str] = None
    check_out_time: Optional[str] = None
    status: RequestStatus = RequestStatus.PENDING
    request_type: ManualRequestType = ManualRequestType.NEW
    original_record_id: Optional[str] = None
    employee_name: Optional[str] = None
    department: Optional[str] = None

    @classmethod
    def from_api(cls, row: dict) -> "ManualRequest":
        employee = row.get("employee") or {}
        return cls(
            request_id=str(row.get("id", "")),
            employee_id=str(row.get("employeeId") or employee.get("id") or ""),
            work_date=parse_iso_date(row["date"]),
            reason=row.get("reason") or "",
            check_in_time=row.get("checkInTime") or None,
            check_out_time=row.get("checkOutTime") or None,
            status=coerce_enum(RequestStatus, row.get("status"), RequestStatus.PENDING),
            request_type=coerce_enum(ManualRequestType, row.get("type"), ManualRequestType.NEW),
            original_record_id=row.get("originalRecordId"),
            employee_name=employee.get("fullName"),
            department=employee.get("department"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.request_id,
            "employeeId": self.employee_id,
            "date": self.work_date.isoformat(),
            "checkInTime": self.check_in_time,
            "checkOutTime": self.check_out_time,
            "reason": self.reason,
            "status": self.status.value,
            "type": self.request_type.value,
            "originalRecordId": self.original_record_id,
            "employeeName": self.employee_name,
            "department": self.department,
        }
