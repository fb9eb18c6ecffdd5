from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..api.client import ApiClient
from ..api.http_base import unwrap_list, unwrap_one
from ..core.enums import LeaveType, RequestStatus
from .model import LeaveRequest
from .repository import LeaveRepository


class HttpLeaveRepository(LeaveRepository):
    def __init__(self, api: ApiClient):
        self._api = api

    @staticmethod
    def _many(payload: dict) -> Sequence[LeaveRequest]:
        return [LeaveRequest.from_api(r) for r in unwrap_list(payload, "leaves")]

    def apply(
        self,
        *,
        start_date: date,
        end_date: date,
        leave_type: LeaveType,
        reason: str,
        employee_id: Optional[str] = None,
    ) -> Optional[LeaveRequest]:
        body = {
            "startDate": start_date.isoformat(),
            "endDate": end_date.isoformat(),
            "type": leave_type.value,
            "reason": reason,
        }
        if employee_id:
            body["employeeId"] = employee_id
        row = unwrap_one(self._api.post("/leaves", body), "leave")
        return LeaveRequest.from_api(row) if row else None

    def list_mine(self) -> Sequence[LeaveRequest]:
        return self._many(self._api.get("/leaves/my-leaves"))

    def cancel(self, leave_id: str) -> bool:
        self._api.delete(f"/leaves/{leave_id}")
        return True

    def list_all(self) -> Sequence[LeaveRequest]:
        return self._many(self._api.get("/leaves"))

    def list_pending(self) -> Sequence[LeaveRequest]:
        return self._many(self._api.get("/leaves/pending"))

    def update_status(self, leave_id: str, status: RequestStatus, remarks: str = "") -> bool:
        self._api.put(f"/leaves/{leave_id}/status", {"status": status.value, "remarks": remarks})
        return True
