from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveType, RequestStatus
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def apply(
        self,
        *,
        start_date: date,
        end_date: date,
        leave_type: LeaveType,
        reason: str,
        employee_id: Optional[str] = None,
    ) -> Optional[LeaveRequest]:
        """Create a leave request.

        `employee_id` is only sent for requests filed on someone's behalf
        (the absentee job); otherwise the backend uses the token's user.
        """

        raise NotImplementedError

    def list_mine(self) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def cancel(self, leave_id: str) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def list_pending(self) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def update_status(self, leave_id: str, status: RequestStatus, remarks: str = "") -> bool:
        raise NotImplementedError
