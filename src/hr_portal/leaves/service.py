from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_choice, require_non_empty
from ..core.constants import ANNUAL_LEAVE_ALLOWANCE
from ..core.enums import LeaveType, RequestStatus, Role
from ..core.exceptions import AuthorizationError, ValidationError
from .model import LeaveBalance, LeaveRequest
from .repository import LeaveRepository

_logger = logging.getLogger(__name__)


def business_days_between(start: date, end: date) -> int:
    """Mon..Fri between two dates, both endpoints included."""

    if end < start:
        return 0
    days = 0
    current = start
    while current <= end:
        if current.weekday() < 5:
            days += 1
        current += timedelta(days=1)
    return days


def calculate_days_between(start: date, end: date) -> int:
    """Calendar days between two dates, both endpoints included."""

    return abs((end - start).days) + 1


class LeaveService:
    def __init__(self, leaves: LeaveRepository, *, annual_allowance: int = ANNUAL_LEAVE_ALLOWANCE):
        self._leaves = leaves
        self._annual_allowance = annual_allowance

    def apply(
        self,
        *,
        start_date: str,
        end_date: str,
        leave_type: str,
        reason: str,
        employee_id: Optional[str] = None,
    ) -> LeaveRequest:
        if not start_date or not end_date:
            raise ValidationError("Please select both start and end dates")
        start = parse_iso_date(start_date)
        end = parse_iso_date(end_date)
        if end < start:
            raise ValidationError("End date cannot be before start date")

        kind = require_choice(leave_type, LeaveType, "Leave type")
        text = require_non_empty(reason, "Reason")

        leave = self._leaves.apply(
            start_date=start,
            end_date=end,
            leave_type=kind,
            reason=text,
            employee_id=employee_id,
        )
        if not leave:
            raise ValidationError("Failed to submit leave request")
        return leave

    def my_leaves(self) -> Sequence[LeaveRequest]:
        return sorted(self._leaves.list_mine(), key=lambda l: l.start_date, reverse=True)

    def cancel(self, leave_id: str) -> None:
        leave = next((l for l in self._leaves.list_mine() if l.leave_id == str(leave_id)), None)
        if not leave:
            raise ValidationError("Leave request not found")
        if leave.status != RequestStatus.PENDING:
            raise ValidationError("Only pending leave requests can be cancelled")
        self._leaves.cancel(leave.leave_id)

    def balance(self, leaves: Optional[Sequence[LeaveRequest]] = None, *, employee_id: str = "") -> LeaveBalance:
        """Annual allowance minus business days of approved leaves.

        With `employee_id`, also the days left per leave type out of the
        allowance.
        """

        leaves = self._leaves.list_mine() if leaves is None else leaves
        approved = [l for l in leaves if l.status == RequestStatus.APPROVED]

        by_type: dict[str, int] = {}
        for l in approved:
            by_type[l.leave_type.value] = by_type.get(l.leave_type.value, 0) + business_days_between(
                l.start_date, l.end_date
            )
        remaining_by_type = {}
        if employee_id:
            remaining_by_type = {
                kind.value: self.remaining_days(
                    leaves,
                    employee_id=str(employee_id),
                    leave_type=kind,
                    allowed_days=self._annual_allowance,
                )
                for kind in LeaveType
            }
        return LeaveBalance(
            total=self._annual_allowance,
            used=sum(by_type.values()),
            by_type=by_type,
            remaining_by_type=remaining_by_type,
        )

    @staticmethod
    def remaining_days(
        leaves: Sequence[LeaveRequest],
        *,
        employee_id: str,
        leave_type: LeaveType,
        allowed_days: int,
    ) -> int:
        used = sum(
            calculate_days_between(l.start_date, l.end_date)
            for l in leaves
            if l.employee_id == employee_id and l.leave_type == leave_type and l.status == RequestStatus.APPROVED
        )
        return max(0, allowed_days - used)

    # Admin

    def list_all(self, *, status: str = "") -> Sequence[LeaveRequest]:
        if status == RequestStatus.PENDING.value:
            rows = self._leaves.list_pending()
        else:
            rows = self._leaves.list_all()
            if status:
                wanted = require_choice(status, RequestStatus, "Status")
                rows = [l for l in rows if l.status == wanted]
        return sorted(rows, key=lambda l: l.start_date, reverse=True)

    def decide(self, *, current_role: Role, leave_id: str, status: str, remarks: str = "") -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")

        decision = require_choice(status, RequestStatus, "Status")
        if decision == RequestStatus.PENDING:
            raise ValidationError("Status must be approved or rejected")

        self._leaves.update_status(str(leave_id), decision, (remarks or "").strip())
        _logger.info("Leave %s %s", leave_id, decision.value)
