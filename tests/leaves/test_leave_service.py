from datetime import date

import pytest

from hr_portal.core.enums import LeaveType, RequestStatus, Role
from hr_portal.core.exceptions import AuthorizationError, ValidationError
from hr_portal.leaves.model import LeaveRequest
from hr_portal.leaves.service import LeaveService, business_days_between, calculate_days_between


def _leave(lid, start, end, status=RequestStatus.APPROVED, kind=LeaveType.SICK, emp="u1"):
    return LeaveRequest(lid, emp, start, end, kind, "flu", status)


class FakeLeaveRepo:
    def __init__(self, leaves=()):
        self.leaves = list(leaves)
        self.applied = []
        self.cancelled = []
        self.decisions = []

    def apply(self, *, start_date, end_date, leave_type, reason, employee_id=None):
        self.applied.append((start_date, end_date, leave_type, reason, employee_id))
        return LeaveRequest("new", employee_id or "u1", start_date, end_date, leave_type, reason)

    def list_mine(self):
        return list(self.leaves)

    def list_all(self):
        return list(self.leaves)

    def list_pending(self):
        return [l for l in self.leaves if l.status == RequestStatus.PENDING]

    def cancel(self, leave_id):
        self.cancelled.append(leave_id)
        return True

    def update_status(self, leave_id, status, remarks=""):
        self.decisions.append((leave_id, status, remarks))
        return True


def test_business_days_include_both_ends():
    # Mon..Fri
    assert business_days_between(date(2025, 3, 10), date(2025, 3, 14)) == 5
    # Fri..Mon skips the weekend
    assert business_days_between(date(2025, 3, 14), date(2025, 3, 17)) == 2
    assert business_days_between(date(2025, 3, 12), date(2025, 3, 12)) == 1
    assert business_days_between(date(2025, 3, 15), date(2025, 3, 16)) == 0


def test_calendar_days_include_both_ends():
    assert calculate_days_between(date(2025, 3, 14), date(2025, 3, 17)) == 4
    assert calculate_days_between(date(2025, 3, 17), date(2025, 3, 14)) == 4


def test_apply_validates_dates_type_and_reason():
    service = LeaveService(FakeLeaveRepo())

    with pytest.raises(ValidationError, match="both start and end"):
        service.apply(start_date="", end_date="2025-03-12", leave_type="sick", reason="x")
    with pytest.raises(ValidationError, match="before start"):
        service.apply(start_date="2025-03-12", end_date="2025-03-11", leave_type="sick", reason="x")
    with pytest.raises(ValidationError, match="Leave type"):
        service.apply(start_date="2025-03-12", end_date="2025-03-12", leave_type="holiday", reason="x")
    with pytest.raises(ValidationError, match="Reason"):
        service.apply(start_date="2025-03-12", end_date="2025-03-12", leave_type="sick", reason="  ")


def test_apply_sends_parsed_values():
    repo = FakeLeaveRepo()
    leave = LeaveService(repo).apply(
        start_date="2025-03-12", end_date="2025-03-13", leave_type="vacation", reason=" trip "
    )

    assert repo.applied == [(date(2025, 3, 12), date(2025, 3, 13), LeaveType.VACATION, "trip", None)]
    assert leave.leave_type == LeaveType.VACATION


def test_only_pending_leaves_can_be_cancelled():
    repo = FakeLeaveRepo(
        [
            _leave("p", date(2025, 3, 12), date(2025, 3, 12), RequestStatus.PENDING),
            _leave("a", date(2025, 3, 1), date(2025, 3, 1), RequestStatus.APPROVED),
        ]
    )
    service = LeaveService(repo)

    service.cancel("p")
    with pytest.raises(ValidationError, match="Only pending"):
        service.cancel("a")
    with pytest.raises(ValidationError, match="not found"):
        service.cancel("zzz")
    assert repo.cancelled == ["p"]


def test_balance_counts_approved_business_days():
    leaves = [
        _leave("1", date(2025, 3, 14), date(2025, 3, 17)),  # Fri..Mon -> 2
        _leave("2", date(2025, 3, 20), date(2025, 3, 20), kind=LeaveType.CASUAL),
        _leave("3", date(2025, 4, 1), date(2025, 4, 30), RequestStatus.REJECTED),
    ]
    balance = LeaveService(FakeLeaveRepo(leaves)).balance()

    assert balance.used == 3
    assert balance.remaining == 9
    assert balance.by_type == {"sick": 2, "casual": 1}


def test_balance_never_negative():
    leaves = [_leave("1", date(2025, 3, 3), date(2025, 3, 28))]  # 20 business days

    assert LeaveService(FakeLeaveRepo(leaves)).balance().remaining == 0


def test_remaining_days_per_type():
    leaves = [
        _leave("1", date(2025, 3, 14), date(2025, 3, 17)),
        _leave("2", date(2025, 3, 20), date(2025, 3, 20), emp="u2"),
        _leave("3", date(2025, 3, 21), date(2025, 3, 21), RequestStatus.PENDING),
    ]

    remaining = LeaveService.remaining_days(leaves, employee_id="u1", leave_type=LeaveType.SICK, allowed_days=6)

    assert remaining == 2


def test_decide_requires_admin_and_final_status():
    repo = FakeLeaveRepo()
    service = LeaveService(repo)

    with pytest.raises(AuthorizationError):
        service.decide(current_role=Role.EMPLOYEE, leave_id="1", status="approved")
    with pytest.raises(ValidationError):
        service.decide(current_role=Role.ADMIN, leave_id="1", status="pending")

    service.decide(current_role=Role.ADMIN, leave_id="1", status="rejected", remarks=" busy week ")
    assert repo.decisions == [("1", RequestStatus.REJECTED, "busy week")]


def test_unknown_type_and_status_from_backend_fall_back():
    leave = LeaveRequest.from_api(
        {"id": "1", "employeeId": "u1", "startDate": "2025-03-12", "endDate": "2025-03-12", "type": "auto", "status": "escalated"}
    )

    assert leave.leave_type == LeaveType.OTHER
    assert leave.status == RequestStatus.PENDING


def test_weekend_only_leave_uses_no_business_days():
    assert business_days_between(date(2025, 3, 15), date(2025, 3, 15)) == 0
    assert business_days_between(date(2025, 3, 15), date(2025, 3, 17)) == 1

    leaves = [_leave("1", date(2025, 3, 15), date(2025, 3, 15))]
    assert LeaveService(FakeLeaveRepo(leaves)).balance().used == 0


def test_balance_for_employee_lists_remaining_days_per_type():
    leaves = [
        _leave("1", date(2025, 3, 14), date(2025, 3, 17)),  # 4 calendar days
        _leave("2", date(2025, 3, 20), date(2025, 3, 20), kind=LeaveType.CASUAL, emp="u2"),
    ]

    balance = LeaveService(FakeLeaveRepo(leaves)).balance(employee_id="u1")

    assert balance.remaining_by_type["sick"] == 8
    assert balance.remaining_by_type["casual"] == 12
    assert set(balance.remaining_by_type) == {kind.value for kind in LeaveType}
    assert balance.to_dict()["remainingByType"]["sick"] == 8


def test_balance_without_employee_has_no_per_type_remaining():
    assert LeaveService(FakeLeaveRepo()).balance().remaining_by_type == {}
