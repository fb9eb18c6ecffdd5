from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..core.constants import AUTO_DEDUCT_REASON
from ..core.enums import LeaveType, RequestStatus
from ..holidays.service import HolidayService
from ..leaves.repository import LeaveRepository
from ..users.repository import UserRepository

_logger = logging.getLogger(__name__)


@dataclass
class AbsenteeRun:
    day: date
    skipped: Optional[str] = None
    deducted: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


class AbsenteeService:
    """Daily job: employees with no check-in and no approved leave lose a casual day."""

    def __init__(
        self,
        users: UserRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        holiday_service: HolidayService,
    ):
        self._users = users
        self._attendance = attendance
        self._leaves = leaves
        self._holidays = holiday_service

    def process_absentees(self, today: date) -> AbsenteeRun:
        run = AbsenteeRun(day=today)

        if self._holidays.is_holiday(today):
            _logger.info("%s is a holiday. Skipping absence processing.", today)
            run.skipped = "holiday"
            return run

        if today.weekday() >= 5:
            _logger.info("%s is a weekend. Skipping absence processing.", today)
            run.skipped = "weekend"
            return run

        employees = self._users.list_all()
        _logger.info("Processing absences for %d employees", len(employees))

        present = {r.employee_id for r in self._attendance.list_for_date(today) if r.check_in_time}
        on_leave = {
            l.employee_id
            for l in self._leaves.list_all()
            if l.status == RequestStatus.APPROVED and l.covers(today)
        }

        for employee in employees:
            if employee.user_id in present or employee.user_id in on_leave:
                continue
            try:
                self._leaves.apply(
                    start_date=today,
                    end_date=today,
                    leave_type=LeaveType.CASUAL,
                    reason=AUTO_DEDUCT_REASON,
                    employee_id=employee.user_id,
                )
            except Exception:
                _logger.exception("Error applying auto-deducted leave for employee %s", employee.user_id)
                run.failed.append(employee.user_id)
                continue
            _logger.info("Auto-deducted leave for employee %s due to absence", employee.full_name or employee.user_id)
            run.deducted.append(employee.user_id)

        return run
