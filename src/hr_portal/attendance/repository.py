from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_today(self) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_my_history(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def check_in(self, *, latitude: float, longitude: float) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def check_out(
        self,
        *,
        latitude: float,
        longitude: float,
        late_checkout_reason: str = "",
    ) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def manual_upsert(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in_time: str,
        check_out_time: Optional[str],
    ) -> bool:
        """Admin-only add/edit of a record."""

        raise NotImplementedError

    def delete(self, record_id: str) -> bool:
        raise NotImplementedError
