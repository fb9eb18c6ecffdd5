from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..api.client import ApiClient
from ..api.http_base import unwrap_list, unwrap_one
from .model import AttendanceRecord
from .repository import AttendanceRepository


class HttpAttendanceRepository(AttendanceRepository):
    def __init__(self, api: ApiClient):
        self._api = api

    @staticmethod
    def _one(payload: dict) -> Optional[AttendanceRecord]:
        row = unwrap_one(payload, "attendance")
        return AttendanceRecord.from_api(row) if row else None

    @staticmethod
    def _many(payload: dict) -> Sequence[AttendanceRecord]:
        return [AttendanceRecord.from_api(r) for r in unwrap_list(payload, "attendance")]

    def get_today(self) -> Optional[AttendanceRecord]:
        return self._one(self._api.get("/attendance/today"))

    def get_my_history(self) -> Sequence[AttendanceRecord]:
        return self._many(self._api.get("/attendance/my-records"))

    def check_in(self, *, latitude: float, longitude: float) -> Optional[AttendanceRecord]:
        return self._one(self._api.post("/attendance/check-in", {"latitude": latitude, "longitude": longitude}))

    def check_out(
        self,
        *,
        latitude: float,
        longitude: float,
        late_checkout_reason: str = "",
    ) -> Optional[AttendanceRecord]:
        payload = self._api.post(
            "/attendance/check-out",
            {"latitude": latitude, "longitude": longitude, "lateCheckoutReason": late_checkout_reason},
        )
        return self._one(payload)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._many(self._api.get("/attendance"))

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        return self._many(self._api.get(f"/attendance/employee/{employee_id}"))

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        return self._many(self._api.get(f"/attendance/date/{work_date.isoformat()}"))

    def manual_upsert(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in_time: str,
        check_out_time: Optional[str],
    ) -> bool:
        self._api.post(
            "/attendance/manually-update",
            {
                "employeeId": employee_id,
                "date": work_date.isoformat(),
                "checkInTime": check_in_time,
                "checkOutTime": check_out_time,
            },
        )
        return True

    def delete(self, record_id: str) -> bool:
        self._api.delete(f"/attendance/delete/{record_id}")
        return True
