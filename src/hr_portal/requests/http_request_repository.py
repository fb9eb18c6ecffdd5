from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..api.client import ApiClient
from ..api.http_base import unwrap_list, unwrap_one
from ..core.enums import RequestStatus
from .model import ManualRequest
from .repository import ManualRequestRepository


class HttpManualRequestRepository(ManualRequestRepository):
    def __init__(self, api: ApiClient):
        self._api = api

    @staticmethod
    def _many(payload: dict) -> Sequence[ManualRequest]:
        return [ManualRequest.from_api(r) for r in unwrap_list(payload, "requests")]

    def submit(
        self,
        *,
        work_date: date,
        check_in_time: Optional[str],
        check_out_time: Optional[str],
        reason: str,
    ) -> Optional[ManualRequest]:
        payload = self._api.post(
            "/manual-requests",
            {
                "date": work_date.isoformat(),
                "checkInTime": check_in_time,
                "checkOutTime": check_out_time,
                "reason": reason,
            },
        )
        row = unwrap_one(payload, "request")
        return ManualRequest.from_api(row) if row else None

    def list_mine(self) -> Sequence[ManualRequest]:
        return self._many(self._api.get("/manual-requests/my-requests"))

    def cancel(self, request_id: str) -> bool:
        self._api.delete(f"/manual-requests/{request_id}")
        return True

    def list_all(self) -> Sequence[ManualRequest]:
        return self._many(self._api.get("/manual-requests"))

    def list_pending(self) -> Sequence[ManualRequest]:
        return self._many(self._api.get("/manual-requests/pending"))

    def process(self, request_id: str, status: RequestStatus, remarks: str = "") -> bool:
        self._api.put(f"/manual-requests/{request_id}/process", {"status": status.value, "remarks": remarks})
        return True
