from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from .model import ManualRequest


class ManualRequestRepository(Protocol):
    def submit(
        self,
        *,
        work_date: date,
        check_in_time: Optional[str],
        check_out_time: Optional[str],
        reason: str,
    ) -> Optional[ManualRequest]:
        raise NotImplementedError

    def list_mine(self) -> Sequence[ManualRequest]:
        raise NotImplementedError

    def cancel(self, request_id: str) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[ManualRequest]:
        raise NotImplementedError

    def list_pending(self) -> Sequence[ManualRequest]:
        raise NotImplementedError

    def process(self, request_id: str, status: RequestStatus, remarks: str = "") -> bool:
        raise NotImplementedError
