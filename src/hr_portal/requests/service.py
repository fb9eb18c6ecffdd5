from __future__ import annotations

import logging
from datetime import time
from typing import Optional, Sequence

from ..common.datetime_utils import format_clock_time, parse_clock_time, parse_iso_date
from ..common.validators import require_choice
from ..core.enums import RequestStatus, Role
from ..core.exceptions import AuthorizationError, ValidationError
from .model import ManualRequest
from .repository import ManualRequestRepository

_logger = logging.getLogger(__name__)


class ManualRequestService:
    def __init__(self, requests: ManualRequestRepository):
        self._requests = requests

    @staticmethod
    def _parse_time(value: str) -> Optional[time]:
        v = (value or "").strip()
        if not v:
            return None
        return parse_clock_time(v)

    def submit(self, *, work_date: str, check_in_time: str, check_out_time: str, reason: str) -> ManualRequest:
        if not (work_date or "").strip():
            raise ValidationError("Missing required information")
        day = parse_iso_date(work_date)

        check_in_t = self._parse_time(check_in_time)
        check_out_t = self._parse_time(check_out_time)
        if not check_in_t and not check_out_t:
            raise ValidationError("Please provide at least check-in or check-out time")
        if check_in_t and check_out_t and check_out_t <= check_in_t:
            raise ValidationError("Check-out time must be after check-in time")

        text = (reason or "").strip()
        if not text:
            raise ValidationError("Please provide a reason for this request")

        req = self._requests.submit(
            work_date=day,
            check_in_time=format_clock_time(check_in_t) if check_in_t else None,
            check_out_time=format_clock_time(check_out_t) if check_out_t else None,
            reason=text,
        )
        if not req:
            raise ValidationError("Failed to submit request")
        return req

    def my_requests(self) -> Sequence[ManualRequest]:
        return sorted(self._requests.list_mine(), key=lambda r: r.work_date, reverse=True)

    def cancel(self, request_id: str) -> None:
        req = next((r for r in self._requests.list_mine() if r.request_id == str(request_id)), None)
        if not req:
            raise ValidationError("Request not found")
        if req.status != RequestStatus.PENDING:
            raise ValidationError("Only pending requests can be cancelled")
        self._requests.cancel(req.request_id)

    def list_all(self, *, pending_only: bool = False) -> Sequence[ManualRequest]:
        rows = self._requests.list_pending() if pending_only else self._requests.list_all()
        return sorted(rows, key=lambda r: r.work_date, reverse=True)

    def process(self, *, current_role: Role, request_id: str, status: str, remarks: str = "") -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")

        decision = require_choice(status, RequestStatus, "Status")
        if decision == RequestStatus.PENDING:
            raise ValidationError("Status must be approved or rejected")

        self._requests.process(str(request_id), decision, (remarks or "").strip())
        _logger.info("Manual request %s %s", request_id, decision.value)
