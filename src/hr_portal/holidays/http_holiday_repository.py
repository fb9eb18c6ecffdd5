from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..api.client import ApiClient
from ..api.http_base import unwrap_list, unwrap_one
from .model import Holiday
from .repository import HolidayRepository


class HttpHolidayRepository(HolidayRepository):
    def __init__(self, api: ApiClient):
        self._api = api

    @staticmethod
    def _one(payload: dict) -> Optional[Holiday]:
        row = unwrap_one(payload, "holiday")
        return Holiday.from_api(row) if row else None

    def list_all(self) -> Sequence[Holiday]:
        return [Holiday.from_api(r) for r in unwrap_list(self._api.get("/holidays"), "holidays")]

    def get_by_id(self, holiday_id: str) -> Optional[Holiday]:
        return self._one(self._api.get(f"/holidays/{holiday_id}"))

    def create(self, *, name: str, day: date, description: str) -> Optional[Holiday]:
        return self._one(
            self._api.post("/holidays", {"name": name, "date": day.isoformat(), "description": description})
        )

    def update(self, holiday_id: str, *, name: str, day: date, description: str) -> Optional[Holiday]:
        return self._one(
            self._api.put(
                f"/holidays/{holiday_id}",
                {"name": name, "date": day.isoformat(), "description": description},
            )
        )

    def delete(self, holiday_id: str) -> bool:
        self._api.delete(f"/holidays/{holiday_id}")
        return True
