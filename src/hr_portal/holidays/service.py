from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from .model import Holiday
from .repository import HolidayRepository


class HolidayService:
    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def list_holidays(self, *, year: Optional[int] = None) -> Sequence[Holiday]:
        rows = self._holidays.list_all()
        if year:
            rows = [h for h in rows if h.day.year == year]
        return sorted(rows, key=lambda h: h.day)

    def get_holiday(self, holiday_id: str) -> Holiday:
        holiday = self._holidays.get_by_id(holiday_id)
        if not holiday:
            raise ValidationError("Holiday not found")
        return holiday

    def is_holiday(self, day: date) -> bool:
        return any(h.day == day for h in self._holidays.list_all())

    def save_holiday(self, *, current_role: Role, data: dict, holiday_id: str = "") -> Holiday:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")

        name = require_non_empty(data.get("name", ""), "Holiday name")
        day = parse_iso_date(require_non_empty(data.get("date", ""), "Date"))
        description = (data.get("description") or "").strip()

        if holiday_id:
            saved = self._holidays.update(holiday_id, name=name, day=day, description=description)
        else:
            saved = self._holidays.create(name=name, day=day, description=description)
        if not saved:
            raise ValidationError("Saving holiday failed")
        return saved

    def delete_holiday(self, *, current_role: Role, holiday_id: str) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")
        self._holidays.delete(holiday_id)
