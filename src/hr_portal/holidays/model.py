from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.datetime_utils import parse_iso_date


@dataclass(frozen=True)
class Holiday:
    holiday_id: str
    name: str
    day: date
    description: str = ""

    @classmethod
    def from_api(cls, row: dict) -> "Holiday":
        return cls(
            holiday_id=str(row.get("id", "")),
            name=row.get("name") or "",
            day=parse_iso_date(row["date"]),
            description=row.get("description") or "",
        )

    def to_dict(self) -> dict:
        return {
            "id": self.holiday_id,
            "name": self.name,
            "date": self.day.isoformat(),
            "description": self.description,
        }
