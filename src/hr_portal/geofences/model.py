from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GeoLocation:
    """A captured position.

    `is_within_fence` is None until the backend (or the WFH rule) decided it.
    """

    latitude: float
    longitude: float
    is_within_fence: Optional[bool] = None


@dataclass(frozen=True)
class GeoFence:
    fence_id: str
    name: str
    center_latitude: float
    center_longitude: float
    radius: float
    active: bool = True

    @property
    def center(self) -> GeoLocation:
        return GeoLocation(self.center_latitude, self.center_longitude)

    @classmethod
    def from_api(cls, row: dict) -> "GeoFence":
        center = row.get("center") or {}
        return cls(
            fence_id=str(row.get("id", "")),
            name=row.get("name") or "",
            center_latitude=float(row.get("centerLatitude", center.get("latitude", 0.0))),
            center_longitude=float(row.get("centerLongitude", center.get("longitude", 0.0))),
            radius=float(row.get("radius") or 0),
            active=bool(row.get("active", True)),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.fence_id,
            "name": self.name,
            "centerLatitude": self.center_latitude,
            "centerLongitude": self.center_longitude,
            "radius": self.radius,
            "active": self.active,
        }
