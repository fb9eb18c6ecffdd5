from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from .model import GeoFence, GeoLocation
from .repository import GeoFenceRepository

_logger = logging.getLogger(__name__)

EARTH_RADIUS_METERS = 6_371_000


def distance_meters(a: GeoLocation, b: GeoLocation) -> float:
    """Great-circle (haversine) distance between two points."""

    lat1, lat2 = math.radians(a.latitude), math.radians(b.latitude)
    d_lat = lat2 - lat1
    d_lon = math.radians(b.longitude - a.longitude)
    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    return 2 * EARTH_RADIUS_METERS * math.asin(math.sqrt(h))


def _coordinate(value, field_name: str, limit: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not -limit <= number <= limit:
        raise ValidationError(f"{field_name} must be between {-limit:g} and {limit:g}")
    return number


class GeoFenceService:
    def __init__(self, fences: GeoFenceRepository):
        self._fences = fences

    def list_fences(self) -> Sequence[GeoFence]:
        return self._fences.list_all()

    def get_fence(self, fence_id: str) -> GeoFence:
        fence = self._fences.get_by_id(fence_id)
        if not fence:
            raise ValidationError("Geofence not found")
        return fence

    def save_fence(self, *, current_role: Role, data: dict, fence_id: str = "") -> GeoFence:
        """Create (no `fence_id`) or update a fence after validating it."""

        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")

        try:
            radius = float(data.get("radius"))
        except (TypeError, ValueError):
            raise ValidationError("Radius must be a number")
        if radius <= 0:
            raise ValidationError("Radius must be greater than 0")

        fence = GeoFence(
            fence_id=fence_id,
            name=require_non_empty(data.get("name", ""), "Name"),
            center_latitude=_coordinate(data.get("centerLatitude"), "Latitude", 90),
            center_longitude=_coordinate(data.get("centerLongitude"), "Longitude", 180),
            radius=radius,
            active=bool(data.get("active", True)),
        )
        saved = self._fences.update(fence) if fence_id else self._fences.create(fence)
        if not saved:
            raise ValidationError("Saving geofence failed")
        _logger.info("Geofence %s saved (%s)", saved.fence_id, saved.name)
        return saved

    def delete_fence(self, *, current_role: Role, fence_id: str) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")
        self._fences.delete(fence_id)

    def check_location(self, latitude, longitude) -> GeoLocation:
        lat = _coordinate(latitude, "Latitude", 90)
        lon = _coordinate(longitude, "Longitude", 180)
        return GeoLocation(lat, lon, is_within_fence=self._fences.is_within_fence(lat, lon))

    def wfh_location(self) -> Optional[GeoLocation]:
        """Centre of the first active fence, marked as inside."""

        for fence in self._fences.list_all():
            if fence.active:
                return GeoLocation(fence.center_latitude, fence.center_longitude, is_within_fence=True)
        return None

    def nearest(self, location: GeoLocation) -> Optional[tuple[GeoFence, float]]:
        """Closest active fence and the distance to its centre in metres."""

        best = None
        for fence in self._fences.list_all():
            if not fence.active:
                continue
            d = distance_meters(location, fence.center)
            if best is None or d < best[1]:
                best = (fence, d)
        return best
