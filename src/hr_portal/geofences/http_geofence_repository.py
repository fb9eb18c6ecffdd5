from __future__ import annotations

from typing import Optional, Sequence

from ..api.client import ApiClient
from ..api.http_base import unwrap_list, unwrap_one
from .model import GeoFence
from .repository import GeoFenceRepository


def _body(fence: GeoFence) -> dict:
    return {
        "name": fence.name,
        "centerLatitude": fence.center_latitude,
        "centerLongitude": fence.center_longitude,
        "radius": fence.radius,
        "active": fence.active,
    }


class HttpGeoFenceRepository(GeoFenceRepository):
    def __init__(self, api: ApiClient):
        self._api = api

    def list_all(self) -> Sequence[GeoFence]:
        return [GeoFence.from_api(r) for r in unwrap_list(self._api.get("/geofences"), "geofences")]

    def get_by_id(self, fence_id: str) -> Optional[GeoFence]:
        row = unwrap_one(self._api.get(f"/geofences/{fence_id}"), "geofence")
        return GeoFence.from_api(row) if row else None

    def create(self, fence: GeoFence) -> Optional[GeoFence]:
        row = unwrap_one(self._api.post("/geofences", _body(fence)), "geofence")
        return GeoFence.from_api(row) if row else None

    def update(self, fence: GeoFence) -> Optional[GeoFence]:
        row = unwrap_one(self._api.put(f"/geofences/{fence.fence_id}", _body(fence)), "geofence")
        return GeoFence.from_api(row) if row else None

    def delete(self, fence_id: str) -> bool:
        self._api.delete(f"/geofences/{fence_id}")
        return True

    def is_within_fence(self, latitude: float, longitude: float) -> bool:
        payload = self._api.post("/geofences/check-location", {"latitude": latitude, "longitude": longitude})
        body = payload.get("data") if isinstance(payload.get("data"), dict) else payload
        return bool(body.get("isWithinFence"))
