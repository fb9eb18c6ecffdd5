from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import GeoFence


class GeoFenceRepository(Protocol):
    def list_all(self) -> Sequence[GeoFence]:
        raise NotImplementedError

    def get_by_id(self, fence_id: str) -> Optional[GeoFence]:
        raise NotImplementedError

    def create(self, fence: GeoFence) -> Optional[GeoFence]:
        raise NotImplementedError

    def update(self, fence: GeoFence) -> Optional[GeoFence]:
        raise NotImplementedError

    def delete(self, fence_id: str) -> bool:
        raise NotImplementedError

    def is_within_fence(self, latitude: float, longitude: float) -> bool:
        """Membership is decided by the backend."""

        raise NotImplementedError
