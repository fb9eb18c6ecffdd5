import pytest

from hr_portal.core.enums import Role
from hr_portal.core.exceptions import AuthorizationError, ValidationError
from hr_portal.geofences.model import GeoFence, GeoLocation
from hr_portal.geofences.service import GeoFenceService, distance_meters


class FakeGeoFenceRepo:
    def __init__(self, fences=(), inside=True):
        self.fences = list(fences)
        self.inside = inside
        self.created = []
        self.asked = []

    def list_all(self):
        return list(self.fences)

    def create(self, fence):
        self.created.append(fence)
        return fence

    def is_within_fence(self, latitude, longitude):
        self.asked.append((latitude, longitude))
        return self.inside


HQ = GeoFence("f1", "HQ", 10.7769, 106.7009, 200)
BRANCH = GeoFence("f2", "Branch", 10.8231, 106.6297, 150)
CLOSED = GeoFence("f3", "Closed", 10.7770, 106.7010, 100, active=False)


def test_distance_meters():
    assert distance_meters(GeoLocation(0, 0), GeoLocation(0, 0)) == 0
    # One degree of latitude is about 111 km.
    assert distance_meters(GeoLocation(0, 0), GeoLocation(1, 0)) == pytest.approx(111_195, rel=1e-3)


def test_check_location_asks_backend_after_validating():
    repo = FakeGeoFenceRepo(inside=False)
    service = GeoFenceService(repo)

    location = service.check_location("10.5", "106.1")

    assert location == GeoLocation(10.5, 106.1, is_within_fence=False)
    assert repo.asked == [(10.5, 106.1)]
    with pytest.raises(ValidationError, match="Latitude"):
        service.check_location(91, 0)
    with pytest.raises(ValidationError, match="Longitude"):
        service.check_location(0, -181)


def test_wfh_location_is_first_active_fence():
    service = GeoFenceService(FakeGeoFenceRepo([CLOSED, HQ, BRANCH]))

    assert service.wfh_location() == GeoLocation(HQ.center_latitude, HQ.center_longitude, is_within_fence=True)
    assert GeoFenceService(FakeGeoFenceRepo([CLOSED])).wfh_location() is None


def test_nearest_skips_inactive_fences():
    service = GeoFenceService(FakeGeoFenceRepo([CLOSED, HQ, BRANCH]))

    fence, meters = service.nearest(GeoLocation(10.7770, 106.7010))

    assert fence is HQ
    assert meters < 50


def test_save_fence_validation():
    repo = FakeGeoFenceRepo()
    service = GeoFenceService(repo)
    data = {"name": "HQ", "centerLatitude": 10.7, "centerLongitude": 106.7, "radius": 100}

    with pytest.raises(AuthorizationError):
        service.save_fence(current_role=Role.EMPLOYEE, data=data)
    with pytest.raises(ValidationError, match="greater than 0"):
        service.save_fence(current_role=Role.ADMIN, data={**data, "radius": 0})
    with pytest.raises(ValidationError, match="Name"):
        service.save_fence(current_role=Role.ADMIN, data={**data, "name": ""})

    saved = service.save_fence(current_role=Role.ADMIN, data=data)
    assert saved.radius == 100.0
    assert saved.active is True
