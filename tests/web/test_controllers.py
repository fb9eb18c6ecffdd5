from unittest.mock import MagicMock

import pytest

from hr_portal.container import build_container
from hr_portal.main import create_app

ADMIN = {"id": "a1", "firstName": "Ada", "lastName": "Admin", "email": "ada@example.com", "role": "admin"}
EMPLOYEE = {
    "id": "e1",
    "firstName": "Eve",
    "lastName": "Stone",
    "email": "eve@example.com",
    "role": "employee",
    "department": "Sales",
}


def _response(body, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.content = b"{}"
    response.json.return_value = body
    return response


class FakeBackend:
    """Answers ApiClient calls by (method, path)."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def on(self, method, path, body, status_code=200):
        self.routes[(method, path)] = (body, status_code)

    def request(self, method, url, **kwargs):
        path = url.split("/api", 1)[1]
        self.calls.append((method, path, kwargs))
        body, status_code = self.routes.get((method, path), ({"message": "Not found"}, 404))
        return _response(body, status_code)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def app(monkeypatch, tmp_path, backend):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_container(
        api_config={"base_url": "http://backend.test/api"},
        settings_path=str(tmp_path / "attendance_settings.json"),
    )
    session = MagicMock()
    session.request.side_effect = backend.request
    container.api._session = session
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


def _login_as(client, user, token="tok"):
    with client.session_transaction() as sess:
        sess["auth_token"] = token
        sess["user_id"] = user["id"]
        sess["role"] = user["role"]
        sess["is_wfh_enabled"] = False


def test_login_stores_token_and_user(client, backend):
    backend.on("POST", "/auth/login", {"token": "jwt-1", "user": EMPLOYEE, "message": "Welcome"})

    response = client.post("/api/auth/login", json={"email": "eve@example.com", "password": "secret"})

    assert response.status_code == 200
    assert response.get_json()["user"]["fullName"] == "Eve Stone"
    with client.session_transaction() as sess:
        assert sess["auth_token"] == "jwt-1"
        assert sess["role"] == "employee"


def test_bearer_token_comes_from_session(client, backend):
    backend.on("GET", "/attendance/today", {"attendance": None})
    _login_as(client, EMPLOYEE, token="jwt-9")

    client.get("/api/attendance/today")

    method, path, kwargs = backend.calls[-1]
    assert kwargs["headers"] == {"Authorization": "Bearer jwt-9"}


def test_views_require_login(client):
    response = client.get("/api/attendance/today")

    assert response.status_code == 401
    assert response.get_json()["success"] is False


def test_admin_views_reject_employees(client):
    _login_as(client, EMPLOYEE)

    assert client.get("/api/admin/attendance").status_code == 403
    assert client.put("/api/settings/attendance", json={"lateThresholdHour": 10}).status_code == 403


def test_qr_code_for_someone_else(client, backend):
    backend.on("GET", "/auth/profile", {"user": EMPLOYEE})
    _login_as(client, EMPLOYEE)

    response = client.post("/api/qr/scan", json={"code": "someone-else", "latitude": 1, "longitude": 2})

    assert response.status_code == 400
    assert response.get_json()["message"] == "This QR code doesn't match your employee ID"


def test_backend_error_message_is_passed_through(client, backend):
    backend.on("GET", "/leaves/my-leaves", {"message": "Database unavailable"}, 503)
    _login_as(client, EMPLOYEE)

    response = client.get("/api/leaves")

    assert response.status_code == 503
    assert response.get_json()["message"] == "Database unavailable"


def test_settings_update_validates_ranges(client):
    _login_as(client, ADMIN)

    bad = client.put("/api/settings/attendance", json={"lateThresholdMinute": 75})
    good = client.put("/api/settings/attendance", json={"lateThresholdHour": 10, "lateThresholdMinute": 0})

    assert bad.status_code == 400
    assert good.status_code == 200
    assert client.get("/api/settings/attendance").get_json()["settings"]["lateThresholdHour"] == 10


def test_csv_export(client, backend):
    backend.on(
        "GET",
        "/attendance",
        {"attendance": [{"id": "r1", "employeeId": "e1", "date": "2025-03-11", "checkInTime": "09:40:00"}]},
    )
    backend.on("GET", "/users", {"users": [EMPLOYEE]})
    _login_as(client, ADMIN)

    response = client.get("/api/admin/attendance/report.csv")

    assert response.status_code == 200
    assert response.mimetype == "text/csv"
    assert "attendance_report_" in response.headers["Content-Disposition"]
    lines = response.data.decode("utf-8-sig").splitlines()
    assert lines[0] == "Date,Employee Name,Department,Check-in Time,Check-out Time,Working Hours,Status"
    assert lines[1].startswith("2025-03-11,Eve Stone,Sales,09:40:00,N/A,Not checked out,")


def test_qr_scan_uses_current_wfh_flag(client, backend):
    backend.on("GET", "/auth/profile", {"user": {**EMPLOYEE, "isWfhEnabled": True}})
    backend.on("GET", "/geofences", {"geofences": []})
    backend.on("GET", "/attendance/today", {"attendance": None})
    backend.on(
        "POST",
        "/attendance/check-in",
        {"attendance": {"id": "r1", "employeeId": "e1", "date": "2025-03-12", "checkInTime": "09:00:00"}},
    )
    _login_as(client, EMPLOYEE)  # logged in before WFH was enabled

    response = client.post("/api/qr/scan", json={"code": "e1", "latitude": 1, "longitude": 2})

    assert response.status_code == 200
    assert response.get_json()["outcome"] == "checked_in"
    assert ("POST", "/geofences/check-location") not in [(m, p) for m, p, _ in backend.calls]
    with client.session_transaction() as sess:
        assert sess["is_wfh_enabled"] is True


def test_today_reports_auto_checkout_flag(client, backend):
    backend.on("GET", "/attendance/today", {"attendance": None})
    _login_as(client, EMPLOYEE)

    body = client.get("/api/attendance/today").get_json()

    assert body["record"] is None
    assert body["autoCheckoutDue"] is False
