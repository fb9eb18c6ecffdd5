from __future__ import annotations

from datetime import datetime

import pytest

from hr_portal.api.client import ApiClient
from hr_portal.attendance.settings_store import JsonSettingsStore


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday
    return datetime(2025, 3, 12, 10, 30, 0)


@pytest.fixture
def settings_store(tmp_path) -> JsonSettingsStore:
    return JsonSettingsStore(tmp_path / "attendance_settings.json")


@pytest.fixture(autouse=True)
def _reset_api_client():
    ApiClient._instance = None
    yield
    ApiClient._instance = None
