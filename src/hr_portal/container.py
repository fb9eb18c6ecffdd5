from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from flask import has_request_context, session

from .absentees.service import AbsenteeService
from .api.client import ApiClient, ApiConfig
from .attendance.http_attendance_repository import HttpAttendanceRepository
from .attendance.service import AttendanceService
from .attendance.settings_store import JsonSettingsStore
from .collaboration.http_collaboration_repository import HttpCollaborationRepository
from .collaboration.service import CollaborationService
from .geofences.http_geofence_repository import HttpGeoFenceRepository
from .geofences.service import GeoFenceService
from .holidays.http_holiday_repository import HttpHolidayRepository
from .holidays.service import HolidayService
from .leaves.http_leave_repository import HttpLeaveRepository
from .leaves.service import LeaveService
from .notifications.http_notification_repository import HttpNotificationRepository
from .notifications.service import NotificationService
from .projects.http_project_repository import HttpProjectRepository
from .projects.service import ProjectService
from .qr.scanner import ScannerRegistry
from .qr.service import QrScanService
from .requests.http_request_repository import HttpManualRequestRepository
from .requests.service import ManualRequestService
from .tasks.http_task_repository import HttpTaskRepository
from .tasks.service import TaskService
from .users.http_user_repository import HttpUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    api: ApiClient

    users_repo: HttpUserRepository
    attendance_repo: HttpAttendanceRepository
    leaves_repo: HttpLeaveRepository

    auth_service: AuthService
    user_service: UserService
    attendance_service: AttendanceService
    geofence_service: GeoFenceService
    qr_scan_service: QrScanService
    leave_service: LeaveService
    manual_request_service: ManualRequestService
    holiday_service: HolidayService
    absentee_service: AbsenteeService
    notification_service: NotificationService
    task_service: TaskService
    project_service: ProjectService
    collaboration_service: CollaborationService


def _token_provider(service_token: Optional[str]):
    """Bearer token of the logged-in user, or the service token outside requests."""

    def provide() -> Optional[str]:
        if has_request_context():
            return session.get("auth_token")
        return service_token or None

    return provide


def build_container(*, api_config: dict, settings_path: str, service_token: str = "") -> Container:
    config = ApiConfig(
        base_url=str(api_config["base_url"]),
        timeout=float(api_config.get("timeout", 10.0)),
    )
    api = ApiClient.get_instance(config, token_provider=_token_provider(service_token))

    users_repo = HttpUserRepository(api)
    attendance_repo = HttpAttendanceRepository(api)
    leaves_repo = HttpLeaveRepository(api)
    holidays_repo = HttpHolidayRepository(api)
    geofences_repo = HttpGeoFenceRepository(api)

    attendance_service = AttendanceService(attendance_repo, users_repo, JsonSettingsStore(settings_path))
    geofence_service = GeoFenceService(geofences_repo)
    holiday_service = HolidayService(holidays_repo)

    return Container(
        api=api,
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        attendance_service=attendance_service,
        geofence_service=geofence_service,
        qr_scan_service=QrScanService(attendance_service, geofence_service, ScannerRegistry()),
        leave_service=LeaveService(leaves_repo),
        manual_request_service=ManualRequestService(HttpManualRequestRepository(api)),
        holiday_service=holiday_service,
        absentee_service=AbsenteeService(users_repo, attendance_repo, leaves_repo, holiday_service),
        notification_service=NotificationService(HttpNotificationRepository(api)),
        task_service=TaskService(HttpTaskRepository(api)),
        project_service=ProjectService(HttpProjectRepository(api)),
        collaboration_service=CollaborationService(HttpCollaborationRepository(api)),
    )
