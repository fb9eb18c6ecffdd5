from __future__ import annotations

import importlib
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .collaboration.controller import register as register_collaboration
from .geofences.controller import register as register_geofences
from .holidays.controller import register as register_holidays
from .leaves.controller import register as register_leaves
from .notifications.controller import register as register_notifications
from .projects.controller import register as register_projects
from .qr.controller import register as register_qr
from .requests.controller import register as register_requests
from .tasks.controller import register as register_tasks
from .users.controller import register as register_users

_logger = logging.getLogger(__name__)


def _register_cli(app: Flask, container: Container) -> None:
    @app.cli.command("process-absentees")
    def process_absentees():
        """Deduct a casual leave day from everyone absent today."""

        run = container.absentee_service.process_absentees(date.today())
        if run.skipped:
            print(f"Skipped {run.day}: {run.skipped}")
            return
        print(f"{run.day}: {len(run.deducted)} deducted, {len(run.failed)} failed")


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _logger.debug("settings=%s api=%s", settings_module, getattr(settings, "API_BASE_URL"))

    if container is None:
        settings_path = getattr(settings, "ATTENDANCE_SETTINGS_PATH", "") or str(
            Path(app.instance_path) / "attendance_settings.json"
        )
        container = build_container(
            api_config={
                "base_url": getattr(settings, "API_BASE_URL"),
                "timeout": getattr(settings, "API_TIMEOUT", 10.0),
            },
            settings_path=settings_path,
            service_token=getattr(settings, "SERVICE_TOKEN", ""),
        )

    register_users(app, container)
    register_attendance(app, container)
    register_qr(app, container)
    register_geofences(app, container)
    register_leaves(app, container)
    register_requests(app, container)
    register_holidays(app, container)
    register_notifications(app, container)
    register_tasks(app, container)
    register_projects(app, container)
    register_collaboration(app, container)
    _register_cli(app, container)

    return app
