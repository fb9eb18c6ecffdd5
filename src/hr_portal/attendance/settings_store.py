from __future__ import annotations

import json
import logging
from pathlib import Path

from ..core.exceptions import ValidationError
from .model import AttendanceSettings

_logger = logging.getLogger(__name__)


class JsonSettingsStore:
    """Attendance settings persisted as a small JSON document.

    A missing, unreadable or out-of-range file yields the defaults.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def load(self) -> AttendanceSettings:
        if not self._path.exists():
            return AttendanceSettings()
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError(f"expected an object, got {type(data).__name__}")
            return AttendanceSettings.from_dict(data)
        except (ValueError, TypeError, ValidationError) as e:
            _logger.warning("Ignoring unreadable attendance settings %s: %s", self._path, e)
            return AttendanceSettings()

    def save(self, settings: AttendanceSettings) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
