from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator

from ..core.exceptions import ScannerBusyError


class ScannerRegistry:
    """Per-user scanner slot: one scan in flight per user."""

    def __init__(self):
        self._lock = threading.Lock()
        self._active: set[str] = set()

    def acquire(self, user_id: str) -> None:
        with self._lock:
            if user_id in self._active:
                raise ScannerBusyError("A scan is already being processed. Please wait.")
            self._active.add(user_id)

    def release(self, user_id: str) -> None:
        with self._lock:
            self._active.discard(user_id)

    def is_busy(self, user_id: str) -> bool:
        with self._lock:
            return user_id in self._active

    @contextmanager
    def slot(self, user_id: str) -> Iterator[None]:
        self.acquire(user_id)
        try:
            yield
        finally:
            self.release(user_id)
