from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when there is no valid login (missing or rejected token)."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class ScannerBusyError(DomainError):
    """Raised when a scan is started while another one is still in flight."""


class ApiError(DomainError):
    """Raised when the REST backend answers with an error or cannot be reached.

    `status_code` is None for transport failures (timeouts, refused connections).
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
