"""Helpers shared by the JSON controllers: role gates, replies, error mapping."""

from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    ScannerBusyError,
    ValidationError,
)

_logger = logging.getLogger(__name__)


def ok(message: str = "", status: int = 200, **data):
    return jsonify({"success": True, "message": message, **data}), status


def fail(message: str, status: int = 400):
    return jsonify({"success": False, "message": message}), status


def current_user_id() -> str:
    return str(session["user_id"])


def current_role() -> Role:
    return Role(session.get("role", Role.EMPLOYEE.value))


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session or "auth_token" not in session:
            return fail("Please log in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session or "auth_token" not in session:
            return fail("Please log in to continue", 401)
        if session.get("role") != Role.ADMIN.value:
            return fail("You do not have permission to do this", 403)
        return view(*args, **kwargs)

    return wrapper


def handle_errors(fallback_message: str):
    """Turn service exceptions into the JSON reply shape.

    Domain errors carry a user-facing message; anything else is logged with
    its traceback and answered with `fallback_message`.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return fail(str(e), 400)
            except AuthenticationError as e:
                return fail(str(e), 401)
            except AuthorizationError as e:
                return fail(str(e), 403)
            except ScannerBusyError as e:
                return fail(str(e), 409)
            except ApiError as e:
                _logger.warning("%s: %s", fallback_message, e)
                return fail(str(e), e.status_code or 502)
            except Exception:
                _logger.exception(fallback_message)
                return fail(fallback_message, 500)

        return wrapper

    return decorator
