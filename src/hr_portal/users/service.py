from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_choice, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from .model import LoginResult, User
from .repository import UserRepository

_logger = logging.getLogger(__name__)


class AuthService:
    """Use case: login, registration and profile refresh."""

    def __init__(self, users: UserRepository):
        self._users = users

    def login(self, email: str, password: str) -> LoginResult:
        email = require_non_empty(email, "Email")
        password = require_non_empty(password, "Password")

        result = self._users.login(email, password)
        if not result:
            raise AuthenticationError("Invalid response from server. Missing token or user data.")
        _logger.info("User %s logged in", result.user.user_id)
        return result

    def register(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        mobile: str = "",
        department: str = "",
        designation: str = "",
    ) -> User:
        payload = {
            "firstName": require_non_empty(first_name, "First name"),
            "lastName": require_non_empty(last_name, "Last name"),
            "email": require_non_empty(email, "Email"),
            "password": require_min_length(password, "Password", MIN_PASSWORD_LENGTH),
            "mobile": (mobile or "").strip(),
            "department": (department or "").strip(),
            "designation": (designation or "").strip(),
            "role": Role.EMPLOYEE.value,
        }
        if "@" not in payload["email"]:
            raise ValidationError("Email is not valid")

        user = self._users.register(payload)
        if not user:
            raise ValidationError("Registration failed")
        return user

    def profile(self) -> User:
        user = self._users.get_profile()
        if not user:
            raise AuthenticationError("Session expired, please log in again")
        return user


class UserService:
    """Use case: manage users (admin) and own account."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()

    def get_user(self, user_id: str) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise ValidationError("Employee not found")
        return user

    def update_role(self, *, current_role: Role, user_id: str, role: str) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")
        new_role = require_choice(role, Role, "Role")
        self._users.update_role(user_id, new_role)

    def update_user(self, *, current_role: Role, user_id: str, fields: dict) -> User:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")
        allowed = {"firstName", "lastName", "email", "mobile", "department", "designation", "birthday", "photoUrl"}
        clean = {k: v for k, v in fields.items() if k in allowed}
        if not clean:
            raise ValidationError("Nothing to update")
        user = self._users.update(user_id, clean)
        if not user:
            raise ValidationError("Updating employee failed")
        return user

    def set_wfh(self, *, current_role: Role, user_id: str, enabled: bool) -> User:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")

        # The backend replaces the whole user on PUT, so send it back with the flag flipped.
        user = self.get_user(user_id)
        body = user.to_dict()
        body["isWfhEnabled"] = bool(enabled)
        updated = self._users.update(user_id, body)
        if not updated:
            raise ValidationError("Failed to update Work From Home status")
        _logger.info("WFH %s for user %s", "enabled" if enabled else "disabled", user_id)
        return updated

    def change_password(self, *, user_id: str, old_password: str, new_password: str) -> None:
        require_non_empty(old_password, "Current password")
        require_min_length(new_password, "New password", MIN_PASSWORD_LENGTH)
        if old_password == new_password:
            raise ValidationError("New password must differ from the current one")
        self._users.change_password(user_id, old_password, new_password)

    def delete_user(self, *, current_role: Role, current_user_id: str, user_id: str) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to do this")
        if str(user_id) == str(current_user_id):
            raise ValidationError("You cannot delete your own account")

        user = self.get_user(user_id)
        if user.is_admin:
            raise ValidationError("Admin accounts cannot be deleted")
        if not self._users.delete_by_id(user_id):
            raise ValidationError("Deleting employee failed")
