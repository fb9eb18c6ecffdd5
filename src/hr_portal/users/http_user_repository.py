from __future__ import annotations

from typing import Optional, Sequence

from ..api.client import ApiClient
from ..api.http_base import unwrap_list, unwrap_one
from ..core.enums import Role
from .model import LoginResult, User
from .repository import UserRepository


class HttpUserRepository(UserRepository):
    def __init__(self, api: ApiClient):
        self._api = api

    def login(self, email: str, password: str) -> Optional[LoginResult]:
        payload = self._api.post("/auth/login", {"email": email, "password": password})
        token = payload.get("token")
        user = unwrap_one(payload, "user")
        if not token or not user:
            return None
        return LoginResult(token=str(token), user=User.from_api(user), message=payload.get("message") or "")

    def register(self, payload: dict) -> Optional[User]:
        row = unwrap_one(self._api.post("/auth/register", payload), "user")
        return User.from_api(row) if row else None

    def get_profile(self) -> Optional[User]:
        row = unwrap_one(self._api.get("/auth/profile"), "user")
        return User.from_api(row) if row else None

    def list_all(self) -> Sequence[User]:
        return [User.from_api(r) for r in unwrap_list(self._api.get("/users"), "users")]

    def get_by_id(self, user_id: str) -> Optional[User]:
        row = unwrap_one(self._api.get(f"/users/{user_id}"), "user")
        return User.from_api(row) if row else None

    def update_role(self, user_id: str, role: Role) -> bool:
        self._api.put(f"/users/update-role/{user_id}", {"role": role.value})
        return True

    def update(self, user_id: str, fields: dict) -> Optional[User]:
        row = unwrap_one(self._api.put(f"/users/{user_id}", fields), "user")
        return User.from_api(row) if row else None

    def change_password(self, user_id: str, old_password: str, new_password: str) -> bool:
        self._api.put(
            f"/users/change-password/{user_id}",
            {"oldPassword": old_password, "newPassword": new_password},
        )
        return True

    def delete_by_id(self, user_id: str) -> bool:
        self._api.delete(f"/users/{user_id}")
        return True
