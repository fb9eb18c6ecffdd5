from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import LoginResult, User


class UserRepository(Protocol):
    """Repository interface for users and authentication.

    Note (DIP): services depend on this interface, not on the HTTP client.
    """

    def login(self, email: str, password: str) -> Optional[LoginResult]:
        raise NotImplementedError

    def register(self, payload: dict) -> Optional[User]:
        raise NotImplementedError

    def get_profile(self) -> Optional[User]:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def update_role(self, user_id: str, role: Role) -> bool:
        raise NotImplementedError

    def update(self, user_id: str, fields: dict) -> Optional[User]:
        raise NotImplementedError

    def change_password(self, user_id: str, old_password: str, new_password: str) -> bool:
        raise NotImplementedError

    def delete_by_id(self, user_id: str) -> bool:
        raise NotImplementedError
