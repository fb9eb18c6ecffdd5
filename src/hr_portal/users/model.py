from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User as returned by the backend.

    Note: Plain data object; fetching lives in the repository.
    """

    user_id: str
    first_name: str
    last_name: str
    email: str
    role: Role
    full_name: str = ""
    mobile: Optional[str] = None
    department: Optional[str] = None
    designation: Optional[str] = None
    photo_url: Optional[str] = None
    birthday: Optional[str] = None
    is_wfh_enabled: bool = False

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @classmethod
    def from_api(cls, row: dict) -> "User":
        first = row.get("firstName") or ""
        last = row.get("lastName") or ""
        return cls(
            user_id=str(row["id"]),
            first_name=first,
            last_name=last,
            email=row.get("email") or "",
            role=Role(row.get("role") or Role.EMPLOYEE.value),
            full_name=row.get("fullName") or f"{first} {last}".strip(),
            mobile=row.get("mobile"),
            department=row.get("department"),
            designation=row.get("designation"),
            photo_url=row.get("photoUrl"),
            birthday=row.get("birthday"),
            is_wfh_enabled=bool(row.get("isWfhEnabled", False)),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.user_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "fullName": self.full_name,
            "email": self.email,
            "role": self.role.value,
            "mobile": self.mobile,
            "department": self.department,
            "designation": self.designation,
            "photoUrl": self.photo_url,
            "birthday": self.birthday,
            "isWfhEnabled": self.is_wfh_enabled,
        }


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: User
    message: str = ""
