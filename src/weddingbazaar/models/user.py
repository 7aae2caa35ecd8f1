"""User-related data models."""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class UserRole(Enum):
    """Marketplace roles."""

    CUSTOMER = "customer"
    VENDOR = "vendor"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: Union["UserRole", str, None]) -> Optional["UserRole"]:
        """Return the matching role, or None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass
class User:
    """Marketplace account information."""

    id: str
    name: str
    email: str
    role: UserRole
    avatar: Optional[str] = None
    is_verified: Optional[bool] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for session storage."""
        data = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
        }
        if self.avatar is not None:
            data["avatar"] = self.avatar
        if self.is_verified is not None:
            data["isVerified"] = self.is_verified
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Create User from dictionary (session data)."""
        return cls(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            role=UserRole(data["role"]),
            avatar=data.get("avatar"),
            is_verified=data.get("isVerified"),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, raw: str) -> "User":
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError("Serialized user must be a JSON object")
        return cls.from_dict(data)


@dataclass
class AuthState:
    """Derived view of the current session."""

    user: Optional[User] = None
    is_authenticated: bool = False
    is_loading: bool = False

    @property
    def role(self) -> Optional[UserRole]:
        return self.user.role if self.user else None
