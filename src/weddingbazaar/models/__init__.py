"""Data models for the wedding marketplace."""

from .menu import MenuItem
from .user import AuthState, User, UserRole

__all__ = [
    "AuthState",
    "MenuItem",
    "User",
    "UserRole",
]
