"""Demonstration account directory.

The marketplace ships with three fixed accounts, one per role. They all share
the same mock password. There is no registration or account editing.
"""

from typing import Optional

from ..models.user import User, UserRole

MOCK_PASSWORD = "password"

MOCK_USERS: dict[str, User] = {
    "customer@example.com": User(
        id="1",
        name="Priya Sharma",
        email="customer@example.com",
        role=UserRole.CUSTOMER,
        avatar="/avatars/customer.jpg",
        is_verified=True,
    ),
    "vendor@example.com": User(
        id="2",
        name="Rajesh Kumar",
        email="vendor@example.com",
        role=UserRole.VENDOR,
        avatar="/avatars/vendor.jpg",
        is_verified=True,
    ),
    "admin@example.com": User(
        id="3",
        name="Admin User",
        email="admin@example.com",
        role=UserRole.ADMIN,
        avatar="/avatars/admin.jpg",
        is_verified=True,
    ),
}

DEMO_EMAILS: dict[UserRole, str] = {
    UserRole.CUSTOMER: "customer@example.com",
    UserRole.VENDOR: "vendor@example.com",
    UserRole.ADMIN: "admin@example.com",
}


def get_account(email: str) -> Optional[User]:
    """Look up an account by email (exact match)."""
    return MOCK_USERS.get(email)


def get_demo_account(role) -> Optional[User]:
    """Get the demo account for a role, or None for an unknown role."""
    user_role = UserRole.parse(role)
    if user_role is None:
        return None
    return MOCK_USERS.get(DEMO_EMAILS[user_role])
