"""Role-based routes, menus and permission checks."""

from typing import Iterable, Optional, Union

from ..models.menu import MenuItem
from ..models.user import UserRole

RoleLike = Union[UserRole, str, None]

LOGIN_ROUTE = "/auth/login"

_MENUS: dict[UserRole, tuple[MenuItem, ...]] = {
    UserRole.CUSTOMER: (
        MenuItem("Dashboard", "/dashboard/customer", "TrendingUp"),
        MenuItem("Wedding Details", "/dashboard/customer/wedding", "Heart"),
        MenuItem("Budget", "/dashboard/customer/budget", "DollarSign"),
        MenuItem("Vendors", "/dashboard/customer/vendors", "Users"),
        MenuItem("Guest List", "/dashboard/customer/guests", "Users"),
        MenuItem("Timeline", "/dashboard/customer/timeline", "Calendar"),
        MenuItem("Documents", "/dashboard/customer/documents", "FileText"),
        MenuItem("Messages", "/dashboard/customer/messages", "MessageCircle"),
    ),
    UserRole.VENDOR: (
        MenuItem("Dashboard", "/dashboard/vendor", "TrendingUp"),
        MenuItem("Bookings", "/dashboard/vendor/bookings", "Calendar"),
        MenuItem("Inquiries", "/dashboard/vendor/inquiries", "MessageCircle"),
        MenuItem("Portfolio", "/dashboard/vendor/portfolio", "Camera"),
        MenuItem("Analytics", "/dashboard/vendor/analytics", "BarChart3"),
        MenuItem("Payments", "/dashboard/vendor/payments", "DollarSign"),
        MenuItem("Reviews", "/dashboard/vendor/reviews", "Star"),
        MenuItem("Profile", "/dashboard/vendor/profile", "Settings"),
    ),
    UserRole.ADMIN: (
        MenuItem("Dashboard", "/dashboard/admin", "TrendingUp"),
        MenuItem("Users", "/dashboard/admin/users", "Users"),
        MenuItem("Vendors", "/dashboard/admin/vendors", "Building"),
        MenuItem("Analytics", "/dashboard/admin/analytics", "BarChart3"),
        MenuItem("Finance", "/dashboard/admin/finance", "DollarSign"),
        MenuItem("Support", "/dashboard/admin/support", "MessageCircle"),
        MenuItem("System", "/dashboard/admin/system", "Server"),
        MenuItem("Settings", "/dashboard/admin/settings", "Settings"),
    ),
}


def get_dashboard_route(role: RoleLike) -> str:
    """Get the dashboard path for a role. No role at all means the login page."""
    if role is None:
        return LOGIN_ROUTE
    user_role = UserRole.parse(role)
    return f"/dashboard/{user_role.value if user_role else role}"


def get_menu_items_for_role(role: RoleLike) -> list[MenuItem]:
    """Get the sidebar menu for a role. Unknown roles get an empty menu."""
    user_role = UserRole.parse(role)
    if user_role is None:
        return []
    return list(_MENUS[user_role])


def get_section_item(role: RoleLike, section: Optional[str]) -> Optional[MenuItem]:
    """Find the menu item for a dashboard section ('' or None is the home item)."""
    items = get_menu_items_for_role(role)
    if not items:
        return None
    href = get_dashboard_route(role)
    if section:
        href = f"{href}/{section}"
    return next((item for item in items if item.href == href), None)


def has_permission(user_role: RoleLike, required: Union[RoleLike, Iterable[RoleLike]]) -> bool:
    """Check a role against a single required role or a set of allowed roles."""
    role = UserRole.parse(user_role)
    if role is None:
        return False
    if isinstance(required, (UserRole, str)) or required is None:
        return role == UserRole.parse(required)
    return any(role == UserRole.parse(r) for r in required)


def can_access_admin_features(user_role: RoleLike) -> bool:
    return has_permission(user_role, UserRole.ADMIN)


def can_manage_vendors(user_role: RoleLike) -> bool:
    return has_permission(user_role, [UserRole.ADMIN])


def can_view_analytics(user_role: RoleLike) -> bool:
    return has_permission(user_role, [UserRole.ADMIN, UserRole.VENDOR])
