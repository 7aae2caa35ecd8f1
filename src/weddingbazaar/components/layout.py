"""Layout components for the dashboard shell."""

from fasthtml.common import *

from ..models.menu import MenuItem
from ..models.user import User
from ..services.navigation import get_menu_items_for_role


def AppShell(user: User, active_route: str, content, title: str = "Dashboard"):
    """
    Dashboard shell with header and role sidebar.

    Args:
        user: The signed-in user
        active_route: Current route for highlighting nav items
        content: The main content to display
        title: Page title
    """
    return (
        Title(f"{title} - WeddingBazaar"),
        Main(
            AppHeader(user),
            Div(
                Sidebar(user, active_route),
                Div(content, cls="main-content"),
                cls="app-shell",
            ),
            cls="app-container",
        ),
    )


def AppHeader(user: User):
    """Application header with brand and user info."""
    return Header(
        Div(
            Span("WeddingBazaar", cls="app-brand-text"),
            cls="app-brand",
        ),
        Div(
            Img(src=user.avatar, alt=user.name, cls="avatar") if user.avatar else None,
            Span(f"Logged in as: {user.name}", cls="username"),
            Span(user.role.value.title(), cls=f"role-badge role-{user.role.value}"),
            A("Logout", href="/auth/logout"),
            cls="user-info",
        ) if user else None,
        cls="app-header",
    )


def Sidebar(user: User, active: str):
    """
    Left sidebar navigation built from the role menu.

    Args:
        user: The signed-in user
        active: Current route path
    """
    items = get_menu_items_for_role(user.role) if user else []
    return Nav(
        *[NavItem(item, active=(item.href == active)) for item in items],
        cls="sidebar",
    )


def NavItem(item: MenuItem, active: bool = False):
    """Navigation item for the sidebar."""
    cls = "nav-item active" if active else "nav-item"
    return A(item.label, href=item.href, cls=cls, data_icon=item.icon)


APP_CSS = """
.app-header {
    display: flex;
    justify-content: space-between;
    align-items: center;
    padding: 0.75rem 1.5rem;
    border-bottom: 1px solid #f3e8ee;
}

.app-brand-text {
    font-weight: 700;
    color: #db2777;
}

.user-info > * {
    margin-left: 0.75rem;
}

.avatar {
    width: 28px;
    height: 28px;
    border-radius: 50%;
    vertical-align: middle;
}

.app-shell {
    display: flex;
}

.sidebar {
    display: flex;
    flex-direction: column;
    min-width: 220px;
    padding: 1rem;
}

.nav-item {
    padding: 0.5rem 0.75rem;
    border-radius: 6px;
    text-decoration: none;
}

.nav-item.active {
    background: #fce7f3;
    font-weight: 600;
}

.main-content {
    flex: 1;
    padding: 1.5rem;
}
"""
