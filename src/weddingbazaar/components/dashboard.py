"""Dashboard content components."""

from fasthtml.common import *

from ..models.menu import MenuItem
from ..models.user import User
from ..services.navigation import (
    can_access_admin_features,
    can_manage_vendors,
    can_view_analytics,
)


def DashboardContent(user: User, section: MenuItem):
    """
    Placeholder content for a dashboard section.

    Args:
        user: The signed-in user
        section: Menu item of the section being shown
    """
    return Div(
        H2(section.label),
        P(f"Welcome back, {user.name}."),
        CapabilityList(user),
        cls="dashboard-section",
    )


def CapabilityList(user: User):
    """List which capability classes the user's role unlocks."""
    capabilities = [
        ("Admin features", can_access_admin_features(user.role)),
        ("Vendor management", can_manage_vendors(user.role)),
        ("Analytics", can_view_analytics(user.role)),
    ]
    return Ul(
        *[
            Li(
                Span(label),
                Span("Yes" if allowed else "No", cls="badge-yes" if allowed else "badge-no"),
            )
            for label, allowed in capabilities
        ],
        cls="capability-list",
    )
