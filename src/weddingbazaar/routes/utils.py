"""Shared utilities for route handlers."""

from typing import Optional

from starlette.responses import Response

from ..models.user import AuthState, User
from ..services.navigation import has_permission


def get_auth_state(req) -> AuthState:
    """Extract the resolved session from request scope."""
    state = req.scope.get("auth")
    return state if isinstance(state, AuthState) else AuthState()


def get_user(req) -> Optional[User]:
    """Extract the signed-in user from request scope."""
    return get_auth_state(req).user


def require_role(req, required) -> Response | None:
    """Check the signed-in user against a role or set of roles.

    Returns error Response if not permitted, None if OK.
    """
    user = get_user(req)
    if not user or not has_permission(user.role, required):
        return Response("You do not have access to this page", status_code=403)
    return None
