"""Role routing middleware for the FastHTML application."""

import logging
from typing import Mapping, Optional

from fasthtml.common import Beforeware
from starlette.responses import RedirectResponse

from .models.user import UserRole
from .services.auth import AuthService
from .services.navigation import LOGIN_ROUTE, get_dashboard_route
from .services.session_store import IS_AUTHENTICATED_KEY, USER_ROLE_KEY, WebSessionStore

logger = logging.getLogger(__name__)

LOGOUT_ROUTE = "/auth/logout"
ROLE_HEADER = "x-user-role"

# Paths that never go through role routing
SKIPPED_PREFIXES = ("/_next", "/api", "/static", "/css", "/js", "/img")


def resolve_role(cookies: Mapping[str, str], headers: Mapping[str, str], default_role: UserRole) -> UserRole:
    """Pick the routing role: cookie, then header, then the default."""
    raw = cookies.get(USER_ROLE_KEY) or headers.get(ROLE_HEADER)
    return UserRole.parse(raw) or default_role


def resolve_redirect(
    path: str,
    cookies: Mapping[str, str],
    headers: Mapping[str, str],
    default_role: UserRole = UserRole.CUSTOMER,
) -> Optional[str]:
    """
    Decide whether a request must be redirected before reaching a route.

    Args:
        path: Request path
        cookies: Request cookies
        headers: Request headers (lower-case names)
        default_role: Role assumed when neither cookie nor header names one

    Returns:
        Target path for a redirect, or None to let the request through
    """
    if path.startswith(SKIPPED_PREFIXES) or "." in path or path == "/favicon.ico":
        return None

    role = resolve_role(cookies, headers, default_role)
    is_authenticated = cookies.get(IS_AUTHENTICATED_KEY) == "true"

    if path.startswith("/dashboard"):
        if not is_authenticated:
            return LOGIN_ROUTE

        segments = path.split("/")
        if segments[1] != "dashboard":
            return None

        current_role = segments[2] if len(segments) > 2 else ""
        if not current_role:
            return get_dashboard_route(role)

        # Covers both another user's role and an unknown role segment
        if current_role != role.value:
            segments[2] = role.value
            return "/".join(segments)
        return None

    if path.startswith("/auth") and path != LOGOUT_ROUTE:
        if is_authenticated:
            return get_dashboard_route(role)

    return None


def make_auth_beforeware(get_settings_fn):
    """Create role routing beforeware.

    Args:
        get_settings_fn: Callable that returns the current Settings.

    Returns:
        Beforeware instance for FastHTML app.
    """

    def auth_beforeware(req, sess):
        """
        Apply role routing and resolve the session.

        Adds `auth` attribute to request scope with the AuthState.
        """
        settings = get_settings_fn()
        target = resolve_redirect(
            req.url.path,
            req.cookies,
            req.headers,
            default_role=settings.default_role,
        )
        if target is not None:
            logger.debug("Redirecting %s to %s", req.url.path, target)
            return RedirectResponse(target, status_code=303)

        store = WebSessionStore(sess, req.cookies)
        req.scope["auth"] = AuthService(store, settings.login_delay).get_auth_state()

    return Beforeware(auth_beforeware, skip=[r"/favicon\.ico", r"/static/.*", r"/css/.*", r"/img/.*"])
