"""Role dashboard routes."""

import logging

from fasthtml.common import *
from starlette.responses import RedirectResponse, Response

from ..components.dashboard import DashboardContent
from ..components.layout import AppShell
from ..context import AppContext
from ..services.navigation import LOGIN_ROUTE, get_section_item
from .utils import get_auth_state, require_role

logger = logging.getLogger(__name__)


def register(app, rt, ctx: AppContext):
    """Register dashboard routes."""

    def render_section(req, sess, role: str, section: str = ""):
        state = get_auth_state(req)
        if not state.is_authenticated:
            # Routing cookies say signed in but the session is incomplete
            logger.info("Clearing incomplete session on %s", req.url.path)
            store, auth = ctx.auth_for(req, sess)
            auth.logout()
            return store.apply_cookies(RedirectResponse(LOGIN_ROUTE, status_code=303))

        error = require_role(req, role)
        if error:
            return error

        item = get_section_item(role, section)
        if item is None:
            return Response("Page not found", status_code=404)

        return AppShell(
            user=state.user,
            active_route=item.href,
            content=DashboardContent(state.user, item),
            title=item.label,
        )

    @rt("/dashboard/{role}")
    def dashboard(req, sess, role: str):
        """Role dashboard home."""
        return render_section(req, sess, role)

    @rt("/dashboard/{role}/{section}")
    def dashboard_section(req, sess, role: str, section: str):
        """A section listed in the role menu."""
        return render_section(req, sess, role, section)
