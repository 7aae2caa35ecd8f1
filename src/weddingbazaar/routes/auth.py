"""Authentication routes for login, demo login and logout."""

from fasthtml.common import *
from starlette.responses import RedirectResponse, Response

from ..components.login import LoginPage
from ..context import AppContext
from ..services.navigation import LOGIN_ROUTE, get_dashboard_route
from .utils import get_auth_state


def register(app, rt, ctx: AppContext):
    """Register authentication routes."""

    @rt("/")
    def index(req):
        """Send visitors to their dashboard or to the login page."""
        state = get_auth_state(req)
        if state.is_authenticated:
            return RedirectResponse(get_dashboard_route(state.role), status_code=303)
        return RedirectResponse(LOGIN_ROUTE, status_code=303)

    @rt(LOGIN_ROUTE)
    def login_page(req):
        """Display login page."""
        state = get_auth_state(req)
        if state.is_authenticated:
            return RedirectResponse(get_dashboard_route(state.role), status_code=303)
        return LoginPage(demo_enabled=ctx.settings.demo_login_enabled)

    @app.post("/auth/login/submit")
    async def login_submit(req, sess, email: str = "", password: str = ""):
        """Process login form submission."""
        store, auth = ctx.auth_for(req, sess)
        user = await auth.login(email, password)
        if user is None:
            return LoginPage(
                error_message="Invalid email or password",
                email=email,
                demo_enabled=ctx.settings.demo_login_enabled,
            )

        response = RedirectResponse(get_dashboard_route(user.role), status_code=303)
        return store.apply_cookies(response)

    @app.post("/auth/demo/{role}")
    def demo_login(req, sess, role: str):
        """Sign in as one of the demo accounts."""
        if not ctx.settings.demo_login_enabled:
            return Response("Demo login is disabled", status_code=404)

        store, auth = ctx.auth_for(req, sess)
        user = auth.demo_login(role)
        if user is None:
            return Response(f"Unknown role: {role}", status_code=404)

        response = RedirectResponse(get_dashboard_route(user.role), status_code=303)
        return store.apply_cookies(response)

    @rt("/auth/logout")
    def logout(req, sess):
        """Log out user and redirect to login."""
        store, auth = ctx.auth_for(req, sess)
        auth.logout()
        return store.apply_cookies(RedirectResponse(LOGIN_ROUTE, status_code=303))
