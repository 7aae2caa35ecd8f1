"""Main FastHTML application."""

from fasthtml.common import *

from .components.layout import APP_CSS
from .components.login import LOGIN_CSS
from .middleware import make_auth_beforeware
from .routes import auth, dashboard
from .startup import get_app_context, get_settings, init_settings, resolve_session_secret

# Load settings and configure logging
init_settings()

# Resolve session secret
SESSION_SECRET = resolve_session_secret()

# Create role routing middleware
bware = make_auth_beforeware(get_settings)

# Create FastHTML app with session support
app, rt = fast_app(
    hdrs=[
        Style(APP_CSS),
        Style(LOGIN_CSS),
    ],
    pico=False,
    secret_key=SESSION_SECRET,
    before=bware,
)

# Create shared AppContext for all routes
_ctx = get_app_context()

# Register routes
auth.register(app, rt, _ctx)
dashboard.register(app, rt, _ctx)  # /dashboard/{role}/{section} after /dashboard/{role}


def main_func():
    """Entry point for running the application."""
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=5001)


if __name__ == "__main__":
    main_func()
