"""Application context for dependency injection."""

from dataclasses import dataclass

from .config import Settings
from .services.auth import AuthService
from .services.session_store import WebSessionStore


@dataclass
class AppContext:
    """
    Central context object shared by route modules.

    Usage:
        ctx = AppContext(settings=load_settings())
        # In routes:
        store, auth = ctx.auth_for(req, sess)
        auth.demo_login("vendor")
        return store.apply_cookies(RedirectResponse(...))
    """

    settings: Settings

    def auth_for(self, req, sess) -> tuple[WebSessionStore, AuthService]:
        """Build a session store and auth service bound to one request."""
        store = WebSessionStore(sess, req.cookies)
        return store, AuthService(store, self.settings.login_delay)
