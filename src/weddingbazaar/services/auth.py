"""Authentication service for mock login and session management."""

import asyncio
import json
import logging
from typing import Optional

from ..data.accounts import MOCK_PASSWORD, get_account, get_demo_account
from ..models.user import AuthState, User, UserRole
from .session_store import (
    COOKIE_NAMES,
    IS_AUTHENTICATED_KEY,
    SESSION_KEYS,
    USER_KEY,
    USER_ROLE_KEY,
    SessionStore,
)

logger = logging.getLogger(__name__)

DEFAULT_LOGIN_DELAY = 1.0  # seconds


class AuthenticationError(Exception):
    """Raised when authentication fails."""

    pass


class SessionUnavailableError(RuntimeError):
    """Raised when a session write is attempted without a session store."""

    pass


class AuthService:
    """Service for authenticating against the demo account directory.

    All session state lives in the injected SessionStore. Reads never raise:
    a missing store, a missing key or malformed data all read as "no session".
    """

    def __init__(self, store: Optional[SessionStore], login_delay: float = DEFAULT_LOGIN_DELAY):
        """
        Initialize auth service.

        Args:
            store: Session store for this request or client, or None when no
                session context is available
            login_delay: Simulated network latency for login(), in seconds
        """
        self.store = store
        self.login_delay = login_delay

    def authenticate(self, email: str, password: str) -> User:
        """
        Check credentials against the account directory.

        Args:
            email: Account email
            password: Plain-text password

        Returns:
            User object if authentication succeeds

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        user = get_account(email)
        if user is None or password != MOCK_PASSWORD:
            raise AuthenticationError("Invalid email or password")
        return user

    async def login(self, email: str, password: str) -> Optional[User]:
        """
        Log in with email and password after a simulated network delay.

        Returns:
            The signed-in User, or None on any credential mismatch
        """
        await asyncio.sleep(self.login_delay)

        try:
            user = self.authenticate(email, password)
        except AuthenticationError:
            logger.warning("Failed login attempt for %s", email)
            return None

        self._persist(user)
        logger.info("User %s logged in as %s", user.email, user.role.value)
        return user

    def demo_login(self, role) -> Optional[User]:
        """Sign in as the demo account for a role, skipping the password check.

        Unknown roles leave the session untouched and return None.
        """
        user = get_demo_account(role)
        if user is None:
            logger.warning("Demo login requested for unknown role %r", role)
            return None

        self._persist(user)
        logger.info("Demo login as %s", user.role.value)
        return user

    def logout(self) -> None:
        """Remove all session keys and expire the routing cookies."""
        store = self._require_store()
        for key in SESSION_KEYS:
            store.remove(key)
        for name in COOKIE_NAMES:
            store.expire_cookie(name)
        logger.info("Session cleared")

    def get_current_user(self) -> Optional[User]:
        """Get the stored user, or None if absent or unreadable."""
        if self.store is None:
            return None
        raw = self.store.get(USER_KEY)
        if not raw:
            return None
        try:
            return User.from_json(raw)
        except (json.JSONDecodeError, KeyError, ValueError, TypeError) as e:
            logger.warning("Ignoring malformed stored user: %s", e)
            return None

    def is_authenticated(self) -> bool:
        """Check the stored authentication flag."""
        if self.store is None:
            return False
        return self.store.get(IS_AUTHENTICATED_KEY) == "true"

    def get_user_role(self) -> Optional[UserRole]:
        """Get the stored role, or None if absent or not a known role."""
        if self.store is None:
            return None
        return UserRole.parse(self.store.get(USER_ROLE_KEY))

    def get_auth_state(self) -> AuthState:
        """
        Resolve the session into a consistent AuthState.

        The three keys are written together but stored independently. If any
        of them is missing or invalid, or the user's role disagrees with the
        stored role, the session counts as logged out.
        """
        if not self.is_authenticated():
            return AuthState()

        role = self.get_user_role()
        user = self.get_current_user()
        if role is None or user is None or user.role != role:
            logger.warning("Inconsistent session state, treating as logged out")
            return AuthState()

        return AuthState(user=user, is_authenticated=True)

    def _persist(self, user: User) -> None:
        store = self._require_store()
        store.set(IS_AUTHENTICATED_KEY, "true")
        store.set(USER_ROLE_KEY, user.role.value)
        store.set(USER_KEY, user.to_json())
        store.set_cookie(IS_AUTHENTICATED_KEY, "true")
        store.set_cookie(USER_ROLE_KEY, user.role.value)

    def _require_store(self) -> SessionStore:
        if self.store is None:
            raise SessionUnavailableError("No session store available")
        return self.store
