"""Session storage backends used by the auth service.

A session is three storage keys plus two cookies that mirror the flag and the
role for request routing. The auth service only talks to the SessionStore
interface, so the same logic runs against the in-memory store (tests, CLI)
and against a FastHTML session plus Starlette response cookies (web).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

# Storage keys
IS_AUTHENTICATED_KEY = "isAuthenticated"
USER_ROLE_KEY = "userRole"
USER_KEY = "user"

SESSION_KEYS = (IS_AUTHENTICATED_KEY, USER_ROLE_KEY, USER_KEY)

# Cookies mirrored for the routing middleware
COOKIE_NAMES = (IS_AUTHENTICATED_KEY, USER_ROLE_KEY)
COOKIE_PATH = "/"
EXPIRED_COOKIE_DATE = "Thu, 01 Jan 1970 00:00:01 GMT"


@dataclass
class Cookie:
    """A cookie as written by the session store."""

    value: str
    path: str = COOKIE_PATH
    expires: Optional[str] = None  # None means a session cookie
    httponly: bool = False

    @property
    def is_expired(self) -> bool:
        return self.expires == EXPIRED_COOKIE_DATE


class SessionStore(ABC):
    """Key/value session storage plus routing cookies."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Read a storage key, None when absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Write a storage key."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete a storage key. Missing keys are ignored."""

    @abstractmethod
    def get_cookie(self, name: str) -> Optional[str]:
        """Read a cookie value, None when absent or expired."""

    @abstractmethod
    def set_cookie(self, name: str, value: str) -> None:
        """Write a non-HttpOnly session cookie on path '/'."""

    @abstractmethod
    def expire_cookie(self, name: str) -> None:
        """Clear a cookie by writing an empty value with a past expiry."""


class MemorySessionStore(SessionStore):
    """Dictionary-backed store."""

    def __init__(self, storage: Optional[dict] = None, cookies: Optional[dict] = None):
        self.storage: dict[str, str] = dict(storage or {})
        self.cookies: dict[str, Cookie] = {
            name: value if isinstance(value, Cookie) else Cookie(value=value)
            for name, value in (cookies or {}).items()
        }

    def get(self, key: str) -> Optional[str]:
        return self.storage.get(key)

    def set(self, key: str, value: str) -> None:
        self.storage[key] = value

    def remove(self, key: str) -> None:
        self.storage.pop(key, None)

    def get_cookie(self, name: str) -> Optional[str]:
        cookie = self.cookies.get(name)
        if cookie is None or cookie.is_expired:
            return None
        return cookie.value

    def set_cookie(self, name: str, value: str) -> None:
        self.cookies[name] = Cookie(value=value)

    def expire_cookie(self, name: str) -> None:
        self.cookies[name] = Cookie(value="", expires=EXPIRED_COOKIE_DATE)


class WebSessionStore(SessionStore):
    """Store backed by the signed FastHTML session and response cookies.

    Cookie writes are queued and only reach the browser once
    apply_cookies() is called with the outgoing response. Reads after a
    write within the same request see the queued value.
    """

    def __init__(self, sess, request_cookies: Optional[dict] = None):
        self.sess = sess
        self._cookies: dict[str, Cookie] = {
            name: Cookie(value=value) for name, value in (request_cookies or {}).items()
        }
        self._pending: dict[str, Cookie] = {}

    def get(self, key: str) -> Optional[str]:
        value = self.sess.get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        self.sess[key] = value

    def remove(self, key: str) -> None:
        self.sess.pop(key, None)

    def get_cookie(self, name: str) -> Optional[str]:
        cookie = self._pending.get(name) or self._cookies.get(name)
        if cookie is None or cookie.is_expired:
            return None
        return cookie.value

    def set_cookie(self, name: str, value: str) -> None:
        self._pending[name] = Cookie(value=value)

    def expire_cookie(self, name: str) -> None:
        self._pending[name] = Cookie(value="", expires=EXPIRED_COOKIE_DATE)

    @property
    def pending_cookies(self) -> dict[str, Cookie]:
        return dict(self._pending)

    def apply_cookies(self, response):
        """Write queued cookies onto a Starlette response and return it."""
        for name, cookie in self._pending.items():
            response.set_cookie(
                name,
                cookie.value,
                path=cookie.path,
                expires=cookie.expires,
                httponly=cookie.httponly,
            )
        self._pending.clear()
        return response
