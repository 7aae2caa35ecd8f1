"""Tests for the mock authentication service."""

import asyncio

import pytest

from weddingbazaar.data.accounts import DEMO_EMAILS, MOCK_USERS
from weddingbazaar.models.user import User, UserRole
from weddingbazaar.services.auth import (
    AuthenticationError,
    AuthService,
    SessionUnavailableError,
)
from weddingbazaar.services.session_store import EXPIRED_COOKIE_DATE, MemorySessionStore


def _login(service, email, password):
    return asyncio.run(service.login(email, password))


def _snapshot(store):
    return dict(store.storage), dict(store.cookies)


class TestLogin:
    """Tests for email/password login."""

    @pytest.mark.parametrize("email", sorted(MOCK_USERS))
    def test_login_each_account(self, auth_service, email):
        user = _login(auth_service, email, "password")
        assert user == MOCK_USERS[email]
        assert auth_service.is_authenticated() is True
        assert auth_service.get_user_role() == user.role
        assert auth_service.get_current_user() == user

    def test_login_persists_keys_and_cookies(self, auth_service, memory_store, vendor):
        _login(auth_service, "vendor@example.com", "password")
        assert memory_store.storage["isAuthenticated"] == "true"
        assert memory_store.storage["userRole"] == "vendor"
        assert User.from_json(memory_store.storage["user"]) == vendor
        assert memory_store.get_cookie("isAuthenticated") == "true"
        assert memory_store.get_cookie("userRole") == "vendor"
        assert memory_store.cookies["userRole"].httponly is False
        assert memory_store.cookies["userRole"].expires is None

    def test_unknown_email(self, auth_service, memory_store):
        before = _snapshot(memory_store)
        assert _login(auth_service, "nobody@example.com", "password") is None
        assert _snapshot(memory_store) == before

    def test_wrong_password(self, auth_service, memory_store):
        before = _snapshot(memory_store)
        assert _login(auth_service, "admin@example.com", "hunter2") is None
        assert _snapshot(memory_store) == before

    def test_failed_login_keeps_existing_session(self, auth_service, memory_store):
        auth_service.demo_login("customer")
        before = _snapshot(memory_store)
        assert _login(auth_service, "admin@example.com", "wrong") is None
        assert _snapshot(memory_store) == before
        assert auth_service.get_user_role() == UserRole.CUSTOMER

    def test_email_match_is_exact(self, auth_service):
        assert _login(auth_service, "Customer@Example.com", "password") is None

    def test_login_waits_for_delay(self, memory_store, monkeypatch):
        delays = []

        async def fake_sleep(seconds):
            delays.append(seconds)

        monkeypatch.setattr("weddingbazaar.services.auth.asyncio.sleep", fake_sleep)
        service = AuthService(memory_store)
        assert _login(service, "customer@example.com", "password") is not None
        assert _login(service, "customer@example.com", "bad") is None
        assert delays == [1.0, 1.0]

    def test_last_login_wins(self, auth_service):
        _login(auth_service, "customer@example.com", "password")
        _login(auth_service, "admin@example.com", "password")
        assert auth_service.get_user_role() == UserRole.ADMIN
        assert auth_service.get_current_user().email == "admin@example.com"


class TestAuthenticate:
    """Tests for the credential check."""

    def test_same_error_for_both_failures(self, auth_service):
        with pytest.raises(AuthenticationError) as unknown:
            auth_service.authenticate("nobody@example.com", "password")
        with pytest.raises(AuthenticationError) as wrong:
            auth_service.authenticate("vendor@example.com", "nope")
        assert str(unknown.value) == str(wrong.value) == "Invalid email or password"


class TestDemoLogin:
    """Tests for password-less demo login."""

    @pytest.mark.parametrize("role", list(UserRole))
    def test_matches_regular_login(self, role):
        demo_store = MemorySessionStore()
        AuthService(demo_store, login_delay=0).demo_login(role)

        login_store = MemorySessionStore()
        _login(AuthService(login_store, login_delay=0), DEMO_EMAILS[role], "password")

        assert _snapshot(demo_store) == _snapshot(login_store)

    def test_accepts_role_string(self, auth_service, admin):
        assert auth_service.demo_login("admin") == admin
        assert auth_service.is_authenticated() is True

    def test_unknown_role_is_noop(self, auth_service, memory_store):
        assert auth_service.demo_login("superuser") is None
        assert memory_store.storage == {}
        assert memory_store.cookies == {}


class TestLogout:
    """Tests for clearing the session."""

    def test_logout_clears_everything(self, auth_service, memory_store):
        _login(auth_service, "customer@example.com", "password")
        auth_service.logout()

        assert memory_store.storage == {}
        for name in ("isAuthenticated", "userRole"):
            cookie = memory_store.cookies[name]
            assert cookie.value == ""
            assert cookie.expires == EXPIRED_COOKIE_DATE
            assert cookie.path == "/"
        assert auth_service.is_authenticated() is False
        assert auth_service.get_current_user() is None
        assert auth_service.get_user_role() is None

    def test_logout_without_session(self, auth_service):
        auth_service.logout()
        assert auth_service.is_authenticated() is False


class TestSessionReads:
    """Tests for reading session state."""

    def test_malformed_user_reads_as_none(self):
        store = MemorySessionStore(storage={"user": "{not json"})
        assert AuthService(store).get_current_user() is None

    def test_user_with_missing_fields_reads_as_none(self):
        store = MemorySessionStore(storage={"user": '{"id": "1"}'})
        assert AuthService(store).get_current_user() is None

    def test_flag_is_literal_comparison(self):
        store = MemorySessionStore(storage={"isAuthenticated": "True"})
        assert AuthService(store).is_authenticated() is False

    def test_invalid_role_reads_as_none(self):
        store = MemorySessionStore(storage={"userRole": "owner"})
        assert AuthService(store).get_user_role() is None

    def test_reads_without_store(self):
        service = AuthService(None)
        assert service.get_current_user() is None
        assert service.is_authenticated() is False
        assert service.get_user_role() is None
        assert service.get_auth_state().is_authenticated is False

    def test_writes_without_store_raise(self):
        service = AuthService(None, login_delay=0)
        with pytest.raises(SessionUnavailableError):
            service.logout()
        with pytest.raises(SessionUnavailableError):
            service.demo_login("vendor")


class TestAuthState:
    """Tests for resolving partially written sessions."""

    def test_complete_session(self, auth_service, vendor):
        auth_service.demo_login("vendor")
        state = auth_service.get_auth_state()
        assert state.is_authenticated is True
        assert state.user == vendor

    def test_logged_out(self, auth_service):
        state = auth_service.get_auth_state()
        assert state.is_authenticated is False
        assert state.user is None

    @pytest.mark.parametrize("missing", ["userRole", "user"])
    def test_missing_key_means_logged_out(self, auth_service, memory_store, missing):
        auth_service.demo_login("admin")
        memory_store.remove(missing)
        assert auth_service.is_authenticated() is True
        assert auth_service.get_auth_state().is_authenticated is False

    def test_role_mismatch_means_logged_out(self, auth_service, memory_store):
        auth_service.demo_login("customer")
        memory_store.set("userRole", "admin")
        assert auth_service.get_auth_state().is_authenticated is False
