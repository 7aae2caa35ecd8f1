"""Pytest fixtures for weddingbazaar tests."""

import pytest

from weddingbazaar.data.accounts import MOCK_USERS
from weddingbazaar.services.auth import AuthService
from weddingbazaar.services.session_store import MemorySessionStore


@pytest.fixture
def memory_store():
    """Create an empty in-memory session store."""
    return MemorySessionStore()


@pytest.fixture
def auth_service(memory_store):
    """Create an auth service with no simulated login delay."""
    return AuthService(memory_store, login_delay=0)


@pytest.fixture
def customer():
    return MOCK_USERS["customer@example.com"]


@pytest.fixture
def vendor():
    return MOCK_USERS["vendor@example.com"]


@pytest.fixture
def admin():
    return MOCK_USERS["admin@example.com"]
