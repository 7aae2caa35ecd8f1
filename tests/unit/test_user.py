"""Tests for user models."""

import json

import pytest

from weddingbazaar.data.accounts import MOCK_USERS
from weddingbazaar.models.user import AuthState, User, UserRole


class TestUserRole:
    """Tests for role parsing at the storage boundary."""

    @pytest.mark.parametrize("value", ["customer", "vendor", "admin"])
    def test_parse_known_values(self, value):
        assert UserRole.parse(value).value == value

    def test_parse_member_passthrough(self):
        assert UserRole.parse(UserRole.VENDOR) is UserRole.VENDOR

    @pytest.mark.parametrize("value", ["", "Admin", "superuser", None, 3])
    def test_parse_unknown_values(self, value):
        assert UserRole.parse(value) is None


class TestUserSerialization:
    """Tests for dict/JSON conversion of session users."""

    def test_to_dict_uses_session_keys(self, customer):
        d = customer.to_dict()
        assert d == {
            "id": "1",
            "name": "Priya Sharma",
            "email": "customer@example.com",
            "role": "customer",
            "avatar": "/avatars/customer.jpg",
            "isVerified": True,
        }

    def test_optional_fields_omitted(self):
        user = User(id="9", name="Guest", email="g@example.com", role=UserRole.CUSTOMER)
        d = user.to_dict()
        assert "avatar" not in d
        assert "isVerified" not in d

    @pytest.mark.parametrize("email", sorted(MOCK_USERS))
    def test_json_round_trip_for_mock_accounts(self, email):
        original = MOCK_USERS[email]
        restored = User.from_json(original.to_json())
        assert restored == original

    def test_from_json_rejects_non_object(self):
        with pytest.raises(ValueError):
            User.from_json(json.dumps(["not", "a", "user"]))

    def test_from_dict_rejects_unknown_role(self):
        with pytest.raises(ValueError):
            User.from_dict({"id": "1", "name": "X", "email": "x@example.com", "role": "owner"})

    def test_from_dict_missing_field(self):
        with pytest.raises(KeyError):
            User.from_dict({"id": "1", "name": "X", "role": "vendor"})


class TestAuthState:
    """Tests for the derived session view."""

    def test_defaults_to_logged_out(self):
        state = AuthState()
        assert state.user is None
        assert state.is_authenticated is False
        assert state.is_loading is False
        assert state.role is None

    def test_role_follows_user(self, vendor):
        state = AuthState(user=vendor, is_authenticated=True)
        assert state.role == UserRole.VENDOR
