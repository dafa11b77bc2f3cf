"""Tests for the capability gate."""

import pytest
from sokobo.access.gate import (
    AuthenticationError,
    AuthorizationError,
    Principal,
    require_administrator,
    require_authenticated,
)
from sokobo.identity.user import User


class TestRequireAuthenticated:
    def test_anonymous_rejected(self):
        with pytest.raises(AuthenticationError) as exc:
            require_authenticated(None)
        assert exc.value.status_code == 401

    def test_principal_without_id_rejected(self):
        with pytest.raises(AuthenticationError):
            require_authenticated(Principal(id=""))

    def test_customer_passes(self):
        principal = Principal(id="user-1")
        assert require_authenticated(principal) is principal


class TestRequireAdministrator:
    def test_anonymous_is_unauthenticated_not_forbidden(self):
        with pytest.raises(AuthenticationError):
            require_administrator(None)

    def test_customer_forbidden(self):
        with pytest.raises(AuthorizationError) as exc:
            require_administrator(Principal(id="user-1", role="customer"))
        assert exc.value.status_code == 403

    def test_admin_passes(self):
        principal = Principal(id="admin-1", role="admin")
        assert require_administrator(principal) is principal


class TestPrincipal:
    def test_for_user_reads_role(self):
        user = User(name="Lerato", email="lerato@example.com", password="x" * 10, role="admin")
        principal = Principal.for_user(user)

        assert principal.id == user.id
        assert principal.is_admin

    def test_default_role_is_customer(self):
        assert not Principal(id="user-1").is_admin
