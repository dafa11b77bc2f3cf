"""Capability checks run before any mutating operation.

The gate only ever reads ``principal.id`` and ``principal.role``; where the
principal comes from (a bearer token, a test fixture) is someone else's
concern.
"""

from dataclasses import dataclass

from sokobo.identity.user import Role


class AccessDenied(Exception):
    """Base class for gate failures."""

    status_code = 403

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AuthenticationError(AccessDenied):
    status_code = 401


class AuthorizationError(AccessDenied):
    status_code = 403


@dataclass(frozen=True)
class Principal:
    id: str
    role: str = Role.CUSTOMER.value

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value

    @classmethod
    def for_user(cls, user) -> "Principal":
        return cls(id=user.id, role=user.role)


def require_authenticated(principal: Principal | None) -> Principal:
    if principal is None or not principal.id:
        raise AuthenticationError("Authentication required")
    return principal


def require_administrator(principal: Principal | None) -> Principal:
    principal = require_authenticated(principal)
    if not principal.is_admin:
        raise AuthorizationError("Admin access required")
    return principal
