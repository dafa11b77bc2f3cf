"""User aggregate."""

from datetime import datetime
from enum import Enum

from protean.fields import DateTime, String

from sokobo.domain import sokobo


class Role(Enum):
    """Enumeration of user roles."""

    CUSTOMER = "customer"
    ADMIN = "admin"


@sokobo.aggregate
class User:
    """A shopper or an administrator.

    ``password`` holds a passlib hash. It is never part of any response.
    """

    name: String(required=True, max_length=100, sanitize=False)
    email: String(required=True, max_length=254, sanitize=False)
    password: String(required=True, max_length=255, sanitize=False)
    role: String(max_length=20, choices=Role, default=Role.CUSTOMER.value, sanitize=False)
    created_at: DateTime(default=datetime.now)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value

    def to_public_dict(self) -> dict:
        data = self.to_dict()
        data.pop("password", None)
        return data
