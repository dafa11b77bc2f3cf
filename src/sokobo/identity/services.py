"""User registration, login lookup and admin user management."""

from protean.exceptions import ObjectNotFoundError, ValidationError

from sokobo.identity.sessions import hash_password, verify_password
from sokobo.identity.user import Role, User
from sokobo.store.entity_store import EntityStore
from sokobo.utils.logging import get_logger

logger = get_logger(__name__)

MIN_PASSWORD_LENGTH = 6


class UserService:
    def __init__(self, users: EntityStore[User]) -> None:
        self.users = users

    def register(self, name: str, email: str, password: str, role: str | None = None) -> User:
        """Create an account. Emails are unique, compared exactly as stored."""
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError({"password": [f"Password must be at least {MIN_PASSWORD_LENGTH} characters"]})

        # Uniqueness check and insert under one lock
        with self.users.lock:
            if self.by_email(email) is not None:
                raise ValidationError({"email": ["Email already registered"]})

            user = self.users.create(
                name=name,
                email=email,
                password=hash_password(password),
                role=role,
            )

        logger.info("user_registered", user_id=user.id, role=user.role)
        return user

    def authenticate(self, email: str, password: str) -> User | None:
        user = self.by_email(email)
        if user is None or not verify_password(password, user.password):
            logger.info("login_failed", email=email)
            return None
        return user

    def by_email(self, email: str) -> User | None:
        matches = self.users.filter_by(email=email)
        return matches[0] if matches else None

    def get(self, user_id: str) -> User:
        user = self.users.get_by_id(user_id)
        if user is None:
            raise ObjectNotFoundError(f"User with id {user_id} does not exist")
        return user

    def list_users(self) -> list[User]:
        return self.users.get_all()

    def set_role(self, user_id: str, role: str) -> User:
        allowed = [r.value for r in Role]
        if role not in allowed:
            raise ValidationError({"role": [f"Role must be one of {', '.join(allowed)}"]})

        user = self.users.update_by_id(user_id, {"role": role})
        if user is None:
            raise ObjectNotFoundError(f"User with id {user_id} does not exist")

        logger.info("user_role_changed", user_id=user_id, role=role)
        return user

    def delete(self, user_id: str) -> None:
        """Remove the account. Orders placed by the user are left untouched."""
        if not self.users.delete_by_id(user_id):
            raise ObjectNotFoundError(f"User with id {user_id} does not exist")
        logger.info("user_deleted", user_id=user_id)

    @staticmethod
    def public_view(user: User) -> dict:
        return user.to_public_dict()
