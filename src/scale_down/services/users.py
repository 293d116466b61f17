"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from scale_down.domain.models import UserRecord
from scale_down.errors import ForbiddenError, UserNameTakenError, UserNotFoundError
from scale_down.services.auth import (
    AccessToken,
    TokenService,
    hash_password,
    verify_password,
)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""

    def get_by_user_name(self, user_name: str) -> UserRecord | None:
        """Return the user with a user name, if present."""

    def create_user(self, user_name: str, hashed_password: str) -> UserRecord:
        """Create and return a new user record."""

    def rename_user(self, user_id: UUID, user_name: str) -> UserRecord:
        """Change a user's name and return the updated record."""

    def delete_user(self, user_id: UUID) -> None:
        """Delete a user."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository
    token_service: TokenService

    def register(self, user_name: str, password: str) -> UserRecord:
        """Create a user with a unique name."""
        if self.repository.get_by_user_name(user_name) is not None:
            raise UserNameTakenError
        return self.repository.create_user(user_name, hash_password(password))

    def authenticate(self, user_name: str, password: str) -> AccessToken:
        """Check credentials and issue a bearer token."""
        user = self.repository.get_by_user_name(user_name)
        if user is None:
            raise UserNotFoundError
        if not verify_password(password, user.hashed_password):
            raise ForbiddenError("Incorrect password")
        return self.token_service.issue(user.id)

    def get_user(self, user_id: UUID) -> UserRecord:
        """Return a user or raise when it does not exist."""
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError
        return user

    def rename(self, user_id: UUID, user_name: str, password: str) -> UserRecord:
        """Rename a user after confirming their password."""
        if self.repository.get_by_user_name(user_name) is not None:
            raise UserNameTakenError
        user = self.get_user(user_id)
        if not verify_password(password, user.hashed_password):
            raise ForbiddenError("Incorrect Password")
        return self.repository.rename_user(user_id, user_name)

    def delete(self, user_id: UUID) -> None:
        """Delete a user; their meals and recent foods are not cascaded."""
        self.get_user(user_id)
        self.repository.delete_user(user_id)
