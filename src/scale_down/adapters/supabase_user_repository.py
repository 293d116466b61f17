"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from scale_down.domain.models import UserRecord
from scale_down.services.users import UserRepository

_COLUMNS = "id, user_name, hashed_password"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_user_name(self, user_name: str) -> UserRecord | None:
        """Return the user with a user name, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("user_name", user_name)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, user_name: str, hashed_password: str) -> UserRecord:
        """Create a new user row and return it."""
        response = (
            self.client.table("users")
            .insert({"user_name": user_name, "hashed_password": hashed_password})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def rename_user(self, user_id: UUID, user_name: str) -> UserRecord:
        """Update the user_name of a user."""
        response = (
            self.client.table("users")
            .update({"user_name": user_name})
            .eq("id", str(user_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update user in Supabase")
        return _parse_user(response.data[0])

    def delete_user(self, user_id: UUID) -> None:
        """Delete a user row."""
        self.client.table("users").delete().eq("id", str(user_id)).execute()


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        user_name=str(row["user_name"]),
        hashed_password=str(row["hashed_password"]),
    )
