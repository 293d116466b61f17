"""Supabase repository for recent foods."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from scale_down.domain.recent_foods import RecentFoodEntry, RecentFoods
from scale_down.services.recent_foods import RecentFoodsRepository

_TABLE = "recent_foods"


@dataclass
class SupabaseRecentFoodsRepository(RecentFoodsRepository):
    """Supabase implementation keeping one row per user."""

    client: Client

    def get_recent_foods(self, user_id: UUID) -> RecentFoods | None:
        """Return the user's recent foods row, if present."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_recent_foods(response.data[0])

    def save_recent_foods(
        self, user_id: UUID, foods: list[RecentFoodEntry]
    ) -> RecentFoods:
        """Upsert the user's recent foods list."""
        response = (
            self.client.table(_TABLE)
            .upsert(
                {
                    "user_id": str(user_id),
                    "foods": [
                        {
                            "food_item_id": str(entry.food_item_id),
                            "date_used": entry.date_used.isoformat(),
                        }
                        for entry in foods
                    ],
                },
                on_conflict="user_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save recent foods")
        return _parse_recent_foods(response.data[0])


def _parse_recent_foods(row: dict[str, object]) -> RecentFoods:
    foods_raw = row.get("foods")
    foods = []
    for item in foods_raw if isinstance(foods_raw, list) else []:
        date_raw = item.get("date_used")
        date_used = (
            datetime.fromisoformat(date_raw)
            if isinstance(date_raw, str) and date_raw
            else datetime.min.replace(tzinfo=UTC)
        )
        foods.append(
            RecentFoodEntry(
                food_item_id=UUID(str(item["food_item_id"])), date_used=date_used
            )
        )
    row_id = row.get("id")
    return RecentFoods(
        id=UUID(str(row_id)) if row_id else None,
        user_id=UUID(str(row["user_id"])),
        foods=foods,
    )
