"""Supabase implementation for food items."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from scale_down.domain.foods import FoodItem
from scale_down.services.foods import FoodRepository

_TABLE = "food_items"


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for shared food items."""

    client: Client

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Create a food item and return it."""
        response = self.client.table(_TABLE).insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create food item")
        return _parse_food(response.data[0])

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodItem:
        """Update a food item and return it."""
        response = (
            self.client.table(_TABLE).update(payload).eq("id", str(food_id)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update food item")
        return _parse_food(response.data[0])

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food item."""
        self.client.table(_TABLE).delete().eq("id", str(food_id)).execute()

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food item by id, if present."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def get_food_by_name(self, name: str) -> FoodItem | None:
        """Return a food item by name, if present."""
        response = (
            self.client.table(_TABLE).select("*").eq("name", name).limit(1).execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def get_foods(self, food_ids: list[UUID]) -> list[FoodItem]:
        """Return the food items that exist among the given ids."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .in_("id", [str(food_id) for food_id in food_ids])
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]


def _parse_food(row: dict[str, object]) -> FoodItem:
    """Parse a food item row into a domain model."""
    return FoodItem(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        serving_size=float(row.get("serving_size", 0.0)),
        serving_unit=str(row.get("serving_unit", "")),
        calories=float(row.get("calories", 0.0)),
        fats=float(row.get("fats", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        proteins=float(row.get("proteins", 0.0)),
    )
