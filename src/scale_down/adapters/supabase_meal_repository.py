"""Supabase repository for meals."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from scale_down.domain.meals import Meal, MealFoodEntry
from scale_down.services.meals import MealRepository

_TABLE = "meals"


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals.

    The food list is kept in a JSON column; food items are resolved by the
    service layer, never stored alongside the meal.
    """

    client: Client

    def create_meal(
        self,
        user_id: UUID,
        name: str,
        date: datetime,
        food_list: list[MealFoodEntry],
    ) -> Meal:
        """Create a meal row and return it."""
        response = (
            self.client.table(_TABLE)
            .insert(
                {
                    "user_id": str(user_id),
                    "name": name,
                    "date": date.isoformat(),
                    "food_list": _serialize_food_list(food_list),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return _parse_meal(response.data[0])

    def update_meal(
        self,
        meal_id: UUID,
        name: str,
        date: datetime,
        food_list: list[MealFoodEntry],
    ) -> Meal:
        """Replace a meal's contents."""
        response = (
            self.client.table(_TABLE)
            .update(
                {
                    "name": name,
                    "date": date.isoformat(),
                    "food_list": _serialize_food_list(food_list),
                }
            )
            .eq("id", str(meal_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update meal")
        return _parse_meal(response.data[0])

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal row."""
        self.client.table(_TABLE).delete().eq("id", str(meal_id)).execute()

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def list_meals(self, user_id: UUID, start: datetime, end: datetime) -> list[Meal]:
        """Return a user's meals in the time range."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lt("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]


def _serialize_food_list(food_list: list[MealFoodEntry]) -> list[dict[str, object]]:
    return [
        {
            "food_item_id": str(entry.food_item_id),
            "serving_size": entry.serving_size,
            "serving_unit": entry.serving_unit,
        }
        for entry in food_list
    ]


def _parse_meal(row: dict[str, object]) -> Meal:
    date_raw = row.get("date")
    date = (
        datetime.fromisoformat(date_raw)
        if isinstance(date_raw, str) and date_raw
        else datetime.min.replace(tzinfo=UTC)
    )
    food_list_raw = row.get("food_list")
    food_list = [
        MealFoodEntry(
            food_item_id=UUID(str(item["food_item_id"])),
            serving_size=float(item.get("serving_size", 0.0)),
            serving_unit=str(item.get("serving_unit", "")),
        )
        for item in (food_list_raw if isinstance(food_list_raw, list) else [])
    ]
    return Meal(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        date=date,
        food_list=food_list,
    )
