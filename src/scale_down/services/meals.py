"""Meal persistence and resolution service."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from scale_down.domain.meals import Meal, MealFoodEntry
from scale_down.errors import FoodItemNotFoundError, MealNotFoundError
from scale_down.services.foods import FoodService

logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def create_meal(
        self,
        user_id: UUID,
        name: str,
        date: datetime,
        food_list: list[MealFoodEntry],
    ) -> Meal:
        """Create a meal and return it."""

    def update_meal(
        self,
        meal_id: UUID,
        name: str,
        date: datetime,
        food_list: list[MealFoodEntry],
    ) -> Meal:
        """Replace a meal's contents and return it."""

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal."""

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id, if present."""

    def list_meals(self, user_id: UUID, start: datetime, end: datetime) -> list[Meal]:
        """Return a user's meals dated within ``[start, end)``."""


@dataclass
class MealService:
    """Service that stores meals and resolves their food items."""

    repository: MealRepository
    food_service: FoodService

    def get_meal(self, user_id: UUID, meal_id: UUID) -> Meal:
        """Return a resolved meal owned by the user."""
        return self.resolve(self._get_owned(user_id, meal_id))

    def list_meals(self, user_id: UUID, start: datetime, end: datetime) -> list[Meal]:
        """Return a user's resolved meals within a time window."""
        return self.resolve_many(self.repository.list_meals(user_id, start, end))

    def create_meal(
        self,
        user_id: UUID,
        name: str,
        food_list: list[MealFoodEntry],
        date: datetime | None = None,
    ) -> Meal:
        """Persist a new meal and return it resolved."""
        self._ensure_foods_exist(food_list)
        meal = self.repository.create_meal(
            user_id=user_id,
            name=name,
            date=_as_utc(date) if date else datetime.now(tz=UTC),
            food_list=food_list,
        )
        logger.info(
            "Meal created", extra={"meal_id": str(meal.id), "user_id": str(user_id)}
        )
        return self.resolve(meal)

    def update_meal(  # noqa: PLR0913
        self,
        user_id: UUID,
        meal_id: UUID,
        name: str,
        food_list: list[MealFoodEntry],
        date: datetime | None = None,
    ) -> Meal:
        """Replace a meal's name, date and food list."""
        existing = self._get_owned(user_id, meal_id)
        self._ensure_foods_exist(food_list)
        meal = self.repository.update_meal(
            meal_id=meal_id,
            name=name,
            date=_as_utc(date) if date else existing.date,
            food_list=food_list,
        )
        return self.resolve(meal)

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> None:
        """Delete a meal owned by the user."""
        self._get_owned(user_id, meal_id)
        self.repository.delete_meal(meal_id)

    def resolve(self, meal: Meal) -> Meal:
        """Populate the food items referenced by a meal."""
        return self.resolve_many([meal])[0]

    def resolve_many(self, meals: list[Meal]) -> list[Meal]:
        """Populate food items for several meals with a single lookup."""
        food_ids = [entry.food_item_id for meal in meals for entry in meal.food_list]
        lookup = self.food_service.lookup(food_ids)
        resolved = [meal.with_food_items(lookup) for meal in meals]
        for meal in resolved:
            missing = meal.unresolved_food_item_ids
            if missing:
                logger.warning(
                    "Meal references missing food items; excluded from totals",
                    extra={
                        "meal_id": str(meal.id),
                        "food_item_ids": [str(food_id) for food_id in missing],
                    },
                )
        return resolved

    def _get_owned(self, user_id: UUID, meal_id: UUID) -> Meal:
        meal = self.repository.get_meal(meal_id)
        if meal is None or meal.user_id != user_id:
            raise MealNotFoundError
        return meal

    def _ensure_foods_exist(self, food_list: list[MealFoodEntry]) -> None:
        lookup = self.food_service.lookup([entry.food_item_id for entry in food_list])
        for entry in food_list:
            if entry.food_item_id not in lookup:
                raise FoodItemNotFoundError(
                    f"Food not found - {entry.food_item_id}"
                )


def _as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)
