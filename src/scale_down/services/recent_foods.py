"""Tracking of the foods a user recently used in meals."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from scale_down.domain.meals import Meal
from scale_down.domain.recent_foods import RecentFoodEntry, RecentFoods
from scale_down.errors import RecentFoodsNotFoundError
from scale_down.services.foods import FoodService

logger = logging.getLogger(__name__)

RECENT_FOODS_LIMIT = 20


class RecentFoodsRepository(Protocol):
    """Persistence interface for recent foods records."""

    def get_recent_foods(self, user_id: UUID) -> RecentFoods | None:
        """Return the user's recent foods record, if present."""

    def save_recent_foods(
        self, user_id: UUID, foods: list[RecentFoodEntry]
    ) -> RecentFoods:
        """Create or overwrite the user's recent foods list."""


def merge_recent_foods(
    existing: list[RecentFoodEntry],
    meal: Meal,
    limit: int = RECENT_FOODS_LIMIT,
) -> list[RecentFoodEntry]:
    """Merge a meal's foods into a recent foods list.

    Entries are ordered by ``date_used`` descending and only the most recent
    entry per food item is kept. On equal dates the meal's entry wins over an
    existing one.
    """
    candidates = [
        RecentFoodEntry(food_item_id=entry.food_item_id, date_used=meal.date)
        for entry in meal.food_list
    ]
    candidates.extend(replace(entry, food_item=None) for entry in existing)
    candidates.sort(key=lambda entry: entry.date_used, reverse=True)

    seen: set[UUID] = set()
    merged: list[RecentFoodEntry] = []
    for entry in candidates:
        if entry.food_item_id in seen:
            continue
        seen.add(entry.food_item_id)
        merged.append(entry)
    return merged[:limit]


@dataclass
class RecentFoodsTracker:
    """Updates a user's recent foods after a meal was written."""

    repository: RecentFoodsRepository
    limit: int = RECENT_FOODS_LIMIT

    def update(self, meal: Meal) -> RecentFoods:
        """Fold the meal's foods into the owner's recent foods record."""
        record = self.repository.get_recent_foods(meal.user_id)
        existing = record.foods if record else []
        foods = merge_recent_foods(existing, meal, self.limit)
        saved = self.repository.save_recent_foods(meal.user_id, foods)
        logger.info(
            "Recent foods updated",
            extra={"user_id": str(meal.user_id), "count": len(foods)},
        )
        return saved


@dataclass
class RecentFoodsService:
    """Read access to recent foods with food items resolved."""

    repository: RecentFoodsRepository
    food_service: FoodService

    def get_recent_foods(self, user_id: UUID) -> RecentFoods:
        """Return the user's recent foods, omitting deleted food items."""
        record = self.repository.get_recent_foods(user_id)
        if record is None:
            raise RecentFoodsNotFoundError
        food_ids = [entry.food_item_id for entry in record.foods]
        lookup = self.food_service.lookup(food_ids)
        foods = [
            replace(entry, food_item=lookup[entry.food_item_id])
            for entry in record.foods
            if entry.food_item_id in lookup
        ]
        return replace(record, foods=foods)
