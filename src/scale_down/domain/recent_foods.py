"""Domain models for recently used foods."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from scale_down.domain.foods import FoodItem


@dataclass(frozen=True)
class RecentFoodEntry:
    """A food item and the date of the meal it was last used in."""

    food_item_id: UUID
    date_used: datetime
    food_item: FoodItem | None = None


@dataclass(frozen=True)
class RecentFoods:
    """The recent foods record of a single user."""

    user_id: UUID
    foods: list[RecentFoodEntry] = field(default_factory=list)
    id: UUID | None = None
