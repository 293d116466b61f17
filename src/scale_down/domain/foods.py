"""Domain models for food items."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class FoodItem:
    """Nutrition facts for one serving of a food.

    Nutrient values are given per ``serving_size`` of ``serving_unit``.
    """

    id: UUID
    name: str
    serving_size: float
    serving_unit: str
    calories: float
    fats: float
    carbs: float
    proteins: float
