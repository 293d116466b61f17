"""Domain models and totals computation for meals."""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime
from uuid import UUID

from scale_down.domain.foods import FoodItem


@dataclass(frozen=True)
class NutritionTotals:
    """Summed nutrient values."""

    calories: float = 0.0
    fats: float = 0.0
    carbs: float = 0.0
    proteins: float = 0.0

    def __add__(self, other: "NutritionTotals") -> "NutritionTotals":
        return NutritionTotals(
            calories=self.calories + other.calories,
            fats=self.fats + other.fats,
            carbs=self.carbs + other.carbs,
            proteins=self.proteins + other.proteins,
        )


@dataclass(frozen=True)
class MealFoodEntry:
    """One food in a meal's food list.

    ``food_item`` is only set once the reference has been resolved.
    """

    food_item_id: UUID
    serving_size: float
    serving_unit: str
    food_item: FoodItem | None = None


@dataclass(frozen=True)
class Meal:
    """A user's meal composed of weighted food items."""

    id: UUID
    user_id: UUID
    name: str
    date: datetime
    food_list: list[MealFoodEntry] = field(default_factory=list)

    @property
    def totals(self) -> NutritionTotals:
        """Totals recomputed from the resolved food list on every access."""
        return compute_meal_totals(self.food_list)

    @property
    def unresolved_food_item_ids(self) -> list[UUID]:
        """Ids of food list entries whose food item could not be resolved."""
        return [
            entry.food_item_id for entry in self.food_list if entry.food_item is None
        ]

    def with_food_items(self, food_items: dict[UUID, FoodItem]) -> "Meal":
        """Return a copy with food list references resolved from a lookup."""
        resolved = [
            replace(entry, food_item=food_items.get(entry.food_item_id))
            for entry in self.food_list
        ]
        return replace(self, food_list=resolved)


def entry_totals(entry: MealFoodEntry) -> NutritionTotals:
    """Return the contribution of one resolved food list entry.

    The multiplier is the ratio of serving sizes; units are not converted.
    """
    food = entry.food_item
    if food is None:
        return NutritionTotals()
    multiplier = entry.serving_size / food.serving_size
    return NutritionTotals(
        calories=multiplier * food.calories,
        fats=multiplier * food.fats,
        carbs=multiplier * food.carbs,
        proteins=multiplier * food.proteins,
    )


def compute_meal_totals(food_list: Iterable[MealFoodEntry]) -> NutritionTotals:
    """Sum nutrient totals over a food list, skipping unresolved entries."""
    return sum_totals(entry_totals(entry) for entry in food_list)


def sum_totals(totals: Iterable[NutritionTotals]) -> NutritionTotals:
    """Add up a sequence of totals."""
    result = NutritionTotals()
    for item in totals:
        result = result + item
    return result
