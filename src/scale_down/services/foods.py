"""Services for managing shared food items."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from scale_down.domain.foods import FoodItem
from scale_down.errors import FoodItemNotFoundError, FoodNameTakenError


class FoodRepository(Protocol):
    """Persistence interface for food items."""

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Create a food item and return it."""

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodItem:
        """Update a food item and return it."""

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food item."""

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food item by id, if present."""

    def get_food_by_name(self, name: str) -> FoodItem | None:
        """Return a food item by its unique name, if present."""

    def get_foods(self, food_ids: list[UUID]) -> list[FoodItem]:
        """Return the food items that exist among the given ids."""


@dataclass
class FoodService:
    """Application service for food item operations."""

    repository: FoodRepository

    def get_food(self, food_id: UUID) -> FoodItem:
        """Return a food item or raise when it does not exist."""
        food = self.repository.get_food(food_id)
        if food is None:
            raise FoodItemNotFoundError
        return food

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Create a food item with a unique name."""
        if self.repository.get_food_by_name(str(payload["name"])) is not None:
            raise FoodNameTakenError
        return self.repository.create_food(payload)

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodItem:
        """Replace a food item's facts, keeping names unique."""
        food = self.get_food(food_id)
        if food.name != payload["name"]:
            if self.repository.get_food_by_name(str(payload["name"])) is not None:
                raise FoodNameTakenError
        return self.repository.update_food(food_id, payload)

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food item; meals referencing it are left untouched."""
        self.get_food(food_id)
        self.repository.delete_food(food_id)

    def lookup(self, food_ids: list[UUID]) -> dict[UUID, FoodItem]:
        """Resolve food item ids into a lookup table, dropping unknown ids."""
        unique_ids = list(dict.fromkeys(food_ids))
        if not unique_ids:
            return {}
        return {food.id: food for food in self.repository.get_foods(unique_ids)}
