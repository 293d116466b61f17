"""Pydantic models for request and response bodies."""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from scale_down.domain.foods import FoodItem
from scale_down.domain.meals import Meal, MealFoodEntry, NutritionTotals
from scale_down.domain.models import UserRecord
from scale_down.domain.recent_foods import RecentFoods
from scale_down.services.auth import AccessToken

UserName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Password = Annotated[str, StringConstraints(strip_whitespace=True, min_length=6)]


class ApiModel(BaseModel):
    """Base model exchanging camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FoodIn(ApiModel):
    """Food item facts per serving."""

    name: str = Field(min_length=1)
    serving_size: float = Field(gt=0)
    serving_unit: str
    calories: float
    fats: float
    carbs: float
    proteins: float


class FoodOut(ApiModel):
    """Food item as returned by the API."""

    id: UUID
    name: str
    serving_size: float
    serving_unit: str
    calories: float
    fats: float
    carbs: float
    proteins: float

    @classmethod
    def from_domain(cls, food: FoodItem) -> "FoodOut":
        return cls(
            id=food.id,
            name=food.name,
            serving_size=food.serving_size,
            serving_unit=food.serving_unit,
            calories=food.calories,
            fats=food.fats,
            carbs=food.carbs,
            proteins=food.proteins,
        )


class FoodListEntryIn(ApiModel):
    """Reference to a food item with the amount eaten."""

    food_item: UUID
    serving_size: float = Field(gt=0)
    serving_unit: str


class MealIn(ApiModel):
    """Meal create/edit payload."""

    name: str = Field(min_length=1)
    date: datetime | None = None
    food_list: list[FoodListEntryIn] = Field(default_factory=list)

    def to_food_list(self) -> list[MealFoodEntry]:
        return [
            MealFoodEntry(
                food_item_id=entry.food_item,
                serving_size=entry.serving_size,
                serving_unit=entry.serving_unit,
            )
            for entry in self.food_list
        ]


class TotalsOut(ApiModel):
    calories: float
    fats: float
    carbs: float
    proteins: float

    @classmethod
    def from_domain(cls, totals: NutritionTotals) -> "TotalsOut":
        return cls(
            calories=totals.calories,
            fats=totals.fats,
            carbs=totals.carbs,
            proteins=totals.proteins,
        )


class FoodListEntryOut(ApiModel):
    """Food list entry with its food item populated when it still exists."""

    food_item_id: UUID
    food_item: FoodOut | None
    serving_size: float
    serving_unit: str


class MealOut(ApiModel):
    """Meal with populated food items and computed totals."""

    id: UUID
    user: UUID
    name: str
    date: datetime
    food_list: list[FoodListEntryOut]
    totals: TotalsOut

    @classmethod
    def from_domain(cls, meal: Meal) -> "MealOut":
        return cls(
            id=meal.id,
            user=meal.user_id,
            name=meal.name,
            date=meal.date,
            food_list=[
                FoodListEntryOut(
                    food_item_id=entry.food_item_id,
                    food_item=FoodOut.from_domain(entry.food_item)
                    if entry.food_item
                    else None,
                    serving_size=entry.serving_size,
                    serving_unit=entry.serving_unit,
                )
                for entry in meal.food_list
            ],
            totals=TotalsOut.from_domain(meal.totals),
        )


class MealListOut(ApiModel):
    meals: list[MealOut]


class UserTotalsOut(ApiModel):
    """Totals for a user's timeframe, echoing the date parameters sent."""

    user: UUID
    date: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    totals: TotalsOut


class RecentFoodOut(ApiModel):
    food_item: FoodOut
    date_used: datetime


class RecentFoodsOut(ApiModel):
    id: UUID | None
    user: UUID
    foods: list[RecentFoodOut]

    @classmethod
    def from_domain(cls, record: RecentFoods) -> "RecentFoodsOut":
        return cls(
            id=record.id,
            user=record.user_id,
            foods=[
                RecentFoodOut(
                    food_item=FoodOut.from_domain(entry.food_item),
                    date_used=entry.date_used,
                )
                for entry in record.foods
                if entry.food_item is not None
            ],
        )


class UserIn(ApiModel):
    """Credentials used to register, log in or rename."""

    user_name: UserName
    password: Password


class UserCreatedOut(ApiModel):
    id: UUID
    user_name: str


class UserInfoOut(ApiModel):
    user_id: UUID
    user_name: str

    @classmethod
    def from_domain(cls, user: UserRecord) -> "UserInfoOut":
        return cls(user_id=user.id, user_name=user.user_name)


class TokenOut(BaseModel):
    """Bearer token response."""

    token: str
    token_type: str
    expires_in: int

    @classmethod
    def from_domain(cls, token: AccessToken) -> "TokenOut":
        return cls(
            token=token.token,
            token_type=token.token_type,
            expires_in=token.expires_in,
        )


class DetailOut(BaseModel):
    detail: str
