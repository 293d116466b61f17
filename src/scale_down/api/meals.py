"""Meal endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from scale_down.api.dependencies import get_container, require_user_id
from scale_down.api.models import DetailOut, MealIn, MealListOut, MealOut

router = APIRouter(prefix="/meal", tags=["Meal"])


@router.get("")
async def list_meals(
    request: Request,
    date: str | None = None,
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    user_id: UUID = Depends(require_user_id),
) -> MealListOut:
    """List the caller's meals for a day or date range (defaults to today)."""
    container = get_container(request)
    window = container.totals_service.resolve_timeframe(date, start_date, end_date)
    meals = container.meal_service.list_meals(user_id, window.start, window.end)
    return MealListOut(meals=[MealOut.from_domain(meal) for meal in meals])


@router.get("/{meal_id}")
async def get_meal(
    meal_id: UUID, request: Request, user_id: UUID = Depends(require_user_id)
) -> MealOut:
    """Return a meal with its food items and totals."""
    meal = get_container(request).meal_service.get_meal(user_id, meal_id)
    return MealOut.from_domain(meal)


@router.post("")
async def create_meal(
    body: MealIn, request: Request, user_id: UUID = Depends(require_user_id)
) -> MealOut:
    """Create a meal and schedule the recent foods update."""
    container = get_container(request)
    meal = container.meal_service.create_meal(
        user_id=user_id,
        name=body.name,
        food_list=body.to_food_list(),
        date=body.date,
    )
    container.recent_foods_worker.dispatch(meal)
    return MealOut.from_domain(meal)


@router.put("/{meal_id}")
async def edit_meal(
    meal_id: UUID,
    body: MealIn,
    request: Request,
    user_id: UUID = Depends(require_user_id),
) -> MealOut:
    """Replace a meal and schedule the recent foods update."""
    container = get_container(request)
    meal = container.meal_service.update_meal(
        user_id=user_id,
        meal_id=meal_id,
        name=body.name,
        food_list=body.to_food_list(),
        date=body.date,
    )
    container.recent_foods_worker.dispatch(meal)
    return MealOut.from_domain(meal)


@router.delete("/{meal_id}")
async def delete_meal(
    meal_id: UUID, request: Request, user_id: UUID = Depends(require_user_id)
) -> DetailOut:
    """Delete a meal; recent foods are left as they are."""
    get_container(request).meal_service.delete_meal(user_id, meal_id)
    return DetailOut(detail="Meal deleted")
