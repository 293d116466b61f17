"""Food item endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from scale_down.api.dependencies import get_container, require_user_id
from scale_down.api.models import DetailOut, FoodIn, FoodOut

router = APIRouter(prefix="/food", tags=["Food"])


@router.get("/{food_id}")
async def get_food(food_id: UUID, request: Request) -> FoodOut:
    """Return a food item; open to anonymous callers."""
    food = get_container(request).food_service.get_food(food_id)
    return FoodOut.from_domain(food)


@router.post("", dependencies=[Depends(require_user_id)])
async def create_food(body: FoodIn, request: Request) -> FoodOut:
    """Create a food item with a unique name."""
    food = get_container(request).food_service.create_food(body.model_dump())
    return FoodOut.from_domain(food)


@router.put("/{food_id}", dependencies=[Depends(require_user_id)])
async def edit_food(food_id: UUID, body: FoodIn, request: Request) -> FoodOut:
    """Replace a food item's facts."""
    food = get_container(request).food_service.update_food(food_id, body.model_dump())
    return FoodOut.from_domain(food)


@router.delete("/{food_id}", dependencies=[Depends(require_user_id)])
async def delete_food(food_id: UUID, request: Request) -> DetailOut:
    """Delete a food item."""
    get_container(request).food_service.delete_food(food_id)
    return DetailOut(detail="Food deleted")
