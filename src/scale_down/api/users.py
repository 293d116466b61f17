"""User, totals and recent foods endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from scale_down.api.dependencies import get_container, require_user_id
from scale_down.api.models import (
    DetailOut,
    RecentFoodsOut,
    TokenOut,
    TotalsOut,
    UserCreatedOut,
    UserIn,
    UserInfoOut,
    UserTotalsOut,
)

router = APIRouter(prefix="/user", tags=["User"])


@router.post("")
async def register(body: UserIn, request: Request) -> UserCreatedOut:
    """Create a new user."""
    user = get_container(request).user_service.register(body.user_name, body.password)
    return UserCreatedOut(id=user.id, user_name=user.user_name)


@router.post("/token")
async def create_token(body: UserIn, request: Request) -> TokenOut:
    """Exchange credentials for a bearer token."""
    token = get_container(request).user_service.authenticate(
        body.user_name, body.password
    )
    return TokenOut.from_domain(token)


@router.get("")
async def get_user(
    request: Request, user_id: UUID = Depends(require_user_id)
) -> UserInfoOut:
    """Return the caller's user info."""
    user = get_container(request).user_service.get_user(user_id)
    return UserInfoOut.from_domain(user)


@router.put("")
async def edit_user(
    body: UserIn, request: Request, user_id: UUID = Depends(require_user_id)
) -> UserInfoOut:
    """Rename the caller after checking their password."""
    user = get_container(request).user_service.rename(
        user_id, body.user_name, body.password
    )
    return UserInfoOut.from_domain(user)


@router.delete("")
async def delete_user(
    request: Request, user_id: UUID = Depends(require_user_id)
) -> DetailOut:
    """Delete the caller."""
    get_container(request).user_service.delete(user_id)
    return DetailOut(detail="User deleted")


@router.get("/totals", response_model_exclude_none=True)
async def get_totals(
    request: Request,
    date: str | None = None,
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    user_id: UUID = Depends(require_user_id),
) -> UserTotalsOut:
    """Return nutrition totals for a day or date range (defaults to today)."""
    totals = get_container(request).totals_service.get_totals(
        user_id, date_param=date, start_date=start_date, end_date=end_date
    )
    return UserTotalsOut(
        user=user_id,
        date=date,
        start_date=start_date,
        end_date=end_date,
        totals=TotalsOut.from_domain(totals),
    )


@router.get("/recent-foods")
async def get_recent_foods(
    request: Request, user_id: UUID = Depends(require_user_id)
) -> RecentFoodsOut:
    """Return the caller's recently used foods."""
    record = get_container(request).recent_foods_service.get_recent_foods(user_id)
    return RecentFoodsOut.from_domain(record)
