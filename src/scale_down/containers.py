"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from scale_down.adapters.supabase_food_repository import SupabaseFoodRepository
from scale_down.adapters.supabase_meal_repository import SupabaseMealRepository
from scale_down.adapters.supabase_recent_foods_repository import (
    SupabaseRecentFoodsRepository,
)
from scale_down.adapters.supabase_user_repository import SupabaseUserRepository
from scale_down.config import Settings
from scale_down.services.auth import TokenService
from scale_down.services.background import RecentFoodsWorker
from scale_down.services.foods import FoodService
from scale_down.services.meals import MealService
from scale_down.services.recent_foods import RecentFoodsService, RecentFoodsTracker
from scale_down.services.totals import TotalsService
from scale_down.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    token_service: TokenService
    user_service: UserService
    food_service: FoodService
    meal_service: MealService
    totals_service: TotalsService
    recent_foods_service: RecentFoodsService
    recent_foods_worker: RecentFoodsWorker
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    food_repository = SupabaseFoodRepository(supabase_client)
    meal_repository = SupabaseMealRepository(supabase_client)
    recent_foods_repository = SupabaseRecentFoodsRepository(supabase_client)

    token_service = TokenService(
        secret=resolved_settings.jwt_secret,
        ttl_days=resolved_settings.token_ttl_days,
    )
    user_service = UserService(user_repository, token_service)
    food_service = FoodService(food_repository)
    meal_service = MealService(meal_repository, food_service)
    totals_service = TotalsService(meal_service, timezone=resolved_settings.timezone)
    recent_foods_service = RecentFoodsService(recent_foods_repository, food_service)
    recent_foods_worker = RecentFoodsWorker(
        RecentFoodsTracker(
            recent_foods_repository, limit=resolved_settings.recent_foods_limit
        )
    )

    async def close_resources() -> None:
        await recent_foods_worker.drain()

    return AppContainer(
        settings=resolved_settings,
        token_service=token_service,
        user_service=user_service,
        food_service=food_service,
        meal_service=meal_service,
        totals_service=totals_service,
        recent_foods_service=recent_foods_service,
        recent_foods_worker=recent_foods_worker,
        close_resources=close_resources,
    )
