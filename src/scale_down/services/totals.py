"""Nutrition totals across a user's meals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from scale_down.domain.meals import NutritionTotals, sum_totals
from scale_down.services.meals import MealService
from scale_down.services.timeframe import Timeframe, resolve_timeframe


@dataclass
class TotalsService:
    """Service that aggregates meal totals for a time window."""

    meal_service: MealService
    timezone: str = "UTC"

    def compute_user_totals(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> NutritionTotals:
        """Sum the totals of every meal the user logged in ``[start, end)``."""
        meals = self.meal_service.list_meals(user_id, start, end)
        return sum_totals(meal.totals for meal in meals)

    def resolve_timeframe(
        self,
        date_param: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> Timeframe:
        """Resolve date query parameters in the configured timezone."""
        return resolve_timeframe(date_param, start_date, end_date, self.timezone)

    def get_totals(
        self,
        user_id: UUID,
        date_param: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> NutritionTotals:
        """Return totals for the window described by the date parameters."""
        window = self.resolve_timeframe(date_param, start_date, end_date)
        return self.compute_user_totals(user_id, window.start, window.end)
