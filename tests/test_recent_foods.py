"""Tests for recent foods tracking."""

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from scale_down.domain.meals import Meal, MealFoodEntry
from scale_down.domain.recent_foods import RecentFoodEntry, RecentFoods
from scale_down.errors import RecentFoodsNotFoundError
from scale_down.services.foods import FoodService
from scale_down.services.recent_foods import (
    RecentFoodsService,
    RecentFoodsTracker,
    merge_recent_foods,
)
from tests.conftest import (
    InMemoryFoodRepository,
    InMemoryRecentFoodsRepository,
    tomato,
)

BASE = datetime(2021, 9, 29, 12, tzinfo=UTC)


def _meal(user_id: UUID, food_ids: list[UUID], date: datetime = BASE) -> Meal:
    return Meal(
        id=uuid4(),
        user_id=user_id,
        name="Meal",
        date=date,
        food_list=[MealFoodEntry(food_id, 100, "g") for food_id in food_ids],
    )


def test_merge_starts_from_empty_list() -> None:
    food_ids = [uuid4(), uuid4()]

    merged = merge_recent_foods([], _meal(uuid4(), food_ids))

    assert [entry.food_item_id for entry in merged] == food_ids
    assert all(entry.date_used == BASE for entry in merged)


def test_merge_keeps_most_recent_use_of_a_food() -> None:
    food_id = uuid4()
    older = RecentFoodEntry(food_item_id=food_id, date_used=BASE - timedelta(days=3))
    other = RecentFoodEntry(food_item_id=uuid4(), date_used=BASE - timedelta(days=1))

    merged = merge_recent_foods([other, older], _meal(uuid4(), [food_id]))

    assert [entry.food_item_id for entry in merged] == [food_id, other.food_item_id]
    assert merged[0].date_used == BASE


def test_merge_with_backdated_meal_keeps_newer_existing_entry() -> None:
    food_id = uuid4()
    newer = RecentFoodEntry(food_item_id=food_id, date_used=BASE)

    merged = merge_recent_foods(
        [newer], _meal(uuid4(), [food_id], date=BASE - timedelta(days=7))
    )

    assert merged == [newer]


def test_merge_puts_meal_entries_first_on_equal_dates() -> None:
    existing = RecentFoodEntry(food_item_id=uuid4(), date_used=BASE)
    meal_food = uuid4()

    merged = merge_recent_foods([existing], _meal(uuid4(), [meal_food], date=BASE))

    assert [entry.food_item_id for entry in merged] == [
        meal_food,
        existing.food_item_id,
    ]


def test_merge_deduplicates_within_one_meal() -> None:
    food_id = uuid4()

    merged = merge_recent_foods([], _meal(uuid4(), [food_id, food_id, food_id]))

    assert len(merged) == 1


def test_merge_caps_list_at_twenty() -> None:
    existing = [
        RecentFoodEntry(food_item_id=uuid4(), date_used=BASE - timedelta(hours=hour))
        for hour in range(1, 16)
    ]
    new_ids = [uuid4() for _ in range(10)]

    merged = merge_recent_foods(existing, _meal(uuid4(), new_ids))

    assert len(merged) == 20
    assert [entry.food_item_id for entry in merged[:10]] == new_ids
    assert merged[10:] == existing[:10]


def test_tracker_never_exceeds_limit_or_duplicates() -> None:
    repository = InMemoryRecentFoodsRepository()
    tracker = RecentFoodsTracker(repository)
    user_id = uuid4()
    pool = [uuid4() for _ in range(30)]

    for index in range(12):
        chosen = pool[index * 2 : index * 2 + 5]
        tracker.update(_meal(user_id, chosen, date=BASE + timedelta(hours=index)))

    foods = repository.records[user_id].foods
    ids = [entry.food_item_id for entry in foods]
    assert len(foods) <= 20
    assert len(ids) == len(set(ids))


def test_tracker_creates_then_overwrites_record() -> None:
    repository = InMemoryRecentFoodsRepository()
    tracker = RecentFoodsTracker(repository)
    user_id = uuid4()
    first, second = uuid4(), uuid4()

    created = tracker.update(_meal(user_id, [first]))
    updated = tracker.update(_meal(user_id, [second], date=BASE + timedelta(days=1)))

    assert created.id == updated.id
    assert [entry.food_item_id for entry in updated.foods] == [second, first]


def test_service_omits_deleted_foods() -> None:
    foods = InMemoryFoodRepository()
    food = tomato()
    foods.foods[food.id] = food
    repository = InMemoryRecentFoodsRepository()
    user_id = uuid4()
    repository.records[user_id] = RecentFoods(
        user_id=user_id,
        foods=[
            RecentFoodEntry(food_item_id=food.id, date_used=BASE),
            RecentFoodEntry(food_item_id=uuid4(), date_used=BASE),
        ],
    )
    service = RecentFoodsService(repository, FoodService(foods))

    record = service.get_recent_foods(user_id)

    assert len(record.foods) == 1
    assert record.foods[0].food_item == food


def test_service_raises_when_user_has_no_record() -> None:
    service = RecentFoodsService(
        InMemoryRecentFoodsRepository(), FoodService(InMemoryFoodRepository())
    )

    with pytest.raises(RecentFoodsNotFoundError):
        service.get_recent_foods(uuid4())
