"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta

import pytest

from nutrition_coach.config import Settings
from nutrition_coach.domain.adherence import DailyMeals, MealSlot, MealSlotTotals
from nutrition_coach.domain.profile import ActivityLevel, Gender, Profile
from nutrition_coach.services.cache import InMemoryCache
from nutrition_coach.services.coaching import CoachingService

TODAY = date(2026, 3, 15)


@dataclass
class FakeClock:
    """Manually advanced clock for cache expiry tests."""

    now: datetime = field(default_factory=lambda: datetime(2026, 3, 15, tzinfo=UTC))

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += timedelta(seconds=seconds)


class CountingCache(InMemoryCache):
    """In-memory cache that records lookups."""

    def __init__(self) -> None:
        super().__init__()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> object | None:
        value = super().get(key)
        if value is None:
            self.misses += 1
        else:
            self.hits += 1
        return value


def day_with(*calories: float, total: float | None = None) -> DailyMeals:
    """Build a day with one slot per calorie value, in slot order."""
    slots = {
        slot: MealSlotTotals(calories=value)
        for slot, value in zip(MealSlot, calories, strict=False)
    }
    return DailyMeals(slots=slots, total_calories=total)


def week_of(*calories: float, today: date = TODAY) -> dict[date, DailyMeals]:
    """Build a seven-day log ending on today, oldest value first."""
    start = today - timedelta(days=len(calories) - 1)
    return {
        start + timedelta(days=offset): day_with(value)
        for offset, value in enumerate(calories)
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(
        credit_required=5,
        default_daily_target=2000,
        goals_cache_ttl_seconds=600,
        debug=True,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache() -> CountingCache:
    return CountingCache()


@pytest.fixture
def coaching_service(settings: Settings, cache: CountingCache) -> CoachingService:
    return CoachingService(settings=settings, cache=cache)


@pytest.fixture
def reference_profile() -> Profile:
    return Profile(
        weight=70,
        height=175,
        age=30,
        gender=Gender.MALE,
        activity_level=ActivityLevel.MODERATE,
    )
