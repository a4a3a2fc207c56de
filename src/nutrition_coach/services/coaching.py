"""Coaching service wrapping the targets, normalization and scoring engines."""

import logging
from dataclasses import dataclass
from datetime import date

from nutrition_coach.config import Settings
from nutrition_coach.domain.adherence import (
    AdherenceReport,
    CreditMessage,
    DailyMeals,
    MealSlotTotals,
)
from nutrition_coach.domain.foods import CookingState, FoodEntry, NormalizedNutrition
from nutrition_coach.domain.profile import NutritionGoals, Profile
from nutrition_coach.engine.adherence import (
    calculate_adherence_credit,
    get_credit_message,
)
from nutrition_coach.engine.goals import calculate_goals
from nutrition_coach.engine.normalizer import normalize_food_entry, sum_nutrition
from nutrition_coach.services.cache import Cache

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdherenceSummary:
    """Credit report together with its display copy."""

    report: AdherenceReport
    message: CreditMessage
    daily_target: int


@dataclass
class CoachingService:
    """Application-facing entry point for coaching computations."""

    settings: Settings
    cache: Cache

    def goals_for(self, profile_key: str, profile: Profile) -> NutritionGoals:
        """Return daily targets, memoized per profile key."""
        cache_key = f"goals:{profile_key}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, NutritionGoals):
            if self.settings.debug:
                _logger.info("Goals cache hit: key=%s", cache_key)
            return cached

        goals = calculate_goals(profile)
        self.cache.set(
            cache_key, goals, ttl_seconds=self.settings.goals_cache_ttl_seconds
        )
        if self.settings.debug:
            _logger.info(
                "Goals computed: key=%s calories=%s", cache_key, goals.calories
            )
        return goals

    def forget_goals(self, profile_key: str) -> None:
        """Drop memoized targets after a profile change."""
        self.cache.invalidate(f"goals:{profile_key}")

    def daily_target(self, goals: NutritionGoals) -> int:
        """Return the calorie target, or the default when the profile is incomplete."""
        if goals.has_data:
            return goals.calories
        if self.settings.debug:
            _logger.info(
                "Incomplete profile, using default target %s",
                self.settings.default_daily_target,
            )
        return self.settings.default_daily_target

    def adherence_for(
        self, meals: dict[date, DailyMeals], goals: NutritionGoals, today: date
    ) -> AdherenceSummary:
        """Score the week ending on today against the profile's targets."""
        target = self.daily_target(goals)
        report = calculate_adherence_credit(
            meals, target, today, credit_required=self.settings.credit_required
        )
        if self.settings.debug:
            _logger.info(
                "Adherence scored: today=%s credit=%s/%s",
                today.isoformat(),
                report.current_credit,
                report.credit_required,
            )
        return AdherenceSummary(
            report=report, message=get_credit_message(report), daily_target=target
        )

    def normalize_entry(
        self,
        entry: FoodEntry,
        per_100g: NormalizedNutrition,
        reference_state: CookingState | None = None,
    ) -> NormalizedNutrition:
        """Return the nutrition of a logged food entry."""
        return normalize_food_entry(entry, per_100g, reference_state)

    def summarize_slot(self, items: list[NormalizedNutrition]) -> MealSlotTotals:
        """Sum normalized entries into totals for one meal slot."""
        total = sum_nutrition(items)
        return MealSlotTotals(
            calories=total.calories,
            proteins=total.proteins,
            carbs=total.carbs,
            fats=total.fats,
        )
