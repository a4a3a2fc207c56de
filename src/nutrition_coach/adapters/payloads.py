"""Pydantic models for documents handed over by the persistence layer."""

from collections.abc import Mapping
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from nutrition_coach.domain.adherence import DailyMeals, MealSlot, MealSlotTotals
from nutrition_coach.domain.foods import CookingState, FoodEntry, MeasurementUnit
from nutrition_coach.domain.profile import (
    ActivityLevel,
    DietType,
    Gender,
    PrimaryGoal,
    Profile,
)


class ProfilePayload(BaseModel):
    """Stored user profile."""

    model_config = ConfigDict(populate_by_name=True)

    weight: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    age: int | None = Field(default=None, gt=0)
    gender: Gender | None = None
    activity_level: ActivityLevel | None = Field(default=None, alias="activityLevel")
    primary_goal: PrimaryGoal | None = Field(default=None, alias="primaryGoal")
    dietary_preferences: DietType | None = Field(
        default=None, alias="dietaryPreferences"
    )
    target_weight: float | None = Field(default=None, gt=0, alias="targetWeight")

    def to_domain(self) -> Profile:
        """Convert to the engine's profile type."""
        return Profile(
            weight=self.weight,
            height=self.height,
            age=self.age,
            gender=self.gender,
            activity_level=self.activity_level,
            primary_goal=self.primary_goal,
            dietary_preferences=self.dietary_preferences,
            target_weight=self.target_weight,
        )


class NutritionPayload(BaseModel):
    """Nutrition totals attached to a meal or a day."""

    calories: float = 0
    proteins: float = 0
    carbs: float = 0
    fats: float = 0


class MealSlotPayload(BaseModel):
    """One logged meal slot."""

    model_config = ConfigDict(populate_by_name=True)

    total_nutrition: NutritionPayload | None = Field(
        default=None, alias="totalNutrition"
    )

    def to_domain(self) -> MealSlotTotals:
        """Convert to slot totals; a slot without totals counts as zero."""
        nutrition = self.total_nutrition or NutritionPayload()
        return MealSlotTotals(
            calories=nutrition.calories,
            proteins=nutrition.proteins,
            carbs=nutrition.carbs,
            fats=nutrition.fats,
        )


class DailyMealsPayload(BaseModel):
    """All meals logged on one day."""

    model_config = ConfigDict(populate_by_name=True)

    breakfast: MealSlotPayload | None = None
    lunch: MealSlotPayload | None = None
    snack: MealSlotPayload | None = None
    dinner: MealSlotPayload | None = None
    total_nutrition: NutritionPayload | None = Field(
        default=None, alias="totalNutrition"
    )

    def to_domain(self) -> DailyMeals:
        """Convert to the engine's daily aggregate."""
        slots = {
            slot: payload.to_domain()
            for slot in MealSlot
            if (payload := getattr(self, slot.value)) is not None
        }
        total = self.total_nutrition.calories if self.total_nutrition else None
        return DailyMeals(slots=slots, total_calories=total)


_MEAL_LOG_ADAPTER = TypeAdapter(dict[date, DailyMealsPayload])


def parse_meal_log(raw: Mapping[str, object]) -> dict[date, DailyMeals]:
    """Parse a meal log keyed by ISO date."""
    parsed = _MEAL_LOG_ADAPTER.validate_python(dict(raw))
    return {day: payload.to_domain() for day, payload in parsed.items()}


class FoodEntryPayload(BaseModel):
    """Food log entry from product search or barcode lookup."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    quantity: float = Field(gt=0)
    unit: MeasurementUnit = MeasurementUnit.GRAMS
    cooking_state: CookingState | None = Field(default=None, alias="cookingState")

    def to_domain(self) -> FoodEntry:
        """Convert to the engine's food entry."""
        return FoodEntry(
            name=self.name,
            quantity=self.quantity,
            unit=self.unit,
            cooking_state=self.cooking_state,
        )
