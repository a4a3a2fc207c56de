"""Domain models for daily consumption and the adherence credit."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class Zone(Enum):
    """Classification of a day's consumption against its target."""

    GREEN = "green"
    ORANGE = "orange"
    RED = "red"


class MealSlot(Enum):
    """Meal slots a day can be logged into."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    SNACK = "snack"
    DINNER = "dinner"


class CreditTier(Enum):
    """Presentation tier of the adherence credit."""

    READY = "ready"
    ALMOST = "almost"
    BUILDING = "building"


@dataclass(frozen=True)
class MealSlotTotals:
    """Nutrition totals for one meal slot."""

    calories: float = 0
    proteins: float = 0
    carbs: float = 0
    fats: float = 0


@dataclass(frozen=True)
class DailyMeals:
    """Per-day meal aggregate as stored by the meal log."""

    slots: dict[MealSlot, MealSlotTotals] = field(default_factory=dict)
    total_calories: float | None = None


@dataclass(frozen=True)
class DailyRecord:
    """Scored day within the trailing window."""

    day: date
    has_data: bool
    consumed_calories: float
    percentage: float
    zone: Zone
    day_label: str

    @property
    def rounded_percentage(self) -> int:
        """Return the percentage rounded for display."""
        return int(self.percentage + 0.5)


@dataclass(frozen=True)
class AdherenceReport:
    """Rolling adherence credit over the trailing seven days."""

    current_credit: int
    credit_required: int
    weekly_history: list[DailyRecord]
    is_ready: bool
    percentage_filled: float


@dataclass(frozen=True)
class CreditMessage:
    """Display copy for the adherence credit widget."""

    tier: CreditTier
    title: str
    subtitle: str
    message: str
    badge_text: str
