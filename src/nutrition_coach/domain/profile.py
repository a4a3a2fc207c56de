"""Domain models for user profiles and daily nutrition targets."""

from dataclasses import dataclass
from enum import Enum

RATIO_TOLERANCE = 1e-9


class Gender(Enum):
    """Gender as captured during onboarding."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(Enum):
    """Typical weekly activity level."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    ATHLETE = "athlete"


class PrimaryGoal(Enum):
    """Main coaching goal selected by the user."""

    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    MAINTENANCE = "maintenance"
    HEALTH = "health"
    ENERGY = "energy"


class DietType(Enum):
    """Dietary preference."""

    OMNIVORE = "omnivore"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    PESCATARIAN = "pescatarian"
    KETO = "keto"
    PALEO = "paleo"


class BmiCategory(Enum):
    """WHO adult BMI band."""

    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"


@dataclass(frozen=True)
class Profile:
    """Biometric and preference data used to derive targets.

    Any of weight, height, age or gender may be missing while the user is
    still onboarding; the goal calculators then report zero targets.
    """

    weight: float | None = None
    height: float | None = None
    age: int | None = None
    gender: Gender | None = None
    activity_level: ActivityLevel | None = None
    primary_goal: PrimaryGoal | None = None
    dietary_preferences: DietType | None = None
    target_weight: float | None = None


@dataclass(frozen=True)
class MacroRatios:
    """Share of daily calories given to each macronutrient."""

    protein: float
    fat: float
    carb: float

    def __post_init__(self) -> None:
        total = self.protein + self.fat + self.carb
        if abs(total - 1.0) > RATIO_TOLERANCE:
            raise ValueError(f"Macro ratios must sum to 1.0, got {total}")


@dataclass(frozen=True)
class NutritionGoals:
    """Daily targets. A zero calorie target means insufficient profile data."""

    calories: int
    proteins: int
    carbs: int
    fats: int
    water: int

    @property
    def has_data(self) -> bool:
        """Return whether the targets come from a complete profile."""
        return self.calories > 0
