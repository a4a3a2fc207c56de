"""Daily calorie, macro and water targets from a user profile.

BMR uses the Mifflin-St Jeor equation:

    male:          10 * weight + 6.25 * height - 5 * age + 5
    female, other: 10 * weight + 6.25 * height - 5 * age - 161

TDEE scales BMR by the activity multiplier, calories are then adjusted for
the primary goal and split into macros at 4/4/9 kcal per gram.
"""

from typing import assert_never

from nutrition_coach.domain.profile import (
    ActivityLevel,
    BmiCategory,
    DietType,
    Gender,
    MacroRatios,
    NutritionGoals,
    PrimaryGoal,
    Profile,
)

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARB = 4
KCAL_PER_G_FAT = 9
WATER_ML_PER_KG = 35
DEFAULT_WATER_ML = 2000

BMI_UNDERWEIGHT_BELOW = 18.5
BMI_NORMAL_BELOW = 25
BMI_OVERWEIGHT_BELOW = 30


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -round_half_up(-value)
    return int(value + 0.5)


def calculate_bmr(profile: Profile) -> float:
    """Return the basal metabolic rate in kcal/day, or 0 when data is missing."""
    if (
        not profile.weight
        or not profile.height
        or not profile.age
        or profile.gender is None
    ):
        return 0
    base = 10 * profile.weight + 6.25 * profile.height - 5 * profile.age
    match profile.gender:
        case Gender.MALE:
            return base + 5
        case Gender.FEMALE | Gender.OTHER:
            # "other" shares the female constant until product decides otherwise.
            return base - 161
        case _:
            assert_never(profile.gender)


def activity_multiplier(level: ActivityLevel | None) -> float:
    """Return the TDEE multiplier for an activity level (sedentary if unset)."""
    match level:
        case None | ActivityLevel.SEDENTARY:
            return 1.2
        case ActivityLevel.LIGHT:
            return 1.375
        case ActivityLevel.MODERATE:
            return 1.55
        case ActivityLevel.ACTIVE:
            return 1.725
        case ActivityLevel.ATHLETE:
            return 1.9
        case _:
            assert_never(level)


def calculate_tdee(profile: Profile) -> float:
    """Return total daily energy expenditure in kcal/day."""
    return calculate_bmr(profile) * activity_multiplier(profile.activity_level)


def goal_multiplier(goal: PrimaryGoal | None) -> float:
    """Return the calorie adjustment for a primary goal."""
    match goal:
        case PrimaryGoal.WEIGHT_LOSS:
            return 0.8
        case PrimaryGoal.MUSCLE_GAIN:
            return 1.1
        case (
            None
            | PrimaryGoal.MAINTENANCE
            | PrimaryGoal.HEALTH
            | PrimaryGoal.ENERGY
        ):
            return 1.0
        case _:
            assert_never(goal)


def macro_ratios(goal: PrimaryGoal | None, diet: DietType | None) -> MacroRatios:
    """Return the protein/fat/carb split. A keto diet overrides the goal."""
    if diet is DietType.KETO:
        return MacroRatios(protein=0.25, fat=0.70, carb=0.05)
    match goal:
        case PrimaryGoal.MUSCLE_GAIN:
            return MacroRatios(protein=0.35, fat=0.25, carb=0.40)
        case PrimaryGoal.WEIGHT_LOSS:
            return MacroRatios(protein=0.35, fat=0.30, carb=0.35)
        case (
            None
            | PrimaryGoal.MAINTENANCE
            | PrimaryGoal.HEALTH
            | PrimaryGoal.ENERGY
        ):
            return MacroRatios(protein=0.30, fat=0.25, carb=0.45)
        case _:
            assert_never(goal)


def calculate_goals(profile: Profile) -> NutritionGoals:
    """Return daily calorie, macro and water targets for a profile."""
    calories = calculate_tdee(profile) * goal_multiplier(profile.primary_goal)
    ratios = macro_ratios(profile.primary_goal, profile.dietary_preferences)
    water = profile.weight * WATER_ML_PER_KG if profile.weight else DEFAULT_WATER_ML
    return NutritionGoals(
        calories=round_half_up(calories),
        proteins=round_half_up(calories * ratios.protein / KCAL_PER_G_PROTEIN),
        carbs=round_half_up(calories * ratios.carb / KCAL_PER_G_CARB),
        fats=round_half_up(calories * ratios.fat / KCAL_PER_G_FAT),
        water=round_half_up(water),
    )


def calculate_bmi(weight: float, height: float) -> float:
    """Return body mass index from weight in kg and height in cm."""
    if height <= 0:
        return 0.0
    height_m = height / 100
    return weight / (height_m * height_m)


def get_bmi_category(bmi: float) -> BmiCategory:
    """Return the BMI band; each band includes its lower bound."""
    if bmi < BMI_UNDERWEIGHT_BELOW:
        return BmiCategory.UNDERWEIGHT
    if bmi < BMI_NORMAL_BELOW:
        return BmiCategory.NORMAL
    if bmi < BMI_OVERWEIGHT_BELOW:
        return BmiCategory.OVERWEIGHT
    return BmiCategory.OBESE


def bmi_category_label(category: BmiCategory) -> str:
    """Return the French display label for a BMI band."""
    match category:
        case BmiCategory.UNDERWEIGHT:
            return "Insuffisance pondérale"
        case BmiCategory.NORMAL:
            return "Poids normal"
        case BmiCategory.OVERWEIGHT:
            return "Surpoids"
        case BmiCategory.OBESE:
            return "Obésité"
        case _:
            assert_never(category)
