"""Turn a logged food entry into nutrition values comparable across entries."""

from nutrition_coach.domain.foods import CookingState, FoodEntry, NormalizedNutrition
from nutrition_coach.engine.cooking import adjust_for_cooking, detect_cooking_state
from nutrition_coach.engine.units import to_equivalent_grams

REFERENCE_GRAMS = 100


def normalize_food_entry(
    entry: FoodEntry,
    per_100g: NormalizedNutrition,
    reference_state: CookingState | None = None,
) -> NormalizedNutrition:
    """Return the nutrition of the quantity the user actually ate.

    per_100g holds the product's reference values, expressed in
    reference_state or, when omitted, in the state guessed from the product
    name. The entry's cooking state is the state the food was weighed in;
    without one the reference state is kept.
    """
    source_state = reference_state or detect_cooking_state(entry.name)
    target_state = entry.cooking_state or source_state
    adjusted = adjust_for_cooking(
        entry.name,
        per_100g.calories,
        per_100g.proteins,
        per_100g.carbs,
        per_100g.fats,
        source_state,
        target_state,
    )
    scale = to_equivalent_grams(entry.name, entry.quantity, entry.unit) / REFERENCE_GRAMS
    return NormalizedNutrition(
        calories=adjusted.calories * scale,
        proteins=adjusted.proteins * scale,
        carbs=adjusted.carbs * scale,
        fats=adjusted.fats * scale,
    )


def sum_nutrition(items: list[NormalizedNutrition]) -> NormalizedNutrition:
    """Return the element-wise total of several nutrition values."""
    total = NormalizedNutrition(calories=0, proteins=0, carbs=0, fats=0)
    for item in items:
        total = NormalizedNutrition(
            calories=total.calories + item.calories,
            proteins=total.proteins + item.proteins,
            carbs=total.carbs + item.carbs,
            fats=total.fats + item.fats,
        )
    return total
