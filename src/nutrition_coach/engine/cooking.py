"""Raw and cooked state detection and nutrition conversion.

Grains and legumes absorb water when cooked, so the same food has a much
lower calorie density per 100 g once cooked. Conversion rules are keyed by
food-name patterns and evaluated first match wins in declaration order.
"""

from typing import assert_never

from nutrition_coach.domain.foods import (
    CookedPortion,
    CookingState,
    FoodConversionRule,
    NormalizedNutrition,
)
from nutrition_coach.engine.matching import contains_any, first_match

COOKED_KEYWORDS: tuple[str, ...] = (
    "cuit", "cuite", "cuites", "cuits",
    "bouilli", "bouillie", "bouillis", "bouillies",
    "vapeur",
    "grillé", "grillée", "grillés", "grillées",
    "rôti", "rôtie", "rôtis", "rôties",
    "frit", "frite", "frits", "frites",
    "poêlé", "poêlée", "poêlés", "poêlées",
    "braisé", "braisée", "braisés", "braisées",
    "mijoté", "mijotée", "mijotés", "mijotées",
    "sauté", "sautée", "sautés", "sautées",
    "al dente",
)  # fmt: skip

RAW_KEYWORDS: tuple[str, ...] = (
    "cru", "crue", "crus", "crues",
    "sec", "sèche", "secs", "sèches",
    "frais", "fraîche",
)  # fmt: skip

# Sold dry, so logged values are raw unless the name says otherwise.
TYPICALLY_RAW_ITEMS: tuple[str, ...] = (
    "riz", "pâtes", "quinoa", "lentilles", "pois", "haricots",
)  # fmt: skip

COOKING_CONVERSIONS: tuple[tuple[str, FoodConversionRule], ...] = (
    ("riz", FoodConversionRule(2.5, 0.4, "Le riz absorbe ~2.5x son poids en eau")),
    ("pâtes", FoodConversionRule(2.2, 0.45, "Les pâtes doublent de volume")),
    ("quinoa", FoodConversionRule(3.0, 0.33, "Le quinoa triple de volume")),
    ("semoule", FoodConversionRule(2.5, 0.4, "Semoule de blé dur")),
    ("boulgour", FoodConversionRule(2.5, 0.4, "Boulgour précuit")),
    ("lentilles", FoodConversionRule(2.5, 0.4, "Lentilles vertes ou corail")),
    ("pois", FoodConversionRule(2.5, 0.4, "Pois chiches ou cassés secs")),
    ("haricots", FoodConversionRule(2.5, 0.4, "Haricots secs (blancs, rouges)")),
    (
        "pomme_de_terre",
        FoodConversionRule(1.0, 1.0, "Pommes de terre (pas de changement majeur)"),
    ),
    (
        "patate_douce",
        FoodConversionRule(1.0, 0.95, "Patate douce (légère perte d'eau)"),
    ),
)


def _expand_keys(
    table: tuple[tuple[str, FoodConversionRule], ...],
) -> tuple[tuple[str, FoodConversionRule], ...]:
    """Match underscore keys both spaced and joined, keeping table order."""
    expanded: list[tuple[str, FoodConversionRule]] = []
    for key, rule in table:
        expanded.append((key.replace("_", " "), rule))
        if "_" in key:
            expanded.append((key.replace("_", ""), rule))
    return tuple(expanded)


_CONVERSION_PATTERNS = _expand_keys(COOKING_CONVERSIONS)

COOKED_PORTIONS: tuple[tuple[tuple[str, ...], tuple[CookedPortion, ...]], ...] = (
    (
        ("riz",),
        (
            CookedPortion("1 portion légère", cooked_grams=150, raw_grams=60),
            CookedPortion("1 portion normale", cooked_grams=200, raw_grams=80),
            CookedPortion("1 grande portion", cooked_grams=250, raw_grams=100),
        ),
    ),
    (
        ("pâtes", "spaghetti"),
        (
            CookedPortion("1 portion légère", cooked_grams=180, raw_grams=80),
            CookedPortion("1 portion normale", cooked_grams=220, raw_grams=100),
            CookedPortion("1 grande portion", cooked_grams=280, raw_grams=130),
        ),
    ),
    (
        ("quinoa",),
        (
            CookedPortion("1 portion", cooked_grams=180, raw_grams=60),
            CookedPortion("1 grande portion", cooked_grams=240, raw_grams=80),
        ),
    ),
    (
        ("lentilles", "pois", "haricots"),
        (
            CookedPortion("1 portion", cooked_grams=200, raw_grams=80),
            CookedPortion("1 grande portion", cooked_grams=250, raw_grams=100),
        ),
    ),
    (
        ("pomme de terre", "patate"),
        (
            CookedPortion("1 moyenne", cooked_grams=150, raw_grams=150),
            CookedPortion("2 moyennes", cooked_grams=300, raw_grams=300),
        ),
    ),
    (
        ("poulet",),
        (
            CookedPortion("1 blanc cuit", cooked_grams=150, raw_grams=180),
            CookedPortion("1 cuisse cuite", cooked_grams=100, raw_grams=130),
        ),
    ),
    (
        ("saumon", "poisson"),
        (
            CookedPortion("1 filet cuit", cooked_grams=150, raw_grams=175),
            CookedPortion("1 portion cuite", cooked_grams=120, raw_grams=140),
        ),
    ),
)


def detect_cooking_state(name: str) -> CookingState:
    """Guess whether a product's nutrition values are raw or cooked."""
    if contains_any(name, COOKED_KEYWORDS):
        return CookingState.COOKED
    if contains_any(name, RAW_KEYWORDS):
        return CookingState.RAW
    if contains_any(name, TYPICALLY_RAW_ITEMS):
        return CookingState.RAW
    return CookingState.COOKED


def get_cooking_conversion(name: str) -> FoodConversionRule | None:
    """Return the conversion rule for a food, or None when unknown."""
    return first_match(name, _CONVERSION_PATTERNS)


def requires_cooking_consideration(name: str) -> bool:
    """Return whether the food changes weight or density when cooked."""
    return get_cooking_conversion(name) is not None


def adjust_for_cooking(  # noqa: PLR0913
    name: str,
    calories: float,
    proteins: float,
    carbs: float,
    fats: float,
    from_state: CookingState,
    to_state: CookingState,
) -> NormalizedNutrition:
    """Express per-100 g values in another cooking state.

    The calorie ratio scales all four values, macros included. Unknown foods
    pass through unchanged.
    """
    unchanged = NormalizedNutrition(
        calories=calories, proteins=proteins, carbs=carbs, fats=fats
    )
    if from_state is to_state:
        return unchanged
    rule = get_cooking_conversion(name)
    if rule is None:
        return unchanged
    match to_state:
        case CookingState.COOKED:
            factor = rule.calorie_ratio
        case CookingState.RAW:
            factor = 1 / rule.calorie_ratio
        case _:
            assert_never(to_state)
    return NormalizedNutrition(
        calories=calories * factor,
        proteins=proteins * factor,
        carbs=carbs * factor,
        fats=fats * factor,
    )


def convert_weight(
    name: str, weight: float, from_state: CookingState, to_state: CookingState
) -> float:
    """Convert a weight between raw and cooked using water absorption."""
    if from_state is to_state:
        return weight
    rule = get_cooking_conversion(name)
    if rule is None:
        return weight
    if to_state is CookingState.COOKED:
        return weight * rule.water_absorption
    return weight / rule.water_absorption


def cooking_state_label(state: CookingState) -> str:
    """Return the French label for a cooking state."""
    match state:
        case CookingState.RAW:
            return "Cru"
        case CookingState.COOKED:
            return "Cuit"
        case _:
            assert_never(state)


def get_cooking_info_message(name: str, state: CookingState) -> str | None:
    """Return a hint about raw and cooked equivalence, if the food converts."""
    rule = get_cooking_conversion(name)
    if rule is None:
        return None
    if state is CookingState.RAW:
        cooked_weight = round(100 * rule.water_absorption)
        cooked_calorie_pct = round(rule.calorie_ratio * 100)
        return (
            f"💡 100g cru → ~{cooked_weight}g cuit "
            f"({cooked_calorie_pct} kcal/100g cuit)"
        )
    raw_weight = round(100 / rule.water_absorption)
    return f"💡 100g cuit ≈ {raw_weight}g cru"


def get_cooked_portions(name: str) -> list[CookedPortion]:
    """Return advisory serving sizes with raw and cooked weights."""
    for patterns, portions in COOKED_PORTIONS:
        if contains_any(name, patterns):
            return list(portions)
    return []
