"""Measurement unit detection, quantity formatting and gram equivalents."""

import math
from typing import assert_never

from nutrition_coach.domain.foods import MeasurementUnit, PortionPreset, UnitConfig
from nutrition_coach.engine.matching import contains_any, first_match

DEFAULT_UNIT_WEIGHT_G = 100
GRAMS_PER_KG = 1000
ML_PER_L = 1000

LIQUID_KEYWORDS: tuple[str, ...] = (
    # beverages
    "jus", "lait", "eau", "boisson", "smoothie", "café", "thé", "infusion",
    "vin", "bière", "cidre", "limonade", "soda", "cola", "orangina",
    # dairy drinks
    "yaourt liquide", "kéfir", "lait fermenté", "lassi", "ayran",
    # soups
    "soupe", "bouillon", "velouté", "potage", "consommé", "bisque",
    # cooking liquids
    "huile", "vinaigre", "sauce", "sirop", "miel liquide", "coulis",
    "crème liquide",
    # spirits
    "whisky", "vodka", "rhum", "gin", "liqueur", "cognac", "champagne",
)  # fmt: skip

# Average weight in grams of one countable item.
UNIT_ITEMS: tuple[tuple[str, float], ...] = (
    # fruits
    ("pomme de terre", 150),
    ("pomme", 150),
    ("poire", 160),
    ("banane", 120),
    ("orange", 180),
    ("mandarine", 80),
    ("clémentine", 70),
    ("kiwi", 70),
    ("pêche", 150),
    ("nectarine", 140),
    ("abricot", 45),
    ("prune", 50),
    ("cerise", 8),
    ("fraise", 12),
    ("framboise", 4),
    ("myrtille", 1.5),
    ("mangue", 300),
    ("ananas", 900),
    ("melon", 800),
    ("pastèque", 2000),
    ("avocat", 200),
    ("citron", 80),
    ("lime", 60),
    ("pamplemousse", 350),
    ("grenade", 200),
    ("figue", 50),
    ("datte", 25),
    # vegetables
    ("tomate", 120),
    ("concombre", 300),
    ("courgette", 200),
    ("aubergine", 300),
    ("poivron", 150),
    ("oignon", 100),
    ("échalote", 30),
    ("ail gousse", 5),
    ("carotte", 80),
    ("patate douce", 200),
    # eggs
    ("œuf de caille", 12),
    ("œuf", 60),
    ("oeuf", 60),
    # breads and pastries
    ("croissant", 60),
    ("pain au chocolat", 70),
    ("brioche", 50),
    ("baguette", 250),
    ("pain de mie tranche", 30),
    ("toast", 25),
    ("tartine", 30),
    ("muffin", 80),
    ("donut", 75),
    # biscuits
    ("biscuit", 10),
    ("cookie", 30),
    ("madeleine", 25),
    ("financier", 30),
    ("macaron", 15),
    ("speculoos", 8),
)

COMMON_PORTIONS: tuple[tuple[tuple[str, ...], tuple[PortionPreset, ...]], ...] = (
    (
        ("pomme",),
        (
            PortionPreset("1 petite pomme", 120, "🍎"),
            PortionPreset("1 moyenne", 150, "🍎"),
            PortionPreset("1 grosse", 200, "🍎"),
        ),
    ),
    (
        ("banane",),
        (
            PortionPreset("1 petite", 90, "🍌"),
            PortionPreset("1 moyenne", 120, "🍌"),
            PortionPreset("1 grosse", 150, "🍌"),
        ),
    ),
    (
        ("orange",),
        (
            PortionPreset("1 moyenne", 180, "🍊"),
            PortionPreset("1 grosse", 250, "🍊"),
        ),
    ),
    (
        ("œuf", "oeuf"),
        (
            PortionPreset("1 œuf moyen", 60, "🥚"),
            PortionPreset("2 œufs", 120, "🥚"),
            PortionPreset("3 œufs", 180, "🥚"),
        ),
    ),
    (
        ("pain", "baguette"),
        (
            PortionPreset("1 tranche fine", 25, "🍞"),
            PortionPreset("1 tranche", 40, "🍞"),
            PortionPreset("1/4 baguette", 60, "🥖"),
        ),
    ),
    (
        ("lait",),
        (
            PortionPreset("1 verre (200ml)", 200, "🥛"),
            PortionPreset("1 bol (300ml)", 300, "🥣"),
            PortionPreset("1 tasse (150ml)", 150, "☕"),
        ),
    ),
    (
        ("jus",),
        (
            PortionPreset("1 petit verre", 150, "🧃"),
            PortionPreset("1 verre (250ml)", 250, "🧃"),
            PortionPreset("1 grand verre", 330, "🧃"),
        ),
    ),
    (
        ("yaourt", "yogourt"),
        (
            PortionPreset("1 pot (125g)", 125, "🥛"),
            PortionPreset("1 pot XL (180g)", 180, "🥛"),
        ),
    ),
    (
        ("riz",),
        (
            PortionPreset("1 portion (150g cuit)", 150, "🍚"),
            PortionPreset("1 assiette (200g)", 200, "🍚"),
            PortionPreset("60g cru", 60, "🌾"),
        ),
    ),
    (
        ("pâtes", "spaghetti"),
        (
            PortionPreset("1 portion (180g cuit)", 180, "🍝"),
            PortionPreset("1 assiette (250g)", 250, "🍝"),
            PortionPreset("80g cru", 80, "🌾"),
        ),
    ),
    (
        ("fromage",),
        (
            PortionPreset("1 portion (30g)", 30, "🧀"),
            PortionPreset("2 portions", 60, "🧀"),
        ),
    ),
    (
        ("poulet", "viande", "bœuf", "boeuf", "porc"),
        (
            PortionPreset("1 portion (120g)", 120, "🍖"),
            PortionPreset("1 grosse portion", 180, "🍖"),
        ),
    ),
    (
        ("poisson", "saumon", "thon"),
        (
            PortionPreset("1 filet (150g)", 150, "🐟"),
            PortionPreset("1 portion (120g)", 120, "🐟"),
        ),
    ),
)

DEFAULT_PORTIONS: tuple[PortionPreset, ...] = (
    PortionPreset("50g", 50),
    PortionPreset("100g", 100),
    PortionPreset("150g", 150),
)

# Unicode fractions shown for fractional item counts.
_FRACTION_LABELS: dict[float, str] = {0.25: "¼", 0.5: "½", 0.75: "¾", 1.5: "1½"}
_FRACTION_INPUTS: dict[str, float] = {
    "¼": 0.25,
    "1/4": 0.25,
    "½": 0.5,
    "1/2": 0.5,
    "¾": 0.75,
    "3/4": 0.75,
    "1½": 1.5,
    "1 1/2": 1.5,
}


def detect_product_unit(name: str) -> MeasurementUnit:
    """Pick the natural unit for a product: ml for liquids, unit for items."""
    if contains_any(name, LIQUID_KEYWORDS):
        return MeasurementUnit.MILLILITRES
    if first_match(name, UNIT_ITEMS) is not None:
        return MeasurementUnit.UNIT
    return MeasurementUnit.GRAMS


def get_unit_weight(name: str) -> float:
    """Return the average weight of one item in grams."""
    weight = first_match(name, UNIT_ITEMS)
    return DEFAULT_UNIT_WEIGHT_G if weight is None else weight


def get_unit_config(unit: MeasurementUnit) -> UnitConfig:
    """Return the quantity picker configuration for a unit."""
    match unit:
        case MeasurementUnit.GRAMS:
            return UnitConfig(
                unit=unit,
                label="grammes",
                label_short="g",
                default_quantity=100,
                step=10,
                min_quantity=5,
                max_quantity=2000,
            )
        case MeasurementUnit.MILLILITRES:
            return UnitConfig(
                unit=unit,
                label="millilitres",
                label_short="ml",
                default_quantity=250,
                step=50,
                min_quantity=10,
                max_quantity=2000,
                equivalent_grams=1,
            )
        case MeasurementUnit.UNIT:
            return UnitConfig(
                unit=unit,
                label="unité(s)",
                label_short="u",
                default_quantity=1,
                step=1,
                min_quantity=0.25,
                max_quantity=20,
                equivalent_grams=150,
            )
        case _:
            assert_never(unit)


def get_common_portions(name: str) -> list[PortionPreset]:
    """Return advisory serving sizes for a product."""
    for patterns, portions in COMMON_PORTIONS:
        if contains_any(name, patterns):
            return list(portions)
    return list(DEFAULT_PORTIONS)


def get_available_units(name: str) -> list[MeasurementUnit]:
    """Return selectable units, detected unit first and grams always offered."""
    detected = detect_product_unit(name)
    if detected is MeasurementUnit.GRAMS:
        return [MeasurementUnit.GRAMS]
    return [detected, MeasurementUnit.GRAMS]


def to_equivalent_grams(name: str, quantity: float, unit: MeasurementUnit) -> float:
    """Convert a logged quantity to grams. Liquids count 1 ml as 1 g."""
    match unit:
        case MeasurementUnit.GRAMS | MeasurementUnit.MILLILITRES:
            return quantity
        case MeasurementUnit.UNIT:
            return quantity * get_unit_weight(name)
        case _:
            assert_never(unit)


def format_quantity(quantity: float, unit: MeasurementUnit) -> str:
    """Format a quantity for display."""
    if unit is MeasurementUnit.UNIT:
        if quantity in _FRACTION_LABELS:
            return _FRACTION_LABELS[quantity]
        if float(quantity).is_integer():
            count = int(quantity)
            return f"{count} {'unités' if count > 1 else 'unité'}"
        return f"{quantity:.1f}"
    if unit is MeasurementUnit.MILLILITRES and quantity >= ML_PER_L:
        return f"{quantity / ML_PER_L:.1f}L"
    if unit is MeasurementUnit.GRAMS and quantity >= GRAMS_PER_KG:
        return f"{quantity / GRAMS_PER_KG:.2f}kg"
    return f"{int(quantity + 0.5)}{unit.value}"


def parse_quantity_input(raw: str) -> float | None:
    """Parse a typed quantity, accepting decimal commas and common fractions."""
    cleaned = raw.strip().replace(",", ".", 1)
    if cleaned in _FRACTION_INPUTS:
        return _FRACTION_INPUTS[cleaned]
    try:
        value = float(cleaned)
    except ValueError:
        return None
    return value if math.isfinite(value) else None
