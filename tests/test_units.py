"""Tests for unit detection and quantity helpers."""

import pytest

from nutrition_coach.domain.foods import MeasurementUnit
from nutrition_coach.engine.units import (
    detect_product_unit,
    format_quantity,
    get_available_units,
    get_common_portions,
    get_unit_config,
    get_unit_weight,
    parse_quantity_input,
    to_equivalent_grams,
)

G = MeasurementUnit.GRAMS
ML = MeasurementUnit.MILLILITRES
UNIT = MeasurementUnit.UNIT


@pytest.mark.parametrize(
    ("name", "unit"),
    [
        ("Jus d'orange", ML),
        ("Lait demi-écrémé", ML),
        ("Soupe de légumes", ML),
        ("Banane", UNIT),
        ("Œuf", UNIT),
        ("Croissant au beurre", UNIT),
        ("Poulet", G),
        ("Riz basmati", G),
    ],
)
def test_detect_product_unit(name: str, unit: MeasurementUnit) -> None:
    assert detect_product_unit(name) is unit


def test_unit_weight_uses_first_matching_item() -> None:
    assert get_unit_weight("Banane bio") == 120
    assert get_unit_weight("Œuf de caille") == 12
    assert get_unit_weight("Œuf plein air") == 60
    assert get_unit_weight("Tofu") == 100


def test_unit_configs() -> None:
    grams = get_unit_config(G)
    assert (grams.default_quantity, grams.step, grams.equivalent_grams) == (
        100,
        10,
        None,
    )
    millilitres = get_unit_config(ML)
    assert (millilitres.default_quantity, millilitres.step) == (250, 50)
    assert millilitres.equivalent_grams == 1
    items = get_unit_config(UNIT)
    assert (items.default_quantity, items.step, items.equivalent_grams) == (1, 1, 150)


def test_common_portions() -> None:
    assert [p.grams for p in get_common_portions("Banane")] == [90, 120, 150]
    assert [p.grams for p in get_common_portions("Tofu")] == [50, 100, 150]
    assert get_common_portions("Oeufs frais")[0].label == "1 œuf moyen"


def test_available_units_always_offer_grams() -> None:
    assert get_available_units("Lait") == [ML, G]
    assert get_available_units("Banane") == [UNIT, G]
    assert get_available_units("Tofu") == [G]


def test_to_equivalent_grams() -> None:
    assert to_equivalent_grams("Banane", 2, UNIT) == 240
    assert to_equivalent_grams("Lait", 250, ML) == 250
    assert to_equivalent_grams("Riz", 80, G) == 80


@pytest.mark.parametrize(
    ("quantity", "unit", "expected"),
    [
        (0.5, UNIT, "½"),
        (1.5, UNIT, "1½"),
        (1, UNIT, "1 unité"),
        (3, UNIT, "3 unités"),
        (2.3, UNIT, "2.3"),
        (1500, ML, "1.5L"),
        (250, ML, "250ml"),
        (1250, G, "1.25kg"),
        (99.6, G, "100g"),
    ],
)
def test_format_quantity(quantity: float, unit: MeasurementUnit, expected: str) -> None:
    assert format_quantity(quantity, unit) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1,5", 1.5),
        (" 200 ", 200.0),
        ("½", 0.5),
        ("3/4", 0.75),
        ("1 1/2", 1.5),
        ("beaucoup", None),
        ("nan", None),
    ],
)
def test_parse_quantity_input(raw: str, expected: float | None) -> None:
    assert parse_quantity_input(raw) == expected
