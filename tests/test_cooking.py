"""Tests for cooking state detection and conversion."""

import pytest

from nutrition_coach.domain.foods import CookingState, NormalizedNutrition
from nutrition_coach.engine.cooking import (
    COOKING_CONVERSIONS,
    adjust_for_cooking,
    convert_weight,
    cooking_state_label,
    detect_cooking_state,
    get_cooked_portions,
    get_cooking_conversion,
    get_cooking_info_message,
    requires_cooking_consideration,
)

RAW = CookingState.RAW
COOKED = CookingState.COOKED


@pytest.mark.parametrize(
    ("name", "state"),
    [
        ("Riz basmati cru", RAW),
        ("Poulet grillé", COOKED),
        ("POULET GRILLE", COOKED),
        ("Riz cuit", COOKED),
        ("Pâtes complètes cuites", COOKED),
        ("Lentilles vertes", RAW),
        ("Haricots rouges", RAW),
        ("Yaourt nature", COOKED),
        ("Légumes vapeur", COOKED),
    ],
)
def test_detect_cooking_state(name: str, state: CookingState) -> None:
    assert detect_cooking_state(name) is state


def test_cooked_keywords_win_over_raw_keywords() -> None:
    # "sec" is a raw keyword, "rôti" a cooked one.
    assert detect_cooking_state("Jambon sec rôti") is COOKED


def test_conversion_lookup_is_first_match() -> None:
    rule = get_cooking_conversion("Riz basmati")
    assert rule is not None
    assert rule.water_absorption == 2.5
    assert rule.calorie_ratio == 0.4


def test_conversion_lookup_ignores_accents() -> None:
    assert get_cooking_conversion("pates") == get_cooking_conversion("Pâtes")
    assert get_cooking_conversion("Pâtes") is not None


def test_conversion_matches_spaced_and_joined_keys() -> None:
    spaced = get_cooking_conversion("Pomme de terre")
    joined = get_cooking_conversion("pommedeterre")
    assert spaced is not None
    assert spaced == joined
    assert spaced.calorie_ratio == 1.0


def test_unknown_food_has_no_conversion() -> None:
    assert get_cooking_conversion("Saumon fumé") is None
    assert not requires_cooking_consideration("Saumon fumé")
    assert requires_cooking_consideration("Quinoa")


def test_adjust_raw_to_cooked_scales_all_values() -> None:
    result = adjust_for_cooking("Riz", 350, 7, 78, 0.6, RAW, COOKED)

    assert result.calories == pytest.approx(140)
    assert result.proteins == pytest.approx(2.8)
    assert result.carbs == pytest.approx(31.2)
    assert result.fats == pytest.approx(0.24)


def test_adjust_same_state_is_identity() -> None:
    result = adjust_for_cooking("Riz", 350, 7, 78, 0.6, COOKED, COOKED)
    assert result == NormalizedNutrition(350, 7, 78, 0.6)


def test_adjust_unknown_food_passes_through() -> None:
    result = adjust_for_cooking("Tofu", 120, 12, 2, 7, RAW, COOKED)
    assert result == NormalizedNutrition(120, 12, 2, 7)


@pytest.mark.parametrize("key", [key for key, _ in COOKING_CONVERSIONS])
def test_adjust_round_trip_restores_values(key: str) -> None:
    name = key.replace("_", " ")
    cooked = adjust_for_cooking(name, 350, 12, 70, 1.5, RAW, COOKED)
    back = adjust_for_cooking(
        name, cooked.calories, cooked.proteins, cooked.carbs, cooked.fats, COOKED, RAW
    )

    assert back.calories == pytest.approx(350)
    assert back.proteins == pytest.approx(12)
    assert back.carbs == pytest.approx(70)
    assert back.fats == pytest.approx(1.5)


def test_convert_weight() -> None:
    assert convert_weight("Riz", 100, RAW, COOKED) == pytest.approx(250)
    assert convert_weight("Riz", 250, COOKED, RAW) == pytest.approx(100)
    assert convert_weight("Tofu", 100, RAW, COOKED) == 100


def test_cooking_info_message() -> None:
    assert (
        get_cooking_info_message("Riz long", RAW)
        == "💡 100g cru → ~250g cuit (40 kcal/100g cuit)"
    )
    assert get_cooking_info_message("Quinoa", COOKED) == "💡 100g cuit ≈ 33g cru"
    assert get_cooking_info_message("Tofu", RAW) is None


def test_cooked_portions() -> None:
    portions = get_cooked_portions("Riz complet")
    assert [portion.cooked_grams for portion in portions] == [150, 200, 250]
    assert portions[0].raw_grams == 60
    assert get_cooked_portions("Yaourt") == []


def test_cooking_state_labels() -> None:
    assert cooking_state_label(RAW) == "Cru"
    assert cooking_state_label(COOKED) == "Cuit"
