"""Domain models for food entries, cooking states and measurement units."""

from dataclasses import dataclass
from enum import Enum


class CookingState(Enum):
    """State in which a food's nutrition values are expressed."""

    RAW = "raw"
    COOKED = "cooked"


class MeasurementUnit(Enum):
    """Unit a quantity is logged in."""

    GRAMS = "g"
    MILLILITRES = "ml"
    UNIT = "unit"


@dataclass(frozen=True)
class FoodConversionRule:
    """Raw to cooked conversion for a food family.

    water_absorption is cooked weight over raw weight; calorie_ratio is
    cooked calories per 100 g over raw calories per 100 g.
    """

    water_absorption: float
    calorie_ratio: float
    description: str


@dataclass(frozen=True)
class NormalizedNutrition:
    """Nutrition values expressed in a requested cooking state."""

    calories: float
    proteins: float
    carbs: float
    fats: float


@dataclass(frozen=True)
class FoodEntry:
    """Raw food log entry as produced by search or barcode lookup."""

    name: str
    quantity: float
    unit: MeasurementUnit = MeasurementUnit.GRAMS
    cooking_state: CookingState | None = None


@dataclass(frozen=True)
class UnitConfig:
    """Quantity picker configuration for a unit."""

    unit: MeasurementUnit
    label: str
    label_short: str
    default_quantity: float
    step: float
    min_quantity: float
    max_quantity: float
    equivalent_grams: float | None = None


@dataclass(frozen=True)
class PortionPreset:
    """Serving-size hint shown next to the quantity picker."""

    label: str
    grams: float
    icon: str | None = None


@dataclass(frozen=True)
class CookedPortion:
    """Serving-size hint with its raw and cooked weights."""

    label: str
    cooked_grams: float
    raw_grams: float
