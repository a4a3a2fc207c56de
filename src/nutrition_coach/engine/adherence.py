"""Adherence credit over a trailing seven-day window.

Each day is classified by consumption against the calorie target:

    green:  90% to 110% inclusive
    orange: 80% to 90%, or above 110% up to 120%
    red:    anything else, and any day with nothing logged

A green day with data counts toward the credit only if the user ate at
least half of the target. Ready means enough credited days in the window.
"""

from datetime import date, timedelta

from nutrition_coach.domain.adherence import (
    AdherenceReport,
    CreditMessage,
    CreditTier,
    DailyMeals,
    DailyRecord,
    MealSlot,
    Zone,
)

WINDOW_DAYS = 7
DEFAULT_CREDIT_REQUIRED = 5
MIN_CREDITED_PERCENTAGE = 50

GREEN_LOW, GREEN_HIGH = 90, 110
ORANGE_LOW, ORANGE_HIGH = 80, 120

# Indexed by date.weekday(), Monday first.
DAY_LABELS = ("L", "M", "M", "J", "V", "S", "D")

CREDIT_TITLE = "Crédit Plaisir"


def classify_day_zone(percentage: float) -> Zone:
    """Return the zone for a consumption percentage."""
    if GREEN_LOW <= percentage <= GREEN_HIGH:
        return Zone.GREEN
    if ORANGE_LOW <= percentage < GREEN_LOW or GREEN_HIGH < percentage <= ORANGE_HIGH:
        return Zone.ORANGE
    return Zone.RED


def consumed_calories(meals: DailyMeals | None) -> float:
    """Return calories eaten on a day, preferring the precomputed total."""
    if meals is None:
        return 0
    if meals.total_calories:
        return meals.total_calories
    return sum(
        meals.slots[slot].calories for slot in MealSlot if slot in meals.slots
    )


def score_day(day: date, meals: DailyMeals | None, target: float) -> DailyRecord:
    """Score one day against the calorie target."""
    has_data = meals is not None and bool(meals.slots)
    consumed = consumed_calories(meals)
    # Multiply before dividing: 2200 / 2000 * 100 is 110.00000000000001.
    percentage = consumed * 100 / target if target > 0 else 0
    return DailyRecord(
        day=day,
        has_data=has_data,
        consumed_calories=consumed,
        percentage=percentage,
        zone=classify_day_zone(percentage) if has_data else Zone.RED,
        day_label=DAY_LABELS[day.weekday()],
    )


def is_credited(record: DailyRecord) -> bool:
    """Return whether a day earns credit."""
    return (
        record.has_data
        and record.zone is Zone.GREEN
        and record.percentage >= MIN_CREDITED_PERCENTAGE
    )


def calculate_adherence_credit(
    meals: dict[date, DailyMeals],
    target: float,
    today: date,
    credit_required: int = DEFAULT_CREDIT_REQUIRED,
) -> AdherenceReport:
    """Score the seven days ending on today, oldest first."""
    days = [today - timedelta(days=offset) for offset in reversed(range(WINDOW_DAYS))]
    history = [score_day(day, meals.get(day), target) for day in days]
    credit = sum(1 for record in history if is_credited(record))
    return AdherenceReport(
        current_credit=credit,
        credit_required=credit_required,
        weekly_history=history,
        is_ready=credit >= credit_required,
        percentage_filled=(
            min(100, credit / credit_required * 100) if credit_required > 0 else 100
        ),
    )


def credit_tier(current_credit: int, credit_required: int) -> CreditTier:
    """Return the presentation tier for a credit count."""
    if current_credit >= credit_required:
        return CreditTier.READY
    if current_credit >= credit_required - 1:
        return CreditTier.ALMOST
    return CreditTier.BUILDING


def get_credit_message(report: AdherenceReport) -> CreditMessage:
    """Return the widget copy for a credit report."""
    credit = report.current_credit
    required = report.credit_required
    remaining = required - credit
    tier = credit_tier(credit, required)
    badge = f"{credit}/{required}"
    if tier is CreditTier.READY:
        return CreditMessage(
            tier=tier,
            title=CREDIT_TITLE,
            subtitle="Tu as gagné !",
            message=(
                "Bravo ! Tu as été régulier(e) cette semaine. "
                "Profite sans culpabilité !"
            ),
            badge_text="Prêt !",
        )
    if tier is CreditTier.ALMOST:
        plural = "s" if remaining > 1 else ""
        return CreditMessage(
            tier=tier,
            title=CREDIT_TITLE,
            subtitle="Régularité > Perfection",
            message=(
                f"Tu y es presque ! Plus que {remaining} jour{plural} "
                "et tu mérites ton plaisir."
            ),
            badge_text=badge,
        )
    return CreditMessage(
        tier=tier,
        title=CREDIT_TITLE,
        subtitle="On ne juge pas un jour, mais ta moyenne",
        message=f"Continue comme ça ! Encore {remaining} jours dans la zone verte.",
        badge_text=badge,
    )
