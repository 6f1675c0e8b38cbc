"""
core/calorie_policy.py
────────────────────────────────────────────────────────────────────────
Calorie input checks and the daily split.

Validators are advisory: they return a `CalorieValidation` and never
raise, leaving it to the caller to block or merely warn.
"""

from __future__ import annotations

from .models import CalorieRange, CalorieValidation, DailyCalorieSplit
from .suggestion_builder import round_half_up

DAILY_MIN_SAFE = 800
DAILY_MAX_SAFE = 4000

# age brackets: < 30, < 50, 50+
_DAILY_BANDS = {
    "female": ((1800, 2400), (1600, 2200), (1400, 2000)),
    "male": ((2200, 3000), (2000, 2800), (1800, 2400)),
}

# Hard limits and the recommended band are tuned independently;
# do not derive one from the other.
MEAL_LIMITS = {
    "breakfast": (250, 600),
    "lunch": (400, 800),
    "dinner": (400, 800),
    "snack": (50, 300),
}
MEAL_RECOMMENDED = {
    "breakfast": (300, 500),
    "lunch": (500, 700),
    "dinner": (500, 700),
    "snack": (100, 200),
}

DAILY_SPLIT = {"breakfast": 0.25, "lunch": 0.35, "dinner": 0.30, "snacks": 0.10}


def recommended_daily_range(age: int, gender: str) -> CalorieRange:
    # anything other than "female" uses the male table
    bands = _DAILY_BANDS["female" if gender.strip().lower() == "female" else "male"]
    bracket = 0 if age < 30 else 1 if age < 50 else 2
    lo, hi = bands[bracket]
    return CalorieRange(min=lo, max=hi)


def validate_daily_calories(calories: float, age: int, gender: str) -> CalorieValidation:
    """
    Only extreme totals are rejected.  A total inside the safe window but
    outside the age/gender band is accepted without a message; the band is
    returned for display.
    """
    band = recommended_daily_range(age, gender)

    if calories < DAILY_MIN_SAFE:
        return CalorieValidation(
            is_valid=False,
            message=(
                "Daily calorie intake too low - this may be unsafe. "
                f"Please enter at least {DAILY_MIN_SAFE} calories."
            ),
            suggested_range=band,
        )
    if calories > DAILY_MAX_SAFE:
        return CalorieValidation(
            is_valid=False,
            message=(
                "Daily calorie intake very high - please consult a nutritionist "
                "for such high calorie needs."
            ),
            suggested_range=band,
        )
    return CalorieValidation(is_valid=True, suggested_range=band)


def validate_meal_calories(calories: float, slot: str) -> CalorieValidation:
    try:
        lo, hi = MEAL_LIMITS[slot]
    except KeyError:
        raise ValueError(f"unknown meal slot: {slot!r}") from None
    rec_lo, rec_hi = MEAL_RECOMMENDED[slot]
    recommended = CalorieRange(min=rec_lo, max=rec_hi)

    if calories < lo:
        return CalorieValidation(
            is_valid=False,
            message=f"Too low for {slot}. Minimum {lo} calories recommended.",
            suggested_range=recommended,
        )
    if calories > hi:
        return CalorieValidation(
            is_valid=False,
            message=f"Too high for {slot}. Maximum {hi} calories recommended.",
            suggested_range=recommended,
        )
    return CalorieValidation(is_valid=True, suggested_range=recommended)


def distribute_daily_calories(total: float) -> DailyCalorieSplit:
    # parts are rounded independently and may miss `total` by a few kcal
    return DailyCalorieSplit(
        **{slot: round_half_up(total * share) for slot, share in DAILY_SPLIT.items()}
    )
