"""
Meal recommendation core.

Module-level shortcuts run against the bundled (or configured) catalog;
build a `MealEngine` directly to use another catalog or a deterministic
id generator.
"""

from __future__ import annotations

from typing import Iterable, List

from .calorie_policy import (
    distribute_daily_calories,
    validate_daily_calories,
    validate_meal_calories,
)
from .catalog import MealCatalog, default_catalog, load_catalog
from .meal_engine import DEFAULT_COUNT, CalorieValidationError, MealEngine
from .models import MemberProfile, Suggestion


def generate_suggestions(
    calorie_target: float,
    slot: str,
    profile: MemberProfile,
    excluded_ids: Iterable[str] = (),
    count: int = DEFAULT_COUNT,
) -> List[Suggestion]:
    return MealEngine(default_catalog()).generate_suggestions(
        calorie_target, slot, profile, excluded_ids, count
    )


__all__ = [
    "MealCatalog",
    "MealEngine",
    "CalorieValidationError",
    "default_catalog",
    "load_catalog",
    "generate_suggestions",
    "distribute_daily_calories",
    "validate_daily_calories",
    "validate_meal_calories",
]
