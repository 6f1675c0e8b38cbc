"""Re-export the engine's data model for easy imports."""

from .meal import SLOTS, DietType, GlycemicIndex, Macros, MealTemplate, Slot
from .member import ALL_CUISINES, HealthCondition, MemberProfile
from .suggestion import (
    PLAN_SLOTS,
    CalorieRange,
    CalorieValidation,
    DailyCalorieSplit,
    DayPlan,
    PlanSlot,
    ScaledMacros,
    Suggestion,
)

__all__ = [
    "SLOTS",
    "ALL_CUISINES",
    "PLAN_SLOTS",
    "Slot",
    "PlanSlot",
    "DietType",
    "GlycemicIndex",
    "Macros",
    "MealTemplate",
    "HealthCondition",
    "MemberProfile",
    "ScaledMacros",
    "Suggestion",
    "CalorieRange",
    "CalorieValidation",
    "DailyCalorieSplit",
    "DayPlan",
]
