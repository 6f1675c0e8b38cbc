"""Re-export individual schema modules for easy imports."""

from .meal import CatalogSummary
from .calorie import DailyCaloriesIn, MealCaloriesIn
from .suggestion import (
    MoreSuggestionsRequest,
    SuggestionRequest,
    SuggestionResponse,
)
from .plan import AlternativeRequest, DayPlanRequest, DayPlanResponse

__all__ = [
    "CatalogSummary",
    "DailyCaloriesIn",
    "MealCaloriesIn",
    "SuggestionRequest",
    "MoreSuggestionsRequest",
    "SuggestionResponse",
    "DayPlanRequest",
    "AlternativeRequest",
    "DayPlanResponse",
]
