# api/v1/suggestions.py
from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException, status

from core.calorie_policy import validate_meal_calories
from core.meal_engine import MealEngine
from services.engine import get_engine
from api.v1.schemas import MoreSuggestionsRequest, SuggestionRequest, SuggestionResponse

router = APIRouter()


def _check_meal_calories(body: SuggestionRequest) -> None:
    if not body.validate_meal:
        return
    v = validate_meal_calories(body.calorie_target, body.slot)
    if not v.is_valid:
        raise HTTPException(
            422,
            detail={"message": v.message, "suggested_range": v.suggested_range.model_dump()},
        )


@router.post("", response_model=SuggestionResponse, status_code=status.HTTP_200_OK)
def suggest(
    body: SuggestionRequest,
    engine: MealEngine = Depends(get_engine),
) -> SuggestionResponse:
    """
    Ranked, calorie-scaled suggestions for one slot.  An empty list means
    nothing in the catalog satisfies the member's constraints.
    """
    _check_meal_calories(body)
    suggestions = engine.generate_suggestions(
        body.calorie_target, body.slot, body.profile, body.excluded_ids, body.count
    )
    return SuggestionResponse(suggestions=suggestions, excluded_ids=body.excluded_ids)


@router.post("/more", response_model=SuggestionResponse, status_code=status.HTTP_200_OK)
def suggest_more(
    body: MoreSuggestionsRequest,
    engine: MealEngine = Depends(get_engine),
) -> SuggestionResponse:
    _check_meal_calories(body)
    suggestions, excluded = engine.generate_more(
        body.calorie_target,
        body.slot,
        body.profile,
        body.shown_ids,
        body.excluded_ids,
        body.count,
    )
    return SuggestionResponse(suggestions=suggestions, excluded_ids=excluded)
