# api/v1/schemas/suggestion.py
from __future__ import annotations
from typing import List

from pydantic import BaseModel, Field

from config import settings
from core.models import MemberProfile, Slot, Suggestion


class SuggestionRequest(BaseModel):
    calorie_target: float = Field(..., gt=0)
    slot:           Slot
    profile:        MemberProfile
    excluded_ids:   List[str] = []
    count:          int = Field(settings.default_suggestion_count, ge=0)
    # run the per-meal calorie check first, as the single-meal planner does
    validate_meal:  bool = True


class MoreSuggestionsRequest(SuggestionRequest):
    shown_ids:     List[str] = Field(..., description="suggestion ids currently on screen")
    validate_meal: bool = False


class SuggestionResponse(BaseModel):
    suggestions:  List[Suggestion]
    excluded_ids: List[str]
