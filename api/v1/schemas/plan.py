# api/v1/schemas/plan.py
from __future__ import annotations
from typing import Dict, List

from pydantic import BaseModel, Field

from core.models import DayPlan, MemberProfile, PlanSlot


class DayPlanRequest(BaseModel):
    total_calories: float
    profile:        MemberProfile
    # per plan slot ("breakfast", "lunch", "dinner", "snacks")
    excluded:       Dict[PlanSlot, List[str]] = Field(default_factory=dict)


class AlternativeRequest(BaseModel):
    plan:      DayPlan
    plan_slot: PlanSlot
    profile:   MemberProfile
    excluded:  Dict[PlanSlot, List[str]] = Field(default_factory=dict)


class DayPlanResponse(BaseModel):
    plan:     DayPlan
    excluded: Dict[str, List[str]]
