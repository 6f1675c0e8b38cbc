# api/v1/plans.py
from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException, status

from core.meal_engine import CalorieValidationError, MealEngine
from services.engine import get_engine
from api.v1.schemas import AlternativeRequest, DayPlanRequest, DayPlanResponse

router = APIRouter()


@router.post("/day", response_model=DayPlanResponse, status_code=status.HTTP_200_OK)
def day_plan(
    body: DayPlanRequest,
    engine: MealEngine = Depends(get_engine),
) -> DayPlanResponse:
    """One meal per slot; a slot with nothing left to offer comes back null."""
    try:
        plan = engine.generate_day_plan(body.total_calories, body.profile, body.excluded)
    except CalorieValidationError as exc:
        raise HTTPException(
            422,
            detail={
                "message": exc.validation.message,
                "suggested_range": exc.validation.suggested_range.model_dump(),
            },
        ) from exc
    return DayPlanResponse(plan=plan, excluded={k: list(v) for k, v in body.excluded.items()})


@router.post("/day/alternative", response_model=DayPlanResponse, status_code=status.HTTP_200_OK)
def alternative(
    body: AlternativeRequest,
    engine: MealEngine = Depends(get_engine),
) -> DayPlanResponse:
    plan, excluded = engine.generate_alternative(
        body.plan, body.plan_slot, body.profile, body.excluded
    )
    return DayPlanResponse(plan=plan, excluded=excluded)
