# api/v1/calories.py
from __future__ import annotations
from fastapi import APIRouter, Query, status

from core.calorie_policy import (
    distribute_daily_calories,
    validate_daily_calories,
    validate_meal_calories,
)
from core.models import CalorieValidation, DailyCalorieSplit
from api.v1.schemas import DailyCaloriesIn, MealCaloriesIn

router = APIRouter()


@router.post(
    "/daily/validate",
    response_model=CalorieValidation,
    status_code=status.HTTP_200_OK,
    summary="Check a whole-day calorie total",
)
def validate_daily(body: DailyCaloriesIn) -> CalorieValidation:
    return validate_daily_calories(body.calories, body.age, body.gender)


@router.post(
    "/meal/validate",
    response_model=CalorieValidation,
    status_code=status.HTTP_200_OK,
    summary="Check a single-meal calorie target",
)
def validate_meal(body: MealCaloriesIn) -> CalorieValidation:
    return validate_meal_calories(body.calories, body.slot)


@router.get(
    "/distribute",
    response_model=DailyCalorieSplit,
    status_code=status.HTTP_200_OK,
    summary="Split a daily total across breakfast, lunch, dinner and snacks",
)
def distribute(total: float = Query(..., gt=0)) -> DailyCalorieSplit:
    return distribute_daily_calories(total)
