# api/v1/schemas/calorie.py
from __future__ import annotations

from pydantic import BaseModel

from core.models import Slot


class DailyCaloriesIn(BaseModel):
    calories: float
    age:      int
    gender:   str


class MealCaloriesIn(BaseModel):
    calories: float
    slot:     Slot
