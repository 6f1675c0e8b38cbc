from __future__ import annotations

from typing import Dict, Literal

from pydantic import BaseModel, ConfigDict, computed_field

from .meal import DietType, Slot

PlanSlot = Literal["breakfast", "lunch", "dinner", "snacks"]

# day plans say "snacks", the catalog says "snack"
PLAN_SLOTS: dict[str, str] = {
    "breakfast": "breakfast",
    "lunch": "lunch",
    "dinner": "dinner",
    "snacks": "snack",
}


class ScaledMacros(BaseModel):
    model_config = ConfigDict(frozen=True)

    carbs: int
    protein: int
    fat: int
    fiber: int


class Suggestion(BaseModel):
    """A calorie-scaled, personalized instance of a template for one request."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    slot: Slot
    cuisine: str
    diet_type: DietType
    calories: int
    ingredients: tuple[str, ...]
    macros: ScaledMacros
    health_note: str
    preparation_time: int

    @computed_field
    @property
    def template_id(self) -> str:
        return self.id.split("_", 1)[0]


class CalorieRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: int
    max: int


class CalorieValidation(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    message: str | None = None
    suggested_range: CalorieRange


class DailyCalorieSplit(BaseModel):
    model_config = ConfigDict(frozen=True)

    breakfast: int
    lunch: int
    dinner: int
    snacks: int

    def for_slot(self, plan_slot: str) -> int:
        return getattr(self, plan_slot)


class DayPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_calories: int
    split: DailyCalorieSplit
    meals: Dict[PlanSlot, Suggestion | None]
