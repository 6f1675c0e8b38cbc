from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Slot = Literal["breakfast", "lunch", "dinner", "snack"]
DietType = Literal["vegetarian", "non-vegetarian", "vegan"]
GlycemicIndex = Literal["low", "medium", "high"]

SLOTS: tuple[str, ...] = ("breakfast", "lunch", "dinner", "snack")


class Macros(BaseModel):
    model_config = ConfigDict(frozen=True)

    carbs: float = Field(..., ge=0)
    protein: float = Field(..., ge=0)
    fat: float = Field(..., ge=0)
    fiber: float = Field(0, ge=0)


class MealTemplate(BaseModel):
    """Catalog entry: a generic meal before personalization and scaling."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    slot: Slot
    cuisine: str
    diet_type: DietType
    base_calories: int = Field(..., gt=0)   # calories at canonical serving
    ingredients: tuple[str, ...] = ()
    macros: Macros
    health_tags: frozenset[str] = frozenset()
    allergens: frozenset[str] = frozenset()
    glycemic_index: GlycemicIndex = "medium"
    preparation_time: int = Field(..., gt=0)  # minutes
    scalable: bool = True

    @field_validator("id")
    @classmethod
    def _id_has_no_separator(cls, v: str) -> str:
        # suggestion ids are "<template id>_<millis>_<suffix>"
        if not v or "_" in v:
            raise ValueError(f"template id must be non-empty and free of '_': {v!r}")
        return v
