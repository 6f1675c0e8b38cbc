from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .meal import DietType

Severity = Literal["mild", "moderate", "severe"]

ALL_CUISINES = "all-indian"


class HealthCondition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    severity: Severity = "mild"


class MemberProfile(BaseModel):
    """Household member as supplied by the caller. Never mutated by the engine."""

    model_config = ConfigDict(frozen=True)

    member_id: str | None = None
    name: str | None = None
    age: int
    gender: str
    dietary_preference: DietType | None = None
    cuisine_preference: str | None = None     # "north-indian" … "all-indian"
    health_conditions: tuple[HealthCondition, ...] = ()
    food_allergies: tuple[str, ...] = ()

    # -------------------------------- convenience flags -------------
    @property
    def condition_names(self) -> frozenset[str]:
        return frozenset(c.name.strip().lower() for c in self.health_conditions)

    @property
    def allergies(self) -> frozenset[str]:
        return frozenset(a.strip().lower() for a in self.food_allergies)

    @property
    def has_diabetes(self) -> bool:
        return "diabetes" in self.condition_names

    @property
    def has_hypertension(self) -> bool:
        return _named(self.condition_names, ("hypertension", "high blood pressure"))

    @property
    def has_anemia(self) -> bool:
        return "anemia" in self.condition_names

    @property
    def has_heart_condition(self) -> bool:
        return _mentions(self.condition_names, ("heart",))

    @property
    def has_heart_or_cholesterol(self) -> bool:
        return _mentions(self.condition_names, ("heart", "cholesterol"))

    @property
    def has_digestive_issue(self) -> bool:
        return _named(self.condition_names, ("digestive", "ibs", "acidity"))


def _named(names: frozenset[str], keys: tuple[str, ...]) -> bool:
    return any(k in names for k in keys)


def _mentions(names: frozenset[str], keys: tuple[str, ...]) -> bool:
    return any(any(k in n for k in keys) for n in names)
