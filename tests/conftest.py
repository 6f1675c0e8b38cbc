"""Shared builders for small, hand-made catalogs."""
from __future__ import annotations

import itertools
from typing import Any

import pytest

from core.catalog import MealCatalog
from core.models import HealthCondition, Macros, MealTemplate, MemberProfile


def template(tid: str, **kw: Any) -> MealTemplate:
    carbs, protein, fat, fiber = kw.pop("macros", (60, 20, 15, 8))
    fields: dict[str, Any] = dict(
        id=tid,
        name=f"Meal {tid}",
        slot="lunch",
        cuisine="North Indian",
        diet_type="vegan",
        base_calories=500,
        ingredients=("1 cup rice", "2 rotis", "Salt to taste"),
        macros=Macros(carbs=carbs, protein=protein, fat=fat, fiber=fiber),
        glycemic_index="medium",
        preparation_time=30,
        scalable=True,
    )
    fields.update(kw)
    return MealTemplate(**fields)


def profile(*conditions: str, **kw: Any) -> MemberProfile:
    fields: dict[str, Any] = dict(age=35, gender="female")
    fields.update(kw)
    fields["health_conditions"] = tuple(HealthCondition(name=c) for c in conditions)
    return MemberProfile(**fields)


@pytest.fixture
def make_template():
    return template


@pytest.fixture
def make_profile():
    return profile


@pytest.fixture
def counting_ids():
    """Deterministic id generator: <template id>_<n>_test."""
    counter = itertools.count()
    return lambda tid: f"{tid}_{next(counter)}_test"


@pytest.fixture
def lunch_catalog() -> MealCatalog:
    return MealCatalog([
        template("a", glycemic_index="low", health_tags=frozenset({"low-sodium"})),
        template("b", diet_type="vegetarian", cuisine="South Indian",
                 allergens=frozenset({"Dairy"})),
        template("c", diet_type="non-vegetarian", glycemic_index="high",
                 allergens=frozenset({"fish"})),
        template("d", slot="breakfast", base_calories=300),
        template("e", diet_type="vegetarian", cuisine="West Indian",
                 health_tags=frozenset({"easy-digest"})),
        template("f", cuisine="East Indian", health_tags=frozenset({"light"})),
    ])
