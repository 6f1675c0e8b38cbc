"""
core/suggestion_builder.py
────────────────────────────────────────────────────────────────────────
Turn a chosen `MealTemplate` into a `Suggestion`:

* scale calories, macros and ingredient quantities to the calorie target
  (only for scalable templates)
* attach a short health note for the member's declared conditions
* stamp a runtime-unique id  ``<template id>_<epoch ms>_<random suffix>``
"""

from __future__ import annotations

import math
import random
import re
import string
import time
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, List, Protocol

from .models import MealTemplate, MemberProfile, ScaledMacros, Suggestion

GENERIC_NOTE = "Nutritionally balanced meal suitable for general health"
FALLBACK_NOTE = "Balanced meal suitable for your health profile"
NOTE_SEPARATOR = " • "

_NUMBER = re.compile(r"\d+(?:\.\d+)?")
_TENTH = Decimal("0.1")
_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits


# ──────────────────────────── ids ─────────────────────────────── #
class IdGenerator(Protocol):
    def __call__(self, template_id: str) -> str: ...


class TimestampIdGenerator:
    """Default id source; pass a fixed `clock`/`rng` for reproducible ids."""

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        rng: random.Random | None = None,
        suffix_length: int = 9,
    ) -> None:
        self._clock = clock
        self._rng = rng or random.Random()
        self._suffix_length = suffix_length

    def __call__(self, template_id: str) -> str:
        millis = int(self._clock() * 1000)
        suffix = "".join(self._rng.choices(_SUFFIX_ALPHABET, k=self._suffix_length))
        return f"{template_id}_{millis}_{suffix}"


def template_id_of(suggestion_id: str) -> str:
    return suggestion_id.split("_", 1)[0]


# ──────────────────────────── scaling ─────────────────────────── #
def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def scale_factor(template: MealTemplate, calorie_target: float) -> float:
    return calorie_target / template.base_calories if template.scalable else 1.0


def scale_ingredient(line: str, factor: float) -> str:
    """
    Multiply every number in `line` by `factor`, one decimal place.

    Purely textual: units are not understood, so any number in the line
    (not only quantities) is rescaled.
    """
    return _NUMBER.sub(lambda m: _one_decimal(float(m.group()) * factor), line)


def _one_decimal(value: float) -> str:
    # ties go up, judged on the exact binary value
    return str(Decimal(value).quantize(_TENTH, rounding=ROUND_HALF_UP))


def build_suggestion(
    template: MealTemplate,
    calorie_target: float,
    profile: MemberProfile,
    id_generator: IdGenerator | None = None,
) -> Suggestion:
    if calorie_target <= 0:
        raise ValueError(f"calorie target must be positive, got {calorie_target}")
    new_id = id_generator or _DEFAULT_IDS

    factor = scale_factor(template, calorie_target)
    if template.scalable and factor != 1:
        ingredients = tuple(scale_ingredient(i, factor) for i in template.ingredients)
    else:
        ingredients = template.ingredients

    m = template.macros
    return Suggestion(
        id=new_id(template.id),
        name=template.name,
        slot=template.slot,
        cuisine=template.cuisine,
        diet_type=template.diet_type,
        calories=round_half_up(template.base_calories * factor),
        ingredients=ingredients,
        # each rounded on its own; they need not add up to `calories`
        macros=ScaledMacros(
            carbs=round_half_up(m.carbs * factor),
            protein=round_half_up(m.protein * factor),
            fat=round_half_up(m.fat * factor),
            fiber=round_half_up(m.fiber * factor),
        ),
        health_note=health_note(template, profile),
        preparation_time=template.preparation_time,
    )


# ──────────────────────────── health note ─────────────────────── #
def health_note(template: MealTemplate, profile: MemberProfile) -> str:
    if not profile.health_conditions:
        return GENERIC_NOTE

    tags = template.health_tags
    notes: List[str] = []

    if profile.has_diabetes:
        if template.glycemic_index == "low":
            notes.append("Low glycemic index - helps manage blood sugar")
        if "low-sugar" in tags:
            notes.append("Low sugar content")

    if profile.has_hypertension and "low-sodium" in tags:
        notes.append("Low sodium - good for blood pressure management")

    if profile.has_anemia and "iron-rich" in tags:
        notes.append("Rich in iron - helps with anemia")

    if profile.has_heart_or_cholesterol:
        if "heart-healthy" in tags:
            notes.append("Heart-healthy option")
        if "low-fat" in tags:
            notes.append("Low in saturated fats")

    if profile.has_digestive_issue and "easy-digest" in tags:
        notes.append("Easy to digest")

    # condition-independent
    if "high-fiber" in tags:
        notes.append("High fiber content")
    if "high-protein" in tags:
        notes.append("Good protein source")

    return NOTE_SEPARATOR.join(notes) if notes else FALLBACK_NOTE


_DEFAULT_IDS: IdGenerator = TimestampIdGenerator()
