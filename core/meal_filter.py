"""
core/meal_filter.py
────────────────────────────────────────────────────────────────────────
Hard-constraint filter pipeline.

Steps run strictly in this order and each one only narrows the pool:

1. meal slot
2. diet type          (vegan ⊂ vegetarian ⊂ non-vegetarian)
3. cuisine region     ("north-indian" → cuisine text containing "north")
4. allergens          (case-insensitive)
5. health conditions  (diabetes → hypertension → digestive)
6. exclusion list     (template ids already shown to the member)

An empty pool is returned as-is; constraints are never relaxed.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List

import pandas as pd

from .catalog import MealCatalog, has_tag
from .models import ALL_CUISINES, MealTemplate, MemberProfile

_LOG = logging.getLogger(__name__)

_DIET_ALLOWED = {
    "vegan": {"vegan"},
    "vegetarian": {"vegan", "vegetarian"},
}


def filter_meals(
    catalog: MealCatalog,
    slot: str,
    profile: MemberProfile,
    excluded_ids: Iterable[str] = (),
) -> List[MealTemplate]:
    df = filter_frame(catalog.frame(), slot, profile, excluded_ids)
    return catalog.templates(df["id"])


def filter_frame(
    df: pd.DataFrame,
    slot: str,
    profile: MemberProfile,
    excluded_ids: Iterable[str] = (),
) -> pd.DataFrame:
    df = df[df["slot"] == slot]
    _log_step("slot", df)

    df = _by_diet(df, profile.dietary_preference)
    df = _by_cuisine(df, profile.cuisine_preference)
    df = _without_allergens(df, profile.allergies)

    if profile.health_conditions:
        for flag, rule in _CONDITION_RULES:
            if getattr(profile, flag):
                df = rule(df)
                _log_step(rule.__name__.lstrip("_"), df)

    excluded = set(excluded_ids)
    if excluded:
        df = df[~df["id"].isin(excluded)]
        _log_step("exclusions", df)

    return df


# ──────────────────────────── profile filters ─────────────────── #
def _by_diet(df: pd.DataFrame, preference: str | None) -> pd.DataFrame:
    allowed = _DIET_ALLOWED.get(preference or "")
    if allowed is None:
        return df   # non-vegetarian (or unset) may eat anything
    df = df[df["diet_type"].isin(allowed)]
    _log_step("diet", df)
    return df


def _by_cuisine(df: pd.DataFrame, preference: str | None) -> pd.DataFrame:
    if not preference or preference == ALL_CUISINES:
        return df
    region = preference.lower().replace("-indian", "", 1)
    mask = df["cuisine"].str.lower().str.contains(region, regex=False).astype(bool)
    df = df[mask]
    _log_step("cuisine", df)
    return df


def _without_allergens(df: pd.DataFrame, allergies: frozenset[str]) -> pd.DataFrame:
    if not allergies:
        return df
    df = df[df["allergens"].map(allergies.isdisjoint).astype(bool)]
    _log_step("allergens", df)
    return df


# ──────────────────────────── condition rules ─────────────────── #
# Diabetes and hypertension are pool-relative: the pool is inspected
# first and only restricted when at least one candidate qualifies.
def _prefer_low_glycemic(df: pd.DataFrame) -> pd.DataFrame:
    low = df["glycemic_index"] == "low"
    return df[low] if low.any() else df


def _prefer_low_sodium(df: pd.DataFrame) -> pd.DataFrame:
    low = has_tag(df, "low-sodium")
    return df[low] if low.any() else df


def _require_easy_digest(df: pd.DataFrame) -> pd.DataFrame:
    return df[has_tag(df, "easy-digest") | has_tag(df, "light")]


_CONDITION_RULES: tuple[tuple[str, Callable[[pd.DataFrame], pd.DataFrame]], ...] = (
    ("has_diabetes", _prefer_low_glycemic),
    ("has_hypertension", _prefer_low_sodium),
    ("has_digestive_issue", _require_easy_digest),
)


# ──────────────────────────── helpers ─────────────────────────── #
def _log_step(step: str, df: pd.DataFrame) -> None:
    _LOG.debug("filter %-22s → %d candidates", step, len(df))
