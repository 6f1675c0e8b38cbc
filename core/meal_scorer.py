"""
core/meal_scorer.py
────────────────────────────────────────────────────────────────────────
Deterministic suitability score for filtered candidates.

    score = 100
          + 2 · max(0, 100 − |base_kcal − target| / target · 100)
          + 30  anemia        & "iron-rich"
          + 30  diabetes      & low glycemic index
          + 30  hypertension  & "low-sodium"
          + 25  heart-related & "heart-healthy"
          + 20  balanced macros (share of carbs+protein+fat)
          + 15  fiber ≥ 6 g

Higher score = better match.  Ties keep catalog order.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

import numpy as np
import pandas as pd

from .catalog import has_tag, templates_frame
from .models import MealTemplate, MemberProfile

_LOG = logging.getLogger(__name__)

BASE_SCORE = 100.0
CALORIE_WEIGHT = 2.0
FIBER_MIN_G = 6.0

# (carbs, protein, fat) share of the macro sum, percent, inclusive
BALANCED_PCT = {"carbs": (40, 70), "protein": (10, 35), "fat": (15, 40)}


def calculate_meal_scores(
    df: pd.DataFrame, calorie_target: float, profile: MemberProfile
) -> pd.DataFrame:
    """Return `df` with an added ``score`` column."""
    if calorie_target <= 0:
        raise ValueError(f"calorie target must be positive, got {calorie_target}")

    base = df["base_calories"].to_numpy(dtype=float)
    proximity = np.maximum(0.0, 100 - np.abs(base - calorie_target) / calorie_target * 100)
    score = BASE_SCORE + proximity * CALORIE_WEIGHT

    # condition bonuses stack independently
    if profile.has_anemia:
        score = score + np.where(has_tag(df, "iron-rich"), 30, 0)
    if profile.has_diabetes:
        score = score + np.where(df["glycemic_index"] == "low", 30, 0)
    if profile.has_hypertension:
        score = score + np.where(has_tag(df, "low-sodium"), 30, 0)
    if profile.has_heart_condition:
        score = score + np.where(has_tag(df, "heart-healthy"), 25, 0)

    score = score + np.where(_balanced(df), 20, 0)
    score = score + np.where(df["fiber"].to_numpy(dtype=float) >= FIBER_MIN_G, 15, 0)

    return df.assign(score=score)


def rank_frame(
    df: pd.DataFrame, calorie_target: float, profile: MemberProfile, count: int
) -> pd.DataFrame:
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    scored = calculate_meal_scores(df, calorie_target, profile)
    ranked = scored.sort_values(["score", "position"], ascending=[False, True])
    if _LOG.isEnabledFor(logging.DEBUG) and not ranked.empty:
        _LOG.debug("top scores: %s", ranked[["id", "score"]].head(count).values.tolist())
    return ranked.head(count)


def rank_meals(
    candidates: Iterable[MealTemplate],
    calorie_target: float,
    profile: MemberProfile,
    count: int,
) -> List[MealTemplate]:
    """Top `count` candidates, best first; input order breaks ties."""
    candidates = list(candidates)
    top = rank_frame(templates_frame(candidates), calorie_target, profile, count)
    return [candidates[pos] for pos in top["position"]]


def score_meal(template: MealTemplate, calorie_target: float, profile: MemberProfile) -> float:
    scored = calculate_meal_scores(templates_frame([template]), calorie_target, profile)
    return float(scored["score"].iloc[0])


def _balanced(df: pd.DataFrame) -> np.ndarray:
    macros = df[["carbs", "protein", "fat"]].to_numpy(dtype=float)
    total = macros.sum(axis=1, keepdims=True)
    # fiber stays out of the denominator; a zero sum is never balanced
    with np.errstate(divide="ignore", invalid="ignore"):
        pct = macros / total * 100

    ok = np.ones(len(df), dtype=bool)
    for i, key in enumerate(("carbs", "protein", "fat")):
        lo, hi = BALANCED_PCT[key]
        ok &= (pct[:, i] >= lo) & (pct[:, i] <= hi)
    return ok
