"""
core/meal_engine.py
────────────────────────────────────────────────────────────────────────
Recommendation engine facade.

Responsibilities
----------------
1.   `generate_suggestions()` – filter → score/rank → build, for one slot.
2.   `generate_more()`        – same, excluding what the member was just shown.
3.   `generate_day_plan()`    – validate a daily total, split it and pick one
                                meal per slot.
4.   `generate_alternative()` – swap a single slot of a day plan.

The engine holds only the immutable catalog and an id generator.  Exclusion
lists belong to the caller and must be passed back in on every call.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from .calorie_policy import distribute_daily_calories, validate_daily_calories
from .catalog import MealCatalog
from .meal_filter import filter_frame
from .meal_scorer import rank_frame
from .models import PLAN_SLOTS, CalorieValidation, DayPlan, MemberProfile, Suggestion
from .suggestion_builder import IdGenerator, build_suggestion, round_half_up, template_id_of

_LOG = logging.getLogger(__name__)

DEFAULT_COUNT = 3

Exclusions = Dict[str, List[str]]   # plan slot → template ids


class CalorieValidationError(ValueError):
    """Raised by the day-plan helpers when the daily total is rejected."""

    def __init__(self, validation: CalorieValidation) -> None:
        super().__init__(validation.message)
        self.validation = validation


class MealEngine:
    def __init__(self, catalog: MealCatalog, id_generator: IdGenerator | None = None) -> None:
        self._catalog = catalog
        self._ids = id_generator

    @property
    def catalog(self) -> MealCatalog:
        return self._catalog

    # ─────────────────────────── single slot ─────────────────────── #
    def generate_suggestions(
        self,
        calorie_target: float,
        slot: str,
        profile: MemberProfile,
        excluded_ids: Iterable[str] = (),
        count: int = DEFAULT_COUNT,
    ) -> List[Suggestion]:
        if calorie_target <= 0:
            raise ValueError(f"calorie target must be positive, got {calorie_target}")
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        if count == 0:
            return []

        candidates = filter_frame(self._catalog.frame(), slot, profile, excluded_ids)
        if candidates.empty:
            _LOG.warning("no %s meals left after filtering – returning empty list", slot)
            return []

        top = rank_frame(candidates, calorie_target, profile, count)
        return [
            build_suggestion(t, calorie_target, profile, self._ids)
            for t in self._catalog.templates(top["id"])
        ]

    def generate_more(
        self,
        calorie_target: float,
        slot: str,
        profile: MemberProfile,
        shown: Iterable[Suggestion | str],
        excluded_ids: Sequence[str] = (),
        count: int = DEFAULT_COUNT,
    ) -> Tuple[List[Suggestion], List[str]]:
        """
        Next batch for the same request.

        `shown` holds the suggestions (or their ids) currently on screen;
        their template ids are appended to `excluded_ids`.  Returns the new
        suggestions and the updated exclusion list for the caller to keep.
        """
        updated = list(excluded_ids)
        for s in shown:
            tid = s.template_id if isinstance(s, Suggestion) else template_id_of(s)
            if tid not in updated:
                updated.append(tid)
        return (
            self.generate_suggestions(calorie_target, slot, profile, updated, count),
            updated,
        )

    # ─────────────────────────── full day ────────────────────────── #
    def generate_day_plan(
        self,
        total_calories: float,
        profile: MemberProfile,
        excluded: Mapping[str, Sequence[str]] | None = None,
    ) -> DayPlan:
        validation = validate_daily_calories(total_calories, profile.age, profile.gender)
        if not validation.is_valid:
            raise CalorieValidationError(validation)

        split = distribute_daily_calories(total_calories)
        excluded = excluded or {}
        meals: Dict[str, Suggestion | None] = {}
        for plan_slot, slot in PLAN_SLOTS.items():
            picked = self.generate_suggestions(
                split.for_slot(plan_slot), slot, profile,
                excluded.get(plan_slot, ()), count=1,
            )
            meals[plan_slot] = picked[0] if picked else None

        return DayPlan(total_calories=round_half_up(total_calories), split=split, meals=meals)

    def generate_alternative(
        self,
        plan: DayPlan,
        plan_slot: str,
        profile: MemberProfile,
        excluded: Mapping[str, Sequence[str]] | None = None,
    ) -> Tuple[DayPlan, Exclusions]:
        """
        Replace one meal of `plan`, never offering the current template again.

        When nothing is left to offer, the plan comes back unchanged (the
        exclusion list still records the current meal).
        """
        if plan_slot not in PLAN_SLOTS:
            raise ValueError(f"unknown plan slot: {plan_slot!r}")

        exclusions: Exclusions = {k: list(v) for k, v in (excluded or {}).items()}
        slot_excluded = exclusions.setdefault(plan_slot, [])
        current = plan.meals.get(plan_slot)
        if current is not None and current.template_id not in slot_excluded:
            slot_excluded.append(current.template_id)

        picked = self.generate_suggestions(
            plan.split.for_slot(plan_slot), PLAN_SLOTS[plan_slot], profile,
            slot_excluded, count=1,
        )
        if not picked:
            _LOG.info("no alternative %s left for member %s", plan_slot, profile.member_id)
            return plan, exclusions

        meals = dict(plan.meals)
        meals[plan_slot] = picked[0]
        return plan.model_copy(update={"meals": meals}), exclusions
