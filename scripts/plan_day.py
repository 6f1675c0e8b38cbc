"""
Print a one-day meal plan for a member profile.

Usage
-----

    python -m scripts.plan_day profile.json --calories 1800

`profile.json` holds a single member profile, e.g.

    {"age": 34, "gender": "female", "dietary_preference": "vegetarian",
     "cuisine_preference": "south-indian",
     "health_conditions": [{"name": "diabetes", "severity": "mild"}],
     "food_allergies": ["peanuts"]}
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from core import CalorieValidationError, MealEngine, default_catalog
from core.models import DayPlan, MemberProfile


def _load_profile(path: Path) -> MemberProfile:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("profile JSON must contain a single object")
    return MemberProfile.model_validate(data)


def _render(plan: DayPlan) -> str:
    lines = [f"Daily total: {plan.total_calories} kcal"]
    for plan_slot, meal in plan.meals.items():
        target = plan.split.for_slot(plan_slot)
        if meal is None:
            lines.append(f"\n{plan_slot:<10} ({target} kcal): no matching meal")
            continue
        lines.append(
            f"\n{plan_slot:<10} ({target} kcal): {meal.name} [{meal.cuisine}] "
            f"{meal.calories} kcal, {meal.preparation_time} min"
        )
        lines.extend(f"    - {ing}" for ing in meal.ingredients)
        lines.append(f"    {meal.health_note}")
    return "\n".join(lines)


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("profile", type=Path, help="member profile JSON file")
    parser.add_argument("--calories", type=float, default=2000, help="daily calorie total")
    parser.add_argument("-v", "--verbose", action="store_true", help="log filter steps")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    engine = MealEngine(default_catalog())
    try:
        plan = engine.generate_day_plan(args.calories, _load_profile(args.profile))
    except CalorieValidationError as exc:
        sys.exit(f"✗ {exc}")
    print(_render(plan))


if __name__ == "__main__":
    main()
