"""
services/engine.py
────────────────────────────────────────────────────────────────────────
FastAPI dependency that hands routers a shared `MealEngine`.

The engine is stateless apart from the immutable catalog, so one
instance serves every request.  Tests override `get_engine` through
``app.dependency_overrides``.
"""
from __future__ import annotations

from functools import lru_cache

from core.catalog import default_catalog
from core.meal_engine import MealEngine


@lru_cache
def _engine() -> MealEngine:
    return MealEngine(default_catalog())


def get_engine() -> MealEngine:
    return _engine()
