"""
core/catalog.py
────────────────────────────────────────────────────────────────────────
Static meal catalog.

`MealCatalog` is an immutable snapshot of `MealTemplate` records.  The
filter pipeline and the scorer work on its pandas view (`frame()`), one
row per template in catalog order; the `position` column is the
tiebreak when scores are equal.
"""

from __future__ import annotations

import json
import logging
from functools import cached_property, lru_cache
from pathlib import Path
from typing import Dict, Iterable, Iterator, List

import pandas as pd
from pydantic import TypeAdapter

from .models import MealTemplate

_LOG = logging.getLogger(__name__)

_TEMPLATES = TypeAdapter(List[MealTemplate])

FRAME_COLUMNS = [
    "position", "id", "slot", "cuisine", "diet_type", "base_calories",
    "glycemic_index", "health_tags", "allergens",
    "carbs", "protein", "fat", "fiber", "scalable",
]


class MealCatalog:
    def __init__(self, templates: Iterable[MealTemplate]) -> None:
        self._templates: tuple[MealTemplate, ...] = tuple(templates)
        self._by_id: Dict[str, MealTemplate] = {}
        for t in self._templates:
            if t.id in self._by_id:
                raise ValueError(f"duplicate template id in catalog: {t.id!r}")
            self._by_id[t.id] = t

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[MealTemplate]:
        return iter(self._templates)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._by_id

    def get(self, template_id: str) -> MealTemplate:
        try:
            return self._by_id[template_id]
        except KeyError:
            raise KeyError(f"unknown template id: {template_id!r}") from None

    def ids(self) -> list[str]:
        return [t.id for t in self._templates]

    def templates(self, ids: Iterable[str]) -> list[MealTemplate]:
        return [self._by_id[i] for i in ids]

    def frame(self) -> pd.DataFrame:
        """Shared read-only view; filter with boolean masks, never assign into it."""
        return self._frame

    @cached_property
    def _frame(self) -> pd.DataFrame:
        return templates_frame(self._templates)


def templates_frame(templates: Iterable[MealTemplate]) -> pd.DataFrame:
    rows = [
        {
            "position": pos,
            "id": t.id,
            "slot": t.slot,
            "cuisine": t.cuisine,
            "diet_type": t.diet_type,
            "base_calories": float(t.base_calories),
            "glycemic_index": t.glycemic_index,
            # tags are matched verbatim, allergens case-insensitively
            "health_tags": frozenset(t.health_tags),
            "allergens": frozenset(a.lower() for a in t.allergens),
            "carbs": float(t.macros.carbs),
            "protein": float(t.macros.protein),
            "fat": float(t.macros.fat),
            "fiber": float(t.macros.fiber),
            "scalable": t.scalable,
        }
        for pos, t in enumerate(templates)
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


# ──────────────────────────── loading ─────────────────────────── #
def load_catalog(path: Path | str) -> MealCatalog:
    path = Path(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path}: catalog JSON must contain a list of meal templates")
    catalog = MealCatalog(_TEMPLATES.validate_python(data))
    _LOG.info("loaded %d meal templates from %s", len(catalog), path)
    return catalog


@lru_cache
def default_catalog() -> MealCatalog:
    from config import settings

    return load_catalog(settings.catalog_path)


# ──────────────────────────── summary ─────────────────────────── #
def summarize(catalog: MealCatalog) -> dict[str, dict[str, int]]:
    """Template counts per slot, cuisine and diet type."""
    df = catalog.frame()
    return {
        col: {str(k): int(v) for k, v in df[col].value_counts().sort_index().items()}
        for col in ("slot", "cuisine", "diet_type")
    }


def has_tag(df: pd.DataFrame, tag: str) -> pd.Series:
    """Boolean mask of rows whose health tags include `tag`."""
    return df["health_tags"].map(lambda tags: tag in tags).astype(bool)
