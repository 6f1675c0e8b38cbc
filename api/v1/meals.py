# api/v1/meals.py
from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException, status

from core.catalog import summarize
from core.meal_engine import MealEngine
from core.models import MealTemplate
from services.engine import get_engine
from api.v1.schemas import CatalogSummary

router = APIRouter()


@router.get(
    "",
    response_model=CatalogSummary,
    status_code=status.HTTP_200_OK,
    summary="Template counts per slot, cuisine and diet type",
)
def catalog_summary(engine: MealEngine = Depends(get_engine)) -> CatalogSummary:
    return CatalogSummary(total=len(engine.catalog), **summarize(engine.catalog))


@router.get(
    "/{template_id}",
    response_model=MealTemplate,
    status_code=status.HTTP_200_OK,
    summary="Fetch one catalog template",
)
def get_template(
    template_id: str,
    engine: MealEngine = Depends(get_engine),
) -> MealTemplate:
    """
    Accepts a suggestion id as well; everything after the first ``_`` is
    ignored.
    """
    try:
        return engine.catalog.get(template_id.split("_", 1)[0])
    except KeyError:
        raise HTTPException(status_code=404, detail="Meal template not found")
