# api/v1/router.py
from fastapi import APIRouter

from . import calories, meals, plans, suggestions

api_router = APIRouter()

api_router.include_router(suggestions.router, prefix="/suggestions", tags=["Suggestions"])
api_router.include_router(plans.router,       prefix="/plans",       tags=["Plans"])
api_router.include_router(calories.router,    prefix="/calories",    tags=["Calories"])
api_router.include_router(meals.router,       prefix="/meals",       tags=["Catalog"])
