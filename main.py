import logging

from fastapi import Depends, FastAPI
from starlette.middleware.cors import CORSMiddleware

from config import settings
from api.v1.router import api_router
from core.meal_engine import MealEngine
from services.engine import get_engine

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Household Meal-Rec API", version="1.0.0")

# CORS (public demo only – lock down in prod)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.get("/health", tags=["meta"])
def health(engine: MealEngine = Depends(get_engine)) -> dict[str, str | int]:
    return {
        "status": "ok",
        "env": settings.env_name,
        "catalog_size": len(engine.catalog),
    }
