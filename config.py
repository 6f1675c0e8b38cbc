"""
Centralised settings loader.

Every field can be overridden through a ``MEALREC_``-prefixed environment
variable or a local ``.env`` file, e.g. ``MEALREC_CATALOG_PATH``.
"""

from __future__ import annotations
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_BUNDLED_CATALOG = Path(__file__).resolve().parent / "core" / "data" / "meals.json"


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime ─────────────────────────────────────────────────────
    env_name: str = "local"
    log_level: str = "INFO"

    # ─── engine ──────────────────────────────────────────────────────
    catalog_path: Path = _BUNDLED_CATALOG
    default_suggestion_count: int = Field(3, ge=0)

    # unprefixed variables and unknown MEALREC_* keys are ignored
    model_config = SettingsConfigDict(
        env_prefix="MEALREC_",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()


settings: _Settings = _cached()
