from __future__ import annotations
from typing import Dict

from pydantic import BaseModel


class CatalogSummary(BaseModel):
    total:     int
    slot:      Dict[str, int]
    cuisine:   Dict[str, int]
    diet_type: Dict[str, int]
