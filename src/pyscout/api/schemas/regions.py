from __future__ import annotations

from pydantic import BaseModel


class RegionTierResponse(BaseModel):
    tier: str
    multiplier: float
    strength_level: int
