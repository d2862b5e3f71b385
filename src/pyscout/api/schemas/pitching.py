from __future__ import annotations

from pydantic import BaseModel, Field


class WhipRequest(BaseModel):
    walks_allowed: float = Field(default=0.0, ge=0.0)
    hits_allowed: float = Field(default=0.0, ge=0.0)
    innings_pitched: float = Field(default=0.0, ge=0.0)


class WhipResponse(BaseModel):
    whip: float
    innings: float
