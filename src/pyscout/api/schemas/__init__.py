"""Pydantic models for API I/O."""

from .evaluation import (
    CurrentSeasonRequest,
    CurrentSeasonResponse,
    DerivedStatsResponse,
    EvaluateRequest,
    EvaluateResponse,
    HitterEvaluationResponse,
    ScoringSummaryResponse,
)
from .pitching import WhipRequest, WhipResponse
from .regions import RegionTierResponse

__all__ = [
    "CurrentSeasonRequest",
    "CurrentSeasonResponse",
    "DerivedStatsResponse",
    "EvaluateRequest",
    "EvaluateResponse",
    "HitterEvaluationResponse",
    "RegionTierResponse",
    "ScoringSummaryResponse",
    "WhipRequest",
    "WhipResponse",
]
