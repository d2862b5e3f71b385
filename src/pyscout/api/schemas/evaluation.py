from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class EvaluateRequest(BaseModel):
    players: List[Dict[str, Any]]
    regions: Dict[str, Dict[str, Any]] | List[Dict[str, Any]] | None = None
    current_season_only: bool = False
    season: str | int | None = None


class DerivedStatsResponse(BaseModel):
    plate_appearances: float
    batting_average: float
    singles: float
    total_bases: float
    slugging: float
    isolated_power: float
    on_base_pct: float
    strikeout_rate: float
    net_stolen_base_rate: float


class HitterEvaluationResponse(BaseModel):
    player_id: str
    season: int | None
    raw_score: float
    multiplier: float
    adjusted_score: float
    final_score: int = Field(..., ge=1, le=100)
    jp_rank: int = Field(..., ge=1)
    derived: DerivedStatsResponse


class ScoringSummaryResponse(BaseModel):
    batch_size: int
    scored_players: int
    eligible_hitters: int
    pitching_records: int
    min_adjusted: float | None
    max_adjusted: float | None


class EvaluateResponse(BaseModel):
    players: List[Dict[str, Any]]
    evaluations: List[HitterEvaluationResponse]
    summary: ScoringSummaryResponse


class CurrentSeasonRequest(BaseModel):
    players: List[Dict[str, Any]]


class CurrentSeasonResponse(BaseModel):
    players: List[Dict[str, Any]]
