"""REST API for the pyscout evaluation engine."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException

from pyscout.api.schemas import (
    CurrentSeasonRequest,
    CurrentSeasonResponse,
    EvaluateRequest,
    EvaluateResponse,
    HitterEvaluationResponse,
    RegionTierResponse,
    ScoringSummaryResponse,
    WhipRequest,
    WhipResponse,
)
from pyscout.config import (
    RegionTier,
    ScoringConfig,
    build_region_map,
    get_region_map,
    load_scoring_config,
)
from pyscout.ingest import (
    current_season_document,
    player_to_document,
    players_from_documents,
)
from pyscout.models import PitchingRecord, PlayerRecord
from pyscout.scoring import calculate_whip, convert_innings_pitched, score_batch
from pyscout.scoring.service import ScoringResult
from pyscout.seasons import flatten_current_season


logger = logging.getLogger("uvicorn.error")


def _load_players(documents: List[Dict[str, Any]]) -> List[PlayerRecord]:
    try:
        return players_from_documents(documents)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"invalid player document: {exc}") from exc


def _resolve_regions(payload: Any) -> Dict[str, RegionTier]:
    if payload is None:
        return get_region_map()
    try:
        return build_region_map(payload)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"invalid region map: {exc}") from exc


def _result_to_response(result: ScoringResult, *, current_season_only: bool) -> EvaluateResponse:
    if current_season_only:
        documents = [current_season_document(player) for player in result.players]
    else:
        documents = [player_to_document(player) for player in result.players]
    evaluations = [
        HitterEvaluationResponse.model_validate(asdict(evaluation))
        for evaluation in result.evaluations
    ]
    return EvaluateResponse(
        players=documents,
        evaluations=evaluations,
        summary=ScoringSummaryResponse.model_validate(asdict(result.summary)),
    )


def create_app(config: Optional[ScoringConfig] = None) -> FastAPI:
    app = FastAPI(title="pyscout evaluation")
    app.state.scoring_config = config or load_scoring_config()

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/regions", response_model=list[RegionTierResponse])
    async def regions() -> list[RegionTierResponse]:
        return [
            RegionTierResponse(tier=tier, multiplier=entry.multiplier, strength_level=entry.strength_level)
            for tier, entry in get_region_map().items()
        ]

    @app.post("/evaluate", response_model=EvaluateResponse)
    async def evaluate(request: EvaluateRequest) -> EvaluateResponse:
        players = _load_players(request.players)
        region_map = _resolve_regions(request.regions)
        if request.current_season_only:
            players = [flatten_current_season(player) for player in players]

        try:
            result = score_batch(
                players,
                region_map,
                season=request.season,
                config=app.state.scoring_config,
            )
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        logger.info(
            "Evaluated %s players (%s eligible hitters, %s pitching lines)",
            result.summary.batch_size,
            result.summary.eligible_hitters,
            result.summary.pitching_records,
        )
        return _result_to_response(result, current_season_only=request.current_season_only)

    @app.post("/current-season", response_model=CurrentSeasonResponse)
    async def current_season(request: CurrentSeasonRequest) -> CurrentSeasonResponse:
        players = _load_players(request.players)
        return CurrentSeasonResponse(players=[current_season_document(player) for player in players])

    @app.post("/whip", response_model=WhipResponse)
    async def whip(request: WhipRequest) -> WhipResponse:
        record = PitchingRecord(
            walks_allowed=request.walks_allowed,
            hits_allowed=request.hits_allowed,
            innings_pitched=request.innings_pitched,
        )
        return WhipResponse(
            whip=calculate_whip(record),
            innings=convert_innings_pitched(record.innings_pitched),
        )

    return app


__all__ = ["create_app"]
