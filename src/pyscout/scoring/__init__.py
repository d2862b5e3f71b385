"""Hitter scoring, ranking and WHIP."""

from .service import (
    HitterEvaluation,
    ScoringResult,
    ScoringSummary,
    adjust_for_region,
    assign_ranks,
    composite_score,
    is_eligible,
    scale_scores,
    score_batch,
)
from .stats import DatasetStatistics, DerivedStats, dataset_statistics, derive_batting_stats, z_score
from .whip import (
    BATCH_WHIP_FALLBACK,
    RECORD_WHIP_FALLBACK,
    batch_whip,
    calculate_whip,
    convert_innings_pitched,
    refresh_stored_whip,
)

__all__ = [
    "BATCH_WHIP_FALLBACK",
    "RECORD_WHIP_FALLBACK",
    "DatasetStatistics",
    "DerivedStats",
    "HitterEvaluation",
    "ScoringResult",
    "ScoringSummary",
    "adjust_for_region",
    "assign_ranks",
    "batch_whip",
    "calculate_whip",
    "composite_score",
    "convert_innings_pitched",
    "dataset_statistics",
    "derive_batting_stats",
    "is_eligible",
    "refresh_stored_whip",
    "scale_scores",
    "score_batch",
    "z_score",
]
