"""Batch scoring pipeline for hitters plus WHIP for pitching lines.

Everything is relative to the batch handed in: the normalization baseline,
the min/max used for rescaling and the rank order all come from the eligible
hitters of this one call. Nothing is cached between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from pyscout.config import DEFAULT_SCORING_CONFIG, RegionMap, ScoringConfig, region_multiplier
from pyscout.models import BattingRecord, PitchingRecord, PlayerRecord, SeasonRecord
from pyscout.scoring.stats import (
    DatasetStatistics,
    DerivedStats,
    clamp,
    dataset_statistics,
    derive_batting_stats,
    z_score,
)
from pyscout.scoring.whip import batch_whip
from pyscout.seasons import require_season_year, season_start_year


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HitterEvaluation:
    """Transient scoring bundle for one eligible (player, season) batting line."""

    player_id: str
    season: Optional[int]
    derived: DerivedStats
    raw_score: float
    multiplier: float
    adjusted_score: float
    final_score: int
    jp_rank: int


@dataclass(frozen=True)
class ScoringSummary:
    batch_size: int
    scored_players: int
    eligible_hitters: int
    pitching_records: int
    min_adjusted: float | None
    max_adjusted: float | None


@dataclass(frozen=True)
class ScoringResult:
    players: List[PlayerRecord]
    evaluations: List[HitterEvaluation]
    statistics: DatasetStatistics
    summary: ScoringSummary


def is_eligible(record: BattingRecord, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> bool:
    return record.at_bats >= config.min_at_bats


def composite_score(
    derived: DerivedStats,
    stats: DatasetStatistics,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    """Weighted blend of clamped z-scores; net stolen-base rate is added as is."""

    weights = config.weights
    limit = config.z_clamp
    return (
        weights.on_base_pct
        * z_score(derived.on_base_pct, stats.on_base_pct.mean, stats.on_base_pct.sd, limit=limit)
        + weights.isolated_power
        * z_score(derived.isolated_power, stats.isolated_power.mean, stats.isolated_power.sd, limit=limit)
        + weights.slugging
        * z_score(derived.slugging, stats.slugging.mean, stats.slugging.sd, limit=limit)
        - weights.strikeout_rate
        * z_score(derived.strikeout_rate, stats.strikeout_rate.mean, stats.strikeout_rate.sd, limit=limit)
        + weights.net_stolen_base_rate * derived.net_stolen_base_rate
    )


def adjust_for_region(raw_score: float, multiplier: float) -> float:
    return raw_score * multiplier


def _round_score(value: float) -> int:
    # Halves round up.
    return int(math.floor(value + 0.5))


def scale_scores(
    adjusted_scores: Sequence[float],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> List[int]:
    """Min-max rescale into [floor, ceiling]; a batch with no spread gets the tie score."""

    if not adjusted_scores:
        return []
    low = min(adjusted_scores)
    high = max(adjusted_scores)
    if high == low:
        return [config.tie_score] * len(adjusted_scores)

    floor = config.score_floor
    ceiling = config.score_ceiling
    span = ceiling - floor
    return [
        _round_score(clamp((score - low) / (high - low) * span + floor, floor, ceiling))
        for score in adjusted_scores
    ]


def assign_ranks(scores: Sequence[int]) -> List[int]:
    """Positional dense ranks, aligned with ``scores``.

    Tied scores share a rank; the first score of each lower group takes its
    1-based position in descending order. Groups of ties therefore yield
    sequences such as 1, 1, 3, 4, 4, 6.
    """

    order = sorted(range(len(scores)), key=lambda idx: scores[idx], reverse=True)
    ranks = [0] * len(scores)
    current_rank = 1
    last_score: Optional[int] = None
    for position, idx in enumerate(order):
        score = scores[idx]
        if last_score is not None and score < last_score:
            current_rank = position + 1
        ranks[idx] = current_rank
        last_score = score
    return ranks


def _in_scope(season: Optional[int], only_season: Optional[int]) -> bool:
    return only_season is None or season == only_season


# Where a batting line lives on its player: ("season", year) or ("unkeyed", index).
_LineKey = Tuple[str, int]


def _batting_lines(player: PlayerRecord) -> Iterator[Tuple[_LineKey, Optional[int], BattingRecord]]:
    for year, batting in player.iter_batting():
        yield ("season", year), year, batting
    for idx, batting in enumerate(player.unkeyed.batting):
        yield ("unkeyed", idx), season_start_year(batting.season_year), batting


def score_batch(
    players: Sequence[PlayerRecord],
    region_map: Optional[RegionMap] = None,
    *,
    season: Any = None,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> ScoringResult:
    """Score every eligible hitter in the batch and compute WHIP for pitching lines.

    Returns new player records; the inputs are left untouched. ``season``
    restricts hitter scoring to one season (label or year); batting lines of
    other seasons are passed through unchanged. A ``season`` that does not name
    a plausible year raises ``ValueError``. Players whose role is not
    ``"player"`` are passed through unchanged.
    """

    region_map = region_map or {}
    only_season = require_season_year(season) if season is not None else None

    hitters: List[Tuple[int, _LineKey, Optional[int], BattingRecord]] = []
    for player_idx, player in enumerate(players):
        if not player.is_player:
            continue
        for key, year, batting in _batting_lines(player):
            if _in_scope(year, only_season) and is_eligible(batting, config):
                hitters.append((player_idx, key, year, batting))

    derived = [derive_batting_stats(batting) for _, _, _, batting in hitters]
    stats = dataset_statistics(derived)

    raw_scores = [composite_score(d, stats, config) for d in derived]
    multipliers = [
        region_multiplier(region_map, players[player_idx].region_tier())
        for player_idx, _, _, _ in hitters
    ]
    adjusted = [adjust_for_region(raw, mult) for raw, mult in zip(raw_scores, multipliers)]
    final_scores = scale_scores(adjusted, config)
    ranks = assign_ranks(final_scores)

    evaluations: List[HitterEvaluation] = []
    scored_lines: Dict[Tuple[int, _LineKey], Tuple[int, int]] = {}
    for idx, (player_idx, key, year, _) in enumerate(hitters):
        scored_lines[(player_idx, key)] = (final_scores[idx], ranks[idx])
        evaluations.append(
            HitterEvaluation(
                player_id=players[player_idx].player_id,
                season=year,
                derived=derived[idx],
                raw_score=raw_scores[idx],
                multiplier=multipliers[idx],
                adjusted_score=adjusted[idx],
                final_score=final_scores[idx],
                jp_rank=ranks[idx],
            )
        )

    def annotate(player_idx: int, key: _LineKey, batting: BattingRecord) -> BattingRecord:
        final_score, jp_rank = scored_lines.get((player_idx, key), (None, None))
        return batting.model_copy(update={"final_score": final_score, "jp_rank": jp_rank})

    def with_whip(pitching: PitchingRecord) -> PitchingRecord:
        return pitching.model_copy(update={"whip": batch_whip(pitching)})

    pitching_records = 0
    scored_players: List[PlayerRecord] = []
    for player_idx, player in enumerate(players):
        if not player.is_player:
            scored_players.append(player)
            continue
        seasons: Dict[int, SeasonRecord] = {}
        for year, record in player.seasons.items():
            update: Dict[str, Any] = {}
            if record.batting is not None and _in_scope(year, only_season):
                update["batting"] = annotate(player_idx, ("season", year), record.batting)
            if record.pitching is not None:
                pitching_records += 1
                update["pitching"] = with_whip(record.pitching)
            seasons[year] = record.model_copy(update=update) if update else record

        unkeyed = player.unkeyed
        if unkeyed.batting or unkeyed.pitching:
            pitching_records += len(unkeyed.pitching)
            unkeyed = unkeyed.model_copy(
                update={
                    "batting": [
                        annotate(player_idx, key, batting)
                        if _in_scope(year, only_season)
                        else batting
                        for key, year, batting in _batting_lines(player)
                        if key[0] == "unkeyed"
                    ],
                    "pitching": [with_whip(pitching) for pitching in unkeyed.pitching],
                }
            )
        scored_players.append(player.model_copy(update={"seasons": seasons, "unkeyed": unkeyed}))

    summary = ScoringSummary(
        batch_size=len(players),
        scored_players=len({player_idx for player_idx, _, _, _ in hitters}),
        eligible_hitters=len(hitters),
        pitching_records=pitching_records,
        min_adjusted=min(adjusted) if adjusted else None,
        max_adjusted=max(adjusted) if adjusted else None,
    )
    if hitters:
        logger.info(
            "Scored %s eligible hitters from %s players (adjusted range %.4f to %.4f)",
            summary.eligible_hitters,
            summary.batch_size,
            summary.min_adjusted,
            summary.max_adjusted,
        )
        if summary.min_adjusted == summary.max_adjusted:
            logger.debug("Adjusted scores have no spread; every hitter gets %s", config.tie_score)
    else:
        logger.info("No hitters with at least %s at-bats in batch of %s", config.min_at_bats, len(players))

    return ScoringResult(
        players=scored_players,
        evaluations=evaluations,
        statistics=stats,
        summary=summary,
    )
