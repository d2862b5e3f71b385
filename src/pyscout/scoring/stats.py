"""Derived batting quantities and batch-relative normalization."""

from __future__ import annotations

from dataclasses import dataclass
from statistics import fmean, pstdev
from typing import Iterable, Sequence

from pyscout.models import BattingRecord


@dataclass(frozen=True)
class DerivedStats:
    """Sabermetric quantities computed from one season's raw batting counts."""

    plate_appearances: float
    batting_average: float
    singles: float
    total_bases: float
    slugging: float
    isolated_power: float
    on_base_pct: float
    strikeout_rate: float
    net_stolen_base_rate: float


@dataclass(frozen=True)
class Distribution:
    mean: float
    sd: float


@dataclass(frozen=True)
class DatasetStatistics:
    """Mean and population standard deviation of each normalized quantity."""

    size: int
    on_base_pct: Distribution
    isolated_power: Distribution
    slugging: Distribution
    strikeout_rate: Distribution


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def derive_batting_stats(record: BattingRecord) -> DerivedStats:
    at_bats = record.at_bats
    hits = record.hits
    walks = record.walks
    hit_by_pitch = record.hit_by_pitch

    plate_appearances = at_bats + walks + hit_by_pitch + record.sacrifice_flies
    batting_average = hits / at_bats if at_bats else 0.0

    singles = hits - record.doubles - record.triples - record.home_runs
    total_bases = singles + 2 * record.doubles + 3 * record.triples + 4 * record.home_runs

    slugging = total_bases / at_bats if at_bats else 0.0
    on_base_pct = (hits + walks + hit_by_pitch) / plate_appearances if plate_appearances else 0.0
    strikeout_rate = record.strikeouts / plate_appearances if plate_appearances else 0.0

    attempts = record.stolen_bases + record.caught_stealing
    net_stolen_base_rate = (
        (record.stolen_bases - record.caught_stealing) / attempts if attempts > 0 else 0.0
    )

    return DerivedStats(
        plate_appearances=plate_appearances,
        batting_average=batting_average,
        singles=singles,
        total_bases=total_bases,
        slugging=slugging,
        isolated_power=slugging - batting_average,
        on_base_pct=on_base_pct,
        strikeout_rate=strikeout_rate,
        net_stolen_base_rate=net_stolen_base_rate,
    )


def distribution(values: Iterable[float]) -> Distribution:
    """Arithmetic mean and population standard deviation; zeros when empty."""

    values = list(values)
    if not values:
        return Distribution(mean=0.0, sd=0.0)
    return Distribution(mean=fmean(values), sd=pstdev(values))


def dataset_statistics(population: Sequence[DerivedStats]) -> DatasetStatistics:
    return DatasetStatistics(
        size=len(population),
        on_base_pct=distribution(d.on_base_pct for d in population),
        isolated_power=distribution(d.isolated_power for d in population),
        slugging=distribution(d.slugging for d in population),
        strikeout_rate=distribution(d.strikeout_rate for d in population),
    )


def z_score(value: float, mean: float, sd: float, *, limit: float = 2.0) -> float:
    """Clamped z-score; 0 when the batch has no spread."""

    if not sd:
        return 0.0
    return clamp((value - mean) / sd, -limit, limit)
