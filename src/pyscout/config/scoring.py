"""Scoring constants and environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field


logger = logging.getLogger(__name__)

_MIN_AT_BATS_ENV = "PYSCOUT_MIN_AT_BATS"

_MIN_AT_BATS_DEFAULT = 75


@dataclass(frozen=True)
class ScoringWeights:
    """Composite hitter score weights. Strikeout rate is subtracted."""

    on_base_pct: float = 0.40
    isolated_power: float = 0.25
    slugging: float = 0.15
    strikeout_rate: float = 0.10
    net_stolen_base_rate: float = 0.10


@dataclass(frozen=True)
class ScoringConfig:
    min_at_bats: int = _MIN_AT_BATS_DEFAULT
    z_clamp: float = 2.0
    score_floor: int = 1
    score_ceiling: int = 100
    tie_score: int = 50
    weights: ScoringWeights = field(default_factory=ScoringWeights)


DEFAULT_SCORING_CONFIG = ScoringConfig()


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def load_scoring_config() -> ScoringConfig:
    """Build a config, honouring ``PYSCOUT_MIN_AT_BATS`` when set.

    Read on every call so a running service never holds a stale eligibility
    threshold in process state.
    """

    min_at_bats = _env_int(_MIN_AT_BATS_ENV, _MIN_AT_BATS_DEFAULT, min_value=0)
    if min_at_bats == _MIN_AT_BATS_DEFAULT:
        return DEFAULT_SCORING_CONFIG
    logger.info("Using eligibility threshold of %s at-bats", min_at_bats)
    return ScoringConfig(min_at_bats=min_at_bats)
