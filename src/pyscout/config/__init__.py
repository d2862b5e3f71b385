"""Configuration helpers for region tiers and scoring rules."""

from .regions import (
    DEFAULT_REGION_TIERS,
    RegionMap,
    RegionTier,
    build_region_map,
    get_region_map,
    region_map_to_payload,
    region_multiplier,
)
from .scoring import DEFAULT_SCORING_CONFIG, ScoringConfig, ScoringWeights, load_scoring_config

__all__ = [
    "DEFAULT_REGION_TIERS",
    "DEFAULT_SCORING_CONFIG",
    "RegionMap",
    "RegionTier",
    "ScoringConfig",
    "ScoringWeights",
    "build_region_map",
    "get_region_map",
    "load_scoring_config",
    "region_map_to_payload",
    "region_multiplier",
]
