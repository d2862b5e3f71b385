"""Region tier configuration used to adjust scores for competitive strength."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class RegionTier(BaseModel):
    """Strength classification for one region tier."""

    multiplier: float = Field(..., ge=0.9, le=1.1)
    strength_level: int = Field(..., ge=1, le=10, alias="strengthLevel")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


RegionMap = Mapping[str, RegionTier]

NEUTRAL_MULTIPLIER = 1.0

# Reference table seeded by the platform; weaker tiers scale scores down.
DEFAULT_REGION_TIERS: Tuple[Tuple[str, int, float], ...] = (
    ("Tier 1", 1, 0.96),
    ("Tier 2", 2, 0.97),
    ("Tier 3", 3, 0.98),
    ("Tier 4", 4, 0.99),
    ("Tier 5", 5, 1.0),
    ("Tier 6", 6, 1.01),
    ("Tier 7", 7, 1.02),
    ("Tier 8", 8, 1.03),
    ("Tier 9", 9, 1.04),
    ("Tier 10", 10, 1.05),
)


def get_region_map() -> Dict[str, RegionTier]:
    """Return a fresh region map built from the default tier table."""

    return {
        tier: RegionTier(multiplier=multiplier, strength_level=strength)
        for tier, strength, multiplier in DEFAULT_REGION_TIERS
    }


def build_region_map(
    rows: Union[Mapping[str, Mapping[str, Any]], Iterable[Mapping[str, Any]]],
) -> Dict[str, RegionTier]:
    """Build a region map from either ``{tier: {...}}`` or a list of tier rows.

    Rows look like the stored reference table: ``{"tier": "Tier 3",
    "multiplier": 0.98, "strengthLevel": 3}``. Out-of-bounds values raise
    ``ValueError`` (pydantic's ``ValidationError``).
    """

    region_map: Dict[str, RegionTier] = {}
    if isinstance(rows, Mapping):
        for tier, payload in rows.items():
            region_map[str(tier).strip()] = _tier_from_payload(payload)
        return region_map

    for row in rows:
        tier = row.get("tier")
        if not tier:
            raise ValueError(f"region row is missing a tier name: {dict(row)!r}")
        region_map[str(tier).strip()] = _tier_from_payload(row)
    return region_map


def _tier_from_payload(payload: Mapping[str, Any] | RegionTier) -> RegionTier:
    if isinstance(payload, RegionTier):
        return payload
    data = {key: value for key, value in payload.items() if key != "tier"}
    if "strength_level" not in data and "strengthLevel" not in data:
        raise ValueError(f"region row is missing strengthLevel: {dict(payload)!r}")
    return RegionTier.model_validate(data)


def region_multiplier(region_map: RegionMap, tier: Optional[str]) -> float:
    """Multiplier for a tier; neutral when the player has no tier or it is unknown."""

    if not tier:
        return NEUTRAL_MULTIPLIER
    entry = region_map.get(tier)
    if entry is None:
        return NEUTRAL_MULTIPLIER
    return entry.multiplier


def region_map_to_payload(region_map: RegionMap) -> Dict[str, Dict[str, Any]]:
    return {
        tier: {"multiplier": entry.multiplier, "strengthLevel": entry.strength_level}
        for tier, entry in region_map.items()
    }
