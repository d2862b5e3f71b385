"""Canonical player models shared across ingestion, season resolution and scoring."""

from __future__ import annotations

import math
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


Count = Union[int, float]

_RECORD_CONFIG = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


def as_count(value: Any) -> Count:
    """Coerce a raw stat cell to a number, treating anything unusable as 0."""

    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return 0
        return value
    text = str(value).strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return 0
    return number if math.isfinite(number) else 0


def _as_label(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class BasicInfo(BaseModel):
    """Per-season profile data (team, position, region tier, ...)."""

    season_year: Optional[str] = Field(default=None, alias="seasonYear")
    team: Optional[Any] = None
    team_name: Optional[str] = Field(default=None, alias="teamName")
    jersey_number: Optional[str] = Field(default=None, alias="jerseyNumber")
    position: Optional[str] = None
    primary_position: Optional[str] = Field(default=None, alias="primaryPosition")
    height: Optional[str] = None
    weight: Optional[str] = None
    bats_throws: Optional[str] = Field(default=None, alias="batsThrows")
    player_class: Optional[str] = Field(default=None, alias="playerClass")
    hometown: Optional[str] = None
    high_school: Optional[str] = Field(default=None, alias="highSchool")
    previous_school: Optional[str] = Field(default=None, alias="previousSchool")
    region: Optional[str] = None

    model_config = _RECORD_CONFIG

    @field_validator(
        "season_year",
        "team_name",
        "jersey_number",
        "position",
        "primary_position",
        "height",
        "weight",
        "bats_throws",
        "player_class",
        "hometown",
        "high_school",
        "previous_school",
        "region",
        mode="before",
    )
    @classmethod
    def strip_labels(cls, value: Any) -> Optional[str]:
        return _as_label(value)


class BattingRecord(BaseModel):
    """Raw batting counts for one season, plus the scores assigned per request."""

    season_year: Optional[str] = Field(default=None, alias="seasonYear")
    at_bats: Count = 0
    hits: Count = 0
    doubles: Count = 0
    triples: Count = 0
    home_runs: Count = 0
    walks: Count = 0
    hit_by_pitch: Count = 0
    sacrifice_flies: Count = 0
    strikeouts: Count = 0
    stolen_bases: Count = 0
    caught_stealing: Count = 0
    final_score: Optional[int] = Field(default=None, alias="finalScore")
    jp_rank: Optional[int] = Field(default=None, alias="jpRank")

    model_config = _RECORD_CONFIG

    @field_validator("season_year", mode="before")
    @classmethod
    def strip_season(cls, value: Any) -> Optional[str]:
        return _as_label(value)

    @field_validator("final_score", "jp_rank", mode="before")
    @classmethod
    def whole_or_none(cls, value: Any) -> Optional[int]:
        if value is None or isinstance(value, bool):
            return None
        number = as_count(value)
        if number <= 0 or number != int(number):
            return None
        return int(number)

    @field_validator(
        "at_bats",
        "hits",
        "doubles",
        "triples",
        "home_runs",
        "walks",
        "hit_by_pitch",
        "sacrifice_flies",
        "strikeouts",
        "stolen_bases",
        "caught_stealing",
        mode="before",
    )
    @classmethod
    def zero_if_missing(cls, value: Any) -> Count:
        return as_count(value)


class PitchingRecord(BaseModel):
    """Raw pitching counts for one season; ``whip`` is filled in at scoring time."""

    season_year: Optional[str] = Field(default=None, alias="seasonYear")
    walks_allowed: Count = 0
    hits_allowed: Count = 0
    innings_pitched: Count = 0
    whip: Optional[float] = None

    model_config = _RECORD_CONFIG

    @field_validator("season_year", mode="before")
    @classmethod
    def strip_season(cls, value: Any) -> Optional[str]:
        return _as_label(value)

    @field_validator("walks_allowed", "hits_allowed", "innings_pitched", mode="before")
    @classmethod
    def zero_if_missing(cls, value: Any) -> Count:
        return as_count(value)

    @field_validator("whip", mode="before")
    @classmethod
    def stale_whip(cls, value: Any) -> Optional[float]:
        if value is None:
            return None
        return float(as_count(value))


class FieldingRecord(BaseModel):
    """Fielding line for one season. Carried through untouched."""

    season_year: Optional[str] = Field(default=None, alias="seasonYear")

    model_config = _RECORD_CONFIG

    @field_validator("season_year", mode="before")
    @classmethod
    def strip_season(cls, value: Any) -> Optional[str]:
        return _as_label(value)


class SeasonRecord(BaseModel):
    """Everything known about a player for one season.

    Each part is independent: a season may carry batting without pitching,
    or basic info without any stats at all.
    """

    season: int
    basic_info: Optional[BasicInfo] = None
    batting: Optional[BattingRecord] = None
    pitching: Optional[PitchingRecord] = None
    fielding: Optional[FieldingRecord] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return not any((self.basic_info, self.batting, self.pitching, self.fielding))


class UnkeyedEntries(BaseModel):
    """Stat entries that could not take a slot in ``PlayerRecord.seasons``.

    These are entries without a usable season label, and later entries whose
    start year was already taken. They are still scored and written back.
    """

    basic_info: List[BasicInfo] = Field(default_factory=list)
    batting: List[BattingRecord] = Field(default_factory=list)
    pitching: List[PitchingRecord] = Field(default_factory=list)
    fielding: List[FieldingRecord] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return not (self.basic_info or self.batting or self.pitching or self.fielding)


class PlayerRecord(BaseModel):
    """Normalized player payload used by the season resolver and scoring engine."""

    player_id: str = Field(..., min_length=1)
    role: str = "player"
    first_name: str = ""
    last_name: str = ""
    region: Optional[str] = None
    seasons: Dict[int, SeasonRecord] = Field(default_factory=dict)
    unkeyed: UnkeyedEntries = Field(default_factory=UnkeyedEntries)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    @property
    def is_player(self) -> bool:
        return self.role == "player"

    def region_tier(self) -> Optional[str]:
        """Region tier used for strength adjustment.

        An explicit top-level region wins; otherwise the region recorded on the
        latest season's basic info is used.
        """

        if self.region:
            return self.region
        for season in sorted(self.seasons, reverse=True):
            info = self.seasons[season].basic_info
            if info is not None:
                return info.region
        return None

    def iter_batting(self) -> Iterator[Tuple[int, BattingRecord]]:
        for season in sorted(self.seasons):
            batting = self.seasons[season].batting
            if batting is not None:
                yield season, batting

    def iter_pitching(self) -> Iterator[Tuple[int, PitchingRecord]]:
        for season in sorted(self.seasons):
            pitching = self.seasons[season].pitching
            if pitching is not None:
                yield season, pitching
