"""Pick the "current" season out of a player's open-ended season history.

Season labels are free text ("2024-25", "2024", "2017-2018"). Only the leading
year is significant, so "2017-18" and "2017" denote the same season.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, List, Mapping, Optional

from pyscout.models import (
    BasicInfo,
    BattingRecord,
    FieldingRecord,
    PitchingRecord,
    PlayerRecord,
    SeasonRecord,
    UnkeyedEntries,
)


_LEADING_DIGITS = re.compile(r"^\s*(\d+)")

# Bounds for a season asked for explicitly, e.g. as a scoring filter.
MIN_SEASON_YEAR = 1900
MAX_SEASON_YEAR = 2100


@dataclass(frozen=True)
class CurrentSeason:
    """Single-season view of a player.

    ``synthesized`` is set when the player had no basic info and one was made
    up for the current calendar year; persisting it is up to the caller.
    """

    season: int
    basic_info: BasicInfo
    batting: Optional[BattingRecord] = None
    fielding: Optional[FieldingRecord] = None
    pitching: Optional[PitchingRecord] = None
    synthesized: bool = False


def season_start_year(label: Any) -> Optional[int]:
    """Return the starting year of a season label, or ``None`` if there is none."""

    if label is None or isinstance(label, bool):
        return None
    if isinstance(label, int):
        return label
    if isinstance(label, float):
        return int(label)
    text = str(label).strip()
    if not text:
        return None
    match = _LEADING_DIGITS.match(text.split("-", 1)[0])
    if match is None:
        return None
    return int(match.group(1))


def require_season_year(season: Any) -> int:
    """Start year of an explicitly requested season.

    Unlike ``season_start_year`` this is strict: a label that does not parse,
    or parses to an implausible year (``"2O24"`` gives 2), raises ``ValueError``.
    """

    year = season_start_year(season)
    if year is None:
        raise ValueError(f"season {season!r} has no start year")
    if not MIN_SEASON_YEAR <= year <= MAX_SEASON_YEAR:
        raise ValueError(f"season {season!r} starts in implausible year {year}")
    return year


def entry_label(entry: Any) -> Any:
    """Season label of a raw document entry, a record model or a bare label."""

    if isinstance(entry, Mapping):
        return entry.get("seasonYear", entry.get("season_year"))
    if hasattr(entry, "season_year"):
        return entry.season_year
    return entry


def latest_season_year(entries: Iterable[Any]) -> Optional[int]:
    latest: Optional[int] = None
    for entry in entries:
        year = season_start_year(entry_label(entry))
        if year and (latest is None or year > latest):
            latest = year
    return latest


def synthesized_label(year: int) -> str:
    return f"{year}-{year + 1}"


def resolve_current_season(player: PlayerRecord, *, today: Optional[date] = None) -> CurrentSeason:
    """Resolve the latest season by basic info and gather that season's stats.

    Batting, fielding and pitching are looked up independently, so any of them
    may be missing even when basic info exists.
    """

    latest = latest_season_year(
        season for season, record in player.seasons.items() if record.basic_info is not None
    )
    synthesized = latest is None
    if latest is None:
        latest = (today or date.today()).year

    record = player.seasons.get(latest)
    basic_info = record.basic_info if record is not None else None
    if basic_info is None:
        basic_info = BasicInfo(season_year=synthesized_label(latest))

    return CurrentSeason(
        season=latest,
        basic_info=basic_info,
        batting=record.batting if record is not None else None,
        fielding=record.fielding if record is not None else None,
        pitching=record.pitching if record is not None else None,
        synthesized=synthesized,
    )


def flatten_current_season(player: PlayerRecord, *, today: Optional[date] = None) -> PlayerRecord:
    """Copy of ``player`` restricted to its current season.

    Unkeyed entries are dropped along with the other seasons.

    A synthesized basic-info entry is not stored on the copy, so resolving the
    copy again still reports it as synthesized.
    """

    current = resolve_current_season(player, today=today)
    season = SeasonRecord(
        season=current.season,
        basic_info=None if current.synthesized else current.basic_info,
        batting=current.batting,
        fielding=current.fielding,
        pitching=current.pitching,
    )
    return player.model_copy(
        update={
            "region": player.region or current.basic_info.region,
            "seasons": {current.season: season},
            "unkeyed": UnkeyedEntries(),
        }
    )


def player_info_for_season(player: PlayerRecord, season: Any) -> Optional[SeasonRecord]:
    year = season_start_year(season)
    if year is None:
        return None
    return player.seasons.get(year)


def all_seasons(player: PlayerRecord) -> List[int]:
    """Seasons with any data, newest first."""

    return sorted(
        (season for season, record in player.seasons.items() if not record.is_empty),
        reverse=True,
    )
