"""Season label parsing and current-season resolution."""

from .resolver import (
    CurrentSeason,
    all_seasons,
    flatten_current_season,
    latest_season_year,
    player_info_for_season,
    require_season_year,
    resolve_current_season,
    season_start_year,
)

__all__ = [
    "CurrentSeason",
    "all_seasons",
    "flatten_current_season",
    "latest_season_year",
    "player_info_for_season",
    "require_season_year",
    "resolve_current_season",
    "season_start_year",
]
