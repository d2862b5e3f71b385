from datetime import date

import pytest

from pyscout.models import BasicInfo, BattingRecord, PitchingRecord, PlayerRecord, SeasonRecord, UnkeyedEntries
from pyscout.seasons import (
    all_seasons,
    flatten_current_season,
    latest_season_year,
    player_info_for_season,
    require_season_year,
    resolve_current_season,
    season_start_year,
)


def _player(**kwargs) -> PlayerRecord:
    seasons = {
        2022: SeasonRecord(season=2022, batting=BattingRecord(season_year="2022", at_bats=90)),
        2023: SeasonRecord(
            season=2023,
            basic_info=BasicInfo(season_year="2023-24", position="SS", region="Tier 2"),
            pitching=PitchingRecord(season_year="2023-24", innings_pitched=20),
        ),
        2024: SeasonRecord(
            season=2024,
            basic_info=BasicInfo(season_year="2024-25", position="2B", region="Tier 6"),
            batting=BattingRecord(season_year="2024", at_bats=110, hits=33),
        ),
    }
    return PlayerRecord(player_id="p1", seasons=seasons, **kwargs)


def test_season_start_year_ignores_suffix():
    assert season_start_year("2017-18") == season_start_year("2017") == 2017
    assert season_start_year("2017-2018") == 2017
    assert season_start_year(" 2024 ") == 2024
    assert season_start_year(2021) == 2021


@pytest.mark.parametrize("label", [None, "", "   ", "season", "-18"])
def test_season_start_year_without_year_is_none(label):
    assert season_start_year(label) is None


def test_latest_season_year_skips_unparsable_labels():
    entries = [{"seasonYear": "2019-20"}, {"seasonYear": "n/a"}, {"seasonYear": "2021"}, {}]

    assert latest_season_year(entries) == 2021
    assert latest_season_year([]) is None


def test_resolve_current_season_uses_latest_basic_info():
    current = resolve_current_season(_player())

    assert current.season == 2024
    assert current.basic_info.position == "2B"
    assert current.batting is not None and current.batting.at_bats == 110
    assert current.pitching is None
    assert current.fielding is None
    assert not current.synthesized


def test_resolve_current_season_ignores_newer_stats_without_basic_info():
    player = _player()
    seasons = dict(player.seasons)
    seasons[2025] = SeasonRecord(season=2025, batting=BattingRecord(season_year="2025", at_bats=12))
    player = player.model_copy(update={"seasons": seasons})

    assert resolve_current_season(player).season == 2024


def test_resolve_current_season_synthesizes_basic_info():
    player = PlayerRecord(
        player_id="p2",
        seasons={2026: SeasonRecord(season=2026, batting=BattingRecord(season_year="2026", at_bats=80))},
    )

    current = resolve_current_season(player, today=date(2026, 3, 1))

    assert current.synthesized
    assert current.season == 2026
    assert current.basic_info.season_year == "2026-2027"
    assert current.batting is not None and current.batting.at_bats == 80
    # The input player is not touched.
    assert player.seasons[2026].basic_info is None


def test_flatten_current_season_keeps_only_that_season():
    flattened = flatten_current_season(_player())

    assert list(flattened.seasons) == [2024]
    assert flattened.region == "Tier 6"
    assert flattened.seasons[2024].batting.at_bats == 110


def test_flatten_current_season_prefers_explicit_region():
    flattened = flatten_current_season(_player(region="Tier 9"))

    assert flattened.region == "Tier 9"


def test_flatten_keeps_synthesized_flag():
    player = PlayerRecord(player_id="p3")

    flattened = flatten_current_season(player, today=date(2025, 6, 1))

    assert list(flattened.seasons) == [2025]
    assert resolve_current_season(flattened, today=date(2025, 6, 1)).synthesized


def test_player_info_for_season_and_all_seasons():
    player = _player()

    info = player_info_for_season(player, "2023-24")
    assert info is not None and info.pitching.innings_pitched == 20
    assert player_info_for_season(player, "1999") is None
    assert player_info_for_season(player, None) is None
    assert all_seasons(player) == [2024, 2023, 2022]


def test_require_season_year_accepts_labels_and_years():
    assert require_season_year("2024-25") == 2024
    assert require_season_year(2019) == 2019


@pytest.mark.parametrize("season", ["current", "", None, "2O24", "12-13", 2500])
def test_require_season_year_rejects_unusable_seasons(season):
    with pytest.raises(ValueError):
        require_season_year(season)


def test_flatten_drops_unkeyed_entries():
    player = _player().model_copy(
        update={"unkeyed": UnkeyedEntries(batting=[BattingRecord(season_year="2024-25", at_bats=80)])}
    )

    flattened = flatten_current_season(player)

    assert flattened.unkeyed.is_empty
    assert not player.unkeyed.is_empty
