import pytest
from pydantic import ValidationError

from pyscout.models import BasicInfo, BattingRecord, PitchingRecord, PlayerRecord, SeasonRecord


def test_player_record_is_frozen():
    record = PlayerRecord(player_id="p1", first_name="Test", last_name="Player")

    assert record.player_id == "p1"
    assert record.name == "Test Player"
    assert record.is_player

    with pytest.raises((TypeError, ValidationError)):
        record.player_id = "p2"  # type: ignore[attr-defined]


def test_player_record_requires_id():
    with pytest.raises(ValidationError):
        PlayerRecord(player_id="")


def test_batting_record_treats_missing_counts_as_zero():
    record = BattingRecord.model_validate(
        {"seasonYear": 2024, "at_bats": None, "hits": "", "walks": "abc", "doubles": "3", "triples": float("nan")}
    )

    assert record.season_year == "2024"
    assert record.at_bats == 0
    assert record.hits == 0
    assert record.walks == 0
    assert record.doubles == 3
    assert record.triples == 0
    assert record.strikeouts == 0


def test_batting_record_reads_score_aliases_and_drops_bad_values():
    record = BattingRecord.model_validate({"at_bats": 80, "finalScore": 64, "jpRank": "bad"})

    assert record.final_score == 64
    assert record.jp_rank is None
    assert record.model_dump(by_alias=True)["finalScore"] == 64


def test_records_keep_extra_document_fields():
    record = PitchingRecord.model_validate({"innings_pitched": "12.1", "era": 3.2, "whip": "1.5"})

    assert record.innings_pitched == pytest.approx(12.1)
    assert record.whip == pytest.approx(1.5)
    assert record.model_dump(by_alias=True)["era"] == 3.2


def test_region_tier_prefers_explicit_region_then_latest_basic_info():
    seasons = {
        2023: SeasonRecord(season=2023, basic_info=BasicInfo(season_year="2023-24", region="Tier 2")),
        2024: SeasonRecord(season=2024, basic_info=BasicInfo(season_year="2024-25", region="Tier 7")),
    }

    assert PlayerRecord(player_id="p1", seasons=seasons).region_tier() == "Tier 7"
    assert PlayerRecord(player_id="p1", region="Tier 1", seasons=seasons).region_tier() == "Tier 1"
    assert PlayerRecord(player_id="p1").region_tier() is None
