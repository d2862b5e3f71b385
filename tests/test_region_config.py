import json
from pathlib import Path

import pytest

from pyscout.config import (
    DEFAULT_SCORING_CONFIG,
    build_region_map,
    get_region_map,
    load_scoring_config,
    region_multiplier,
)
from pyscout.config_loader import RegionProfile


def test_default_region_map_has_ten_tiers():
    region_map = get_region_map()

    assert len(region_map) == 10
    assert region_map["Tier 1"].multiplier == pytest.approx(0.96)
    assert region_map["Tier 5"].multiplier == pytest.approx(1.0)
    assert region_map["Tier 10"].strength_level == 10


def test_default_region_map_is_a_fresh_copy():
    first = get_region_map()
    first.pop("Tier 1")

    assert "Tier 1" in get_region_map()


def test_build_region_map_accepts_rows_and_mapping():
    from_rows = build_region_map([{"tier": "North", "multiplier": 1.04, "strengthLevel": 8}])
    from_mapping = build_region_map({"North": {"multiplier": 1.04, "strengthLevel": 8}})

    assert from_rows["North"].multiplier == pytest.approx(1.04)
    assert from_mapping["North"].strength_level == 8


@pytest.mark.parametrize(
    "payload",
    [
        {"North": {"multiplier": 1.5, "strengthLevel": 8}},
        {"North": {"multiplier": 1.0, "strengthLevel": 11}},
        {"North": {"multiplier": 1.0}},
        [{"multiplier": 1.0, "strengthLevel": 3}],
    ],
)
def test_build_region_map_rejects_invalid_rows(payload):
    with pytest.raises(ValueError):
        build_region_map(payload)


def test_region_multiplier_is_neutral_for_missing_tiers():
    region_map = get_region_map()

    assert region_multiplier(region_map, "Tier 9") == pytest.approx(1.04)
    assert region_multiplier(region_map, "Tier 42") == 1.0
    assert region_multiplier(region_map, None) == 1.0
    assert region_multiplier({}, "Tier 9") == 1.0


def test_region_profile_loads_reference_rows(tmp_path: Path):
    path = tmp_path / "regions.json"
    path.write_text(
        json.dumps([{"tier": "Tier 3", "multiplier": 0.98, "strengthLevel": 3}]),
        encoding="utf-8",
    )

    profile = RegionProfile.load(path)
    assert list(profile.regions) == ["Tier 3"]

    saved = tmp_path / "saved.json"
    profile.save(saved)
    assert json.loads(saved.read_text(encoding="utf-8")) == {
        "regions": {"Tier 3": {"multiplier": 0.98, "strengthLevel": 3}}
    }


def test_load_scoring_config_reads_min_at_bats(monkeypatch):
    monkeypatch.setenv("PYSCOUT_MIN_AT_BATS", "50")
    assert load_scoring_config().min_at_bats == 50

    monkeypatch.setenv("PYSCOUT_MIN_AT_BATS", "lots")
    assert load_scoring_config() == DEFAULT_SCORING_CONFIG

    monkeypatch.delenv("PYSCOUT_MIN_AT_BATS")
    assert load_scoring_config().min_at_bats == 75
