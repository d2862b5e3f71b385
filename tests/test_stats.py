import pytest

from pyscout.models import BattingRecord
from pyscout.scoring.stats import dataset_statistics, derive_batting_stats, distribution, z_score


def test_derive_batting_stats_from_counts():
    record = BattingRecord(
        at_bats=100,
        hits=30,
        doubles=5,
        triples=1,
        home_runs=4,
        walks=10,
        hit_by_pitch=2,
        sacrifice_flies=3,
        strikeouts=20,
        stolen_bases=8,
        caught_stealing=2,
    )

    derived = derive_batting_stats(record)

    assert derived.plate_appearances == 115
    assert derived.batting_average == pytest.approx(0.30)
    assert derived.singles == 20
    assert derived.total_bases == 49
    assert derived.slugging == pytest.approx(0.49)
    assert derived.isolated_power == pytest.approx(0.19)
    assert derived.on_base_pct == pytest.approx(42 / 115)
    assert derived.strikeout_rate == pytest.approx(20 / 115)
    assert derived.net_stolen_base_rate == pytest.approx(0.6)


def test_derive_batting_stats_guards_every_denominator():
    derived = derive_batting_stats(BattingRecord())

    assert derived.plate_appearances == 0
    assert derived.batting_average == 0.0
    assert derived.slugging == 0.0
    assert derived.isolated_power == 0.0
    assert derived.on_base_pct == 0.0
    assert derived.strikeout_rate == 0.0
    assert derived.net_stolen_base_rate == 0.0


def test_walk_only_line_has_on_base_but_no_average():
    derived = derive_batting_stats(BattingRecord(walks=4, caught_stealing=3))

    assert derived.batting_average == 0.0
    assert derived.on_base_pct == 1.0
    assert derived.net_stolen_base_rate == -1.0


def test_distribution_uses_population_sd():
    stats = distribution([1.0, 3.0])

    assert stats.mean == pytest.approx(2.0)
    assert stats.sd == pytest.approx(1.0)


def test_distribution_of_nothing_is_zero():
    stats = distribution([])

    assert stats.mean == 0.0
    assert stats.sd == 0.0


def test_dataset_statistics_covers_normalized_quantities():
    lines = [
        derive_batting_stats(BattingRecord(at_bats=100, hits=30, walks=10)),
        derive_batting_stats(BattingRecord(at_bats=100, hits=20, walks=0, strikeouts=25)),
    ]

    stats = dataset_statistics(lines)

    assert stats.size == 2
    assert stats.on_base_pct.mean == pytest.approx((40 / 110 + 0.2) / 2)
    assert stats.isolated_power.sd == 0.0
    assert stats.strikeout_rate.mean == pytest.approx(0.125)


@pytest.mark.parametrize(
    ("value", "mean", "sd", "expected"),
    [
        (1.0, 0.0, 2.0, 0.5),
        (10.0, 0.0, 1.0, 2.0),
        (-10.0, 0.0, 1.0, -2.0),
        (5.0, 5.0, 0.0, 0.0),
        (7.0, 5.0, 0.0, 0.0),
    ],
)
def test_z_score_is_clamped_and_safe(value, mean, sd, expected):
    assert z_score(value, mean, sd) == pytest.approx(expected)
