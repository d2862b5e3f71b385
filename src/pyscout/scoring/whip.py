"""Walks plus hits per inning pitched.

Two conventions exist and are kept at their own call sites:

* the batch path (``batch_whip``) divides by innings exactly as recorded and
  falls back to ``BATCH_WHIP_FALLBACK`` for zero innings;
* the per-record path (``calculate_whip``) reads innings in baseball notation
  (``6.1`` is six and a third) and falls back to ``RECORD_WHIP_FALLBACK``.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pyscout.models import PitchingRecord, PlayerRecord, as_count


BATCH_WHIP_FALLBACK = 1.0
RECORD_WHIP_FALLBACK = 0.0

_CENTS = Decimal("0.01")


def round_half_up(value: float, places: Decimal = _CENTS) -> float:
    return float(Decimal(value).quantize(places, rounding=ROUND_HALF_UP))


def convert_innings_pitched(innings_pitched: Any) -> float:
    """Convert ``.1``/``.2`` out notation to thirds of an inning.

    Any other fractional part is dropped.
    """

    innings = as_count(innings_pitched)
    if innings <= 0:
        return 0.0
    whole = math.floor(innings)
    outs = round(innings - whole, 1)
    if outs == 0.1:
        return whole + 1 / 3
    if outs == 0.2:
        return whole + 2 / 3
    return float(whole)


def batch_whip(record: PitchingRecord) -> float:
    innings = record.innings_pitched
    if innings > 0:
        return round_half_up((record.walks_allowed + record.hits_allowed) / innings)
    return BATCH_WHIP_FALLBACK


def calculate_whip(record: PitchingRecord) -> float:
    innings = convert_innings_pitched(record.innings_pitched)
    if not innings:
        return RECORD_WHIP_FALLBACK
    return round_half_up((record.walks_allowed + record.hits_allowed) / innings)


def refresh_stored_whip(player: PlayerRecord) -> PlayerRecord:
    """Copy of ``player`` with per-record WHIP on every pitching line that has innings.

    Lines without innings keep whatever value they already carried.
    """

    def refreshed(pitching: PitchingRecord) -> PitchingRecord:
        if pitching.innings_pitched > 0:
            return pitching.model_copy(update={"whip": calculate_whip(pitching)})
        return pitching

    seasons = dict(player.seasons)
    for season, pitching in player.iter_pitching():
        seasons[season] = seasons[season].model_copy(update={"pitching": refreshed(pitching)})
    unkeyed = player.unkeyed.model_copy(
        update={"pitching": [refreshed(pitching) for pitching in player.unkeyed.pitching]}
    )
    return player.model_copy(update={"seasons": seasons, "unkeyed": unkeyed})
