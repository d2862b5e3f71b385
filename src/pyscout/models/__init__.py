"""Player and season models."""

from .player import (
    BasicInfo,
    BattingRecord,
    FieldingRecord,
    PitchingRecord,
    PlayerRecord,
    SeasonRecord,
    UnkeyedEntries,
    as_count,
)

__all__ = [
    "BasicInfo",
    "BattingRecord",
    "FieldingRecord",
    "PitchingRecord",
    "PlayerRecord",
    "SeasonRecord",
    "UnkeyedEntries",
    "as_count",
]
