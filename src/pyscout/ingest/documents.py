"""Convert stored player documents to canonical records and back.

Stored documents keep one array per stat category (``playerBasicInfo``,
``battingStats``, ``pitchingStats``, ``fieldingStats``), each entry tagged with
a free-text ``seasonYear``. The arrays are not aligned with one another, so
each is keyed by season start year independently. Entries that cannot be
keyed are kept on ``PlayerRecord.unkeyed`` and written back after the keyed ones.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel

from pyscout.models import (
    BasicInfo,
    BattingRecord,
    FieldingRecord,
    PitchingRecord,
    PlayerRecord,
    SeasonRecord,
    UnkeyedEntries,
)
from pyscout.seasons.resolver import entry_label, resolve_current_season, season_start_year


logger = logging.getLogger(__name__)

BASIC_INFO_KEY = "playerBasicInfo"
BATTING_KEY = "battingStats"
PITCHING_KEY = "pitchingStats"
FIELDING_KEY = "fieldingStats"

_SEASON_ARRAYS: Dict[str, tuple[str, Type[BaseModel]]] = {
    BASIC_INFO_KEY: ("basic_info", BasicInfo),
    BATTING_KEY: ("batting", BattingRecord),
    PITCHING_KEY: ("pitching", PitchingRecord),
    FIELDING_KEY: ("fielding", FieldingRecord),
}

_ID_KEYS = ("_id", "id", "player_id")
_CONSUMED_KEYS = set(_SEASON_ARRAYS) | set(_ID_KEYS) | {"role", "firstName", "lastName", "region"}
_PRIVATE_KEYS = {"password"}

# Basic-info fields lifted to the top level of a single-season view.
_FLATTENED_FIELDS = (
    "team",
    "teamName",
    "jerseyNumber",
    "position",
    "primaryPosition",
    "height",
    "weight",
    "batsThrows",
    "hometown",
    "highSchool",
    "previousSchool",
    "playerClass",
    "region",
)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _player_id(document: Mapping[str, Any], fallback_id: Optional[str]) -> str:
    for key in _ID_KEYS:
        value = document.get(key)
        if value not in (None, ""):
            return str(value)
    if fallback_id:
        return fallback_id
    raise ValueError("player document has no _id/id/player_id")


def _group_by_season(
    entries: Any,
    model: Type[ModelT],
    *,
    player_id: str,
    category: str,
) -> Tuple[Dict[int, ModelT], List[ModelT]]:
    """Key entries by season start year.

    Entries without a usable season, and later entries for a year that is
    already taken, come back in the second list in document order.
    """

    grouped: Dict[int, ModelT] = {}
    unkeyed: List[ModelT] = []
    if not entries:
        return grouped, unkeyed
    if not isinstance(entries, Sequence) or isinstance(entries, (str, bytes)):
        logger.warning("Ignoring %s for player %s: expected a list", category, player_id)
        return grouped, unkeyed
    for entry in entries:
        if not isinstance(entry, Mapping):
            logger.warning("Skipping non-object %s entry for player %s", category, player_id)
            continue
        record = model.model_validate(dict(entry))
        year = season_start_year(entry_label(entry))
        if year is None:
            logger.info("Keeping %s entry without a season for player %s", category, player_id)
            unkeyed.append(record)
        elif year in grouped:
            # First entry for a season owns the slot.
            logger.info("Keeping duplicate %s season %s for player %s", category, year, player_id)
            unkeyed.append(record)
        else:
            grouped[year] = record
    return grouped, unkeyed


def player_from_document(
    document: Mapping[str, Any],
    *,
    fallback_id: Optional[str] = None,
) -> PlayerRecord:
    """Build a ``PlayerRecord`` from a stored player document."""

    if not isinstance(document, Mapping):
        raise ValueError(f"player document must be an object, got {type(document).__name__}")

    player_id = _player_id(document, fallback_id)
    parts: Dict[int, Dict[str, Any]] = {}
    leftovers: Dict[str, List[Any]] = {}
    for key, (field_name, model) in _SEASON_ARRAYS.items():
        grouped, unkeyed = _group_by_season(document.get(key), model, player_id=player_id, category=key)
        for year, record in grouped.items():
            parts.setdefault(year, {})[field_name] = record
        leftovers[field_name] = unkeyed

    seasons = {year: SeasonRecord(season=year, **fields) for year, fields in sorted(parts.items())}
    metadata = {
        key: value
        for key, value in document.items()
        if key not in _CONSUMED_KEYS and key not in _PRIVATE_KEYS
    }
    region = str(document.get("region") or "").strip()
    return PlayerRecord(
        player_id=player_id,
        role=str(document.get("role") or "player"),
        first_name=str(document.get("firstName") or ""),
        last_name=str(document.get("lastName") or ""),
        region=region or None,
        seasons=seasons,
        unkeyed=UnkeyedEntries(**leftovers),
        metadata=metadata,
    )


def players_from_documents(documents: Iterable[Mapping[str, Any]]) -> List[PlayerRecord]:
    return [
        player_from_document(document, fallback_id=f"player-{index}")
        for index, document in enumerate(documents, start=1)
    ]


def _dump_batting(record: BattingRecord) -> Dict[str, Any]:
    payload = record.model_dump(by_alias=True, exclude_none=True)
    # Unscored lines still report an explicit null rank.
    payload["jpRank"] = record.jp_rank
    return payload


def _season_arrays(player: PlayerRecord) -> Dict[str, List[Dict[str, Any]]]:
    arrays: Dict[str, List[Dict[str, Any]]] = {key: [] for key in _SEASON_ARRAYS}
    for year in sorted(player.seasons):
        record = player.seasons[year]
        if record.basic_info is not None:
            arrays[BASIC_INFO_KEY].append(record.basic_info.model_dump(by_alias=True, exclude_none=True))
        if record.batting is not None:
            arrays[BATTING_KEY].append(_dump_batting(record.batting))
        if record.pitching is not None:
            arrays[PITCHING_KEY].append(record.pitching.model_dump(by_alias=True, exclude_none=True))
        if record.fielding is not None:
            arrays[FIELDING_KEY].append(record.fielding.model_dump(by_alias=True, exclude_none=True))

    unkeyed = player.unkeyed
    arrays[BASIC_INFO_KEY].extend(info.model_dump(by_alias=True, exclude_none=True) for info in unkeyed.basic_info)
    arrays[BATTING_KEY].extend(_dump_batting(batting) for batting in unkeyed.batting)
    arrays[PITCHING_KEY].extend(
        pitching.model_dump(by_alias=True, exclude_none=True) for pitching in unkeyed.pitching
    )
    arrays[FIELDING_KEY].extend(
        fielding.model_dump(by_alias=True, exclude_none=True) for fielding in unkeyed.fielding
    )
    return arrays


def player_to_document(player: PlayerRecord) -> Dict[str, Any]:
    """Inverse of ``player_from_document``, carrying any scores computed since."""

    document: Dict[str, Any] = dict(player.metadata)
    document.update(
        {
            "_id": player.player_id,
            "role": player.role,
            "firstName": player.first_name,
            "lastName": player.last_name,
            "region": player.region,
        }
    )
    document.update(_season_arrays(player))
    return document


def current_season_document(player: PlayerRecord, *, today: Optional[date] = None) -> Dict[str, Any]:
    """Single-season view: basic info lifted to the top level, one entry per stat list."""

    current = resolve_current_season(player, today=today)
    basic = current.basic_info.model_dump(by_alias=True)

    document: Dict[str, Any] = dict(player.metadata)
    document.update(
        {
            "_id": player.player_id,
            "role": player.role,
            "firstName": player.first_name,
            "lastName": player.last_name,
        }
    )
    for field_name in _FLATTENED_FIELDS:
        document[field_name] = basic.get(field_name)
    if player.region and not document.get("region"):
        document["region"] = player.region

    document["seasonYear"] = current.basic_info.season_year
    document["synthesizedSeason"] = current.synthesized
    document[BATTING_KEY] = [_dump_batting(current.batting)] if current.batting is not None else []
    document[PITCHING_KEY] = (
        [current.pitching.model_dump(by_alias=True, exclude_none=True)] if current.pitching is not None else []
    )
    document[FIELDING_KEY] = (
        [current.fielding.model_dump(by_alias=True, exclude_none=True)] if current.fielding is not None else []
    )
    return document


def load_players_json(path: Path) -> List[PlayerRecord]:
    """Load player documents from a JSON list or a ``{"players": [...]}`` object."""

    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, Mapping):
        data = data.get("players")
    if not isinstance(data, list):
        raise ValueError(f"{path} does not contain a list of player documents")
    return players_from_documents(data)
