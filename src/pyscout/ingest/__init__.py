"""Input adapters that normalize stored player documents."""

from .documents import (
    current_season_document,
    load_players_json,
    player_from_document,
    player_to_document,
    players_from_documents,
)

__all__ = [
    "current_season_document",
    "load_players_json",
    "player_from_document",
    "player_to_document",
    "players_from_documents",
]
