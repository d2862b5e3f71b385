"""Lightweight REST client for the pyscout API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_json(path: Path | None) -> object:
    if path is None:
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pyscout REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("players", type=Path, nargs="?", help="JSON list of player documents")
    parser.add_argument("--regions", type=Path, default=None, help="Region tier JSON")
    parser.add_argument("--season", default=None, help="Only score this season")
    parser.add_argument("--current-season", action="store_true", help="Score each player's current season only")
    parser.add_argument("--list-regions", action="store_true", help="Print the default region tiers and exit")
    parser.add_argument("--whip", nargs=3, type=float, metavar=("BB", "H", "IP"), help="Compute WHIP and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.list_regions:
            resp = client.get("/regions")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return
        if args.whip:
            walks, hits, innings = args.whip
            resp = client.post(
                "/whip",
                json={"walks_allowed": walks, "hits_allowed": hits, "innings_pitched": innings},
            )
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.players is None:
            raise SystemExit("players file is required unless using --list-regions/--whip")

        players = load_json(args.players)
        if isinstance(players, dict):
            players = players.get("players")
        payload = {
            "players": players,
            "regions": load_json(args.regions),
            "current_season_only": args.current_season,
            "season": args.season,
        }
        resp = client.post("/evaluate", json=payload)
        if resp.status_code == 400:
            raise SystemExit(resp.json().get("detail", "bad request"))
        resp.raise_for_status()
        body = resp.json()
        print("Summary:", json.dumps(body["summary"], indent=2))
        for item in sorted(body["evaluations"], key=lambda e: e["jp_rank"])[:10]:
            print(f"{item['jp_rank']:>3}  {item['final_score']:>3}  {item['player_id']}  {item['season']}")


if __name__ == "__main__":
    main()
