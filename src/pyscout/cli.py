"""Command-line interface for scoring a batch of player documents."""

from __future__ import annotations

import argparse
import csv
import json
from dataclasses import replace
from pathlib import Path

from pyscout.config import get_region_map, load_scoring_config
from pyscout.config_loader import RegionProfile
from pyscout.ingest import current_season_document, load_players_json, player_to_document
from pyscout.scoring import refresh_stored_whip, score_batch
from pyscout.seasons import flatten_current_season


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score and rank hitters from player documents")
    parser.add_argument("players", type=Path, help="Path to a JSON list of player documents")
    parser.add_argument(
        "--regions",
        type=Path,
        default=None,
        help="Region tier JSON (defaults to the built-in Tier 1-10 table)",
    )
    parser.add_argument("--save-regions", type=Path, default=None, help="Save the region tiers used to JSON")
    parser.add_argument(
        "--current-season",
        action="store_true",
        help="Evaluate only each player's current season and emit the flattened view",
    )
    parser.add_argument("--season", default=None, help="Only score batting lines of this season (e.g. 2024-25)")
    parser.add_argument(
        "--min-at-bats",
        type=int,
        default=None,
        help="Override the at-bat eligibility threshold",
    )
    parser.add_argument(
        "--backfill-whip",
        action="store_true",
        help="Only recompute stored WHIP (innings in out notation) and skip scoring",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("scored_players.json"),
        help="Output JSON path",
    )
    parser.add_argument(
        "--leaderboard",
        type=Path,
        default=None,
        help="Optional path to write a CSV of ranked hitters",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    try:
        players = load_players_json(args.players)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Unable to load players from {args.players}: {exc}") from exc

    if args.backfill_whip:
        documents = [player_to_document(refresh_stored_whip(player)) for player in players]
        args.output.write_text(json.dumps(documents, indent=2, default=str), encoding="utf-8")
        print(f"Refreshed WHIP for {len(documents)} players; wrote {args.output}")
        return

    if args.regions:
        try:
            region_map = RegionProfile.load(args.regions).regions
        except (OSError, ValueError) as exc:
            raise SystemExit(f"Unable to load regions from {args.regions}: {exc}") from exc
    else:
        region_map = get_region_map()
    if args.save_regions:
        RegionProfile(region_map).save(args.save_regions)
        print(f"Saved region tiers to {args.save_regions}")

    config = load_scoring_config()
    if args.min_at_bats is not None:
        config = replace(config, min_at_bats=max(0, args.min_at_bats))

    if args.current_season:
        players = [flatten_current_season(player) for player in players]

    try:
        result = score_batch(players, region_map, season=args.season, config=config)
    except ValueError as exc:
        raise SystemExit(f"Unable to score {args.players}: {exc}") from exc
    summary = result.summary
    print(
        f"Scored {summary.eligible_hitters} eligible hitters across {summary.batch_size} players"
    )
    if summary.pitching_records:
        print(f"Computed WHIP for {summary.pitching_records} pitching lines")

    if args.current_season:
        documents = [current_season_document(player) for player in result.players]
    else:
        documents = [player_to_document(player) for player in result.players]
    args.output.write_text(json.dumps(documents, indent=2, default=str), encoding="utf-8")
    print(f"Wrote scored players to {args.output}")

    if args.leaderboard:
        names = {player.player_id: player.name for player in result.players}
        ranked = sorted(result.evaluations, key=lambda item: (item.jp_rank, item.player_id))
        with args.leaderboard.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow([
                "jp_rank",
                "final_score",
                "player_id",
                "name",
                "season",
                "on_base_pct",
                "isolated_power",
                "slugging",
                "strikeout_rate",
                "net_stolen_base_rate",
                "raw_score",
                "multiplier",
            ])
            for item in ranked:
                derived = item.derived
                writer.writerow([
                    item.jp_rank,
                    item.final_score,
                    item.player_id,
                    names.get(item.player_id, ""),
                    "" if item.season is None else item.season,
                    f"{derived.on_base_pct:.3f}",
                    f"{derived.isolated_power:.3f}",
                    f"{derived.slugging:.3f}",
                    f"{derived.strikeout_rate:.3f}",
                    f"{derived.net_stolen_base_rate:.3f}",
                    f"{item.raw_score:.4f}",
                    item.multiplier,
                ])
        print(f"Wrote leaderboard to {args.leaderboard}")


if __name__ == "__main__":
    main()
