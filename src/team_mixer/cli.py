from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from typing import List, Optional

import numpy as np

from team_mixer.config import Config, ConfigurationError, TeamOptions, load_config
from team_mixer.evaluation.reporting import save_history_csv, summarize_grouping
from team_mixer.evaluation.runner import open_store, run_round
from team_mixer.indices.pair_scores import compute_pair_scores
from team_mixer.roster import eligible_participants
from team_mixer.viz.plots import plot_pair_scores


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="team-mixer",
        description="Split a roster into teams, avoiding recently repeated pairings.",
    )
    parser.add_argument("participants", nargs="+", help="participant names")
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--team-count", type=int, help="number of teams (round-robin)")
    mode.add_argument("--team-size", type=int, help="players per team (last team may be smaller)")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--history", type=str, default=None, help="override history file path")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--dry-run", action="store_true", help="do not record the result")
    parser.add_argument("--export-csv", type=str, default=None, help="write the history log to CSV")
    parser.add_argument("--plot-dir", type=str, default=None, help="save a pair familiarity heatmap")
    parser.add_argument("--json", action="store_true", help="print the round result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else Config()
        if args.history:
            config = dataclasses.replace(config, history_path=args.history)
        options = TeamOptions(team_count=args.team_count, team_size=args.team_size)
    except ConfigurationError as exc:
        parser.error(str(exc))

    participants = eligible_participants(args.participants, config.spectator_marker)
    if not participants:
        print("No eligible participants.", file=sys.stderr)
        return 1

    store = open_store(config)
    rng = np.random.default_rng(args.seed)
    try:
        result = run_round(participants, options, store, rng=rng, config=config, commit=not args.dry_run)
    except OSError as exc:
        print(f"Failed to record history at {store.path}: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(summarize_grouping(result.teams))
        print(f"familiarity score: {result.search.score} ({result.search.trials} trials)")
        if not result.committed:
            print("(dry run: history not updated)")

    if args.export_csv:
        save_history_csv(result.history, args.export_csv)
    if args.plot_dir:
        plot_pair_scores(compute_pair_scores(result.history, config), args.plot_dir, players=participants)
    return 0


if __name__ == "__main__":
    sys.exit(main())
