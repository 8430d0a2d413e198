from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import pandas as pd

from team_mixer.history.schema import HistoryLog
from team_mixer.schedule.types import PairScores, Partition

HISTORY_COLUMNS = ["round", "timestamp", "team_id", "members", "size"]
PAIR_COLUMNS = ["player_a", "player_b", "score"]


def summarize_grouping(teams: Partition, separator: str = ", ") -> str:
    lines = []
    for team_id, team in enumerate(teams, start=1):
        members = separator.join(team) if team else "(empty)"
        lines.append(f"Team {team_id}: {members}")
    return "\n".join(lines)


def history_to_dataframe(history: HistoryLog) -> pd.DataFrame:
    """
    One row per team per round. ``round`` is the recency index (0 = newest).
    """
    rows: List[Dict[str, object]] = []
    for round_idx, entry in enumerate(history):
        for team_id, team in enumerate(entry.teams):
            rows.append(
                {
                    "round": round_idx,
                    "timestamp": entry.timestamp,
                    "team_id": team_id,
                    "members": ",".join(team),
                    "size": len(team),
                }
            )
    return pd.DataFrame(rows, columns=HISTORY_COLUMNS)


def pair_scores_to_dataframe(scores: PairScores) -> pd.DataFrame:
    rows = [{"player_a": a, "player_b": b, "score": score} for (a, b), score in scores.items()]
    df = pd.DataFrame(rows, columns=PAIR_COLUMNS)
    if df.empty:
        return df
    return df.sort_values(["score", "player_a", "player_b"], ascending=[False, True, True]).reset_index(drop=True)


def save_history_csv(history: HistoryLog, path: str | Path) -> None:
    df = history_to_dataframe(history)
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(p, index=False)
