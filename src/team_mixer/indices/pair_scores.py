"""Recency-weighted pair familiarity derived from the history log.

A pair that shared a team in the newest round weighs the most; each older
round weighs ``recency_step`` less. Rounds evicted from the log contribute
nothing.
"""
from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, Tuple

from team_mixer.config import Config
from team_mixer.history.schema import HistoryLog
from team_mixer.schedule.types import PairScores, Participant, Team


def pair_key(a: Participant, b: Participant) -> Tuple[Participant, Participant]:
    return (a, b) if a <= b else (b, a)


def recency_weight(index: int, config: Config) -> int:
    return (config.history_limit + 1 - index) * config.recency_step


def compute_pair_scores(history: HistoryLog, config: Config) -> PairScores:
    scores: Dict[Tuple[Participant, Participant], int] = defaultdict(int)
    for index, entry in enumerate(history):
        weight = recency_weight(index, config)
        for team in entry.teams:
            for i_idx in range(len(team)):
                for j_idx in range(i_idx + 1, len(team)):
                    scores[pair_key(team[i_idx], team[j_idx])] += weight
    return dict(scores)


def pair_score(scores: PairScores, a: Participant, b: Participant) -> int:
    return scores.get(pair_key(a, b), 0)


def team_score(team: Team, scores: PairScores) -> int:
    total = 0
    for i_idx in range(len(team)):
        for j_idx in range(i_idx + 1, len(team)):
            total += pair_score(scores, team[i_idx], team[j_idx])
    return total


def partition_score(teams: Iterable[Team], scores: PairScores) -> int:
    return sum(team_score(team, scores) for team in teams)
