from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from team_mixer.config import Config, TeamOptions
from team_mixer.history.schema import HistoryLog
from team_mixer.indices.pair_scores import compute_pair_scores, partition_score
from team_mixer.schedule.types import Participant, Partition, SearchResult
from team_mixer.strategies.partition import partition_players
from team_mixer.strategies.shuffle import shuffle

logger = logging.getLogger(__name__)


def search_grouping(
    participants: Sequence[Participant],
    options: TeamOptions,
    history: HistoryLog,
    rng: np.random.Generator,
    config: Optional[Config] = None,
) -> SearchResult:
    """
    Pick the lowest-familiarity grouping out of ``config.attempts`` random trials.

    Each trial shuffles the roster and splits it per ``options``. The best
    candidate is replaced only on a strict improvement, and the search stops
    as soon as a candidate scores 0.

    Precondition: ``participants`` is non-empty.
    """
    if not participants:
        raise ValueError("participants must not be empty")
    config = config or Config()
    pair_scores = compute_pair_scores(history, config)

    best_teams: Optional[Partition] = None
    best_score = float("inf")
    trials = 0
    for _ in range(config.attempts):
        trials += 1
        candidate = partition_players(shuffle(participants, rng), options)
        score = partition_score(candidate, pair_scores)
        logger.debug("trial %d: score=%d", trials, score)
        if score < best_score:
            best_score = score
            best_teams = candidate
        if best_score == 0:
            break

    logger.info(
        "Chose %d teams for %d participants: score=%d after %d/%d trials",
        len(best_teams),
        len(participants),
        best_score,
        trials,
        config.attempts,
    )
    return SearchResult(teams=best_teams, score=int(best_score), trials=trials)


def generate_grouping(
    participants: Sequence[Participant],
    options: TeamOptions,
    history: HistoryLog,
    rng: np.random.Generator,
    config: Optional[Config] = None,
) -> Partition:
    return search_grouping(participants, options, history, rng, config).teams
