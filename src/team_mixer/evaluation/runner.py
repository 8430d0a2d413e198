from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

import numpy as np

from team_mixer.config import Config, TeamOptions
from team_mixer.evaluation.types import RoundResult
from team_mixer.history.schema import HistoryEntry
from team_mixer.history.store import HistoryStore
from team_mixer.schedule.generator import search_grouping
from team_mixer.schedule.types import Participant

logger = logging.getLogger(__name__)


def open_store(config: Config) -> HistoryStore:
    return HistoryStore(config.history_path, limit=config.history_limit)


def run_round(
    participants: Sequence[Participant],
    options: TeamOptions,
    store: HistoryStore,
    rng: Optional[np.random.Generator] = None,
    config: Optional[Config] = None,
    commit: bool = True,
    now: Optional[datetime] = None,
) -> RoundResult:
    """
    Load history, search for a grouping and record it, all under the store lock.

    With ``commit=False`` the history is read but left untouched. A failed
    write propagates; the round is then not recorded.
    """
    config = config or Config()
    rng = rng if rng is not None else np.random.default_rng()

    with store.locked():
        history = store.load()
        result = search_grouping(participants, options, history, rng, config)
        if not commit:
            return RoundResult(search=result, history=history, committed=False)
        history = store.append(HistoryEntry.create(result.teams, now=now))

    logger.info("Committed round with score %d", result.score)
    return RoundResult(search=result, history=history, committed=True)
