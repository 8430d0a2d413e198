from __future__ import annotations

from dataclasses import dataclass

from team_mixer.history.schema import HistoryLog, history_to_payload
from team_mixer.schedule.types import Partition, SearchResult


@dataclass(frozen=True)
class RoundResult:
    search: SearchResult
    history: HistoryLog
    committed: bool

    @property
    def teams(self) -> Partition:
        return self.search.teams

    def to_dict(self) -> dict:
        return {
            "search": self.search.to_dict(),
            "history": history_to_payload(self.history),
            "committed": self.committed,
        }
