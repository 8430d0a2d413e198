from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

Participant = str
Team = Tuple[Participant, ...]
Partition = List[Team]
PairScores = Dict[Tuple[Participant, Participant], int]


@dataclass(frozen=True)
class SearchResult:
    teams: Partition
    score: int
    trials: int

    def to_dict(self) -> dict:
        return {
            "teams": [list(team) for team in self.teams],
            "score": self.score,
            "trials": self.trials,
        }
