from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence, Tuple

from team_mixer.schedule.types import Team


@dataclass(frozen=True)
class HistoryEntry:
    timestamp: str
    teams: Tuple[Team, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "teams", tuple(tuple(team) for team in self.teams))

    @classmethod
    def create(cls, teams: Iterable[Sequence[str]], now: Optional[datetime] = None) -> "HistoryEntry":
        stamp = now if now is not None else datetime.now(timezone.utc)
        return cls(timestamp=stamp.isoformat(), teams=teams)

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp,
            "teams": [list(team) for team in self.teams],
        }

    @classmethod
    def from_dict(cls, data: object) -> "HistoryEntry":
        if not isinstance(data, dict):
            raise ValueError(f"history entry must be an object, got {type(data).__name__}")
        timestamp = data.get("timestamp")
        teams = data.get("teams")
        if not isinstance(timestamp, str):
            raise ValueError("history entry is missing a string timestamp")
        if not isinstance(teams, list):
            raise ValueError("history entry is missing a teams list")
        for team in teams:
            if not isinstance(team, list) or not all(isinstance(m, str) for m in team):
                raise ValueError("history teams must be lists of participant ids")
        return cls(timestamp=timestamp, teams=teams)


HistoryLog = List[HistoryEntry]


def history_to_payload(history: HistoryLog) -> list:
    return [entry.to_dict() for entry in history]


def history_from_payload(payload: object) -> HistoryLog:
    if not isinstance(payload, list):
        raise ValueError(f"history log must be a list, got {type(payload).__name__}")
    return [HistoryEntry.from_dict(item) for item in payload]
