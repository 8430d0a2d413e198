from __future__ import annotations

import numbers
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml


class ConfigurationError(ValueError):
    """Raised for invalid team options or engine configuration."""


def _positive_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


@dataclass(frozen=True)
class Config:
    # History log
    history_limit: int = 5
    history_path: str = "team_history.json"

    # Familiarity weighting: weight(i) = (history_limit + 1 - i) * recency_step
    recency_step: int = 2

    # Search
    attempts: int = 10

    # Roster
    spectator_marker: str = "📺"

    def __post_init__(self) -> None:
        for name in ("history_limit", "recency_step", "attempts"):
            object.__setattr__(self, name, _positive_int(name, getattr(self, name)))
        for name in ("history_path", "spectator_marker"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ConfigurationError(f"{name} must be a non-empty string, got {value!r}")


@dataclass(frozen=True)
class TeamOptions:
    """
    How to split a roster: into ``team_count`` teams, or into teams of
    ``team_size``. Exactly one of the two must be given.
    """

    team_count: Optional[int] = None
    team_size: Optional[int] = None

    def __post_init__(self) -> None:
        if (self.team_count is None) == (self.team_size is None):
            raise ConfigurationError("exactly one of team_count or team_size must be set")
        name = "team_count" if self.team_count is not None else "team_size"
        object.__setattr__(self, name, _positive_int(name, getattr(self, name)))

    @classmethod
    def from_key(cls, key: str) -> "TeamOptions":
        """
        Parse a panel key such as ``"teamCount_3"`` or ``"teamSize_2"``.
        """
        kind, sep, raw = key.partition("_")
        if not sep:
            raise ConfigurationError(f"malformed team option key: {key!r}")
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"malformed team option key: {key!r}") from None
        if kind == "teamCount":
            return cls(team_count=value)
        if kind == "teamSize":
            return cls(team_size=value)
        raise ConfigurationError(f"unknown team option kind: {kind!r}")


def load_config(path: str | Path) -> Config:
    """
    Load engine configuration from YAML. Missing keys fall back to defaults.

    An unreadable file, malformed YAML or an invalid value all raise
    ``ConfigurationError``.
    """
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"{p}: cannot read config: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"{p}: malformed YAML: {exc}") from exc

    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigurationError(f"{p}: expected a mapping at the top level")

    known = {f.name for f in fields(Config)}
    unknown = sorted(str(key) for key in set(data) - known)
    if unknown:
        raise ConfigurationError(f"{p}: unknown config keys: {', '.join(unknown)}")
    return Config(**data)
