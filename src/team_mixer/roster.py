"""Display-name helpers for spectators.

A participant opts out of grouping by carrying the spectator marker at the
start of their display name.
"""
from __future__ import annotations

from typing import Iterable, List

DEFAULT_MARKER = "📺"


def is_spectator(name: str, marker: str = DEFAULT_MARKER) -> bool:
    return name.startswith(marker)


def eligible_participants(names: Iterable[str], marker: str = DEFAULT_MARKER) -> List[str]:
    return [name for name in names if not is_spectator(name, marker)]


def mark_spectator(name: str, marker: str = DEFAULT_MARKER) -> str:
    if is_spectator(name, marker):
        return name
    return f"{marker} {name}"


def unmark_spectator(name: str, marker: str = DEFAULT_MARKER) -> str:
    if not is_spectator(name, marker):
        return name
    return name.replace(marker, "", 1).strip()
