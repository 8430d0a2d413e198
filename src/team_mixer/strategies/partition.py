from __future__ import annotations

from typing import List, Sequence

from team_mixer.config import TeamOptions
from team_mixer.schedule.types import Participant, Partition


def round_robin_partition(players: Sequence[Participant], team_count: int) -> Partition:
    buckets: List[List[Participant]] = [[] for _ in range(team_count)]
    for idx, player in enumerate(players):
        buckets[idx % team_count].append(player)
    return [tuple(bucket) for bucket in buckets]


def chunk_partition(players: Sequence[Participant], team_size: int) -> Partition:
    return [tuple(players[i : i + team_size]) for i in range(0, len(players), team_size)]


def partition_players(players: Sequence[Participant], options: TeamOptions) -> Partition:
    if options.team_count is not None:
        return round_robin_partition(players, options.team_count)
    return chunk_partition(players, options.team_size)
