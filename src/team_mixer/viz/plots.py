from __future__ import annotations

import os
from typing import List, Optional, Sequence

import matplotlib
import numpy as np

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from team_mixer.indices.pair_scores import pair_score
from team_mixer.schedule.types import PairScores, Participant


def _save(fig: plt.Figure, outdir: str, filename: str) -> str:
    os.makedirs(outdir, exist_ok=True)
    path = os.path.join(outdir, filename)
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path


def pair_score_matrix(scores: PairScores, players: Sequence[Participant]) -> np.ndarray:
    n = len(players)
    matrix = np.zeros((n, n), dtype=float)
    for i in range(n):
        for j in range(i + 1, n):
            val = pair_score(scores, players[i], players[j])
            matrix[i, j] = val
            matrix[j, i] = val
    return matrix


def plot_pair_scores(
    scores: PairScores,
    outdir: str,
    players: Optional[Sequence[Participant]] = None,
    filename: str = "pair_scores.png",
) -> str:
    if players is None:
        seen: List[Participant] = sorted({p for pair in scores for p in pair})
        players = seen
    matrix = pair_score_matrix(scores, players)

    size = max(4.0, 0.5 * len(players) + 2.0)
    fig, ax = plt.subplots(figsize=(size, size))
    im = ax.imshow(matrix, cmap="viridis", vmin=0)
    ax.set_xticks(range(len(players)))
    ax.set_yticks(range(len(players)))
    ax.set_xticklabels(players, rotation=45, ha="right")
    ax.set_yticklabels(players)
    ax.set_title("Pair familiarity")
    fig.colorbar(im, ax=ax, shrink=0.8)

    return _save(fig, outdir, filename)
