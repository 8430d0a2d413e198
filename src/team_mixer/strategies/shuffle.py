from __future__ import annotations

from typing import List, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: np.random.Generator) -> List[T]:
    """Fisher-Yates shuffle of a copy of ``items``; the input is left as is."""
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        out[i], out[j] = out[j], out[i]
    return out
