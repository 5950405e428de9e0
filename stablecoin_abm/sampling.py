"""Random sampling helpers shared by every stochastic step."""

from typing import Sequence, TypeVar

import numpy as np

T = TypeVar('T')


def sample_without_replacement(items: Sequence[T], k: int,
                               rng: np.random.Generator) -> list[T]:
    """Draw up to ``k`` distinct items in random order.

    Requests larger than the population return every item (shuffled).
    """
    items = list(items)
    k = max(0, min(int(k), len(items)))
    if k == 0:
        return []
    idx = rng.choice(len(items), size=k, replace=False)
    return [items[i] for i in idx]


def choose_other(items: Sequence[T], exclude: T,
                 rng: np.random.Generator) -> T | None:
    """Pick one item uniformly from ``items`` other than ``exclude``."""
    candidates = [x for x in items if x is not exclude]
    if not candidates:
        return None
    return candidates[int(rng.integers(len(candidates)))]
