"""Seed count distribution."""
from __future__ import annotations

import random
from typing import Sequence


def weighted_seed_count(weights: Sequence[int], rng: random.Random) -> int:
    """Pick how many seeds to drop; index i has relative weight weights[i].

    A zero total weight always yields 0 without consulting *rng*.
    """
    total = sum(weights)
    if total <= 0:
        return 0
    r = rng.randrange(total)
    for count, weight in enumerate(weights):
        if r < weight:
            return count
        r -= weight
    return 0
