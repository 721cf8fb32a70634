"""Input generators for the tree and list algorithms.

Randomness always comes from an explicitly passed random.Random; nothing here
touches the module-level random state.
"""

from __future__ import annotations

import random
from typing import List

from sortedcontainers import SortedList


def sequential_keys(length: int) -> List[int]:
    """Returns [0, 1, ..., length - 1]."""
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    return list(range(length))


def random_keys(length: int, rng: random.Random) -> List[int]:
    """Returns length draws from [0, length), duplicates allowed."""
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    return [rng.randrange(length) for _ in range(length)]


def sorted_random_keys(length: int, rng: random.Random) -> List[int]:
    """Returns the draws of random_keys in ascending order."""
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    keys = SortedList()
    for _ in range(length):
        keys.add(rng.randrange(length))
    return list(keys)
