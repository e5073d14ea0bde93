"""Number sources — where a Game gets its secret from.

A source is any zero-argument callable returning an int. Games call it once
at construction, so swapping in fixed_source() makes a round deterministic.
"""

from __future__ import annotations

import itertools
import random
from typing import Callable, Optional

NumberSource = Callable[[], int]


def random_source(low: int, high: int, seed: Optional[int] = None) -> NumberSource:
    """Uniform draws from [low, high], both ends included.

    Each source owns its own Random instance so seeding one never disturbs
    the module-level generator.
    """
    if low > high:
        raise ValueError(f"empty range [{low},{high}]")
    rng = random.Random(seed)

    def draw() -> int:
        return rng.randint(low, high)

    return draw


def fixed_source(*values: int) -> NumberSource:
    """Cycle through the given values forever."""
    if not values:
        raise ValueError("fixed_source needs at least one value")
    it = itertools.cycle(values)
    return lambda: next(it)
