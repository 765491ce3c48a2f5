"""Random number helpers for dice throws."""

from __future__ import annotations

import random
from typing import Optional


def roll(low: int, high: int, rng: Optional[random.Random] = None) -> int:
    """Return a random integer in the inclusive range [low, high]."""
    if low > high:
        raise ValueError(f"empty range: low={low} is greater than high={high}")
    source = rng if rng is not None else random
    return source.randint(low, high)