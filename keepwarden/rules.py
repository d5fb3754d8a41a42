"""Random helpers and castle progression rules."""

from __future__ import annotations

import random
from typing import TypeVar

T = TypeVar("T")


def random_choice(value1: T, value2: T, rng=None) -> T:
    """Pick one of two values with equal chance."""
    rng = rng or random
    return value1 if rng.randrange(2) == 0 else value2


def random_int_in_range(low: int, high: int, rng=None) -> int:
    """Uniform integer in ``[low, high]`` inclusive."""
    if high < low:
        raise ValueError(f"empty range: {low}..{high}")
    rng = rng or random
    return rng.randint(low, high)


def random_float_in_range(low: float, high: float, rng=None) -> float:
    """Uniform float between ``low`` and ``high``."""
    rng = rng or random
    return low + rng.random() * (high - low)


def max_castle_health(level: int) -> float:
    """Maximum castle health for a castle level."""
    return 10000 + (level - 1) * 500


def castle_attack_interval(level: int) -> float:
    """Seconds between castle attacks at a castle level."""
    return {1: 6.0, 2: 5.5, 3: 5.1}.get(level, 2.0)