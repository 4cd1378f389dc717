from __future__ import annotations

import math
from typing import List, Sequence, TypeVar

T = TypeVar("T")

SINE_SCALE = 10_000


def seeded_random(seed: int) -> float:
    """Map an integer seed to a float in [0, 1).

    Stateless: the same seed always yields the same value.
    """
    value = math.sin(seed) * SINE_SCALE
    return value - math.floor(value)


def seeded_shuffle(items: Sequence[T], seed: int) -> List[T]:
    shuffled = list(items)
    for index in range(len(shuffled) - 1, 0, -1):
        swap_index = math.floor(seeded_random(seed + index) * (index + 1))
        shuffled[index], shuffled[swap_index] = shuffled[swap_index], shuffled[index]
    return shuffled
