from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class DeterministicRng:
    def __init__(self, seed: int):
        self._seed = seed
        self._random = random.Random(seed)

    def reset(self) -> None:
        self._random.seed(self._seed)

    def next_int(self, max_value: int) -> int:
        return self._random.randrange(max_value)

    def next_int_range(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high)``; ``low`` when the range is empty."""
        if high <= low:
            return low
        return self._random.randrange(low, high)

    def sample_choice(self, items: Sequence[T]) -> Optional[T]:
        if not items:
            return None
        return items[self._random.randrange(len(items))]
