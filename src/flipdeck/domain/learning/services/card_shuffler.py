"""Uniform reordering of a card sequence."""

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


class CardShuffler:
    """
    Fisher-Yates shuffle.

    Every permutation of the input is equally likely. A seeded
    ``random.Random`` can be injected for reproducible orderings.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def shuffled(self, items: Sequence[T]) -> list[T]:
        """Return a new list holding ``items`` in a uniformly random order."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self._rng.randint(0, i)
            result[i], result[j] = result[j], result[i]
        return result
