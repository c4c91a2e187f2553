"""
Seeded Random Source

Deterministic pseudo-random stream owned by exactly one generator instance.

Two sources built with the same seed return identical sequences for identical
call sequences. A seed of None draws initial state from the operating system,
so the stream is not reproducible.

Usage:
    source = SeededRandomSource(seed=42)
    roll = source.next_uniform()      # float in [0, 1)
    index = source.next_int(10)       # int in [0, 10)
"""

import random
from typing import List, MutableSequence, Optional, Sequence, TypeVar

from ..config.generation_settings import GenerationSettings
from .exceptions import ConfigurationError

T = TypeVar("T")


class SeededRandomSource:
    """
    Wraps a private random.Random instance.

    The module-level ``random`` functions are never touched, so seeding one
    source cannot disturb another.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize random source.

        Args:
            seed: Optional seed for reproducible streams
        """
        self.seed = seed
        self._random = random.Random(seed)

    def next_uniform(self) -> float:
        """Return a float in [0, 1)."""
        return self._random.random()

    def next_int(self, bound: int) -> int:
        """
        Return an integer in [0, bound).

        Raises:
            ConfigurationError: If bound is not positive
        """
        if bound <= 0:
            raise ConfigurationError(
                "Integer bound must be positive",
                config_key="bound",
                config_value=bound,
                error_code=ConfigurationError.INVALID_PARAMETER,
            )
        return self._random.randrange(bound)

    def choice(self, items: Sequence[T]) -> T:
        """Pick one element uniformly."""
        if not items:
            raise ConfigurationError(
                "Cannot choose from an empty sequence",
                config_key="items",
                error_code=ConfigurationError.INVALID_PARAMETER,
            )
        return items[self.next_int(len(items))]

    def random_bool(self, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        return self.next_uniform() < probability

    def generate_id(self, length: int = GenerationSettings.ENTITY_ID_LENGTH) -> str:
        """Generate a lowercase alphanumeric identifier."""
        alphabet = GenerationSettings.ID_ALPHABET
        return "".join(alphabet[self.next_int(len(alphabet))] for _ in range(length))

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Shuffle a list in place (Fisher-Yates, back to front)."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_int(i + 1)
            items[i], items[j] = items[j], items[i]

    def random_subset(self, items: Sequence[T], count: int) -> List[T]:
        """
        Return ``count`` distinct elements in random order.

        Raises:
            ConfigurationError: If more items are requested than available
        """
        if count > len(items):
            raise ConfigurationError(
                f"Cannot select {count} items from {len(items)}",
                config_key="count",
                config_value=count,
                error_code=ConfigurationError.OUT_OF_RANGE,
            )
        shuffled = list(items)
        self.shuffle(shuffled)
        return shuffled[:count]
