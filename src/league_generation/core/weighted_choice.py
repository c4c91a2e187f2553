"""Weighted categorical selection."""

from dataclasses import dataclass
from typing import Generic, List, Sequence, TypeVar

from .exceptions import ConfigurationError
from .random_source import SeededRandomSource

T = TypeVar("T")


@dataclass(frozen=True)
class WeightedOption(Generic[T]):
    """A candidate value and its non-negative weight."""
    value: T
    weight: float


class WeightedChoiceSelector:
    """
    Picks one option with probability proportional to its weight.

    Options are scanned left to right and the first whose cumulative weight
    reaches the draw wins, so input order matters for reproducibility.
    """

    def __init__(self, random_source: SeededRandomSource):
        self.random_source = random_source

    @staticmethod
    def validate_weights(options: Sequence[T], weights: Sequence[float]) -> float:
        """
        Check the option/weight lists and return the total weight.

        Raises:
            ConfigurationError: On length mismatch, negative weights or a
                non-positive total
        """
        if len(options) != len(weights):
            raise ConfigurationError(
                f"Options ({len(options)}) and weights ({len(weights)}) must have the same length",
                config_key="weights",
                error_code=ConfigurationError.INVALID_WEIGHTS,
            )
        if any(w < 0 for w in weights):
            raise ConfigurationError(
                "All weights must be non-negative",
                config_key="weights",
                config_value=list(weights),
                error_code=ConfigurationError.INVALID_WEIGHTS,
            )

        total = sum(weights)
        if total <= 0:
            raise ConfigurationError(
                "Total weight must be positive",
                config_key="weights",
                config_value=list(weights),
                error_code=ConfigurationError.INVALID_WEIGHTS,
            )
        return total

    def choose(self, options: Sequence[T], weights: Sequence[float]) -> T:
        """
        Select one option.

        Args:
            options: Candidate values (order is significant)
            weights: Matching non-negative weights

        Returns:
            The selected option
        """
        total = self.validate_weights(options, weights)
        target = self.random_source.next_uniform() * total

        cumulative = 0.0
        for option, weight in zip(options, weights):
            cumulative += weight
            # Zero-weight options can only tie at target == 0; never pick them
            if weight > 0 and target <= cumulative:
                return option

        # Floating point drift only
        return options[-1]

    def choose_option(self, options: Sequence[WeightedOption[T]]) -> T:
        """Select from (value, weight) pairs."""
        values: List[T] = [o.value for o in options]
        weights = [o.weight for o in options]
        return self.choose(values, weights)
