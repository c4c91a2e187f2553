"""
Unique Name Resolver

Turns a candidate-name generator into a collision-free name within one
generation run.

Strategy:
1. Ask the generator for fresh candidates up to ``max_attempts`` times
2. If every candidate is taken, append " 2", " 3", ... to the last candidate
   until a free name is found

The set of issued names belongs to the caller and lives for one run (one
league or one team batch). Resolved names are added to it.

Usage:
    resolver = UniqueNameResolver()
    used = set()
    name = resolver.resolve(lambda: make_team_name(), used).name
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Set

from ..config.generation_settings import GenerationSettings
from ..core.exceptions import ConfigurationError


class NameOutcome(Enum):
    """How a name was resolved."""
    GENERATED = "generated"
    SUFFIXED = "suffixed"


@dataclass(frozen=True)
class NameResolution:
    """
    Result of resolving one name.

    Attributes:
        name: The collision-free name (already recorded as used)
        outcome: GENERATED if a fresh candidate was free, SUFFIXED otherwise
        attempts: Number of candidates requested from the generator
    """
    name: str
    outcome: NameOutcome
    attempts: int


class UniqueNameResolver:
    """Retry-then-suffix name resolution."""

    def __init__(self, max_attempts: int = GenerationSettings.NAME_RETRY_LIMIT,
                 suffix_limit: int = GenerationSettings.NAME_SUFFIX_LIMIT,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize resolver.

        Args:
            max_attempts: Candidates requested before suffixing (>= 1)
            suffix_limit: Highest numeric suffix tried
            logger: Optional logger (defaults to the module logger)
        """
        if max_attempts < 1:
            raise ConfigurationError(
                "max_attempts must be at least 1",
                config_key="max_attempts",
                config_value=max_attempts,
                error_code=ConfigurationError.INVALID_PARAMETER,
            )
        self.max_attempts = max_attempts
        self.suffix_limit = suffix_limit
        self.logger = logger or logging.getLogger(__name__)

    def resolve(self, candidate_generator: Callable[[], str], used: Set[str]) -> NameResolution:
        """
        Produce a name not yet in ``used`` and record it there.

        Raises:
            ConfigurationError: If every suffix up to suffix_limit is taken
        """
        candidate = ""
        for attempt in range(1, self.max_attempts + 1):
            candidate = candidate_generator()
            if candidate not in used:
                used.add(candidate)
                return NameResolution(candidate, NameOutcome.GENERATED, attempt)

        for suffix in range(2, self.suffix_limit + 1):
            suffixed = f"{candidate} {suffix}"
            if suffixed not in used:
                self.logger.debug(
                    f"Name '{candidate}' still taken after {self.max_attempts} attempts, "
                    f"using '{suffixed}'"
                )
                used.add(suffixed)
                return NameResolution(suffixed, NameOutcome.SUFFIXED, self.max_attempts)

        raise ConfigurationError(
            f"Name space exhausted for '{candidate}' (suffixes 2-{self.suffix_limit} all taken)",
            config_key="name",
            config_value=candidate,
            error_code=ConfigurationError.NAME_SPACE_EXHAUSTED,
        )


def resolve_unique_name(candidate_generator: Callable[[], str], used: Set[str]) -> str:
    """Resolve one name with the default retry ceiling and return it."""
    return UniqueNameResolver().resolve(candidate_generator, used).name
