"""
Team Generator

Generates clubs for a country: reputation, home city, founding year, colours
and a culturally styled name that is unique within the current batch.

Each team is produced in a fixed order:
    reputation -> city / founded year / colours -> name -> record
"""

import logging
from datetime import datetime
from typing import List, Optional, Sequence, Set

from ..core.correlations import ReputationMapper
from ..core.distributions import DistributionSampler, round_half_away
from ..core.exceptions import ConfigurationError
from ..core.generation_config import TeamConfig
from ..core.random_source import SeededRandomSource
from ..data.country_repository import Country, NamingCulture
from ..data.name_repository import NameRepository
from ..models.generated_entities import GeneratedTeam, TeamColors
from ..naming.unique_name_resolver import UniqueNameResolver


class TeamGenerator:
    """
    Generates teams with a private random stream.

    Team names are unique within one ``generate_teams`` call, or across
    several calls when the caller passes the same ``used_names`` set.
    """

    EARLIEST_FOUNDING_YEAR = 1880
    MIN_HISTORY_YEARS = 5

    COLOR_OPTIONS = [
        TeamColors("Red", "White"),
        TeamColors("Blue", "White"),
        TeamColors("White", "Blue"),
        TeamColors("Green", "White"),
        TeamColors("Yellow", "Blue"),
        TeamColors("Black", "White"),
        TeamColors("Purple", "White"),
        TeamColors("Orange", "Black"),
    ]

    # Traditional name structure probabilities
    PREFIX_PROBABILITY = 0.4
    SUFFIX_PROBABILITY = 0.6
    CITY_PROBABILITY = 0.8

    def __init__(self, seed: Optional[int] = None, current_year: Optional[int] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize team generator.

        Args:
            seed: Optional seed for reproducible output
            current_year: Reference year for founding dates (defaults to today)
            logger: Optional logger for tracking generation progress
        """
        self.random_source = SeededRandomSource(seed)
        self.sampler = DistributionSampler(self.random_source)
        self.reputation_mapper = ReputationMapper(self.sampler)
        self.logger = logger or logging.getLogger(__name__)
        self.name_resolver = UniqueNameResolver(logger=self.logger)
        self.current_year = current_year or datetime.now().year

    def generate_teams(self, country: Country, config: TeamConfig, count: int,
                       city_names: Optional[Sequence[str]] = None,
                       used_names: Optional[Set[str]] = None) -> List[GeneratedTeam]:
        """
        Generate a batch of teams.

        Args:
            country: Country whose naming culture is used
            config: Team settings (validated before any draw)
            count: Number of teams
            city_names: Cities to draw from (defaults to the country's list)
            used_names: Names already issued in this run; updated in place

        Returns:
            List of teams without players or stadiums
        """
        config.validate().raise_if_invalid()
        if count < 0:
            raise ConfigurationError("Team count cannot be negative", config_key="count",
                                     config_value=count, error_code=ConfigurationError.OUT_OF_RANGE)

        cities = list(city_names) if city_names else NameRepository.get_city_names(country.code)
        used = used_names if used_names is not None else set()

        teams = [self.generate_team(country, config, used, cities) for _ in range(count)]

        self.logger.info(f"Generated {len(teams)} teams for {country.name}")
        return teams

    def generate_team(self, country: Country, config: TeamConfig,
                      used_names: Set[str], cities: Sequence[str]) -> GeneratedTeam:
        """Generate one complete team and record its name in ``used_names``."""
        if not cities:
            raise ConfigurationError("At least one city is required", config_key="city_names",
                                     error_code=ConfigurationError.INVALID_PARAMETER)

        reputation = self.reputation_mapper.generate_reputation(config.min_reputation,
                                                                config.max_reputation)
        city = self.random_source.choice(cities)
        founded_year = self._generate_founded_year()
        colors = self.random_source.choice(self.COLOR_OPTIONS)

        resolution = self.name_resolver.resolve(
            lambda: self._generate_team_name(country.naming_culture, config, cities),
            used_names,
        )

        team = GeneratedTeam(
            team_id=self.random_source.generate_id(),
            name=resolution.name,
            city=city,
            country_code=country.code,
            founded_year=founded_year,
            reputation=reputation,
            colors=colors,
        )
        self.logger.debug(f"Team '{team.name}' ({city}) reputation={reputation}")
        return team

    # ==================== Naming ====================

    def _generate_team_name(self, culture: NamingCulture, config: TeamConfig,
                            cities: Sequence[str]) -> str:
        if config.use_traditional_names and culture.prefers_traditional_names:
            return self._generate_traditional_name(culture, cities)
        return self._generate_modern_name(culture, cities)

    def _generate_traditional_name(self, culture: NamingCulture, cities: Sequence[str]) -> str:
        """Prefix / city / suffix assembled from the culture's patterns."""
        city = self.random_source.choice(cities)

        use_prefix = self.random_source.random_bool(self.PREFIX_PROBABILITY)
        use_suffix = self.random_source.random_bool(self.SUFFIX_PROBABILITY)
        include_city = (culture.includes_city_in_team_name
                        and self.random_source.random_bool(self.CITY_PROBABILITY))

        parts = []
        if use_prefix and culture.team_prefixes:
            parts.append(self.random_source.choice(culture.team_prefixes))
        if include_city:
            parts.append(city)
        if use_suffix and culture.team_suffixes:
            parts.append(self.random_source.choice(culture.team_suffixes))

        if not parts:
            return f"{city} FC"
        return " ".join(parts).strip()

    def _generate_modern_name(self, culture: NamingCulture, cities: Sequence[str]) -> str:
        """Simple corporate-style patterns."""
        city = self.random_source.choice(cities)
        patterns = [
            f"{city} FC",
            f"{city} United",
            f"{city} City",
            f"FC {city}",
        ]
        if culture.team_prefixes:
            prefix = self.random_source.choice(culture.team_prefixes)
            patterns.append(f"{prefix} {city}")

        return self.random_source.choice(patterns)

    # ==================== History ====================

    def _generate_founded_year(self) -> int:
        """Founding year weighted toward older clubs (product of two uniforms)."""
        latest = self.current_year - self.MIN_HISTORY_YEARS
        span = latest - self.EARLIEST_FOUNDING_YEAR
        weighted = span * self.random_source.next_uniform() * self.random_source.next_uniform()
        return self.EARLIEST_FOUNDING_YEAR + round_half_away(weighted)
