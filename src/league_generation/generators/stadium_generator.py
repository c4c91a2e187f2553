"""
Stadium Generator

Builds a home ground for a team. Capacity and atmosphere follow the team's
reputation; the name comes from the country's stadium naming patterns.
"""

import logging
import re
from datetime import datetime
from typing import List, Optional, Set, Tuple

from ..core.correlations import ReputationMapper
from ..core.distributions import DistributionSampler
from ..core.generation_config import StadiumConfig
from ..core.random_source import SeededRandomSource
from ..core.validation import ValidationResult
from ..core.weighted_choice import WeightedChoiceSelector
from ..data.country_repository import Country
from ..models.generated_entities import GeneratedStadium, RoofType, SurfaceType
from ..naming.name_generator import NameGenerator
from ..naming.unique_name_resolver import UniqueNameResolver


class StadiumGenerator:
    """Generates stadiums with a private random stream."""

    # (first year, last year or None for "up to now"), weight
    CONSTRUCTION_ERAS: List[Tuple[Tuple[int, Optional[int]], int]] = [
        ((1920, 1939), 15),
        ((1945, 1975), 25),
        ((1976, 1995), 20),
        ((1996, 2010), 25),
        ((2011, None), 15),
    ]

    SURFACES = [SurfaceType.NATURAL_GRASS, SurfaceType.ARTIFICIAL_TURF, SurfaceType.HYBRID_GRASS]
    SURFACE_WEIGHTS = [70, 10, 20]

    ROOFS = [RoofType.OPEN, RoofType.PARTIAL, RoofType.RETRACTABLE, RoofType.FULL]
    ROOF_WEIGHTS = [60, 25, 10, 5]

    COLD_CLIMATE_COUNTRIES = {"GB", "DE", "NL", "NO", "SE", "DK", "FI"}
    COLD_HEATING_PROBABILITY = 0.7
    MILD_HEATING_PROBABILITY = 0.2

    LANDMARKS = ["Park", "Road", "Lane", "Ground", "Field", "Meadow", "Bridge", "Hill", "Green", "Common"]
    SPONSORS = ["Allianz", "Emirates", "Etihad", "Signal Iduna", "Coliseum", "Metropolitan",
                "Unity", "Victory", "Heritage", "Crown"]

    _PLACEHOLDER = re.compile(r"\{(\w+)\}")

    def __init__(self, seed: Optional[int] = None, current_year: Optional[int] = None,
                 logger: Optional[logging.Logger] = None):
        self.random_source = SeededRandomSource(seed)
        self.sampler = DistributionSampler(self.random_source)
        self.selector = WeightedChoiceSelector(self.random_source)
        self.reputation_mapper = ReputationMapper(self.sampler)
        self.name_generator = NameGenerator(self.random_source)
        self.logger = logger or logging.getLogger(__name__)
        self.name_resolver = UniqueNameResolver(logger=self.logger)
        self.current_year = current_year or datetime.now().year

    def generate_stadium(self, country: Country, config: StadiumConfig, team_name: str,
                         city_name: str, team_reputation: int,
                         used_names: Optional[Set[str]] = None) -> GeneratedStadium:
        """
        Generate the home ground for one team.

        Args:
            country: Country providing naming patterns and climate
            config: Stadium settings (validated before any draw)
            team_name: Owning team, used by the "{team}" pattern
            city_name: Host city
            team_reputation: Owning team's reputation (0-100)
            used_names: Stadium names already issued; updated in place

        Returns:
            Generated stadium
        """
        self.validate_stadium_config(config).raise_if_invalid()

        capacity = self._generate_capacity(team_reputation, config)
        founded_year = self._generate_founded_year()
        surface_type = self.selector.choose(self.SURFACES, self.SURFACE_WEIGHTS)
        roof_type = self.selector.choose(self.ROOFS, self.ROOF_WEIGHTS)
        has_undersoil_heating = self._generate_undersoil_heating(country.code)
        atmosphere = self.reputation_mapper.map_atmosphere(capacity, team_reputation)

        used = used_names if used_names is not None else set()
        name = self.name_resolver.resolve(
            lambda: self._generate_stadium_name(country, team_name, city_name), used
        ).name

        return GeneratedStadium(
            stadium_id=self.random_source.generate_id(),
            name=name,
            capacity=capacity,
            city=city_name,
            country_code=country.code,
            founded_year=founded_year,
            surface_type=surface_type,
            roof_type=roof_type,
            has_undersoil_heating=has_undersoil_heating,
            atmosphere=atmosphere,
        )

    def validate_stadium_config(self, config: StadiumConfig) -> ValidationResult:
        return config.validate()

    # ==================== Naming ====================

    def _generate_stadium_name(self, country: Country, team_name: str, city_name: str) -> str:
        patterns = country.naming_culture.stadium_patterns
        if not patterns:
            return f"{team_name} Stadium"

        pattern = self.random_source.choice(patterns)
        name = self._PLACEHOLDER.sub(
            lambda match: self._fill_placeholder(match.group(1), country, team_name, city_name),
            pattern,
        )
        return self._capitalize_words(name)

    def _fill_placeholder(self, key: str, country: Country, team_name: str, city_name: str) -> str:
        if key == "team":
            return team_name
        if key == "city":
            return city_name
        if key == "name":
            return self.name_generator.generate_full_name(
                country.language, title_prefixes=country.naming_culture.title_prefixes)
        if key == "landmark":
            return self.random_source.choice(self.LANDMARKS)
        if key == "sponsor":
            return self.random_source.choice(self.SPONSORS)
        return key

    @staticmethod
    def _capitalize_words(name: str) -> str:
        """Upper-case the first letter of each word, leaving the rest alone."""
        return " ".join(word[:1].upper() + word[1:] for word in name.split())

    # ==================== Attributes ====================

    def _generate_capacity(self, team_reputation: int, config: StadiumConfig) -> int:
        if config.use_realistic_capacities:
            return self.reputation_mapper.map_capacity(team_reputation, config)
        return config.min_capacity + self.random_source.next_int(config.max_capacity - config.min_capacity)

    def _generate_founded_year(self) -> int:
        eras = [era for era, _ in self.CONSTRUCTION_ERAS]
        weights = [weight for _, weight in self.CONSTRUCTION_ERAS]
        start, end = self.selector.choose(eras, weights)
        end = max(start, end if end is not None else self.current_year)
        return start + self.random_source.next_int(end - start + 1)

    def _generate_undersoil_heating(self, country_code: str) -> bool:
        if country_code in self.COLD_CLIMATE_COUNTRIES:
            return self.random_source.random_bool(self.COLD_HEATING_PROBABILITY)
        return self.random_source.random_bool(self.MILD_HEATING_PROBABILITY)
