"""
Player Generator

Builds squads of players for a team. Ages and skills come from bounded
normal draws, positions from a weighted choice, nationality from the
configured domestic share.
"""

import logging
from typing import Dict, List, Optional

from ..core.correlations import ReputationMapper
from ..core.distributions import DistributionSampler
from ..core.exceptions import ConfigurationError
from ..core.generation_config import PlayerConfig
from ..core.random_source import SeededRandomSource
from ..core.validation import ValidationResult
from ..core.weighted_choice import WeightedChoiceSelector
from ..data.country_repository import Country
from ..models.generated_entities import GeneratedPlayer, PlayerPosition
from ..naming.name_generator import NameGenerator


class PlayerGenerator:
    """Generates players with a private random stream."""

    # Squad shape: GK 10, DEF 25, MID 30, FWD 25, extra MID 10
    POSITION_OPTIONS = [
        PlayerPosition.GOALKEEPER,
        PlayerPosition.DEFENDER,
        PlayerPosition.MIDFIELDER,
        PlayerPosition.FORWARD,
        PlayerPosition.MIDFIELDER,
    ]
    POSITION_WEIGHTS = [10, 25, 30, 25, 10]

    ATTRIBUTE_STD_DEV = 8.0
    ATTRIBUTE_MIN = 1
    ATTRIBUTE_MAX = 100

    # Where foreign players in each league tend to come from
    FOREIGN_CONNECTIONS: Dict[str, List[str]] = {
        "GB": ["IE", "FR", "ES", "PT", "NL", "BR", "AR", "DE"],
        "ES": ["AR", "BR", "PT", "FR", "IT", "NL"],
        "DE": ["NL", "FR", "PT", "BR", "ES", "GB"],
        "IT": ["AR", "BR", "FR", "ES", "PT", "DE"],
        "FR": ["BR", "PT", "ES", "IT", "NL", "GB"],
        "BR": ["AR", "PT", "ES", "IT"],
        "AR": ["BR", "ES", "IT", "PT"],
        "NL": ["DE", "GB", "FR", "BR", "PT", "ES"],
        "PT": ["BR", "ES", "AR", "FR"],
        "US": ["GB", "BR", "AR", "ES", "DE", "FR"],
    }
    DEFAULT_FOREIGN = ["BR", "AR", "FR", "ES", "DE", "IT", "PT", "NL", "GB"]

    def __init__(self, seed: Optional[int] = None, logger: Optional[logging.Logger] = None):
        self.random_source = SeededRandomSource(seed)
        self.sampler = DistributionSampler(self.random_source)
        self.selector = WeightedChoiceSelector(self.random_source)
        self.reputation_mapper = ReputationMapper(self.sampler)
        self.name_generator = NameGenerator(self.random_source)
        self.logger = logger or logging.getLogger(__name__)

    def generate_players_for_team(self, country: Country, config: PlayerConfig,
                                  squad_size: int) -> List[GeneratedPlayer]:
        """
        Generate a full squad.

        Args:
            country: Country providing the name culture and domestic nationality
            config: Player settings (validated before any draw)
            squad_size: Number of players to generate

        Returns:
            List of generated players
        """
        self.validate_player_config(config).raise_if_invalid()
        if squad_size < 0:
            raise ConfigurationError("Squad size cannot be negative", config_key="squad_size",
                                     config_value=squad_size, error_code=ConfigurationError.OUT_OF_RANGE)

        players = [self._generate_single_player(country, config) for _ in range(squad_size)]
        self.logger.debug(f"Generated {len(players)} players ({country.code})")
        return players

    def generate_squad_size(self, team_reputation: int, config: PlayerConfig) -> int:
        """Squad size for a team; stronger clubs carry bigger squads."""
        if not config.use_variable_squad_sizes:
            return config.average_squad_size
        return self.reputation_mapper.map_reputation_to_range(team_reputation, config.squad_size_range)

    def validate_player_config(self, config: PlayerConfig) -> ValidationResult:
        return config.validate()

    def _generate_single_player(self, country: Country, config: PlayerConfig) -> GeneratedPlayer:
        name = self.name_generator.generate_full_name(country.language)
        age = self._generate_age(config)
        position = self._generate_position(config.use_realistic_positions)
        overall = self._generate_overall(config)
        nationality = self._generate_nationality(country, config.domestic_player_percentage)

        technical = self._generate_attribute(overall)
        physical = self._generate_attribute(overall)
        mental = self._generate_attribute(overall)

        return GeneratedPlayer(
            player_id=self.random_source.generate_id(),
            name=name,
            age=age,
            position=position,
            overall=overall,
            technical=technical,
            physical=physical,
            mental=mental,
            nationality=nationality,
        )

    def _generate_age(self, config: PlayerConfig) -> int:
        ages = config.age_distribution
        return self.sampler.sample_bounded_int(ages.peak_age, ages.standard_deviation,
                                               ages.min_age, ages.max_age)

    def _generate_position(self, use_realistic_positions: bool) -> PlayerPosition:
        if use_realistic_positions:
            return self.selector.choose(self.POSITION_OPTIONS, self.POSITION_WEIGHTS)
        return self.random_source.choice(list(PlayerPosition))

    def _generate_overall(self, config: PlayerConfig) -> int:
        skills = config.skill_distribution
        return self.sampler.sample_bounded_int(skills.mean_skill, skills.standard_deviation,
                                               skills.min_skill, skills.max_skill)

    def _generate_attribute(self, overall: int) -> int:
        return self.sampler.sample_bounded_int(overall, self.ATTRIBUTE_STD_DEV,
                                               self.ATTRIBUTE_MIN, self.ATTRIBUTE_MAX)

    def _generate_nationality(self, country: Country, domestic_percentage: int) -> str:
        if self.random_source.next_int(100) < domestic_percentage:
            return country.code
        connections = self.FOREIGN_CONNECTIONS.get(country.code, self.DEFAULT_FOREIGN)
        return self.random_source.choice(connections)
