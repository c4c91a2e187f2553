"""
Generation Configuration

Value objects describing how a league, its teams, players and stadiums are
generated. Configs are plain dataclasses: construction never fails (except
for RangeConfig, whose invariant the sampler depends on) and each exposes a
``validate()`` method returning a ValidationResult that explains what is wrong.

Configs round-trip through ``to_dict()`` / ``from_dict()`` for JSON storage.
"""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..data.country_repository import Country, CountryRepository
from .exceptions import ConfigurationError
from .validation import ValidationResult


def _invalid(message: str, key: str, value: Any = None) -> ValidationResult:
    return ValidationResult.fail(ConfigurationError(message, config_key=key, config_value=value))


@dataclass(frozen=True)
class RangeConfig:
    """
    Bounds for a reputation-correlated attribute.

    Attributes:
        min: Lowest allowed value
        max: Highest allowed value
        average: Value a mid-reputation entity gravitates to
        influence: 0.0-1.0, how strongly reputation skews the result
    """
    min: int
    max: int
    average: float
    influence: float

    def __post_init__(self):
        if self.min >= self.max:
            raise ConfigurationError.invalid_bounds(self.min, self.max, "range")
        if not self.min <= self.average <= self.max:
            raise ConfigurationError(
                f"Average must lie within [{self.min}, {self.max}]",
                config_key="average",
                config_value=self.average,
                error_code=ConfigurationError.OUT_OF_RANGE,
            )
        if not 0.0 <= self.influence <= 1.0:
            raise ConfigurationError(
                "Influence must be between 0.0 and 1.0",
                config_key="influence",
                config_value=self.influence,
                error_code=ConfigurationError.OUT_OF_RANGE,
            )


@dataclass
class AgeDistribution:
    """Age distribution parameters for player generation."""
    min_age: int = 16
    max_age: int = 40
    peak_age: int = 26
    standard_deviation: float = 4.5

    @classmethod
    def realistic(cls) -> "AgeDistribution":
        return cls()

    def validate(self) -> ValidationResult:
        if self.min_age >= self.max_age:
            return ValidationResult.fail(
                ConfigurationError.invalid_bounds(self.min_age, self.max_age, "age_distribution"))
        if not self.min_age <= self.peak_age <= self.max_age:
            return _invalid("Peak age must lie within the age bounds", "peak_age", self.peak_age)
        if self.standard_deviation < 0:
            return ValidationResult.fail(ConfigurationError(
                "Standard deviation cannot be negative",
                config_key="age_distribution.standard_deviation",
                config_value=self.standard_deviation,
                error_code=ConfigurationError.NEGATIVE_STD_DEV,
            ))
        return ValidationResult.ok()


@dataclass
class SkillDistribution:
    """Skill distribution parameters for player generation."""
    mean_skill: float = 55.0
    standard_deviation: float = 15.0
    min_skill: int = 20
    max_skill: int = 95

    @classmethod
    def realistic(cls) -> "SkillDistribution":
        return cls()

    def validate(self) -> ValidationResult:
        if self.min_skill >= self.max_skill:
            return ValidationResult.fail(
                ConfigurationError.invalid_bounds(self.min_skill, self.max_skill, "skill_distribution"))
        if not self.min_skill <= self.mean_skill <= self.max_skill:
            return _invalid("Mean skill must lie within the skill bounds", "mean_skill", self.mean_skill)
        if self.standard_deviation < 0:
            return ValidationResult.fail(ConfigurationError(
                "Standard deviation cannot be negative",
                config_key="skill_distribution.standard_deviation",
                config_value=self.standard_deviation,
                error_code=ConfigurationError.NEGATIVE_STD_DEV,
            ))
        return ValidationResult.ok()


@dataclass
class LeagueConfig:
    """League structure settings."""
    divisions: int = 1
    teams_per_division: int = 20
    generate_cups: bool = True
    name_format: str = "Premier League"
    historical_years: int = 5

    @classmethod
    def default_for_country(cls, country: Country) -> "LeagueConfig":
        return cls(
            divisions=country.league_structure.professional_divisions,
            teams_per_division=country.league_structure.top_division_teams,
            generate_cups=True,
            name_format=f"{country.name} Premier League",
            historical_years=5,
        )


@dataclass
class TeamConfig:
    """Team generation settings."""
    use_realistic_distribution: bool = True
    min_reputation: int = 30
    max_reputation: int = 85
    generate_history: bool = True
    use_traditional_names: bool = True

    @classmethod
    def default_config(cls) -> "TeamConfig":
        return cls()

    def validate(self) -> ValidationResult:
        if self.min_reputation >= self.max_reputation:
            return ValidationResult.fail(ConfigurationError.invalid_bounds(
                self.min_reputation, self.max_reputation, "reputation"))
        if self.min_reputation < 0 or self.max_reputation > 100:
            return ValidationResult.fail(ConfigurationError(
                "Reputation bounds must lie within 0-100",
                config_key="reputation",
                config_value=(self.min_reputation, self.max_reputation),
                error_code=ConfigurationError.OUT_OF_RANGE,
            ))
        return ValidationResult.ok()


@dataclass
class PlayerConfig:
    """Player and squad generation settings."""
    age_distribution: AgeDistribution = field(default_factory=AgeDistribution.realistic)
    skill_distribution: SkillDistribution = field(default_factory=SkillDistribution.realistic)
    generate_personalities: bool = True
    use_realistic_positions: bool = True
    domestic_player_percentage: int = 75
    use_variable_squad_sizes: bool = True
    min_squad_size: int = 18
    max_squad_size: int = 32
    average_squad_size: int = 25
    reputation_influence: float = 0.6

    @classmethod
    def default_config(cls) -> "PlayerConfig":
        return cls()

    @property
    def squad_size_range(self) -> RangeConfig:
        """Squad size bounds as a RangeConfig (raises if they are invalid)."""
        return RangeConfig(
            min=self.min_squad_size,
            max=self.max_squad_size,
            average=self.average_squad_size,
            influence=self.reputation_influence,
        )

    def validate(self) -> ValidationResult:
        for check in (self.age_distribution.validate(), self.skill_distribution.validate()):
            if not check.is_valid:
                return check

        if not 0 <= self.domestic_player_percentage <= 100:
            return ValidationResult.fail(ConfigurationError(
                "Domestic player percentage must be between 0 and 100",
                config_key="domestic_player_percentage",
                config_value=self.domestic_player_percentage,
                error_code=ConfigurationError.OUT_OF_RANGE,
            ))

        try:
            _ = self.squad_size_range
        except ConfigurationError as e:
            return ValidationResult.fail(e)

        return ValidationResult.ok()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerConfig":
        defaults = cls()
        return cls(
            age_distribution=AgeDistribution(**data["age_distribution"])
            if "age_distribution" in data else defaults.age_distribution,
            skill_distribution=SkillDistribution(**data["skill_distribution"])
            if "skill_distribution" in data else defaults.skill_distribution,
            generate_personalities=data.get("generate_personalities", defaults.generate_personalities),
            use_realistic_positions=data.get("use_realistic_positions", defaults.use_realistic_positions),
            domestic_player_percentage=data.get("domestic_player_percentage",
                                                defaults.domestic_player_percentage),
            use_variable_squad_sizes=data.get("use_variable_squad_sizes", defaults.use_variable_squad_sizes),
            min_squad_size=data.get("min_squad_size", defaults.min_squad_size),
            max_squad_size=data.get("max_squad_size", defaults.max_squad_size),
            average_squad_size=data.get("average_squad_size", defaults.average_squad_size),
            reputation_influence=data.get("reputation_influence", defaults.reputation_influence),
        )


@dataclass
class StadiumConfig:
    """Stadium generation settings."""
    min_capacity: int = 5000
    max_capacity: int = 80000
    use_realistic_capacities: bool = True
    generate_history: bool = True

    @classmethod
    def default_config(cls) -> "StadiumConfig":
        return cls()

    def validate(self) -> ValidationResult:
        if self.min_capacity >= self.max_capacity:
            return ValidationResult.fail(ConfigurationError.invalid_bounds(
                self.min_capacity, self.max_capacity, "capacity"))
        if self.min_capacity < 1000 or self.max_capacity > 150000:
            return ValidationResult.fail(ConfigurationError(
                "Capacity bounds must lie within 1,000-150,000",
                config_key="capacity",
                config_value=(self.min_capacity, self.max_capacity),
                error_code=ConfigurationError.OUT_OF_RANGE,
            ))
        return ValidationResult.ok()


@dataclass
class GenerationConfig:
    """Complete configuration for generating one country's football data."""
    country: Country
    league_config: LeagueConfig
    team_config: TeamConfig = field(default_factory=TeamConfig.default_config)
    player_config: PlayerConfig = field(default_factory=PlayerConfig.default_config)
    stadium_config: StadiumConfig = field(default_factory=StadiumConfig.default_config)
    seed: Optional[int] = None

    @classmethod
    def default_for_country(cls, country: Country, seed: Optional[int] = None) -> "GenerationConfig":
        """Create the default configuration for a given country."""
        return cls(
            country=country,
            league_config=LeagueConfig.default_for_country(country),
            seed=seed,
        )

    def validate(self) -> ValidationResult:
        """Validate the team, player and stadium sections in that order."""
        for check in (self.team_config.validate(),
                      self.player_config.validate(),
                      self.stadium_config.validate()):
            if not check.is_valid:
                return check
        return ValidationResult.ok()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization (country stored by code)."""
        return {
            "country": self.country.code,
            "league_config": asdict(self.league_config),
            "team_config": asdict(self.team_config),
            "player_config": self.player_config.to_dict(),
            "stadium_config": asdict(self.stadium_config),
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationConfig":
        """
        Create GenerationConfig from dictionary.

        Missing sections fall back to the country's defaults.

        Raises:
            ConfigurationError: If the country code is unknown or a section
                carries keys its config class does not accept
        """
        if not isinstance(data, dict):
            raise ConfigurationError("Generation config must be a JSON object",
                                     config_key="config", config_value=type(data).__name__)

        code = data.get("country", "")
        country = CountryRepository.get_country_by_code(code)
        if country is None:
            raise ConfigurationError("Unknown country code", config_key="country", config_value=code)

        defaults = cls.default_for_country(country)
        try:
            return cls(
                country=country,
                league_config=LeagueConfig(**data["league_config"])
                if "league_config" in data else defaults.league_config,
                team_config=TeamConfig(**data["team_config"])
                if "team_config" in data else defaults.team_config,
                player_config=PlayerConfig.from_dict(data["player_config"])
                if "player_config" in data else defaults.player_config,
                stadium_config=StadiumConfig(**data["stadium_config"])
                if "stadium_config" in data else defaults.stadium_config,
                seed=data.get("seed"),
            )
        except TypeError as e:
            raise ConfigurationError(f"Invalid generation config section: {e}",
                                     config_key="config") from e


def load_generation_config(path: Union[str, Path]) -> GenerationConfig:
    """
    Load a GenerationConfig from a JSON file.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid JSON,
            or does not describe a valid configuration
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Could not read generation config: {e}",
                                 config_key="config", config_value=str(path)) from e
    return GenerationConfig.from_dict(data)


def save_generation_config(config: GenerationConfig, path: Union[str, Path]) -> None:
    """Write a GenerationConfig to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
