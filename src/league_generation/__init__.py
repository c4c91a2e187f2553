"""
League Generation

Seeded statistical generation of fictional football leagues: teams, squads,
stadiums and competitions for a chosen country.

Public API:
    Sampling core:
        - SeededRandomSource: private deterministic random stream
        - DistributionSampler: uniform, normal, exponential, gamma and beta draws
        - WeightedChoiceSelector: weighted categorical choice
        - ReputationMapper: reputation -> squad size, capacity, atmosphere
        - UniqueNameResolver: retry-then-suffix unique names

    Generators:
        - LeagueGenerator, TeamGenerator, PlayerGenerator, StadiumGenerator,
          CountryGenerator

    Configuration:
        - GenerationConfig and its sections, GenerationSettings constants

Example:
    from league_generation import CountryRepository, GenerationConfig, LeagueGenerator

    england = CountryRepository.get_country_by_code("GB")
    config = GenerationConfig.default_for_country(england, seed=42)
    league = LeagueGenerator.from_config(config).generate_complete_league(england, config)
"""

from .config import GenerationSettings
from .core import (
    AgeDistribution,
    ConfigurationError,
    DistributionSampler,
    DistributionSpec,
    DistributionType,
    GeneratedAttribute,
    GenerationConfig,
    GenerationException,
    LeagueConfig,
    PlayerConfig,
    RangeConfig,
    ReputationMapper,
    SamplingError,
    SeededRandomSource,
    SkillDistribution,
    StadiumConfig,
    TeamConfig,
    ValidationResult,
    WeightedChoiceSelector,
    WeightedOption,
    load_generation_config,
    save_generation_config,
)
from .data import Country, CountryRepository, LeagueStructure, NameRepository, NamingCulture
from .generators import (
    CountryGenerator,
    LeagueGenerator,
    PlayerGenerator,
    StadiumGenerator,
    TeamGenerator,
)
from .models import (
    CompetitionType,
    GeneratedLeague,
    GeneratedPlayer,
    GeneratedStadium,
    GeneratedTeam,
    PlayerPosition,
    RoofType,
    SurfaceType,
    TeamColors,
)
from .naming import NameGenerator, NameOutcome, NameResolution, UniqueNameResolver, resolve_unique_name

__version__ = "0.1.0"

__all__ = [
    "AgeDistribution",
    "CompetitionType",
    "ConfigurationError",
    "Country",
    "CountryGenerator",
    "CountryRepository",
    "DistributionSampler",
    "DistributionSpec",
    "DistributionType",
    "GeneratedAttribute",
    "GeneratedLeague",
    "GeneratedPlayer",
    "GeneratedStadium",
    "GeneratedTeam",
    "GenerationConfig",
    "GenerationException",
    "GenerationSettings",
    "LeagueConfig",
    "LeagueGenerator",
    "LeagueStructure",
    "NameGenerator",
    "NameOutcome",
    "NameRepository",
    "NameResolution",
    "NamingCulture",
    "PlayerConfig",
    "PlayerGenerator",
    "PlayerPosition",
    "RangeConfig",
    "ReputationMapper",
    "RoofType",
    "SamplingError",
    "SeededRandomSource",
    "SkillDistribution",
    "StadiumConfig",
    "StadiumGenerator",
    "SurfaceType",
    "TeamColors",
    "TeamConfig",
    "TeamGenerator",
    "UniqueNameResolver",
    "ValidationResult",
    "WeightedChoiceSelector",
    "WeightedOption",
    "load_generation_config",
    "resolve_unique_name",
    "save_generation_config",
]
