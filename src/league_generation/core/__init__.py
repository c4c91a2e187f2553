"""Statistical core: random source, samplers, weighted choice, correlations."""

from .correlations import ReputationMapper
from .distributions import (
    DistributionSampler,
    DistributionSpec,
    DistributionType,
    GeneratedAttribute,
)
from .exceptions import ConfigurationError, GenerationException, SamplingError
from .generation_config import (
    AgeDistribution,
    GenerationConfig,
    LeagueConfig,
    PlayerConfig,
    RangeConfig,
    SkillDistribution,
    StadiumConfig,
    TeamConfig,
    load_generation_config,
    save_generation_config,
)
from .random_source import SeededRandomSource
from .validation import ValidationResult
from .weighted_choice import WeightedChoiceSelector, WeightedOption

__all__ = [
    "AgeDistribution",
    "ConfigurationError",
    "DistributionSampler",
    "DistributionSpec",
    "DistributionType",
    "GeneratedAttribute",
    "GenerationConfig",
    "GenerationException",
    "LeagueConfig",
    "PlayerConfig",
    "RangeConfig",
    "ReputationMapper",
    "SamplingError",
    "SeededRandomSource",
    "SkillDistribution",
    "StadiumConfig",
    "TeamConfig",
    "ValidationResult",
    "WeightedChoiceSelector",
    "WeightedOption",
    "load_generation_config",
    "save_generation_config",
]
