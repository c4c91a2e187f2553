"""
Distribution Sampler

Bounded statistical draws used for every generated scalar.

Supported distributions:
- Uniform: flat over [min, max]
- Normal: Box-Muller transform with a cached spare value
- Exponential: scaled by a tunable divisor, then mapped into [min, max]
- Gamma: Marsaglia-Tsang rejection sampling
- Beta: ratio of two gamma draws

Values outside the requested bounds are clamped, never resampled, so a tail
draw can not make sampling fail.

Usage:
    sampler = DistributionSampler(SeededRandomSource(seed=42))
    age = sampler.sample_bounded_int(mean=26, std_dev=4.5, min_value=16, max_value=40)
    value = sampler.sample(DistributionSpec.beta(0, 100, alpha=2.0, beta=5.0))
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..config.generation_settings import GenerationSettings
from .exceptions import ConfigurationError, SamplingError
from .random_source import SeededRandomSource

Number = Union[int, float]


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class DistributionType(Enum):
    """Sampling algorithm selector for DistributionSpec."""
    UNIFORM = "uniform"
    NORMAL = "normal"
    EXPONENTIAL = "exponential"
    BETA = "beta"


@dataclass(frozen=True)
class DistributionSpec:
    """
    Tagged description of a bounded scalar draw.

    Only the parameters belonging to ``distribution_type`` are read; unset
    parameters fall back to the defaults documented on DistributionSampler.sample.
    """
    distribution_type: DistributionType
    min_value: float
    max_value: float
    mean: Optional[float] = None
    std_dev: Optional[float] = None
    rate: Optional[float] = None
    shape_alpha: Optional[float] = None
    shape_beta: Optional[float] = None

    def __post_init__(self):
        if self.min_value >= self.max_value:
            raise ConfigurationError.invalid_bounds(self.min_value, self.max_value)
        if self.std_dev is not None and self.std_dev < 0:
            raise ConfigurationError(
                "Standard deviation cannot be negative",
                config_key="std_dev",
                config_value=self.std_dev,
                error_code=ConfigurationError.NEGATIVE_STD_DEV,
            )

    @classmethod
    def uniform(cls, min_value: float, max_value: float) -> "DistributionSpec":
        return cls(DistributionType.UNIFORM, min_value, max_value)

    @classmethod
    def normal(cls, min_value: float, max_value: float,
               mean: Optional[float] = None,
               std_dev: Optional[float] = None) -> "DistributionSpec":
        return cls(DistributionType.NORMAL, min_value, max_value,
                   mean=mean, std_dev=std_dev)

    @classmethod
    def exponential(cls, min_value: float, max_value: float,
                    rate: float = 1.0) -> "DistributionSpec":
        return cls(DistributionType.EXPONENTIAL, min_value, max_value, rate=rate)

    @classmethod
    def beta(cls, min_value: float, max_value: float,
             alpha: float = 2.0, beta: float = 2.0) -> "DistributionSpec":
        return cls(DistributionType.BETA, min_value, max_value,
                   shape_alpha=alpha, shape_beta=beta)


@dataclass(frozen=True)
class GeneratedAttribute:
    """A sampled value together with the spec that produced it (debugging aid)."""
    value: float
    spec: DistributionSpec


class DistributionSampler:
    """
    Draws bounded values from a private SeededRandomSource.

    Holds one cached standard-normal "spare" from the last Box-Muller pair.
    The spare is stored unscaled and scaled by whatever mean/std_dev the next
    normal call passes, so changing parameters does not discard it.
    """

    def __init__(self, random_source: Optional[SeededRandomSource] = None,
                 seed: Optional[int] = None):
        """
        Initialize sampler.

        Args:
            random_source: Source to draw from (created from ``seed`` if omitted)
            seed: Seed used only when no random_source is given
        """
        self.random_source = random_source or SeededRandomSource(seed)
        self._spare_gaussian: Optional[float] = None

    # ==================== Validation ====================

    @staticmethod
    def _check_bounds(min_value: Number, max_value: Number) -> None:
        if min_value >= max_value:
            raise ConfigurationError.invalid_bounds(min_value, max_value)

    @staticmethod
    def _check_std_dev(std_dev: float) -> None:
        if std_dev < 0:
            raise ConfigurationError(
                "Standard deviation cannot be negative",
                config_key="std_dev",
                config_value=std_dev,
                error_code=ConfigurationError.NEGATIVE_STD_DEV,
            )

    @staticmethod
    def _check_positive(name: str, value: float) -> None:
        if value <= 0:
            raise ConfigurationError(
                f"{name} must be positive",
                config_key=name,
                config_value=value,
                error_code=ConfigurationError.INVALID_PARAMETER,
            )

    # ==================== Primitive Draws ====================

    def _open_unit(self) -> float:
        """Uniform draw in (0, 1], safe to pass to log()."""
        return 1.0 - self.random_source.next_uniform()

    def sample_uniform(self, min_value: float, max_value: float) -> float:
        """Uniform float in [min_value, max_value)."""
        self._check_bounds(min_value, max_value)
        return min_value + self.random_source.next_uniform() * (max_value - min_value)

    def sample_normal(self, mean: float, std_dev: float) -> float:
        """
        Unbounded normal draw via the Box-Muller transform.

        Args:
            mean: Distribution mean
            std_dev: Standard deviation (>= 0)

        Returns:
            Normally distributed float
        """
        self._check_std_dev(std_dev)

        if self._spare_gaussian is not None:
            z = self._spare_gaussian
            self._spare_gaussian = None
            return z * std_dev + mean

        u1 = self._open_unit()
        u2 = self.random_source.next_uniform()

        radius = math.sqrt(-2.0 * math.log(u1))
        angle = 2.0 * math.pi * u2
        z0 = radius * math.cos(angle)
        self._spare_gaussian = radius * math.sin(angle)

        return z0 * std_dev + mean

    def sample_exponential(self, min_value: float, max_value: float,
                           rate: float = 1.0) -> float:
        """
        Exponential draw mapped into [min_value, max_value].

        The raw draw is divided by EXPONENTIAL_NORMALIZATION_DIVISOR and
        clamped to [0, 1] before scaling, so the mass piles up near min_value.
        """
        self._check_bounds(min_value, max_value)
        self._check_positive("rate", rate)

        raw = -math.log(self._open_unit()) / rate
        normalized = raw / GenerationSettings.EXPONENTIAL_NORMALIZATION_DIVISOR
        normalized = max(0.0, min(1.0, normalized))
        return min_value + normalized * (max_value - min_value)

    def sample_gamma(self, shape: float) -> float:
        """
        Gamma(shape, 1) draw.

        shape >= 1 uses Marsaglia-Tsang; shape < 1 boosts the shape by one and
        scales the result by u ** (1 / shape).

        Raises:
            ConfigurationError: If shape is not positive
            SamplingError: If the rejection loop exceeds GAMMA_MAX_ITERATIONS
        """
        self._check_positive("shape", shape)

        if shape < 1.0:
            boosted = self.sample_gamma(shape + 1.0)
            return boosted * self._open_unit() ** (1.0 / shape)

        d = shape - 1.0 / 3.0
        c = 1.0 / math.sqrt(9.0 * d)

        for _ in range(GenerationSettings.GAMMA_MAX_ITERATIONS):
            x = self.sample_normal(0.0, 1.0)
            v = 1.0 + c * x
            if v <= 0:
                continue

            v = v * v * v
            u = self._open_unit()

            # Squeeze test first, log test only when it fails
            if u < 1.0 - 0.0331 * x ** 4:
                return d * v
            if math.log(u) < 0.5 * x * x + d * (1.0 - v + math.log(v)):
                return d * v

        raise SamplingError(f"Gamma sampler did not converge for shape={shape}",
                            GenerationSettings.GAMMA_MAX_ITERATIONS)

    def sample_beta(self, alpha: float, beta: float) -> float:
        """
        Beta(alpha, beta) draw in [0, 1] as Ga / (Ga + Gb).

        Very small shapes can underflow both gamma draws to 0.0. The
        distribution then sits almost entirely on the end points, so the draw
        falls back to 1.0 with probability alpha / (alpha + beta), else 0.0.
        """
        x = self.sample_gamma(alpha)
        y = self.sample_gamma(beta)
        if x + y == 0.0:
            return 1.0 if self.random_source.next_uniform() < alpha / (alpha + beta) else 0.0
        return x / (x + y)

    # ==================== Bounded Draws ====================

    def sample_bounded_double(self, mean: float, std_dev: float,
                              min_value: float, max_value: float) -> float:
        """Normal draw clamped to [min_value, max_value]."""
        self._check_bounds(min_value, max_value)
        value = self.sample_normal(mean, std_dev)
        return max(min_value, min(max_value, value))

    def sample_bounded_int(self, mean: float, std_dev: float,
                           min_value: int, max_value: int) -> int:
        """Normal draw clamped to [min_value, max_value], rounded half away from zero."""
        return round_half_away(self.sample_bounded_double(mean, std_dev, min_value, max_value))

    # ==================== Spec Dispatch ====================

    def sample(self, spec: DistributionSpec) -> float:
        """
        Draw a value described by a DistributionSpec.

        Defaults for unset parameters:
        - normal: mean=(min+max)/2, std_dev=(max-min)/4
        - exponential: rate=1.0
        - beta: alpha=2.0, beta=2.0

        Returns:
            Float inside [spec.min_value, spec.max_value]
        """
        low, high = spec.min_value, spec.max_value

        if spec.distribution_type == DistributionType.UNIFORM:
            return self.sample_uniform(low, high)

        if spec.distribution_type == DistributionType.NORMAL:
            mean = spec.mean if spec.mean is not None else (low + high) / 2
            std_dev = spec.std_dev if spec.std_dev is not None else (high - low) / 4
            return self.sample_bounded_double(mean, std_dev, low, high)

        if spec.distribution_type == DistributionType.EXPONENTIAL:
            rate = spec.rate if spec.rate is not None else 1.0
            return self.sample_exponential(low, high, rate)

        if spec.distribution_type == DistributionType.BETA:
            alpha = spec.shape_alpha if spec.shape_alpha is not None else 2.0
            beta = spec.shape_beta if spec.shape_beta is not None else 2.0
            return low + self.sample_beta(alpha, beta) * (high - low)

        raise ConfigurationError(
            "Unknown distribution type",
            config_key="distribution_type",
            config_value=spec.distribution_type,
            error_code=ConfigurationError.INVALID_PARAMETER,
        )

    def sample_attribute(self, spec: DistributionSpec) -> GeneratedAttribute:
        """Draw a value and keep the spec alongside it."""
        return GeneratedAttribute(value=self.sample(spec), spec=spec)
