"""
Reputation Correlations

Maps a team's reputation (0-100) onto correlated secondary attributes:
squad size, stadium capacity and atmosphere. Stronger clubs skew toward the
top of each range, weaker clubs toward the bottom.

Also owns the central-limit reputation draw used when reputation itself is
generated. That draw sums 12 uniform perturbations instead of calling the
Box-Muller sampler; the two strategies produce different sequences for the
same seed and are kept apart on purpose.
"""

from typing import TYPE_CHECKING

from ..config.generation_settings import GenerationSettings
from .distributions import DistributionSampler, round_half_away
from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from .generation_config import RangeConfig, StadiumConfig


class ReputationMapper:
    """Reputation-driven attribute mapping on top of a DistributionSampler."""

    def __init__(self, sampler: DistributionSampler):
        self.sampler = sampler

    @property
    def random_source(self):
        return self.sampler.random_source

    @staticmethod
    def _check_reputation(reputation: int) -> None:
        if not 0 <= reputation <= GenerationSettings.REPUTATION_SCALE:
            raise ConfigurationError(
                f"Reputation must be between 0 and {GenerationSettings.REPUTATION_SCALE}",
                config_key="reputation",
                config_value=reputation,
                error_code=ConfigurationError.OUT_OF_RANGE,
            )

    # ==================== Range Mapping ====================

    def map_reputation_to_range(self, reputation: int, range_config: "RangeConfig") -> int:
        """
        Sample a reputation-skewed integer inside a RangeConfig.

        target = average + ((reputation/100 * influence) - 0.5) * (max - min) * 0.8
        result = bounded normal around target with std_dev 2.5

        With influence 0 reputation carries no signal and the rounded average
        is returned without a draw. The mapping is not continuous there: any
        influence above 0 already pulls the target down by up to
        0.4 * (max - min) for low factors, while 0 returns the average itself.

        Args:
            reputation: Team reputation, 0-100
            range_config: Bounds, average and influence

        Returns:
            Integer in [range_config.min, range_config.max]
        """
        self._check_reputation(reputation)

        if range_config.influence == 0:
            return round_half_away(range_config.average)

        factor = (reputation / GenerationSettings.REPUTATION_SCALE) * range_config.influence
        spread = range_config.max - range_config.min
        adjustment = (factor - 0.5) * spread * GenerationSettings.RANGE_ADJUSTMENT_SCALE
        target = range_config.average + adjustment

        return self.sampler.sample_bounded_int(
            mean=target,
            std_dev=GenerationSettings.RANGE_STD_DEV,
            min_value=range_config.min,
            max_value=range_config.max,
        )

    def map_capacity(self, reputation: int, stadium_config: "StadiumConfig") -> int:
        """
        Stadium capacity for a reputation.

        Reputation 30-85 maps linearly onto a base of 8,000-60,000 seats; the
        result is a bounded normal draw within +/- 30% of that base, further
        limited to the configured capacity bounds.
        """
        self._check_reputation(reputation)
        s = GenerationSettings

        normalized = (reputation - s.CAPACITY_REPUTATION_FLOOR) / s.CAPACITY_REPUTATION_SPAN
        base = s.CAPACITY_BASE_MIN + round_half_away(normalized * s.CAPACITY_BASE_SPAN)
        base = max(s.CAPACITY_ABSOLUTE_MIN, min(s.CAPACITY_ABSOLUTE_MAX, base))

        variation = round_half_away(base * s.CAPACITY_VARIATION)
        low = max(stadium_config.min_capacity, min(stadium_config.max_capacity, base - variation))
        high = max(stadium_config.min_capacity, min(stadium_config.max_capacity, base + variation))

        # Base far outside the configured bounds collapses the window
        if low >= high:
            return low

        return self.sampler.sample_bounded_int(
            mean=float(base),
            std_dev=variation / 3.0,
            min_value=low,
            max_value=high,
        )

    def map_atmosphere(self, capacity: int, reputation: int) -> int:
        """
        Atmosphere rating (40-95) from capacity tier, reputation and noise.

        Mid-sized grounds score highest; very large ones lose intimacy.
        """
        self._check_reputation(reputation)
        s = GenerationSettings

        if capacity < 20_000:
            score = 70.0
        elif capacity < 40_000:
            score = 80.0
        elif capacity < 60_000:
            score = 75.0
        else:
            score = 65.0

        score += (reputation - 50) * s.ATMOSPHERE_REPUTATION_WEIGHT
        score += (self.random_source.next_uniform() - 0.5) * s.ATMOSPHERE_NOISE

        return max(s.ATMOSPHERE_MIN, min(s.ATMOSPHERE_MAX, round_half_away(score)))

    # ==================== Reputation Generation ====================

    def generate_reputation(self, min_reputation: int, max_reputation: int) -> int:
        """
        Draw a reputation with the central-limit approximation.

        Starts at the midpoint and adds 12 perturbations of
        (u - 0.5) * std_dev * 0.5, where std_dev = (max - min) / 4.

        Raises:
            ConfigurationError: If min_reputation >= max_reputation
        """
        if min_reputation >= max_reputation:
            raise ConfigurationError.invalid_bounds(min_reputation, max_reputation, "reputation")

        s = GenerationSettings
        std_dev = (max_reputation - min_reputation) / 4
        reputation = (min_reputation + max_reputation) / 2

        for _ in range(s.CLT_ITERATIONS):
            reputation += (self.random_source.next_uniform() - 0.5) * std_dev * s.CLT_PERTURBATION_SCALE

        return max(min_reputation, min(max_reputation, round_half_away(reputation)))
