"""
Centralized Generation Settings

Tunable constants used by the sampling engine and the entity generators.
None of these values are derived from a statistical law; they were chosen
by eye so that generated leagues look plausible. Change them here rather
than in the individual modules.
"""


class GenerationSettings:
    """
    Generation engine constants.

    Grouped by the component that reads them.
    """

    # ================================================================
    # DISTRIBUTION SAMPLER
    # ================================================================

    EXPONENTIAL_NORMALIZATION_DIVISOR = 5.0
    # Raw exponential draws are divided by this before being clamped to 0-1.
    # With rate=1.0 roughly 99% of draws land inside the target range.

    GAMMA_MAX_ITERATIONS = 10_000
    # Marsaglia-Tsang accepts ~96% of proposals for shape >= 1, so this
    # ceiling is only reached with a broken random source.

    # ================================================================
    # REPUTATION MAPPER
    # ================================================================

    REPUTATION_SCALE = 100
    # Reputation is an integer in [0, REPUTATION_SCALE]

    RANGE_STD_DEV = 2.5
    # Spread around the reputation-adjusted target (squad size etc.)

    RANGE_ADJUSTMENT_SCALE = 0.8
    # Fraction of (max - min) that reputation may shift the target by

    CLT_ITERATIONS = 12
    CLT_PERTURBATION_SCALE = 0.5
    # Central-limit reputation draw: 12 uniform perturbations of
    # (u - 0.5) * std_dev * 0.5 around the midpoint

    CAPACITY_REPUTATION_FLOOR = 30
    CAPACITY_REPUTATION_SPAN = 55.0
    CAPACITY_BASE_MIN = 8_000
    CAPACITY_BASE_SPAN = 52_000
    CAPACITY_ABSOLUTE_MIN = 5_000
    CAPACITY_ABSOLUTE_MAX = 80_000
    CAPACITY_VARIATION = 0.3
    # Linear map: reputation 30-85 -> base capacity 8,000-60,000 (+/- 30%)

    ATMOSPHERE_MIN = 40
    ATMOSPHERE_MAX = 95
    ATMOSPHERE_REPUTATION_WEIGHT = 0.3
    ATMOSPHERE_NOISE = 20.0

    # ================================================================
    # NAMING
    # ================================================================

    NAME_RETRY_LIMIT = 50
    # Fresh candidates requested before falling back to numeric suffixes

    NAME_SUFFIX_LIMIT = 10_000
    # Highest numeric suffix tried before the name space counts as exhausted

    TITLE_PREFIX_PROBABILITY = 0.1

    # ================================================================
    # IDENTIFIERS
    # ================================================================

    ID_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"
    ENTITY_ID_LENGTH = 12
    LEAGUE_ID_LENGTH = 8
