"""Tests for DistributionSampler and DistributionSpec."""

import math

import pytest

from league_generation.config.generation_settings import GenerationSettings
from league_generation.core.distributions import (
    DistributionSampler,
    DistributionSpec,
    DistributionType,
    round_half_away,
)
from league_generation.core.exceptions import ConfigurationError, SamplingError
from league_generation.core.random_source import SeededRandomSource


class TestRoundHalfAway:
    """Ties round away from zero, not to the nearest even integer."""

    @pytest.mark.parametrize("value,expected", [
        (2.5, 3), (-2.5, -3), (0.5, 1), (24.5, 25), (0.49, 0), (-0.49, 0), (7.0, 7),
    ])
    def test_rounding(self, value, expected):
        assert round_half_away(value) == expected


class TestBoundedSampling:
    """Bounded draws always land inside [min, max]."""

    @pytest.mark.parametrize("mean,std_dev,min_value,max_value", [
        (50, 10, 0, 100),
        (25, 2.5, 18, 32),
        (500, 10, 0, 100),     # mean far above the range
        (-500, 10, 0, 100),    # mean far below the range
        (50, 1000, 40, 60),    # huge spread
        (30, 0, 20, 40),
    ])
    def test_bounded_int_within_bounds(self, sampler, mean, std_dev, min_value, max_value):
        for _ in range(500):
            value = sampler.sample_bounded_int(mean, std_dev, min_value, max_value)
            assert isinstance(value, int)
            assert min_value <= value <= max_value

    @pytest.mark.parametrize("mean,std_dev,min_value,max_value", [
        (0.5, 0.2, 0.0, 1.0),
        (10.0, 50.0, -1.0, 1.0),
    ])
    def test_bounded_double_within_bounds(self, sampler, mean, std_dev, min_value, max_value):
        for _ in range(500):
            assert min_value <= sampler.sample_bounded_double(mean, std_dev, min_value, max_value) <= max_value

    def test_bounded_int_rounds_half_away_from_zero(self, sampler):
        assert sampler.sample_bounded_int(24.5, 0.0, 18, 32) == 25
        assert sampler.sample_bounded_int(25.5, 0.0, 18, 32) == 26
        assert sampler.sample_bounded_int(-3.5, 0.0, -10, 10) == -4

    def test_out_of_range_mean_clamps_to_boundary(self, sampler):
        """Tail values snap to the bound instead of being resampled."""
        assert sampler.sample_bounded_int(1000, 1, 0, 100) == 100
        assert sampler.sample_bounded_double(-1000, 1, 0, 100) == 0

    def test_zero_std_dev_returns_mean(self, sampler):
        assert sampler.sample_bounded_double(42.0, 0, 0, 100) == 42.0

    @pytest.mark.parametrize("min_value,max_value", [(10, 10), (20, 5)])
    def test_invalid_bounds_rejected(self, sampler, min_value, max_value):
        with pytest.raises(ConfigurationError) as exc_info:
            sampler.sample_bounded_int(50, 5, min_value, max_value)
        assert exc_info.value.error_code == ConfigurationError.INVALID_BOUNDS

    def test_negative_std_dev_rejected(self, sampler):
        with pytest.raises(ConfigurationError) as exc_info:
            sampler.sample_bounded_double(50, -1, 0, 100)
        assert exc_info.value.error_code == ConfigurationError.NEGATIVE_STD_DEV


class TestBoxMuller:
    """Normal draws come in pairs; the second one is cached unscaled."""

    def test_spare_scaled_by_next_call_parameters(self):
        first = DistributionSampler(SeededRandomSource(3))
        z0 = first.sample_normal(0.0, 1.0)
        z1 = first.sample_normal(0.0, 1.0)

        second = DistributionSampler(SeededRandomSource(3))
        assert second.sample_normal(0.0, 1.0) == pytest.approx(z0)
        assert second.sample_normal(10.0, 2.0) == pytest.approx(z1 * 2.0 + 10.0)

    def test_pair_consumes_two_uniforms(self):
        source = SeededRandomSource(11)
        sampler = DistributionSampler(source)
        sampler.sample_normal(0.0, 1.0)
        sampler.sample_normal(0.0, 1.0)

        reference = SeededRandomSource(11)
        reference.next_uniform()
        reference.next_uniform()
        assert source.next_uniform() == reference.next_uniform()

    def test_normal_moments(self, sampler):
        values = [sampler.sample_normal(100.0, 15.0) for _ in range(10000)]
        mean = sum(values) / len(values)
        variance = sum((v - mean) ** 2 for v in values) / len(values)
        assert mean == pytest.approx(100.0, abs=1.0)
        assert math.sqrt(variance) == pytest.approx(15.0, rel=0.05)


class TestGammaAndBeta:
    """Marsaglia-Tsang gamma and gamma-ratio beta."""

    def test_gamma_mean_shape_five(self, sampler):
        values = [sampler.sample_gamma(5.0) for _ in range(10000)]
        assert sum(values) / len(values) == pytest.approx(5.0, rel=0.1)

    def test_gamma_small_shape(self, sampler):
        values = [sampler.sample_gamma(0.5) for _ in range(10000)]
        assert all(v >= 0 for v in values)
        assert sum(values) / len(values) == pytest.approx(0.5, rel=0.1)

    @pytest.mark.parametrize("shape", [0, -2.0])
    def test_gamma_rejects_non_positive_shape(self, sampler, shape):
        with pytest.raises(ConfigurationError):
            sampler.sample_gamma(shape)

    def test_gamma_iteration_ceiling(self, sampler, monkeypatch):
        """A stream that never passes the acceptance test raises SamplingError."""
        monkeypatch.setattr(sampler, "sample_normal", lambda mean, std_dev: -100.0)
        with pytest.raises(SamplingError) as exc_info:
            sampler.sample_gamma(5.0)
        assert exc_info.value.iterations == GenerationSettings.GAMMA_MAX_ITERATIONS
        assert exc_info.value.error_code == "SAMPLING_EXHAUSTED"

    def test_beta_in_unit_interval(self, sampler):
        for _ in range(1000):
            assert 0.0 <= sampler.sample_beta(2.0, 5.0) <= 1.0

    def test_beta_mean(self, sampler):
        values = [sampler.sample_beta(2.0, 5.0) for _ in range(5000)]
        assert sum(values) / len(values) == pytest.approx(2.0 / 7.0, abs=0.02)

    def test_beta_tiny_shapes_stay_in_unit_interval(self):
        """Both gamma draws can underflow to zero when alpha and beta are tiny."""
        sampler = DistributionSampler(SeededRandomSource(1))
        spec = DistributionSpec.beta(0.0, 1.0, alpha=0.001, beta=0.001)
        for _ in range(200):
            assert 0.0 <= sampler.sample(spec) <= 1.0
            assert 0.0 <= sampler.sample_beta(0.001, 0.001) <= 1.0

    def test_beta_underflow_falls_back_to_end_points(self, sampler, monkeypatch):
        monkeypatch.setattr(sampler, "sample_gamma", lambda shape: 0.0)
        values = {sampler.sample_beta(0.001, 0.001) for _ in range(200)}
        assert values == {0.0, 1.0}


class TestExponential:
    """Exponential draws scaled by the normalization divisor."""

    def test_within_bounds(self, sampler):
        for _ in range(1000):
            assert 10.0 <= sampler.sample_exponential(10.0, 20.0) <= 20.0

    def test_skews_toward_minimum(self, sampler):
        values = [sampler.sample_exponential(0.0, 100.0) for _ in range(5000)]
        mean = sum(values) / len(values)
        assert 10.0 < mean < 30.0

    def test_rejects_non_positive_rate(self, sampler):
        with pytest.raises(ConfigurationError):
            sampler.sample_exponential(0.0, 1.0, rate=0.0)


class TestDistributionSpec:
    """Spec construction and dispatch."""

    def test_construction_rejects_inverted_bounds(self):
        with pytest.raises(ConfigurationError) as exc_info:
            DistributionSpec.uniform(5.0, 5.0)
        assert exc_info.value.error_code == ConfigurationError.INVALID_BOUNDS

    def test_construction_rejects_negative_std_dev(self):
        with pytest.raises(ConfigurationError):
            DistributionSpec.normal(0.0, 10.0, mean=5.0, std_dev=-1.0)

    @pytest.mark.parametrize("spec", [
        DistributionSpec.uniform(1.0, 2.0),
        DistributionSpec.normal(40.0, 99.0, mean=70.0, std_dev=10.0),
        DistributionSpec.normal(0.0, 10.0),
        DistributionSpec.exponential(0.0, 50.0, rate=2.0),
        DistributionSpec.beta(40.0, 99.0, alpha=2.0, beta=5.0),
    ])
    def test_sample_within_spec_bounds(self, sampler, spec):
        for _ in range(300):
            assert spec.min_value <= sampler.sample(spec) <= spec.max_value

    def test_sample_attribute_keeps_spec(self, sampler):
        spec = DistributionSpec.beta(0.0, 100.0)
        attribute = sampler.sample_attribute(spec)
        assert attribute.spec is spec
        assert attribute.spec.distribution_type == DistributionType.BETA
        assert 0.0 <= attribute.value <= 100.0

    def test_same_seed_same_samples(self):
        specs = [DistributionSpec.uniform(0.0, 1.0), DistributionSpec.normal(0.0, 100.0),
                 DistributionSpec.exponential(0.0, 10.0), DistributionSpec.beta(0.0, 1.0)]

        a = DistributionSampler(seed=2024)
        b = DistributionSampler(seed=2024)
        assert [a.sample(s) for s in specs * 20] == [b.sample(s) for s in specs * 20]
