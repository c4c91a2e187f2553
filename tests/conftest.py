"""
Pytest configuration for test discovery and imports.

Provides fixtures for testing including:
- Seeded random sources and samplers
- Reference countries
- Default generation configs
"""

import sys
from pathlib import Path

import pytest


# Determine paths
project_root = Path(__file__).parent.parent
src_path = project_root / "src"


def pytest_configure(config):
    """Put src/ at the front of sys.path so the package imports without installation."""
    if str(src_path) in sys.path:
        sys.path.remove(str(src_path))
    sys.path.insert(0, str(src_path))


TEST_SEED = 12345


# ============================================================================
# SAMPLING FIXTURES
# ============================================================================

@pytest.fixture
def seed():
    return TEST_SEED


@pytest.fixture
def random_source():
    from league_generation.core.random_source import SeededRandomSource
    return SeededRandomSource(TEST_SEED)


@pytest.fixture
def sampler(random_source):
    from league_generation.core.distributions import DistributionSampler
    return DistributionSampler(random_source)


@pytest.fixture
def mapper(sampler):
    from league_generation.core.correlations import ReputationMapper
    return ReputationMapper(sampler)


@pytest.fixture
def squad_range():
    """Squad size range used throughout the correlation tests."""
    from league_generation.core.generation_config import RangeConfig
    return RangeConfig(min=18, max=32, average=25, influence=0.6)


# ============================================================================
# COUNTRY AND CONFIG FIXTURES
# ============================================================================

@pytest.fixture
def england():
    from league_generation.data.country_repository import CountryRepository
    return CountryRepository.get_country_by_code("GB")


@pytest.fixture
def spain():
    from league_generation.data.country_repository import CountryRepository
    return CountryRepository.get_country_by_code("ES")


@pytest.fixture
def generation_config(england):
    """England defaults with a fixed seed."""
    from league_generation.core.generation_config import GenerationConfig
    return GenerationConfig.default_for_country(england, seed=TEST_SEED)


@pytest.fixture
def small_config(generation_config):
    """England config cut down to 16 teams in two divisions for faster runs."""
    from dataclasses import replace
    return replace(
        generation_config,
        league_config=replace(generation_config.league_config, teams_per_division=16, divisions=2),
    )
