"""Tests for generation configuration objects."""

from dataclasses import replace

import pytest

from league_generation.core.exceptions import ConfigurationError
from league_generation.core.generation_config import (
    AgeDistribution,
    GenerationConfig,
    LeagueConfig,
    PlayerConfig,
    StadiumConfig,
    TeamConfig,
    load_generation_config,
    save_generation_config,
)


class TestDefaults:
    """Factory defaults."""

    def test_default_for_country(self, england):
        config = GenerationConfig.default_for_country(england, seed=3)

        assert config.country is england
        assert config.seed == 3
        assert config.league_config.teams_per_division == 20
        assert config.league_config.divisions == 4
        assert config.league_config.name_format == "England Premier League"
        assert config.validate().is_valid

    def test_squad_size_range(self):
        squad_range = PlayerConfig().squad_size_range
        assert (squad_range.min, squad_range.max, squad_range.average) == (18, 32, 25)
        assert squad_range.influence == 0.6

    def test_league_config_defaults(self):
        assert LeagueConfig() == LeagueConfig(1, 20, True, "Premier League", 5)


class TestValidation:
    """validate() explains what is wrong instead of returning a bare bool."""

    def test_result_unpacks(self):
        is_valid, error = TeamConfig().validate()
        assert is_valid
        assert error is None

    def test_inverted_reputation_bounds(self):
        result = TeamConfig(min_reputation=80, max_reputation=40).validate()
        assert not result
        assert result.error_code == ConfigurationError.INVALID_BOUNDS

    def test_reputation_above_scale(self):
        result = TeamConfig(min_reputation=50, max_reputation=120).validate()
        assert result.error_code == ConfigurationError.OUT_OF_RANGE

    def test_domestic_percentage(self):
        result = PlayerConfig(domestic_player_percentage=110).validate()
        assert result.error_code == ConfigurationError.OUT_OF_RANGE
        assert result.error.config_key == "domestic_player_percentage"

    def test_squad_bounds(self):
        result = PlayerConfig(min_squad_size=30, max_squad_size=20).validate()
        assert result.error_code == ConfigurationError.INVALID_BOUNDS

    def test_age_peak_outside_bounds(self):
        result = PlayerConfig(age_distribution=AgeDistribution(peak_age=45)).validate()
        assert not result.is_valid

    def test_stadium_capacity_limits(self):
        assert StadiumConfig(min_capacity=500).validate().error_code == ConfigurationError.OUT_OF_RANGE
        assert StadiumConfig(min_capacity=9000, max_capacity=8000).validate().error_code == \
            ConfigurationError.INVALID_BOUNDS

    def test_generation_config_reports_first_failure(self, generation_config):
        broken = replace(generation_config, stadium_config=StadiumConfig(max_capacity=200_000))
        result = broken.validate()
        assert result.error.config_key == "capacity"

    def test_raise_if_invalid(self):
        with pytest.raises(ConfigurationError):
            TeamConfig(min_reputation=90, max_reputation=10).validate().raise_if_invalid()


class TestSerialization:
    """JSON storage."""

    def test_to_dict_stores_country_code(self, generation_config):
        data = generation_config.to_dict()
        assert data["country"] == "GB"
        assert data["player_config"]["age_distribution"]["peak_age"] == 26

    def test_save_and_load(self, generation_config, tmp_path):
        path = tmp_path / "config.json"
        save_generation_config(generation_config, path)
        assert load_generation_config(path) == generation_config

    def test_partial_dict_uses_country_defaults(self):
        config = GenerationConfig.from_dict({"country": "de", "team_config": {"min_reputation": 40}})
        assert config.country.code == "DE"
        assert config.team_config.min_reputation == 40
        assert config.league_config.teams_per_division == 18
        assert config.seed is None

    def test_unknown_country(self):
        with pytest.raises(ConfigurationError):
            GenerationConfig.from_dict({"country": "XX"})

    def test_unknown_section_key(self):
        with pytest.raises(ConfigurationError) as exc_info:
            GenerationConfig.from_dict({"country": "GB", "team_config": {"bogus": 1}})
        assert exc_info.value.config_key == "config"
        assert isinstance(exc_info.value.__cause__, TypeError)

    def test_non_object_document(self):
        with pytest.raises(ConfigurationError):
            GenerationConfig.from_dict(["GB"])

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            load_generation_config(tmp_path / "missing.json")
        assert exc_info.value.error_code == ConfigurationError.INVALID_CONFIG

    def test_load_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{\"country\": ", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_generation_config(path)
