"""Tests for WeightedChoiceSelector."""

import pytest

from league_generation.core.exceptions import ConfigurationError
from league_generation.core.random_source import SeededRandomSource
from league_generation.core.weighted_choice import WeightedChoiceSelector, WeightedOption


@pytest.fixture
def selector(random_source):
    return WeightedChoiceSelector(random_source)


class TestChoose:
    """Selection behaviour."""

    def test_zero_weight_first_option_never_chosen(self, selector):
        assert all(selector.choose(["A", "B"], [0, 1]) == "B" for _ in range(1000))

    def test_zero_weight_last_option_never_chosen(self, selector):
        assert all(selector.choose(["A", "B"], [1, 0]) == "A" for _ in range(1000))

    def test_frequencies_follow_weights(self, selector):
        results = [selector.choose(["A", "B", "C"], [70, 20, 10]) for _ in range(5000)]
        assert results.count("A") > results.count("B") > results.count("C")
        assert results.count("A") / len(results) == pytest.approx(0.7, abs=0.03)

    def test_duplicate_values_accumulate(self, selector):
        """Repeated values in the option list share their weights."""
        results = [selector.choose(["MID", "DEF", "MID"], [30, 40, 30]) for _ in range(5000)]
        assert results.count("MID") / len(results) == pytest.approx(0.6, abs=0.03)

    def test_choose_option_pairs(self, selector):
        options = [WeightedOption("home", 0.0), WeightedOption("away", 2.5)]
        assert selector.choose_option(options) == "away"

    def test_same_seed_same_choices(self):
        options, weights = ["GK", "DEF", "MID", "FWD"], [10, 25, 40, 25]
        a = WeightedChoiceSelector(SeededRandomSource(77))
        b = WeightedChoiceSelector(SeededRandomSource(77))
        assert [a.choose(options, weights) for _ in range(100)] == \
               [b.choose(options, weights) for _ in range(100)]

    def test_overshooting_draw_falls_back_to_last_option(self, selector, monkeypatch):
        monkeypatch.setattr(selector.random_source, "next_uniform", lambda: 1.5)
        assert selector.choose(["A", "B", "C"], [1, 1, 1]) == "C"


class TestValidation:
    """Invalid weight lists fail before any draw."""

    def test_all_zero_weights(self, selector):
        with pytest.raises(ConfigurationError) as exc_info:
            selector.choose(["A", "B"], [0, 0])
        assert exc_info.value.error_code == ConfigurationError.INVALID_WEIGHTS

    def test_length_mismatch(self, selector):
        with pytest.raises(ConfigurationError) as exc_info:
            selector.choose(["A", "B"], [1])
        assert exc_info.value.error_code == ConfigurationError.INVALID_WEIGHTS

    def test_negative_weight(self, selector):
        with pytest.raises(ConfigurationError):
            selector.choose(["A", "B"], [2, -1])

    def test_empty_lists(self, selector):
        with pytest.raises(ConfigurationError):
            selector.choose([], [])

    def test_invalid_weights_consume_no_randomness(self):
        source = SeededRandomSource(8)
        selector = WeightedChoiceSelector(source)
        with pytest.raises(ConfigurationError):
            selector.choose(["A"], [0])
        assert source.next_uniform() == SeededRandomSource(8).next_uniform()

    def test_validate_weights_returns_total(self):
        assert WeightedChoiceSelector.validate_weights(["a", "b"], [1.5, 2.5]) == 4.0
