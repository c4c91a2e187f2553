"""Tests for the reference data repositories and CountryGenerator."""

import pytest

from league_generation.data.country_repository import CountryRepository
from league_generation.data.name_repository import NameRepository
from league_generation.generators.country_generator import CountryGenerator


class TestCountryRepository:
    """Country lookups."""

    def test_all_countries_sorted_by_name(self):
        countries = CountryRepository.get_all_countries()
        assert len(countries) == 10
        assert [c.name for c in countries] == sorted(c.name for c in countries)

    @pytest.mark.parametrize("code", ["GB", "gb", "Gb"])
    def test_lookup_is_case_insensitive(self, code):
        assert CountryRepository.get_country_by_code(code).name == "England"

    def test_unknown_code(self):
        assert CountryRepository.get_country_by_code("ZZ") is None

    def test_strong_countries_exclude_us(self):
        codes = {c.code for c in CountryRepository.get_strong_soccer_countries()}
        assert "US" not in codes
        assert {"GB", "ES", "DE", "IT", "BR"} <= codes

    def test_countries_by_language(self):
        codes = [c.code for c in CountryRepository.get_countries_by_language("es")]
        assert codes == ["AR", "ES"]


class TestNameRepository:
    """Name and city tables."""

    def test_gender_selection(self):
        male = NameRepository.get_first_names("en", "male")
        female = NameRepository.get_first_names("en", "female")
        assert set(NameRepository.get_first_names("en", "any")) == set(male) | set(female)

    def test_unknown_language_falls_back_to_english(self):
        assert NameRepository.get_first_names("xx") == NameRepository.get_first_names("en")
        assert NameRepository.get_last_names("xx") == NameRepository.get_last_names("en")

    def test_every_country_has_cities(self):
        for country in CountryRepository.get_all_countries():
            assert NameRepository.get_city_names(country.code)

    def test_unknown_country_gets_default_cities(self):
        assert NameRepository.get_city_names("ZZ")

    def test_returned_lists_are_copies(self):
        names = NameRepository.get_last_names("de")
        names.clear()
        assert NameRepository.get_last_names("de")


class TestCountryGenerator:
    """Suitability and recommendations."""

    def test_all_built_in_countries_suitable(self):
        for country in CountryGenerator.get_all_countries():
            assert CountryGenerator.is_country_suitable_for_generation(country)

    def test_recommended_countries(self):
        recommended = CountryGenerator.get_recommended_countries()
        assert [c.code for c in recommended] == ["AR", "BR", "GB", "FR", "DE"]
        assert all(c.strong_soccer_culture for c in recommended)

    def test_lookup_passthrough(self):
        assert CountryGenerator.get_country_by_code("it").code == "IT"
