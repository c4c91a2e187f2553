"""Country selection helpers for league generation."""

from typing import List, Optional

from ..data.country_repository import Country, CountryRepository


class CountryGenerator:
    """Static lookups over the country table plus suitability checks."""

    RECOMMENDED_COUNT = 5

    @staticmethod
    def get_all_countries() -> List[Country]:
        return CountryRepository.get_all_countries()

    @staticmethod
    def get_strong_soccer_countries() -> List[Country]:
        return CountryRepository.get_strong_soccer_countries()

    @staticmethod
    def get_country_by_code(code: str) -> Optional[Country]:
        return CountryRepository.get_country_by_code(code)

    @staticmethod
    def get_countries_by_language(language: str) -> List[Country]:
        return CountryRepository.get_countries_by_language(language)

    @staticmethod
    def is_country_suitable_for_generation(country: Country) -> bool:
        """A country needs a 10+ team top flight, one pro division and team prefixes."""
        structure = country.league_structure
        return (structure.top_division_teams >= 10
                and structure.professional_divisions >= 1
                and len(country.naming_culture.team_prefixes) > 0)

    @classmethod
    def get_recommended_countries(cls) -> List[Country]:
        """First five strong football countries that pass the suitability check."""
        suitable = [c for c in cls.get_strong_soccer_countries()
                    if cls.is_country_suitable_for_generation(c)]
        return suitable[:cls.RECOMMENDED_COUNT]
