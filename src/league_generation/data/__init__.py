"""Static reference data: countries, names and cities."""

from .country_repository import Country, CountryRepository, LeagueStructure, NamingCulture
from .name_repository import NameRepository

__all__ = [
    "Country",
    "CountryRepository",
    "LeagueStructure",
    "NamingCulture",
    "NameRepository",
]
