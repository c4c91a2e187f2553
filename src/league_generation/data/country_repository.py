"""
Country Repository

Static metadata for the countries a league can be generated for: league
structure, naming culture and language. Lookup is by ISO-style country code.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class LeagueStructure:
    """Shape of a country's professional pyramid."""
    top_division_teams: int
    professional_divisions: int
    has_playoffs: bool
    has_relegation: bool
    season_length: int
    season_start_month: int


@dataclass(frozen=True)
class NamingCulture:
    """Patterns used to build team, stadium and person names."""
    team_prefixes: Tuple[str, ...]
    team_suffixes: Tuple[str, ...]
    stadium_patterns: Tuple[str, ...]
    includes_city_in_team_name: bool
    prefers_traditional_names: bool
    title_prefixes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Country:
    """A country that leagues can be generated for."""
    code: str
    name: str
    native_name: str
    language: str
    currency: str
    strong_soccer_culture: bool
    league_structure: LeagueStructure
    naming_culture: NamingCulture


_COUNTRIES: Dict[str, Country] = {
    "GB": Country(
        code="GB", name="England", native_name="England", language="en", currency="GBP",
        strong_soccer_culture=True,
        league_structure=LeagueStructure(20, 4, True, True, 38, 8),
        naming_culture=NamingCulture(
            team_prefixes=("FC", "AFC", "Athletic"),
            team_suffixes=("United", "City", "Town", "Rovers", "Wanderers", "County", "Borough"),
            stadium_patterns=("{team} Stadium", "{city} Stadium", "Old {landmark}", "{sponsor} Stadium"),
            includes_city_in_team_name=True,
            prefers_traditional_names=True,
            title_prefixes=("Mr.", "Mrs.", "Sir", "Lord"),
        ),
    ),
    "ES": Country(
        code="ES", name="Spain", native_name="España", language="es", currency="EUR",
        strong_soccer_culture=True,
        league_structure=LeagueStructure(20, 3, False, True, 38, 8),
        naming_culture=NamingCulture(
            team_prefixes=("Real", "Athletic", "Club", "CF", "CD", "SD"),
            team_suffixes=("FC", "CF", "CD", "SD", "Club de Fútbol"),
            stadium_patterns=("Estadio {name}", "Campo de {name}", "{sponsor} Stadium"),
            includes_city_in_team_name=True,
            prefers_traditional_names=True,
            title_prefixes=("Sr.", "Sra.", "Don", "Doña"),
        ),
    ),
    "DE": Country(
        code="DE", name="Germany", native_name="Deutschland", language="de", currency="EUR",
        strong_soccer_culture=True,
        league_structure=LeagueStructure(18, 3, True, True, 34, 8),
        naming_culture=NamingCulture(
            team_prefixes=("FC", "SV", "VfL", "VfB", "Borussia", "Eintracht", "Bayern"),
            team_suffixes=("04", "05", "09", "München", "Dortmund"),
            stadium_patterns=("{name}-Arena", "{name} Stadion", "{sponsor} Arena"),
            includes_city_in_team_name=True,
            prefers_traditional_names=True,
            title_prefixes=("Herr", "Frau", "Dr."),
        ),
    ),
    "IT": Country(
        code="IT", name="Italy", native_name="Italia", language="it", currency="EUR",
        strong_soccer_culture=True,
        league_structure=LeagueStructure(20, 3, True, True, 38, 8),
        naming_culture=NamingCulture(
            team_prefixes=("AC", "AS", "FC", "SS", "US", "Inter"),
            team_suffixes=("Calcio", "FC", "1907", "1909", "1900"),
            stadium_patterns=("Stadio {name}", "{name} Stadium", "Arena {name}"),
            includes_city_in_team_name=True,
            prefers_traditional_names=True,
            title_prefixes=("Sig.", "Sig.ra", "Dott."),
        ),
    ),
    "FR": Country(
        code="FR", name="France", native_name="France", language="fr", currency="EUR",
        strong_soccer_culture=True,
        league_structure=LeagueStructure(20, 3, False, True, 38, 8),
        naming_culture=NamingCulture(
            team_prefixes=("AS", "FC", "RC", "OGC", "LOSC", "Olympique"),
            team_suffixes=("FC", "SC", "AC"),
            stadium_patterns=("Stade {name}", "Stadium {name}", "Parc {name}"),
            includes_city_in_team_name=True,
            prefers_traditional_names=True,
            title_prefixes=("M.", "Mme", "Dr."),
        ),
    ),
    "BR": Country(
        code="BR", name="Brazil", native_name="Brasil", language="pt", currency="BRL",
        strong_soccer_culture=True,
        league_structure=LeagueStructure(20, 4, True, True, 38, 4),
        naming_culture=NamingCulture(
            team_prefixes=("Sport Club", "Clube", "Associação", "Grêmio", "Santos"),
            team_suffixes=("FC", "EC", "AC", "SC"),
            stadium_patterns=("Estádio {name}", "Arena {name}", "Estádio {landmark}"),
            includes_city_in_team_name=True,
            prefers_traditional_names=True,
            title_prefixes=("Sr.", "Sra.", "Dr."),
        ),
    ),
    "AR": Country(
        code="AR", name="Argentina", native_name="Argentina", language="es", currency="ARS",
        strong_soccer_culture=True,
        league_structure=LeagueStructure(28, 3, True, True, 40, 2),
        naming_culture=NamingCulture(
            team_prefixes=("Club Atlético", "Club", "Asociación Atlética", "Racing"),
            team_suffixes=("Juniors", "Unidos", "Central"),
            stadium_patterns=("Estadio {name}", "La Bombonera", "El Monumental"),
            includes_city_in_team_name=True,
            prefers_traditional_names=True,
            title_prefixes=("Sr.", "Sra.", "Dr."),
        ),
    ),
    "NL": Country(
        code="NL", name="Netherlands", native_name="Nederland", language="nl", currency="EUR",
        strong_soccer_culture=True,
        league_structure=LeagueStructure(18, 2, True, True, 34, 8),
        naming_culture=NamingCulture(
            team_prefixes=("AFC", "FC", "PSV", "AZ", "SC"),
            team_suffixes=("'20", "'26", "United"),
            stadium_patterns=("{name} Stadion", "{sponsor} Arena", "{name} Stadium"),
            includes_city_in_team_name=True,
            prefers_traditional_names=True,
            title_prefixes=("Dhr.", "Mevr.", "Dr."),
        ),
    ),
    "PT": Country(
        code="PT", name="Portugal", native_name="Portugal", language="pt", currency="EUR",
        strong_soccer_culture=True,
        league_structure=LeagueStructure(18, 3, False, True, 34, 8),
        naming_culture=NamingCulture(
            team_prefixes=("FC", "SC", "CD", "CF", "Sporting"),
            team_suffixes=("FC", "SC", "CD"),
            stadium_patterns=("Estádio {name}", "Estádio do {landmark}", "{sponsor} Stadium"),
            includes_city_in_team_name=True,
            prefers_traditional_names=True,
            title_prefixes=("Sr.", "Sra.", "Dr."),
        ),
    ),
    "US": Country(
        code="US", name="United States", native_name="United States", language="en", currency="USD",
        strong_soccer_culture=False,
        league_structure=LeagueStructure(29, 2, True, False, 34, 2),
        naming_culture=NamingCulture(
            team_prefixes=("FC", "SC", "Real"),
            team_suffixes=("FC", "SC", "United", "City"),
            stadium_patterns=("{sponsor} Stadium", "{city} Stadium", "{landmark} Field"),
            includes_city_in_team_name=True,
            prefers_traditional_names=False,
            title_prefixes=("Mr.", "Mrs.", "Dr."),
        ),
    ),
}


class CountryRepository:
    """Read-only lookups over the built-in country table."""

    @staticmethod
    def get_all_countries() -> List[Country]:
        """All countries sorted by English name."""
        return sorted(_COUNTRIES.values(), key=lambda c: c.name)

    @staticmethod
    def get_country_by_code(code: str) -> Optional[Country]:
        """Case-insensitive lookup; None for unknown codes."""
        return _COUNTRIES.get(code.upper())

    @staticmethod
    def get_strong_soccer_countries() -> List[Country]:
        return sorted((c for c in _COUNTRIES.values() if c.strong_soccer_culture),
                      key=lambda c: c.name)

    @staticmethod
    def get_countries_by_language(language: str) -> List[Country]:
        return sorted((c for c in _COUNTRIES.values() if c.language == language),
                      key=lambda c: c.name)
