"""
League Generator

Top-level orchestration: country -> league -> teams -> squads and stadiums.

Each call runs to completion synchronously. Teams are assembled one at a time
(team with reputation, then squad size, then players, then stadium), so the
sequence of random draws is fixed for a given seed and configuration.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Set, Tuple

from ..config.generation_settings import GenerationSettings
from ..core.exceptions import ConfigurationError
from ..core.generation_config import GenerationConfig, LeagueConfig
from ..core.random_source import SeededRandomSource
from ..core.validation import ValidationResult
from ..data.country_repository import Country, LeagueStructure
from ..data.name_repository import NameRepository
from ..models.generated_entities import CompetitionType, GeneratedLeague, GeneratedTeam
from .player_generator import PlayerGenerator
from .stadium_generator import StadiumGenerator
from .team_generator import TeamGenerator


class LeagueGenerator:
    """
    Generates leagues, division pyramids and cup competitions.

    The team, player and stadium generators each own a random source seeded
    with a sub-seed drawn from this generator's seed; no source is shared
    between them.
    """

    MIN_TEAMS = 8
    MAX_TEAMS = 30
    MIN_DIVISIONS = 1
    MAX_DIVISIONS = 6
    MAX_TEAM_COUNT_DEVIATION = 4
    CHILD_SEED_BOUND = 2 ** 31

    # Lower tier names by country; level 1 uses the configured name format
    DIVISION_NAMES: Dict[str, Dict[int, str]] = {
        "GB": {2: "Championship", 3: "League One", 4: "League Two"},
        "ES": {2: "Segunda División", 3: "Primera Federación", 4: "Segunda Federación"},
        "DE": {2: "2. Bundesliga", 3: "3. Liga", 4: "Regionalliga"},
        "IT": {2: "Serie B", 3: "Serie C", 4: "Serie D"},
        "FR": {2: "Ligue 2", 3: "National", 4: "National 2"},
        "BR": {2: "Série B", 3: "Série C", 4: "Série D"},
        "AR": {2: "Primera Nacional", 3: "Primera B Metropolitana", 4: "Primera C"},
        "NL": {2: "Eerste Divisie", 3: "Tweede Divisie", 4: "Derde Divisie"},
        "PT": {2: "Liga Portugal 2", 3: "Liga 3", 4: "Campeonato de Portugal"},
        "US": {2: "Championship League", 3: "League One", 4: "Premier Development League"},
    }

    def __init__(self, seed: Optional[int] = None, current_year: Optional[int] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize league generator.

        Args:
            seed: Optional seed; the same seed and config reproduce the same league
            current_year: Reference year for founding dates (defaults to today)
            logger: Optional logger for tracking generation progress
        """
        self.seed = seed
        self.current_year = current_year or datetime.now().year
        self.logger = logger or logging.getLogger(__name__)

        self.random_source = SeededRandomSource(seed)
        team_seed, player_seed, stadium_seed = self._child_seeds()
        self.team_generator = TeamGenerator(team_seed, self.current_year)
        self.player_generator = PlayerGenerator(player_seed)
        self.stadium_generator = StadiumGenerator(stadium_seed, self.current_year)

    @classmethod
    def from_config(cls, config: GenerationConfig,
                    current_year: Optional[int] = None) -> "LeagueGenerator":
        """Build a generator seeded with the configuration's seed."""
        return cls(seed=config.seed, current_year=current_year)

    def _child_seeds(self) -> Tuple[Optional[int], Optional[int], Optional[int]]:
        """Derive distinct team, player and stadium seeds from this generator's seed."""
        if self.seed is None:
            return None, None, None
        return tuple(self.random_source.next_int(self.CHILD_SEED_BOUND) for _ in range(3))

    # ==================== Leagues ====================

    def generate_league(self, country: Country, config: GenerationConfig) -> GeneratedLeague:
        """
        Generate the top division with teams only (no players or stadiums).

        Raises:
            ConfigurationError: If the league or team settings are invalid
        """
        self._validate(country, config)

        teams = self.team_generator.generate_teams(
            country, config.team_config, config.league_config.teams_per_division
        )
        league = self._build_league(country, config.league_config.name_format, teams, level=1)

        self.logger.info(f"Generated league '{league.name}' with {len(teams)} teams")
        return league

    def generate_complete_league(self, country: Country, config: GenerationConfig) -> GeneratedLeague:
        """
        Generate the top division with full squads and stadiums.

        Raises:
            ConfigurationError: If any configuration section is invalid
        """
        self._validate(country, config)

        cities = NameRepository.get_city_names(country.code)
        used_team_names: Set[str] = set()
        used_stadium_names: Set[str] = set()
        teams: List[GeneratedTeam] = []

        for _ in range(config.league_config.teams_per_division):
            teams.append(self._generate_complete_team(
                country, config, cities, used_team_names, used_stadium_names
            ))

        league = self._build_league(country, config.league_config.name_format, teams, level=1)

        self.logger.info(
            f"Generated complete league '{league.name}': "
            f"{len(teams)} teams, {league.total_players} players"
        )
        return league

    def generate_divisions(self, country: Country, config: GenerationConfig) -> List[GeneratedLeague]:
        """
        Generate every configured division (teams only).

        Team names are unique across all divisions of one call.
        """
        self._validate(country, config)

        used_names: Set[str] = set()
        divisions = []

        for level in range(1, config.league_config.divisions + 1):
            name = self._generate_division_name(country, config.league_config, level)
            teams = self.team_generator.generate_teams(
                country, config.team_config, config.league_config.teams_per_division,
                used_names=used_names,
            )
            divisions.append(self._build_league(country, name, teams, level=level))

        self.logger.info(f"Generated {len(divisions)} divisions for {country.name}")
        return divisions

    def generate_cup_competitions(self, country: Country, config: GenerationConfig,
                                  teams: List[GeneratedTeam]) -> List[GeneratedLeague]:
        """Domestic cup for every setup; a league cup as well when there are several divisions."""
        if not config.league_config.generate_cups:
            return []

        cups = [self._build_league(country, f"{country.name} Cup", teams, level=1,
                                   competition_type=CompetitionType.DOMESTIC_CUP)]

        if config.league_config.divisions > 1:
            cups.append(self._build_league(country, f"{country.name} League Cup", teams, level=1,
                                           competition_type=CompetitionType.LEAGUE_CUP))

        self.logger.debug(f"Generated {len(cups)} cup competitions for {country.name}")
        return cups

    # ==================== Structure ====================

    def calculate_optimal_structure(self, country: Country) -> LeagueStructure:
        return country.league_structure

    def validate_league_config(self, country: Country, config: LeagueConfig) -> ValidationResult:
        """
        Check division and team counts against sensible limits and the country.

        Returns:
            ValidationResult with is_valid False and the error on failure
        """
        teams = config.teams_per_division
        if not self.MIN_TEAMS <= teams <= self.MAX_TEAMS:
            return ValidationResult.fail(ConfigurationError(
                f"Teams per division must be between {self.MIN_TEAMS} and {self.MAX_TEAMS}",
                config_key="teams_per_division",
                config_value=teams,
                error_code=ConfigurationError.OUT_OF_RANGE,
            ))

        if not self.MIN_DIVISIONS <= config.divisions <= self.MAX_DIVISIONS:
            return ValidationResult.fail(ConfigurationError(
                f"Divisions must be between {self.MIN_DIVISIONS} and {self.MAX_DIVISIONS}",
                config_key="divisions",
                config_value=config.divisions,
                error_code=ConfigurationError.OUT_OF_RANGE,
            ))

        expected = country.league_structure.top_division_teams
        if abs(teams - expected) > self.MAX_TEAM_COUNT_DEVIATION:
            return ValidationResult.fail(ConfigurationError(
                f"{teams} teams is unusual for {country.name} (typically {expected})",
                config_key="teams_per_division",
                config_value=teams,
                error_code=ConfigurationError.OUT_OF_RANGE,
            ))

        return ValidationResult.ok()

    # ==================== Helpers ====================

    def _validate(self, country: Country, config: GenerationConfig) -> None:
        self.validate_league_config(country, config.league_config).raise_if_invalid()
        config.validate().raise_if_invalid()

    def _generate_complete_team(self, country: Country, config: GenerationConfig,
                                cities: List[str], used_team_names: Set[str],
                                used_stadium_names: Set[str]) -> GeneratedTeam:
        team = self.team_generator.generate_team(country, config.team_config, used_team_names, cities)

        squad_size = self.player_generator.generate_squad_size(team.reputation, config.player_config)
        players = self.player_generator.generate_players_for_team(country, config.player_config, squad_size)

        stadium = self.stadium_generator.generate_stadium(
            country, config.stadium_config, team.name, team.city, team.reputation,
            used_names=used_stadium_names,
        )
        return team.with_squad(players, stadium)

    def _generate_division_name(self, country: Country, config: LeagueConfig, level: int) -> str:
        if level == 1:
            return config.name_format
        names = self.DIVISION_NAMES.get(country.code, {})
        return names.get(level, f"{country.name} Division {level}")

    def _build_league(self, country: Country, name: str, teams: List[GeneratedTeam], level: int,
                      competition_type: CompetitionType = CompetitionType.LEAGUE) -> GeneratedLeague:
        return GeneratedLeague(
            league_id=self.random_source.generate_id(GenerationSettings.LEAGUE_ID_LENGTH),
            name=name,
            country_code=country.code,
            teams=list(teams),
            level=level,
            competition_type=competition_type,
        )
