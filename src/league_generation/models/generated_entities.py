"""
Generated Entities

Records assembled by the generators. The engine only fills in scalar and
string attributes; it never interprets these records further.
"""

from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional


class PlayerPosition(Enum):
    GOALKEEPER = "GK"
    DEFENDER = "DEF"
    MIDFIELDER = "MID"
    FORWARD = "FWD"


class SurfaceType(Enum):
    NATURAL_GRASS = "Natural Grass"
    ARTIFICIAL_TURF = "Artificial Turf"
    HYBRID_GRASS = "Hybrid Grass"


class RoofType(Enum):
    OPEN = "Open"
    PARTIAL = "Partial"
    RETRACTABLE = "Retractable"
    FULL = "Full"


class CompetitionType(Enum):
    LEAGUE = "league"
    DOMESTIC_CUP = "domestic_cup"
    LEAGUE_CUP = "league_cup"


@dataclass(frozen=True)
class TeamColors:
    primary: str
    secondary: str


@dataclass
class GeneratedPlayer:
    """A generated squad member."""
    player_id: str
    name: str
    age: int
    position: PlayerPosition
    overall: int
    technical: int
    physical: int
    mental: int
    nationality: str

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["position"] = self.position.value
        return data


@dataclass
class GeneratedStadium:
    """A generated home ground."""
    stadium_id: str
    name: str
    capacity: int
    city: str
    country_code: str
    founded_year: int
    surface_type: SurfaceType
    roof_type: RoofType
    has_undersoil_heating: bool
    atmosphere: int

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["surface_type"] = self.surface_type.value
        data["roof_type"] = self.roof_type.value
        return data


@dataclass
class GeneratedTeam:
    """
    A generated club.

    Teams start without players or a stadium; the league generator attaches
    them with ``with_squad``.
    """
    team_id: str
    name: str
    city: str
    country_code: str
    founded_year: int
    reputation: int
    colors: TeamColors
    players: List[GeneratedPlayer] = field(default_factory=list)
    stadium: Optional[GeneratedStadium] = None

    @property
    def squad_size(self) -> int:
        return len(self.players)

    def with_squad(self, players: List[GeneratedPlayer],
                   stadium: Optional[GeneratedStadium] = None) -> "GeneratedTeam":
        """Return a copy carrying the given players (and stadium)."""
        return replace(self, players=list(players), stadium=stadium or self.stadium)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "team_id": self.team_id,
            "name": self.name,
            "city": self.city,
            "country_code": self.country_code,
            "founded_year": self.founded_year,
            "reputation": self.reputation,
            "colors": asdict(self.colors),
            "players": [p.to_dict() for p in self.players],
            "stadium": self.stadium.to_dict() if self.stadium else None,
        }


@dataclass
class GeneratedLeague:
    """A league division or cup competition."""
    league_id: str
    name: str
    country_code: str
    teams: List[GeneratedTeam] = field(default_factory=list)
    level: int = 1
    competition_type: CompetitionType = CompetitionType.LEAGUE

    @property
    def total_players(self) -> int:
        return sum(team.squad_size for team in self.teams)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "league_id": self.league_id,
            "name": self.name,
            "country_code": self.country_code,
            "level": self.level,
            "competition_type": self.competition_type.value,
            "teams": [t.to_dict() for t in self.teams],
        }
