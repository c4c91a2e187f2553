"""
Entity Generators

Orchestration over the sampling core: each generator owns a seeded random
source and assembles typed records.

Key Components:
- CountryGenerator: country lookups and suitability checks
- TeamGenerator: clubs with reputation, city, colours and unique names
- PlayerGenerator: squads sized by reputation
- StadiumGenerator: grounds with reputation-driven capacity and atmosphere
- LeagueGenerator: leagues, division pyramids and cups
"""

from .country_generator import CountryGenerator
from .league_generator import LeagueGenerator
from .player_generator import PlayerGenerator
from .stadium_generator import StadiumGenerator
from .team_generator import TeamGenerator

__all__ = [
    "CountryGenerator",
    "LeagueGenerator",
    "PlayerGenerator",
    "StadiumGenerator",
    "TeamGenerator",
]
