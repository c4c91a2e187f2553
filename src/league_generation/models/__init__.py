"""Typed records produced by the generators."""

from .generated_entities import (
    CompetitionType,
    GeneratedLeague,
    GeneratedPlayer,
    GeneratedStadium,
    GeneratedTeam,
    PlayerPosition,
    RoofType,
    SurfaceType,
    TeamColors,
)

__all__ = [
    "CompetitionType",
    "GeneratedLeague",
    "GeneratedPlayer",
    "GeneratedStadium",
    "GeneratedTeam",
    "PlayerPosition",
    "RoofType",
    "SurfaceType",
    "TeamColors",
]
