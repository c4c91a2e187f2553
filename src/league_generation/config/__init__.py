"""Tunable constants for the generation engine."""

from .generation_settings import GenerationSettings

__all__ = [
    "GenerationSettings",
]
