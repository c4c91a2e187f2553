"""Person names and collision-free entity naming."""

from .name_generator import NameGenerator
from .unique_name_resolver import (
    NameOutcome,
    NameResolution,
    UniqueNameResolver,
    resolve_unique_name,
)

__all__ = [
    "NameGenerator",
    "NameOutcome",
    "NameResolution",
    "UniqueNameResolver",
    "resolve_unique_name",
]
