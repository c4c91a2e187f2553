"""Culture-aware person names."""

from typing import Sequence

from ..config.generation_settings import GenerationSettings
from ..core.random_source import SeededRandomSource
from ..data.name_repository import NameRepository


class NameGenerator:
    """Generates first, last and full names from the name repository."""

    def __init__(self, random_source: SeededRandomSource):
        self.random_source = random_source

    def generate_first_name(self, language: str, gender: str = "male") -> str:
        return self.random_source.choice(NameRepository.get_first_names(language, gender))

    def generate_last_name(self, language: str) -> str:
        return self.random_source.choice(NameRepository.get_last_names(language))

    def generate_full_name(self, language: str, gender: str = "male",
                           title_prefixes: Sequence[str] = ()) -> str:
        """
        Generate "First Last", occasionally with a cultural title.

        Args:
            language: Two-letter language code
            gender: "male", "female" or "any"
            title_prefixes: Titles such as "Sir" or "Don"; 10% of names get one

        Returns:
            Full name string
        """
        first_name = self.generate_first_name(language, gender)
        last_name = self.generate_last_name(language)

        if title_prefixes and self.random_source.random_bool(GenerationSettings.TITLE_PREFIX_PROBABILITY):
            title = self.random_source.choice(title_prefixes)
            return f"{title} {first_name} {last_name}"

        return f"{first_name} {last_name}"
