"""Explicit validation results for configuration checks."""

from typing import NamedTuple, Optional

from .exceptions import ConfigurationError


class ValidationResult(NamedTuple):
    """Outcome of a configuration check.

    Unpacks like the ``(is_valid, error)`` tuples used elsewhere:

        is_valid, error = config.validate()

    ``error`` carries the specific ConfigurationError (with its error code)
    when the check failed, so callers can report why.
    """

    is_valid: bool
    error: Optional[ConfigurationError] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(True, None)

    @classmethod
    def fail(cls, error: ConfigurationError) -> "ValidationResult":
        return cls(False, error)

    @property
    def error_code(self) -> Optional[str]:
        return self.error.error_code if self.error else None

    def raise_if_invalid(self) -> None:
        """Raise the stored error if the check failed."""
        if self.error is not None:
            raise self.error

    def __bool__(self) -> bool:
        return self.is_valid
