"""
Generation Exception Classes

Exception hierarchy for the league generation engine.
Provides specific error types with error codes and readable messages.
"""

from typing import Any, Optional


class GenerationException(Exception):
    """
    Base exception for all generation errors.

    Provides error code support and structured error messages.
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        """
        Initialize generation exception.

        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with optional error code."""
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class ConfigurationError(GenerationException):
    """
    Raised when caller-supplied parameters or configuration are invalid.

    Covers inverted bounds, negative standard deviations, unusable weight
    lists, out-of-range reputations and an exhausted name space. Always
    raised at the point of invocation; invalid input is never corrected.
    """

    INVALID_BOUNDS = "INVALID_BOUNDS"
    NEGATIVE_STD_DEV = "NEGATIVE_STD_DEV"
    INVALID_PARAMETER = "INVALID_PARAMETER"
    INVALID_WEIGHTS = "INVALID_WEIGHTS"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    INVALID_CONFIG = "INVALID_CONFIG"
    NAME_SPACE_EXHAUSTED = "NAME_SPACE_EXHAUSTED"

    def __init__(self, message: str, config_key: Optional[str] = None,
                 config_value: Optional[Any] = None,
                 error_code: str = INVALID_CONFIG):
        """
        Initialize configuration error.

        Args:
            message: Description of the configuration problem
            config_key: The parameter or config field that caused the error
            config_value: The offending value
            error_code: One of the class-level error codes
        """
        self.config_key = config_key
        self.config_value = config_value

        full_message = message
        if config_key:
            full_message += f". Key: '{config_key}'"
        if config_value is not None:
            full_message += f". Value: {config_value}"

        super().__init__(full_message, error_code)

    @classmethod
    def invalid_bounds(cls, min_value: Any, max_value: Any,
                       config_key: str = "bounds") -> "ConfigurationError":
        """Build the error for a min >= max range."""
        return cls(
            f"Minimum ({min_value}) must be less than maximum ({max_value})",
            config_key=config_key,
            error_code=cls.INVALID_BOUNDS,
        )


class SamplingError(GenerationException):
    """
    Raised when a rejection-sampling loop exceeds its safety ceiling.

    Unreachable with a healthy random source and valid parameters.
    """

    def __init__(self, message: str, iterations: int):
        """
        Initialize sampling error.

        Args:
            message: Description of the sampler that gave up
            iterations: Number of iterations attempted
        """
        self.iterations = iterations
        super().__init__(f"{message} (gave up after {iterations} iterations)",
                         "SAMPLING_EXHAUSTED")
