"""Exception hierarchy for straitjacket."""

from typing import Iterable

from straitjacket.core.constants import VALIDATION_DELIMITER


class StraitjacketError(Exception):
    """Base exception for all straitjacket errors."""


class ValidationError(StraitjacketError, ValueError):
    """Action inputs failed one or more construction-time checks."""

    def __init__(self, errors: Iterable[str], action: str = ""):
        self.errors = tuple(errors)
        self.action = action
        super().__init__(VALIDATION_DELIMITER.join(self.errors))


class OutcomeTypeError(StraitjacketError, TypeError):
    """An action body returned a value of the wrong shape."""


class MissingContinuationError(StraitjacketError):
    """An outcome was produced but no continuation was there to receive it."""


class ConfigError(StraitjacketError):
    """Configuration loading or validation error."""
