"""straitjacket: uniform, validated, side-effecting actions."""

__version__ = "0.9.0"

from straitjacket.actions.base import Action, ActionState, with_outcome
from straitjacket.actions.outcome import Outcome, Result, Unit, UnitType, is_unit
from straitjacket.core.config import Settings, configure, get_settings
from straitjacket.core.exceptions import (
    ConfigError,
    MissingContinuationError,
    OutcomeTypeError,
    StraitjacketError,
    ValidationError,
)
from straitjacket.core.logging import setup_logging

__all__ = [
    "Action",
    "ActionState",
    "ConfigError",
    "MissingContinuationError",
    "Outcome",
    "OutcomeTypeError",
    "Result",
    "Settings",
    "StraitjacketError",
    "Unit",
    "UnitType",
    "ValidationError",
    "configure",
    "get_settings",
    "is_unit",
    "setup_logging",
    "with_outcome",
]
