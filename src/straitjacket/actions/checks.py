"""Pure input checks for Action.validate().

Each check returns a failure message, or None when the input is fine.
Checks only look at the value they are given: no I/O, no clock.
"""

from decimal import Decimal
from fractions import Fraction
from typing import Any, Optional, Union

NUMERIC_TYPES = (int, float, Decimal, Fraction)


def numeric(name: str, value: Any) -> Optional[str]:
    # bool is an int subclass but never a meaningful number here
    if isinstance(value, bool) or not isinstance(value, NUMERIC_TYPES):
        return f"{name} non-numeric"
    return None


def present(name: str, value: Any) -> Optional[str]:
    if value is None:
        return f"{name} missing"
    return None


def non_empty(name: str, value: Any) -> Optional[str]:
    try:
        empty = value is None or len(value) == 0
    except TypeError:
        empty = False
    if empty:
        return f"{name} empty"
    return None


def instance_of(name: str, value: Any, types: Union[type, tuple]) -> Optional[str]:
    if isinstance(value, types):
        return None
    if not isinstance(types, tuple):
        types = (types,)
    names = " or ".join(t.__name__ for t in types)
    return f"{name} must be {names}"


def collect(*results: Optional[str]) -> list[str]:
    """Keep the failure messages, in argument order."""
    return [r for r in results if r is not None]
