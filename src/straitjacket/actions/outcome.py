"""Result values an action can report: per-action Outcome records and Unit.

An action that has nothing to report returns ``Unit``, never ``None``.
``Unit`` is one shared, immutable value that looks like an empty record
and an empty collection to anything inspecting it, so code handling
"whatever the action returned" needs no special case for it.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Callable, ClassVar, Iterator, Optional, TypeVar, Union


@dataclass(frozen=True)
class Outcome:
    """Base for per-action result records.

    Subclasses are ``@dataclass(frozen=True)`` records with named fields.
    Equality includes the class, so two outcome types never compare equal
    even when their field values match.
    """

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, repr=False)
class UnitType:
    """The type of ``Unit``. Calling it always returns the same instance."""

    _instance: ClassVar[Optional["UnitType"]] = None

    def __new__(cls) -> "UnitType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init_subclass__(cls, **kwargs):
        raise TypeError("UnitType cannot be subclassed")

    # Identity survives copy, deepcopy and pickle
    def __reduce__(self) -> str:
        return "Unit"

    def __repr__(self) -> str:
        return "Unit"

    __str__ = __repr__

    def __len__(self) -> int:
        return 0

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __contains__(self, item: Any) -> bool:
        return False

    def __getitem__(self, key: Any) -> Any:
        raise KeyError(key)

    def get(self, key: Any, default: Any = None) -> Any:
        return default

    def keys(self) -> list:
        return []

    def values(self) -> list:
        return []

    def items(self) -> list:
        return []

    def members(self) -> list:
        return []

    def values_at(self, *keys: Any) -> list:
        return []

    def select(self, predicate: Callable[[Any], bool]) -> list:
        return []

    def to_list(self) -> list:
        return []

    def to_dict(self) -> dict:
        return {}


Unit = UnitType()

O = TypeVar("O", bound=Outcome)

# What an invocation produces: nothing (Unit) or one specific Outcome
Result = Union[UnitType, O]


def is_unit(value: Any) -> bool:
    return value is Unit
