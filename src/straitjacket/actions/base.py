"""Action base class: validated construction and single-point invocation.

A concrete action declares keyword-only inputs in ``__init__``, an
optional pure ``validate()``, an ``invoke()`` body holding its side
effects, and, if it reports something back, the ``Outcome`` record it
returns::

    @dataclass(frozen=True)
    class Sum(Outcome):
        sum: float

    class AddTwoNumbers(Action[Sum]):
        Outcome = Sum

        def __init__(self, *, a, b):
            self.a = a
            self.b = b

        def validate(self):
            return checks.collect(checks.numeric("a", self.a),
                                  checks.numeric("b", self.b))

        def invoke(self):
            return self.Outcome(sum=self.a + self.b)

    AddTwoNumbers.make(a=1, b=2).call(lambda outcome: print(outcome.sum))

The outcome is only ever handed to the continuation; ``call()`` itself
returns None.
"""

from __future__ import annotations

import enum
import logging
from abc import ABCMeta, abstractmethod
from typing import Any, Callable, ClassVar, Generic, Iterable, Optional, TypeVar

from straitjacket.actions.outcome import Outcome as BaseOutcome
from straitjacket.actions.outcome import Unit
from straitjacket.core.config import check_policy, get_settings
from straitjacket.core.constants import POLICY_RAISE, POLICY_WARN
from straitjacket.core.exceptions import (
    MissingContinuationError,
    OutcomeTypeError,
    ValidationError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ActionState(enum.Enum):
    CONSTRUCTED = "constructed"
    VALIDATING = "validating"
    FAILED = "failed"
    READY = "ready"
    INVOKING = "invoking"
    COMPLETED = "completed"


class ActionMeta(ABCMeta):
    """Runs the validation pass as part of construction.

    Any way of building an action, ``make()`` or the class call, ends in
    either a READY instance or a raised ValidationError.
    """

    def __call__(cls, *args, **kwargs):
        action = cls.__new__(cls)
        action._state = ActionState.CONSTRUCTED
        action.__init__(*args, **kwargs)
        action._run_validation()
        return action


class Action(Generic[T], metaclass=ActionMeta):
    """Base for side-effecting units of work.

    ``T`` is the static result shape: ``UnitType`` for actions that report
    nothing, or the action's own ``Outcome`` record.
    """

    # Outcome record returned by invoke(); None means the action returns Unit
    Outcome: ClassVar[Optional[type]] = None

    # Per-class override of Settings.on_missing_continuation
    on_missing_continuation: ClassVar[Optional[str]] = None

    _state: ActionState

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        declared = cls.__dict__.get("Outcome")
        if declared is not None and not (
            isinstance(declared, type) and issubclass(declared, BaseOutcome)
        ):
            raise TypeError(
                f"{cls.__name__}.Outcome must be a subclass of straitjacket.Outcome"
            )
        if cls.on_missing_continuation is not None:
            check_policy(cls.on_missing_continuation)

    @classmethod
    def make(cls, **inputs: Any) -> "Action[T]":
        """Build a validated action from named inputs."""
        return cls(**inputs)

    @classmethod
    def produces_outcome(cls) -> bool:
        return cls.Outcome is not None

    @property
    def state(self) -> ActionState:
        return self._state

    def validate(self) -> Iterable[str]:
        """Return failure messages for the stored inputs, in check order.

        Must stay pure: inspect inputs only, never touch collaborators.
        """
        return ()

    @abstractmethod
    def invoke(self) -> T:
        """Perform the side effects and return Unit or an Outcome."""
        ...

    def call(self, continuation: Optional[Callable[[T], Any]] = None) -> None:
        """Run invoke() once and hand a non-Unit result to the continuation.

        Errors from the body or the continuation propagate unchanged.
        """
        name = type(self).__name__
        verbose = get_settings().log_invocations
        if verbose:
            logger.debug(f"Invoking {name}")

        self._state = ActionState.INVOKING
        value = self.invoke()
        self._check_result(value)
        self._state = ActionState.COMPLETED

        if value is Unit:
            return None
        if continuation is None:
            self._missing_continuation(value)
            return None

        if verbose:
            logger.debug(f"Delivering {type(value).__name__} from {name} to continuation")
        continuation(value)
        return None

    def _run_validation(self) -> None:
        self._state = ActionState.VALIDATING
        result = self.validate() or ()
        # a lone message, not a sequence of one-character messages
        if isinstance(result, str):
            result = [result]
        errors = [str(e) for e in result if e is not None]
        if errors:
            self._state = ActionState.FAILED
            error = ValidationError(errors, action=type(self).__name__)
            logger.debug(f"Validation failed for {type(self).__name__}: {error}")
            raise error
        self._state = ActionState.READY
        logger.debug(f"Constructed {type(self).__name__}")

    def _check_result(self, value: Any) -> None:
        expected = type(self).Outcome
        name = type(self).__name__
        if expected is None:
            if value is not Unit:
                raise OutcomeTypeError(
                    f"{name}.invoke() must return Unit, got {value!r}"
                )
        elif type(value) is not expected:
            raise OutcomeTypeError(
                f"{name}.invoke() must return {expected.__qualname__}, got {value!r}"
            )

    def _missing_continuation(self, value: Any) -> None:
        policy = self.on_missing_continuation or get_settings().on_missing_continuation
        name = type(self).__name__
        if policy == POLICY_RAISE:
            raise MissingContinuationError(
                f"{name} produced {type(value).__qualname__} but no continuation was given"
            )
        if policy == POLICY_WARN:
            logger.warning(f"{name} produced {value!r} with no continuation; discarded")

    def __repr__(self) -> str:
        state = getattr(self, "_state", None)
        label = state.value if state is not None else "new"
        return f"<{type(self).__name__} state={label}>"


def with_outcome(action: Action[T], continuation: Callable[[T], Any]) -> None:
    """Invoke ``action`` with a required continuation."""
    if not callable(continuation):
        raise TypeError(f"continuation must be callable, got {continuation!r}")
    action.call(continuation)
