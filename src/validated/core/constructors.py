"""Constructors lifting ordinary values and outcomes into ``Validated``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from ..primitives.outcome import Failure, Success, attempt
from .result import MISSING, Invalid, Valid

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ..primitives.outcome import Outcome
    from .result import Validated

T = TypeVar("T")
E = TypeVar("E")
K = TypeVar("K")
V = TypeVar("V")


def valid(value: T) -> Valid[T, Any]:
    return Valid(value)


def invalid(placeholder: T, errors: Iterable[E]) -> Invalid[T, E]:
    """Build an ``Invalid``; raises ``EmptyErrorsError`` when *errors* is empty."""
    return Invalid(placeholder, errors)  # type: ignore[arg-type]


def from_outcome(outcome: Outcome[T, E], placeholder: T) -> Validated[T, E]:
    """Lift a ``Success`` / ``Failure`` into the accumulating world.

    *placeholder* stands in for the value when the outcome is a failure.
    """
    if isinstance(outcome, Success):
        return Valid(outcome.value)
    if isinstance(outcome, Failure):
        return Invalid(placeholder, (outcome.error,))
    raise TypeError(f"expected Success or Failure, got {type(outcome).__name__}")


# ── Zero-placeholder wrappers ────────────────────────────────────


def from_int(outcome: Outcome[int, E]) -> Validated[int, E]:
    return from_outcome(outcome, 0)


def from_float(outcome: Outcome[float, E]) -> Validated[float, E]:
    return from_outcome(outcome, 0.0)


def from_str(outcome: Outcome[str, E]) -> Validated[str, E]:
    return from_outcome(outcome, "")


def from_bool(outcome: Outcome[bool, E]) -> Validated[bool, E]:
    return from_outcome(outcome, False)


def from_list(outcome: Outcome[list[T], E]) -> Validated[list[T], E]:
    return from_outcome(outcome, [])


def from_optional(outcome: Outcome[T | None, E]) -> Validated[T | None, E]:
    return from_outcome(outcome, None)


def from_bytes(outcome: Outcome[bytes, E]) -> Validated[bytes, E]:
    return from_outcome(outcome, b"")


def from_dict(outcome: Outcome[dict[K, V], E]) -> Validated[dict[K, V], E]:
    return from_outcome(outcome, {})


# ── Python callables and predicates ──────────────────────────────


def from_call(
    func: Callable[..., T],
    *args: Any,
    placeholder: T,
    catch: tuple[type[Exception], ...] = (ValueError,),
    **kwargs: Any,
) -> Validated[T, Exception]:
    """Call a raising function and lift the result.

    Exceptions listed in *catch* become the single error of an ``Invalid``;
    anything else propagates.

    Usage::

        age = from_call(int, raw_age, placeholder=0)
    """
    return from_outcome(attempt(func, *args, catch=catch, **kwargs), placeholder)


def check(
    value: T,
    predicate: Callable[[T], bool],
    error: E,
    placeholder: T = MISSING,
) -> Validated[T, E]:
    """``Valid(value)`` when *predicate* holds, else ``Invalid`` with *error*.

    The placeholder defaults to *value* itself.
    """
    if predicate(value):
        return Valid(value)
    return Invalid(value if placeholder is MISSING else placeholder, (error,))
