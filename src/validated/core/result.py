"""Validated — an error-accumulating result type.

A ``Validated`` is either ``Valid(value)`` or ``Invalid(placeholder, errors)``.
An ``Invalid`` still carries a value of the declared type (the placeholder)
so that dependent checks can keep running and keep contributing their own
errors. The placeholder is never a real answer: ``to_result()`` drops it.

Usage::

    name = from_str(parse_name(raw["name"]))
    age = from_int(parse_age(raw["age"]))

    person = name.and_then(
        lambda n: age.map(lambda a: Person(name=n, age=a))
    )
    match person.to_result():
        case Success(value):
            save(value)
        case Failure(errors):
            report(errors)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..primitives.exceptions import (
    ContractViolationError,
    EmptyErrorsError,
    ValidationFailedError,
)
from ..primitives.outcome import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ..primitives.outcome import Outcome

logger = logging.getLogger("validated.core")

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")

MISSING: Any = object()


def _freeze_errors(errors: Iterable[Any]) -> tuple[Any, ...]:
    if isinstance(errors, (str, bytes)):
        raise ContractViolationError(
            f"errors must be a collection of errors, not a bare {type(errors).__name__}"
        )
    frozen = tuple(errors)
    if not frozen:
        raise EmptyErrorsError()
    return frozen


class Validated(ABC, Generic[T, E]):
    """Common interface of ``Valid`` and ``Invalid``."""

    @property
    @abstractmethod
    def is_valid(self) -> bool: ...

    @property
    def is_invalid(self) -> bool:
        return not self.is_valid

    @property
    @abstractmethod
    def errors(self) -> tuple[E, ...]:
        """Accumulated errors in check order; always ``()`` for ``Valid``."""

    # ── Combination ──────────────────────────────────────────────

    @abstractmethod
    def combine(self, other: Validated[U, E]) -> Validated[U, E]:
        """Merge *other* into this result.

        The value always comes from *other*; the errors are this result's
        errors followed by *other*'s.
        """

    def __and__(self, other: Validated[U, E]) -> Validated[U, E]:
        return self.combine(other)

    @abstractmethod
    def and_then(self, next_step: Callable[[T], Validated[U, E]]) -> Validated[U, E]:
        """Run *next_step* on the value or placeholder and accumulate errors.

        *next_step* runs even when this result is ``Invalid``.
        """

    # ── Transformation ───────────────────────────────────────────

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> Validated[U, E]:
        """Apply *func* to the carried value, keeping variant and errors."""

    @abstractmethod
    def map_error(self, func: Callable[[list[E]], Iterable[F]]) -> Validated[T, F]:
        """Apply *func* to the whole error list of an ``Invalid``."""

    @abstractmethod
    def try_map(
        self, placeholder: U, func: Callable[[T], Outcome[U, E]]
    ) -> Validated[U, E]:
        """Run a second fallible step, only when this result is ``Valid``."""

    # ── Guards ───────────────────────────────────────────────────

    @abstractmethod
    def guard(
        self, placeholder: U, then: Callable[[T], Validated[U, E]]
    ) -> Validated[U, E]:
        """Like ``and_then`` but stops at the first ``Invalid``."""

    @abstractmethod
    def lazy_guard(
        self,
        make_placeholder: Callable[[], U],
        then: Callable[[T], Validated[U, E]],
    ) -> Validated[U, E]:
        """``guard`` with a placeholder built only when it is needed."""

    # ── Extraction ───────────────────────────────────────────────

    @abstractmethod
    def to_result(self) -> Success[T] | Failure[list[E]]: ...

    @abstractmethod
    def unwrap(self) -> T:
        """Return the value or the placeholder.

        Only meaningful after branching on ``is_valid``.
        """

    @abstractmethod
    def raise_for_errors(self) -> T:
        """Return the real value or raise ``ValidationFailedError``."""


@dataclass(frozen=True)
class Valid(Validated[T, E]):
    """Every check so far succeeded; ``value`` is the genuine result."""

    value: T

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def errors(self) -> tuple[E, ...]:
        return ()

    def combine(self, other: Validated[U, E]) -> Validated[U, E]:
        if not isinstance(other, Validated):
            raise TypeError(f"cannot combine with {type(other).__name__}")
        return other

    def and_then(self, next_step: Callable[[T], Validated[U, E]]) -> Validated[U, E]:
        return next_step(self.value)

    def map(self, func: Callable[[T], U]) -> Validated[U, E]:
        return Valid(func(self.value))

    def map_error(self, func: Callable[[list[E]], Iterable[F]]) -> Validated[T, F]:
        return Valid(self.value)

    def try_map(
        self, placeholder: U, func: Callable[[T], Outcome[U, E]]
    ) -> Validated[U, E]:
        from .constructors import from_outcome

        return from_outcome(func(self.value), placeholder)

    def guard(
        self, placeholder: U, then: Callable[[T], Validated[U, E]]
    ) -> Validated[U, E]:
        return then(self.value)

    def lazy_guard(
        self,
        make_placeholder: Callable[[], U],
        then: Callable[[T], Validated[U, E]],
    ) -> Validated[U, E]:
        return then(self.value)

    def to_result(self) -> Success[T] | Failure[list[E]]:
        return Success(self.value)

    def unwrap(self) -> T:
        return self.value

    def raise_for_errors(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Invalid(Validated[T, E]):
    """At least one check failed.

    ``placeholder`` keeps computation moving; ``errors`` is the non-empty,
    ordered tuple of everything collected so far.
    """

    placeholder: T
    # slot shadows the abstract ``Validated.errors`` property
    errors: tuple[E, ...] = field()  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", _freeze_errors(self.errors))

    @property
    def is_valid(self) -> bool:
        return False

    def combine(self, other: Validated[U, E]) -> Validated[U, E]:
        if isinstance(other, Valid):
            return Invalid(other.value, self.errors)
        if isinstance(other, Invalid):
            return Invalid(other.placeholder, self.errors + other.errors)
        raise TypeError(f"cannot combine with {type(other).__name__}")

    def and_then(self, next_step: Callable[[T], Validated[U, E]]) -> Validated[U, E]:
        return self.combine(next_step(self.placeholder))

    def map(self, func: Callable[[T], U]) -> Validated[U, E]:
        return Invalid(func(self.placeholder), self.errors)

    def map_error(self, func: Callable[[list[E]], Iterable[F]]) -> Validated[T, F]:
        mapped = func(list(self.errors))
        return Invalid(self.placeholder, mapped)  # type: ignore[arg-type]

    def try_map(
        self, placeholder: U, func: Callable[[T], Outcome[U, E]]
    ) -> Validated[U, E]:
        return Invalid(placeholder, self.errors)

    def guard(
        self, placeholder: U, then: Callable[[T], Validated[U, E]]
    ) -> Validated[U, E]:
        return Invalid(placeholder, self.errors)

    def lazy_guard(
        self,
        make_placeholder: Callable[[], U],
        then: Callable[[T], Validated[U, E]],
    ) -> Validated[U, E]:
        return Invalid(make_placeholder(), self.errors)

    def to_result(self) -> Success[T] | Failure[list[E]]:
        return Failure(list(self.errors))

    def unwrap(self) -> T:
        return self.placeholder

    def raise_for_errors(self) -> T:
        logger.debug(
            "Raising ValidationFailedError with %d error(s)", len(self.errors)
        )
        raise ValidationFailedError(list(self.errors))
