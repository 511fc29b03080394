"""Plain success/failure values for ordinary fallible computations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar, Union

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A computation that produced ``value``."""

    value: T

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure(Generic[E]):
    """A computation that failed with ``error``."""

    error: E

    @property
    def is_success(self) -> bool:
        return False


Outcome = Union[Success[T], Failure[E]]


def attempt(
    func: Callable[..., T],
    *args: Any,
    catch: tuple[type[Exception], ...] = (ValueError,),
    **kwargs: Any,
) -> Success[T] | Failure[Exception]:
    """Call *func* and capture the exception types in *catch* as a ``Failure``.

    Anything outside *catch* propagates unchanged.

    Usage::

        attempt(int, "42")          # Success(42)
        attempt(int, "forty-two")   # Failure(ValueError(...))
    """
    try:
        return Success(func(*args, **kwargs))
    except catch as exc:
        return Failure(exc)
