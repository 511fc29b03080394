"""Aggregate combinators folding many ``Validated`` values into one."""

from __future__ import annotations

import logging
from functools import reduce
from typing import TYPE_CHECKING, TypeVar

from ..primitives.exceptions import EmptyValidatorsError
from .result import MISSING, Invalid, Valid

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .result import Validated

logger = logging.getLogger("validated.core")

A = TypeVar("A")
E = TypeVar("E")
In = TypeVar("In")
Out = TypeVar("Out")


def combine_all(items: Iterable[Validated[A, E]], default: A) -> Validated[A, E]:
    """Left fold of ``combine`` starting from ``Valid(default)``."""
    seed: Validated[A, E] = Valid(default)
    return reduce(lambda acc, item: acc.combine(item), items, seed)


def all_of(items: Iterable[Validated[A, E]]) -> Validated[list[A], E]:
    """Collect every carried value in order, concatenating all errors.

    Invalid elements contribute their placeholder to the list.
    """
    values: list[A] = []
    errors: list[E] = []
    for item in items:
        values.append(item.unwrap())
        if isinstance(item, Invalid):
            errors.extend(item.errors)
    if errors:
        return Invalid(values, tuple(errors))
    return Valid(values)


def run_all(
    validators: Iterable[Callable[[In], Validated[Out, E]]],
    value: In,
    *,
    default: Out = MISSING,
) -> Validated[Out, E]:
    """Apply every validator to *value* and fold the results with ``combine``.

    An empty validator sequence raises ``EmptyValidatorsError`` unless
    *default* is given, in which case it yields ``Valid(default)``.
    """
    results = [validator(value) for validator in validators]
    if not results:
        if default is MISSING:
            raise EmptyValidatorsError()
        logger.debug("run_all received no validators; using the supplied default")
        return Valid(default)
    return reduce(lambda acc, item: acc.combine(item), results)
