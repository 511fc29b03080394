"""CompositeValidator — runs many validators on one input, collects all errors."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..core.combinators import run_all
from ..core.result import MISSING

if TYPE_CHECKING:
    from ..core.result import Validated
    from ..ports.validator import IValidator

logger = logging.getLogger("validated.validation")


class CompositeValidator:
    """Applies a list of validators to the same input and merges their results.

    Unlike fail-fast validation, this collects **all** errors across
    all validators before returning. The carried value is the last
    validator's value or placeholder.

    Composites are validators themselves, so they nest.

    Usage::

        password = CompositeValidator([min_length(8), has_digit, has_symbol])
        result = password("hunter2")
    """

    def __init__(
        self,
        validators: list[IValidator[Any]] | None = None,
        *,
        default: Any = MISSING,
    ) -> None:
        self._validators: list[IValidator[Any]] = list(validators or [])
        self._default = default

    @property
    def validators(self) -> list[IValidator[Any]]:
        return list(self._validators)

    def add(self, validator: IValidator[Any]) -> None:
        """Append a validator to the chain."""
        self._validators.append(validator)

    def validate(self, value: Any) -> Validated[Any, Any]:
        """Run all validators against *value* and merge errors."""
        result = run_all(self._validators, value, default=self._default)
        logger.debug(
            "Ran %d validator(s): %d error(s)",
            len(self._validators),
            len(result.errors),
        )
        return result

    def __call__(self, value: Any, /) -> Validated[Any, Any]:
        return self.validate(value)

    def __len__(self) -> int:
        return len(self._validators)
