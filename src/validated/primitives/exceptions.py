"""Exception hierarchy for validated.

Validation errors are values and are never raised. The exceptions here
cover the two remaining cases: contract violations (programmer errors) and
the explicit exception boundary offered by ``raise_for_errors()``.
"""

from __future__ import annotations

from typing import Any


class ValidatedError(Exception):
    """Root exception for the entire validated package."""


class ContractViolationError(ValidatedError):
    """Base class for programmer errors in the use of the API.

    These are never accumulated; they signal a bug in the calling code."""


class EmptyErrorsError(ContractViolationError):
    """Raised when an ``Invalid`` would be constructed without any errors."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "Invalid requires at least one error")


class EmptyValidatorsError(ContractViolationError):
    """Raised when a strict ``run_all`` receives no validators.

    Usage: pass ``default=`` to ``run_all`` or ``CompositeValidator`` to opt
    into the permissive policy instead.
    """

    def __init__(self) -> None:
        super().__init__(
            "run_all received an empty validator sequence; "
            "pass default= to allow it"
        )


class ValidationFailedError(ValidatedError):
    """Raised by ``Validated.raise_for_errors()`` for an ``Invalid`` value.

    Carries every accumulated error in encounter order.
    """

    def __init__(self, errors: list[Any]) -> None:
        self.errors = list(errors)
        count = len(self.errors)
        noun = "error" if count == 1 else "errors"
        super().__init__(
            f"{count} validation {noun}: " + "; ".join(str(e) for e in self.errors)
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_FAILED",
            "errors": [str(e) for e in self.errors],
        }
