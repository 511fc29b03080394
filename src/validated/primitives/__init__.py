"""Primitives: exceptions, plain success/failure outcomes."""

from __future__ import annotations

from .exceptions import (
    ContractViolationError,
    EmptyErrorsError,
    EmptyValidatorsError,
    ValidatedError,
    ValidationFailedError,
)
from .outcome import Failure, Outcome, Success, attempt

__all__ = [
    "ContractViolationError",
    "EmptyErrorsError",
    "EmptyValidatorsError",
    "Failure",
    "Outcome",
    "Success",
    "ValidatedError",
    "ValidationFailedError",
    "attempt",
]
