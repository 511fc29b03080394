"""validated — accumulate validation errors instead of stopping at the first.

Pure and synchronous. Ships pydantic-based helpers for structured field errors.
"""

from __future__ import annotations

# ── Core ─────────────────────────────────────────────────────────
from .core import (
    Invalid,
    Valid,
    Validated,
    all_of,
    check,
    combine_all,
    from_bool,
    from_bytes,
    from_call,
    from_dict,
    from_float,
    from_int,
    from_list,
    from_optional,
    from_outcome,
    from_str,
    invalid,
    run_all,
    valid,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import IValidator

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    ContractViolationError,
    EmptyErrorsError,
    EmptyValidatorsError,
    Failure,
    Outcome,
    Success,
    ValidatedError,
    ValidationFailedError,
    attempt,
)

# ── Validation ──────────────────────────────────────────────────
from .validation import (
    ROOT_FIELD,
    CompositeValidator,
    FieldError,
    at_field,
    group_errors,
    model_validator,
    validate_model,
)

__all__: list[str] = [
    # Core
    "Invalid",
    "Valid",
    "Validated",
    "valid",
    "invalid",
    "from_outcome",
    "from_int",
    "from_float",
    "from_str",
    "from_bool",
    "from_list",
    "from_optional",
    "from_bytes",
    "from_dict",
    "from_call",
    "check",
    "combine_all",
    "all_of",
    "run_all",
    # Ports
    "IValidator",
    # Primitives
    "Success",
    "Failure",
    "Outcome",
    "attempt",
    "ValidatedError",
    "ContractViolationError",
    "EmptyErrorsError",
    "EmptyValidatorsError",
    "ValidationFailedError",
    # Validation
    "CompositeValidator",
    "FieldError",
    "ROOT_FIELD",
    "at_field",
    "group_errors",
    "model_validator",
    "validate_model",
]
