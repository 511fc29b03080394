"""Core: the Validated type, its constructors and aggregate combinators."""

from __future__ import annotations

from .combinators import all_of, combine_all, run_all
from .constructors import (
    check,
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
    valid,
)
from .result import Invalid, Valid, Validated

__all__ = [
    "Invalid",
    "Valid",
    "Validated",
    "all_of",
    "check",
    "combine_all",
    "from_bool",
    "from_bytes",
    "from_call",
    "from_dict",
    "from_float",
    "from_int",
    "from_list",
    "from_optional",
    "from_outcome",
    "from_str",
    "invalid",
    "run_all",
    "valid",
]
