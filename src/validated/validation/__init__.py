"""Validation helpers: CompositeValidator, FieldError, pydantic integration."""

from __future__ import annotations

from .composite import CompositeValidator
from .fields import ROOT_FIELD, FieldError, at_field, group_errors
from .pydantic import model_validator, validate_model

__all__ = [
    "CompositeValidator",
    "FieldError",
    "ROOT_FIELD",
    "at_field",
    "group_errors",
    "model_validator",
    "validate_model",
]
