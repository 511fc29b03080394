"""Lift pydantic model validation into ``Validated``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..core.result import Invalid, Valid
from .fields import ROOT_FIELD, FieldError

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..core.result import Validated

logger = logging.getLogger("validated.validation")

M = TypeVar("M", bound=BaseModel)


def validate_model(
    model_cls: type[M], data: Any, placeholder: M
) -> Validated[M, FieldError]:
    """Validate *data* with *model_cls*; each pydantic error becomes a ``FieldError``.

    Only :class:`pydantic.ValidationError` is converted; the error order is
    the order pydantic reports.
    """
    try:
        return Valid(model_cls.model_validate(data))
    except PydanticValidationError as exc:
        errors = [
            FieldError(
                field=".".join(str(p) for p in error.get("loc", ())) or ROOT_FIELD,
                message=error.get("msg", "validation error"),
            )
            for error in exc.errors()
        ]
        logger.debug(
            "%s validation produced %d error(s)", model_cls.__name__, len(errors)
        )
        return Invalid(placeholder, tuple(errors))


def model_validator(
    model_cls: type[M], placeholder: M
) -> Callable[[Any], Validated[M, FieldError]]:
    """Return ``validate_model`` bound to *model_cls* as a validator function."""

    def _validate(data: Any) -> Validated[M, FieldError]:
        return validate_model(model_cls, data, placeholder)

    return _validate
