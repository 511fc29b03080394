"""FieldError — structured, field-addressed validation errors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..core.result import Validated

T = TypeVar("T")

ROOT_FIELD = "__root__"


class FieldError(BaseModel):
    """An error message addressed to a (dotted) field path.

    Immutable; equality is structural.
    """

    model_config = ConfigDict(frozen=True)

    field: str
    message: str

    def nested_under(self, parent: str) -> FieldError:
        """Return a copy whose path is prefixed with *parent*."""
        if self.field == ROOT_FIELD:
            return FieldError(field=parent, message=self.message)
        return FieldError(field=f"{parent}.{self.field}", message=self.message)

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


def _tag(error: Any, field: str) -> FieldError:
    if isinstance(error, FieldError):
        return error.nested_under(field)
    return FieldError(field=field, message=str(error))


def at_field(result: Validated[T, Any], field: str) -> Validated[T, FieldError]:
    """Address every error of *result* to *field*.

    Errors that are already ``FieldError`` instances keep their own path
    below *field* (``"zip"`` under ``"address"`` becomes ``"address.zip"``).
    """
    return result.map_error(lambda errors: [_tag(e, field) for e in errors])


def group_errors(errors: Iterable[Any]) -> dict[str, list[str]]:
    """Group messages by field for presentation: ``{field: [messages]}``.

    Fields appear in order of first occurrence; messages keep encounter
    order. Errors that are not ``FieldError`` go under ``ROOT_FIELD``.
    """
    grouped: dict[str, list[str]] = {}
    for error in errors:
        if isinstance(error, FieldError):
            grouped.setdefault(error.field, []).append(error.message)
        else:
            grouped.setdefault(ROOT_FIELD, []).append(str(error))
    return grouped
