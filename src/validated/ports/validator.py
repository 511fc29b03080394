"""IValidator — the shape every composable validator has."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ..core.result import Validated

In = TypeVar("In", contravariant=True)


@runtime_checkable
class IValidator(Protocol[In]):
    """Protocol for validators.

    A validator is a pure callable from an input to a
    :class:`~validated.core.result.Validated`. It may be invoked against a
    placeholder, so it must not have observable side effects.

    Plain functions satisfy this protocol, as does
    :class:`~validated.validation.composite.CompositeValidator`.
    """

    def __call__(self, value: In, /) -> Validated[Any, Any]: ...
