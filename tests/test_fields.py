import pytest
from pydantic import ValidationError as PydanticValidationError

from validated.core.combinators import all_of
from validated.core.constructors import invalid, valid
from validated.core.result import Invalid, Valid
from validated.validation.fields import ROOT_FIELD, FieldError, at_field, group_errors


def test_field_error_is_frozen_and_structural() -> None:
    err = FieldError(field="name", message="required")

    assert err == FieldError(field="name", message="required")
    assert str(err) == "name: required"
    with pytest.raises(PydanticValidationError):
        err.message = "changed"  # type: ignore[misc]


def test_nested_under() -> None:
    err = FieldError(field="zip", message="bad")
    assert err.nested_under("address") == FieldError(field="address.zip", message="bad")

    root = FieldError(field=ROOT_FIELD, message="bad")
    assert root.nested_under("address") == FieldError(field="address", message="bad")


def test_at_field_tags_plain_errors() -> None:
    result = at_field(invalid("", ["required", "too short"]), "name")

    assert result == Invalid(
        "",
        [
            FieldError(field="name", message="required"),
            FieldError(field="name", message="too short"),
        ],
    )


def test_at_field_nests_existing_field_errors() -> None:
    inner = at_field(invalid("", ["bad"]), "zip")
    assert at_field(inner, "address").errors == (
        FieldError(field="address.zip", message="bad"),
    )


def test_at_field_leaves_valid_untouched() -> None:
    assert at_field(valid(3), "age") == Valid(3)


def test_group_errors_preserves_order_and_duplicates() -> None:
    record = all_of(
        [
            at_field(invalid("", ["required"]), "name"),
            at_field(invalid(0, ["too young"]), "age"),
            at_field(invalid("", ["required"]), "name"),
            invalid(None, ["record rejected"]),
        ]
    )

    assert isinstance(record, Invalid)
    grouped = group_errors(record.errors)

    assert list(grouped) == ["name", "age", ROOT_FIELD]
    assert grouped == {
        "name": ["required", "required"],
        "age": ["too young"],
        ROOT_FIELD: ["record rejected"],
    }


def test_group_errors_empty() -> None:
    assert group_errors([]) == {}
