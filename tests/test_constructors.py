import pytest

from validated.core.constructors import (
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
)
from validated.core.result import Invalid, Valid
from validated.primitives.outcome import Failure, Success


def test_from_outcome_success() -> None:
    assert from_outcome(Success(7), 0) == Valid(7)


def test_from_outcome_failure_uses_placeholder() -> None:
    assert from_outcome(Failure("nope"), 0) == Invalid(0, ["nope"])


@pytest.mark.parametrize(
    ("constructor", "zero"),
    [
        (from_int, 0),
        (from_float, 0.0),
        (from_str, ""),
        (from_bool, False),
        (from_list, []),
        (from_optional, None),
        (from_bytes, b""),
        (from_dict, {}),
    ],
)
def test_typed_wrappers_supply_zero_placeholder(constructor, zero) -> None:
    result = constructor(Failure("err"))

    assert isinstance(result, Invalid)
    assert result.placeholder == zero
    assert type(result.placeholder) is type(zero)
    assert result.errors == ("err",)


@pytest.mark.parametrize(
    ("constructor", "value"),
    [
        (from_int, 3),
        (from_float, 1.5),
        (from_str, "abc"),
        (from_bool, True),
        (from_list, [1]),
        (from_optional, "x"),
        (from_bytes, b"\x00"),
        (from_dict, {"k": 1}),
    ],
)
def test_typed_wrappers_pass_success_through(constructor, value) -> None:
    assert constructor(Success(value)) == Valid(value)


def test_mutable_zero_placeholders_are_fresh() -> None:
    first = from_list(Failure("a"))
    second = from_list(Failure("b"))
    assert first.placeholder is not second.placeholder

    d1 = from_dict(Failure("a"))
    d2 = from_dict(Failure("b"))
    assert d1.placeholder is not d2.placeholder


def test_from_call_success() -> None:
    assert from_call(int, "12", placeholder=0) == Valid(12)


def test_from_call_captures_value_error() -> None:
    result = from_call(int, "twelve", placeholder=0)

    assert isinstance(result, Invalid)
    assert result.placeholder == 0
    assert len(result.errors) == 1
    assert isinstance(result.errors[0], ValueError)


def test_from_call_with_kwargs_and_custom_catch() -> None:
    def lookup(key: str, *, table: dict[str, int]) -> int:
        return table[key]

    ok = from_call(lookup, "a", placeholder=-1, catch=(KeyError,), table={"a": 1})
    assert ok == Valid(1)

    missing = from_call(lookup, "b", placeholder=-1, catch=(KeyError,), table={})
    assert isinstance(missing, Invalid)
    assert isinstance(missing.errors[0], KeyError)


def test_from_call_propagates_uncaught_exceptions() -> None:
    def boom() -> int:
        raise RuntimeError("bug")

    with pytest.raises(RuntimeError):
        from_call(boom, placeholder=0)


def test_check_passes() -> None:
    assert check(5, lambda n: n > 0, "must be positive") == Valid(5)


def test_check_defaults_placeholder_to_value() -> None:
    assert check(-5, lambda n: n > 0, "must be positive") == Invalid(
        -5, ["must be positive"]
    )


def test_check_with_explicit_placeholder() -> None:
    result = check(-5, lambda n: n > 0, "must be positive", placeholder=0)
    assert result == Invalid(0, ["must be positive"])


@pytest.mark.parametrize("wrong", [Valid(1), Invalid(0, ["e"]), 1, None])
def test_from_outcome_rejects_non_outcomes(wrong) -> None:
    with pytest.raises(TypeError):
        from_outcome(wrong, 0)
