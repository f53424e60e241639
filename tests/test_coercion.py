"""Scalar coercion of raw request text."""

from decimal import Decimal

import pytest

from parambind import CoercionFailure, coerce
from parambind.coercion import is_blank


def test_string_passes_through_verbatim() -> None:
    assert coerce(str, "  padded ") == "  padded "
    assert coerce(str, "") == ""
    assert coerce(str, None) == ""


@pytest.mark.parametrize(
    "target,zero",
    [(int, 0), (float, 0.0), (bool, False), (Decimal, Decimal(0))],
)
def test_blank_text_yields_zero_value(target: type, zero: object) -> None:
    assert coerce(target, "") == zero
    assert coerce(target, "   ") == zero
    assert coerce(target, None) == zero


def test_numeric_and_boolean_parsing() -> None:
    assert coerce(int, "42") == 42
    assert coerce(int, "-7") == -7
    assert coerce(float, "2.5") == 2.5
    assert coerce(Decimal, "10.25") == Decimal("10.25")
    assert coerce(bool, "true") is True
    assert coerce(bool, "YES") is True
    assert coerce(bool, "off") is False
    assert coerce(bool, "0") is False


@pytest.mark.parametrize(
    "target,raw",
    [(int, "abc"), (int, "4.5"), (float, "one"), (bool, "maybe"), (Decimal, "1,5")],
)
def test_malformed_text_raises(target: type, raw: str) -> None:
    with pytest.raises(CoercionFailure) as info:
        coerce(target, raw, "count")
    exc = info.value
    assert exc.name == "count"
    assert exc.raw == raw
    assert exc.target is target
    assert exc.errors()[0]["loc"] == ["count"]
    assert exc.errors()[0]["input"] == raw
    assert exc.errors()[0]["type"] == f"{target.__name__.lower()}_parsing"
    assert exc.errors()[0]["msg"]
    assert exc.__cause__ is not None


def test_blank_versus_malformed_asymmetry() -> None:
    assert coerce(int, "") == 0
    with pytest.raises(CoercionFailure):
        coerce(int, "abc")


def test_bytes_are_encoded() -> None:
    assert coerce(bytes, "hi") == b"hi"
    assert coerce(bytes, None) == b""


def test_unrecognized_targets_yield_none() -> None:
    assert coerce(complex, "1+2j") is None
    assert coerce(list, "a,b") is None

    class Thing:
        pass

    assert coerce(Thing, "x") is None


def test_is_blank() -> None:
    assert is_blank(None)
    assert is_blank("")
    assert is_blank(" \t")
    assert not is_blank("0")


def test_lax_literals_and_surrounding_whitespace() -> None:
    assert coerce(bool, "t") is True
    assert coerce(bool, "N") is False
    assert coerce(int, " 12 ") == 12
    assert coerce(int, "3.0") == 3


def test_failure_details_come_from_validation() -> None:
    with pytest.raises(CoercionFailure) as info:
        coerce(int, "12abc")
    detail = info.value.errors()[0]
    assert detail["loc"] == []
    assert detail["type"] == "int_parsing"
    assert detail["input"] == "12abc"
