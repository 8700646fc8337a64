"""Unit tests for typed value coercion."""

from __future__ import annotations

import pytest

from jsonc_splice import apply_edit
from jsonc_splice.values import Coerced, Fallback, ScalarKind, coerce, coerce_value


class TestScalarKind:
    def test_values(self) -> None:
        assert {kind.value for kind in ScalarKind} == {"string", "number", "boolean", "null"}


class TestCoercionTable:
    def test_number(self) -> None:
        assert coerce("42", ScalarKind.NUMBER) == Coerced(42)

    def test_number_fallback(self) -> None:
        assert coerce("abc", ScalarKind.NUMBER) == Fallback("abc")

    def test_boolean_true(self) -> None:
        assert coerce("true", ScalarKind.BOOLEAN) == Coerced(True)

    def test_boolean_is_strict(self) -> None:
        assert coerce("TRUE", ScalarKind.BOOLEAN) == Coerced(False)

    def test_null_ignores_input(self) -> None:
        assert coerce("x", ScalarKind.NULL) == Coerced(None)

    def test_string_is_unchanged(self) -> None:
        assert coerce(" x ", ScalarKind.STRING) == Coerced(" x ")


class TestNumber:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("0", 0),
            ("-7", -7),
            ("+3", 3),
            ("1.5", 1.5),
            ("1.0", 1),
            ("1e3", 1000),
            (".5", 0.5),
            ("5.", 5),
            ("  12  ", 12),
            ("", 0),
            ("   ", 0),
            ("0x1F", 31),
            ("0b101", 5),
            ("0o17", 15),
        ],
    )
    def test_parses(self, raw: str, expected: float) -> None:
        result = coerce(raw, ScalarKind.NUMBER)
        assert isinstance(result, Coerced)
        assert result.value == expected
        assert type(result.value) is type(expected)

    @pytest.mark.parametrize("raw", ["abc", "1e400", "Infinity", "NaN", "1,5", "1_000", "--1", "0x"])
    def test_falls_back_to_raw(self, raw: str) -> None:
        assert coerce(raw, ScalarKind.NUMBER) == Fallback(raw)

    def test_integral_values_above_2_53_become_int(self) -> None:
        result = coerce("9007199254740993", ScalarKind.NUMBER)
        assert result == Coerced(9007199254740992)
        assert type(result.value) is int
        assert coerce_value("1e20", ScalarKind.NUMBER) == 10**20

    def test_large_integral_value_is_written_without_fraction(self) -> None:
        value = coerce_value("9007199254740993", ScalarKind.NUMBER)
        assert apply_edit('{"a": 1}', ["a"], value) == '{"a": 9007199254740992}'

    def test_exponent_range_stays_float(self) -> None:
        result = coerce("1e21", ScalarKind.NUMBER)
        assert result == Coerced(1e21)
        assert isinstance(result.value, float)


class TestBoolean:
    @pytest.mark.parametrize("raw", ["True", "1", "yes", " true", ""])
    def test_everything_but_true_is_false(self, raw: str) -> None:
        assert coerce(raw, ScalarKind.BOOLEAN) == Coerced(False)


class TestKinds:
    def test_plain_string_kinds_are_accepted(self) -> None:
        assert coerce("3", "number") == Coerced(3)
        assert coerce("true", "boolean") == Coerced(True)

    def test_unknown_kind_is_string(self) -> None:
        assert coerce("3", "date") == Coerced("3")


class TestCoerceValue:
    def test_unwraps_coerced(self) -> None:
        assert coerce_value("42", ScalarKind.NUMBER) == 42

    def test_unwraps_fallback(self) -> None:
        assert coerce_value("4x", ScalarKind.NUMBER) == "4x"

    def test_null(self) -> None:
        assert coerce_value("anything", ScalarKind.NULL) is None
