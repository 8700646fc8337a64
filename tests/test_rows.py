"""Unit tests for Row, NodeData and the normalize preview."""

from __future__ import annotations

import json

import pytest

from jsonc_splice.rows import NodeData, Row, RowType, display_text, normalize
from jsonc_splice.values import ScalarKind


class TestNormalize:
    def test_no_rows(self) -> None:
        assert normalize([]) == "{}"
        assert normalize(None) == "{}"

    def test_bare_scalar(self) -> None:
        assert normalize([Row(key=None, type=RowType.NUMBER, value=5)]) == "5"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(True, "true"), (None, "null"), ("text", "text"), (2.0, "2"), (2.5, "2.5")],
    )
    def test_bare_scalar_text(self, value: object, expected: str) -> None:
        assert normalize([Row(key=None, type="string", value=value)]) == expected

    def test_container_rows_are_dropped(self) -> None:
        rows = [
            Row(key="a", type=RowType.NUMBER, value=1),
            Row(key="b", type=RowType.ARRAY, value=[1, 2]),
        ]
        assert normalize(rows) == '{\n  "a": 1\n}'

    def test_keyed_rows_pretty_printed(self) -> None:
        rows = [
            Row(key="name", type=RowType.STRING, value="Ada"),
            Row(key="age", type=RowType.NUMBER, value=36),
            Row(key="admin", type=RowType.BOOLEAN, value=False),
            Row(key="meta", type=RowType.OBJECT),
            Row(key="nick", type=RowType.NULL, value=None),
        ]
        assert json.loads(normalize(rows)) == {
            "name": "Ada",
            "age": 36,
            "admin": False,
            "nick": None,
        }
        assert normalize(rows).startswith('{\n  "name": "Ada",')

    def test_only_container_rows(self) -> None:
        assert normalize([Row(key="a", type=RowType.OBJECT)]) == "{}"

    def test_integer_keys_become_strings(self) -> None:
        rows = [Row(key=0, type=RowType.STRING, value="x"), Row(key=1, type=RowType.STRING, value="y")]
        assert json.loads(normalize(rows)) == {"0": "x", "1": "y"}


class TestRow:
    def test_is_keyed(self) -> None:
        assert Row(key="a", type="string").is_keyed
        assert Row(key=0, type="string").is_keyed
        assert not Row(key=None, type="string").is_keyed
        assert not Row(key="", type="string").is_keyed

    def test_is_container(self) -> None:
        assert Row(key="a", type="array").is_container
        assert Row(key="a", type=RowType.OBJECT).is_container
        assert not Row(key="a", type="null").is_container

    def test_scalar_kind(self) -> None:
        assert Row(key="a", type="number").scalar_kind is ScalarKind.NUMBER
        assert Row(key="a", type="date").scalar_kind == "date"


class TestNodeData:
    def test_is_scalar(self) -> None:
        assert NodeData(path=("a",), text=[Row(key=None, type="number", value=1)]).is_scalar
        assert not NodeData(path=(), text=[Row(key="a", type="number", value=1)]).is_scalar
        assert not NodeData().is_scalar


class TestDisplayText:
    def test_false(self) -> None:
        assert display_text(False) == "false"

    def test_int(self) -> None:
        assert display_text(10) == "10"
