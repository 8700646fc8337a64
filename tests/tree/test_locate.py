"""Unit tests for find_node, find_property and node_value."""

from __future__ import annotations

from jsonc_splice.tree import NodeType, find_node, find_property, node_value, parse_tree

DOC = """{
  "customer": {"name": "Ada", "tags": ["a", "b"]},
  "items": [{"sku": 1}, {"sku": 2}],
  // comments do not affect lookup
  "empty": null
}"""


class TestFindNode:
    def test_empty_path_is_root(self) -> None:
        root = parse_tree(DOC)
        assert find_node(root, []) is root

    def test_nested_key(self) -> None:
        node = find_node(parse_tree(DOC), ["customer", "name"])
        assert node is not None
        assert node.node_type is NodeType.STRING
        assert node.value == "Ada"

    def test_index_then_key(self) -> None:
        node = find_node(parse_tree(DOC), ["items", 1, "sku"])
        assert node is not None
        assert node.value == 2

    def test_missing_key(self) -> None:
        assert find_node(parse_tree(DOC), ["customer", "email"]) is None

    def test_index_out_of_range(self) -> None:
        assert find_node(parse_tree(DOC), ["items", 2]) is None

    def test_segment_kind_mismatch_is_missing(self) -> None:
        root = parse_tree(DOC)
        assert find_node(root, ["items", "0"]) is None
        assert find_node(root, [0]) is None
        assert find_node(root, ["customer", "name", "first"]) is None

    def test_bool_is_not_an_index(self) -> None:
        assert find_node(parse_tree("[1, 2]"), [True]) is None

    def test_none_root(self) -> None:
        assert find_node(None, []) is None
        assert find_node(None, ["a"]) is None


class TestFindProperty:
    def test_last_duplicate_wins(self) -> None:
        text = '{"a": 1, "a": 2}'
        root = parse_tree(text)
        assert root is not None
        prop = find_property(root, "a")
        assert prop is root.children[1]


class TestNodeValue:
    def test_whole_document(self) -> None:
        assert node_value(parse_tree(DOC)) == {
            "customer": {"name": "Ada", "tags": ["a", "b"]},
            "items": [{"sku": 1}, {"sku": 2}],
            "empty": None,
        }

    def test_key_order_is_kept(self) -> None:
        value = node_value(parse_tree('{"z": 1, "a": 2}'))
        assert list(value) == ["z", "a"]

    def test_property_node_yields_its_value(self) -> None:
        root = parse_tree('{"a": [1]}')
        assert root is not None
        assert node_value(root.children[0]) == [1]

    def test_none(self) -> None:
        assert node_value(None) is None
