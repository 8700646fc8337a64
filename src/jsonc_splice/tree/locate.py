"""Path lookup and value extraction over a parsed TreeNode tree."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from jsonc_splice.tree.nodes import NodeType, TreeNode


def find_property(node: TreeNode, key: str) -> TreeNode | None:
    """Return the PROPERTY child of an OBJECT node named ``key``.

    When a key is duplicated the last occurrence wins, the same way
    ``json.loads`` resolves duplicates.
    """
    found: TreeNode | None = None
    for prop in node.children:
        if prop.children[0].value == key:
            found = prop
    return found


def find_node(root: TreeNode | None, path: Sequence[str | int]) -> TreeNode | None:
    """Return the value node at ``path`` or None if any segment is missing.

    String segments only match OBJECT properties and integer segments only
    match ARRAY elements; a mismatched segment is reported as missing.
    """
    node = root
    for segment in path:
        if node is None:
            return None
        if node.node_type is NodeType.OBJECT and isinstance(segment, str):
            prop = find_property(node, segment)
            node = prop.children[1] if prop is not None else None
        elif (
            node.node_type is NodeType.ARRAY
            and isinstance(segment, int)
            and not isinstance(segment, bool)
            and 0 <= segment < len(node.children)
        ):
            node = node.children[segment]
        else:
            return None
    return node


def node_value(node: TreeNode | None) -> Any:
    """Rebuild the plain Python value a node represents."""
    if node is None:
        return None
    if node.node_type is NodeType.OBJECT:
        return {prop.children[0].value: node_value(prop.children[1]) for prop in node.children}
    if node.node_type is NodeType.ARRAY:
        return [node_value(child) for child in node.children]
    if node.node_type is NodeType.PROPERTY:
        return node_value(node.children[1])
    return node.value
