"""Tree subpackage for JSONC-to-tree conversion primitives.

Re-exports the public API for the tree module:
- TreeNode: dataclass representing a node with its source span
- NodeType: StrEnum of the node kinds (OBJECT, ARRAY, PROPERTY and scalars)
- TreeParser / parse_tree: JSONC text to TreeNode tree
- find_node / node_value: path lookup and value extraction
"""

from jsonc_splice.tree.locate import find_node, find_property, node_value
from jsonc_splice.tree.nodes import NodeType, TreeNode
from jsonc_splice.tree.parser import TreeParser, parse_tree

__all__ = [
    "NodeType",
    "TreeNode",
    "TreeParser",
    "find_node",
    "find_property",
    "node_value",
    "parse_tree",
]
