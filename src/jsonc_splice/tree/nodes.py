"""TreeNode dataclass and NodeType StrEnum for the offset-annotated JSONC tree.

Every node records where it sits in the source text (``offset`` and
``length`` in characters), so the edit planner can turn a path into a span
of the original document without re-serialising anything around it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any


class NodeType(StrEnum):
    """Enumeration of the structural node types in a JSONC tree.

    - OBJECT   -> "object"   : ``{ ... }``; children are PROPERTY nodes
    - ARRAY    -> "array"    : ``[ ... ]``; children are value nodes
    - PROPERTY -> "property" : ``"key": value``; children are [key, value]
    - STRING   -> "string"
    - NUMBER   -> "number"
    - BOOLEAN  -> "boolean"
    - NULL     -> "null"
    """

    OBJECT = auto()
    ARRAY = auto()
    PROPERTY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()


CONTAINER_TYPES = frozenset({NodeType.OBJECT, NodeType.ARRAY})


@dataclass(slots=True)
class TreeNode:
    """A node in the JSONC tree.

    Attributes:
        node_type:    Which kind of node this is (see NodeType).
        offset:       Character offset of the first character of the node.
        length:       Number of characters the node spans.  For PROPERTY nodes
                      the span runs from the opening quote of the key to the
                      last character of the value.
        value:        Decoded Python value for scalar nodes (and the key text
                      for the key child of a PROPERTY); None for containers.
        colon_offset: Offset of the ``:`` for PROPERTY nodes, -1 otherwise.
        children:     Child nodes in source order.
    """

    node_type: NodeType
    offset: int
    length: int
    value: Any = None
    colon_offset: int = -1
    children: list[TreeNode] = field(default_factory=list)

    @property
    def end(self) -> int:
        """Offset one past the last character of the node."""
        return self.offset + self.length

    @property
    def is_container(self) -> bool:
        return self.node_type in CONTAINER_TYPES
