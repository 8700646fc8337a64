"""EditPlanner: turns one (path, value) request into a splice set.

Given the text of a document and its parsed tree, the planner finds the
deepest existing ancestor of the target path and emits the smallest change
that makes the path hold the new value:

1. Walk up from the full path until an existing node is found.  Every
   missing level wraps the value: ``{segment: value}`` for string segments,
   ``[value]`` for integer segments.  This is how missing intermediate
   containers get created.
2. Against that ancestor:
   - no ancestor (empty path or empty document): replace the root span;
   - OBJECT + string segment: replace the property value, or append a new
     property after the last one;
   - ARRAY + integer segment: replace the element, or append when the index
     equals the array length;
   - anything else: ``PathConflictError``.

New text follows the layout of the container it lands in.  Single-line
containers get single-line text; multi-line containers get their children's
indentation; empty containers are opened onto separate lines.
"""

from __future__ import annotations

import json
import re
from collections.abc import Sequence
from typing import Any

from jsonc_splice.edits.config import FormattingOptions
from jsonc_splice.edits.splice import Splice
from jsonc_splice.errors import PathConflictError, SerializationError
from jsonc_splice.paths import validate_path
from jsonc_splice.tree.locate import find_node, find_property
from jsonc_splice.tree.nodes import NodeType, TreeNode

__all__ = ["EditPlanner", "line_indent"]

_INDENT = re.compile(r"[ \t]*")

# Whitespace-only container interior (no comments to keep)
_BLANK = re.compile(r"\s*")


def line_indent(text: str, offset: int) -> str:
    """Return the leading whitespace of the line that contains ``offset``."""
    line_start = max(text.rfind("\n", 0, offset), text.rfind("\r", 0, offset)) + 1
    match = _INDENT.match(text, line_start)
    return match.group(0) if match else ""


def _is_multiline(text: str, container: TreeNode) -> bool:
    """True when the first child does not share a line with the opening bracket."""
    if not container.children:
        return False
    lead = text[container.offset + 1 : container.children[0].offset]
    return "\n" in lead or "\r" in lead


def _colon_separator(text: str, container: TreeNode) -> str:
    """Reuse the spacing the last sibling property puts after its colon."""
    if not container.children:
        return ": "
    prop = container.children[-1]
    between = text[prop.colon_offset + 1 : prop.children[1].offset]
    if between.strip(" \t"):
        return ": "
    return ":" + between


class EditPlanner:
    """Plans the splices for a single value replacement.

    Example::

        planner = EditPlanner()
        text = '{"a": 1}'
        planner.plan(text, parse_tree(text), ["b"], 2)
        # [Splice(start=7, end=7, content=', "b": 2')]
    """

    def __init__(self, formatting: FormattingOptions | None = None) -> None:
        self._formatting = formatting if formatting is not None else FormattingOptions()

    @property
    def formatting(self) -> FormattingOptions:
        return self._formatting

    def plan(
        self,
        text: str,
        root: TreeNode | None,
        path: Sequence[str | int],
        value: Any,
    ) -> list[Splice]:
        """Compute the splices that set ``path`` to ``value`` in ``text``.

        Args:
            text:  Document snapshot the splices are computed against.
            root:  ``parse_tree(text)``.
            path:  Target path; missing intermediate levels are created.
            value: Any JSON-serialisable value.

        Returns:
            A non-empty, non-overlapping list of splices over ``text``.

        Raises:
            PathConflictError: If a segment addresses a node of the wrong kind
                or an array index lies past the end of the array.
            SerializationError: If ``value`` cannot be written as JSON.
        """
        full_path = validate_path(path)
        remaining = list(full_path)
        parent: TreeNode | None = None
        segment: str | int | None = None

        while remaining:
            segment = remaining.pop()
            parent = find_node(root, remaining)
            if parent is not None:
                break
            value = {segment: value} if isinstance(segment, str) else [value]

        if parent is None or segment is None:
            return [self._replace_root(text, root, value)]

        if parent.node_type is NodeType.OBJECT and isinstance(segment, str):
            return [self._set_property(text, parent, segment, value)]

        if parent.node_type is NodeType.ARRAY and isinstance(segment, int):
            if segment <= len(parent.children):
                return [self._set_element(text, parent, segment, value)]

        raise PathConflictError(full_path, segment, str(parent.node_type))

    # ------------------------------------------------------------------
    # Splice construction
    # ------------------------------------------------------------------

    def _replace_root(self, text: str, root: TreeNode | None, value: Any) -> Splice:
        if root is None:
            # Blank or comment-only document: the value goes in front.
            return Splice(0, 0, self._render(value, "", inline=False))
        indent = line_indent(text, root.offset)
        return Splice(root.offset, root.end, self._render(value, indent, inline=False))

    def _set_property(self, text: str, parent: TreeNode, key: str, value: Any) -> Splice:
        prop = find_property(parent, key)
        inline = not _is_multiline(text, parent)
        if prop is not None:
            target = prop.children[1]
            indent = line_indent(text, target.offset)
            return Splice(target.offset, target.end, self._render(value, indent, inline))

        child_indent = self._child_indent(text, parent)
        entry = (
            json.dumps(key, ensure_ascii=False)
            + _colon_separator(text, parent)
            + self._render(value, child_indent, inline and bool(parent.children))
        )
        return self._append_entry(text, parent, entry, child_indent, inline)

    def _set_element(self, text: str, parent: TreeNode, index: int, value: Any) -> Splice:
        inline = not _is_multiline(text, parent)
        if index < len(parent.children):
            target = parent.children[index]
            indent = line_indent(text, target.offset)
            return Splice(target.offset, target.end, self._render(value, indent, inline))

        child_indent = self._child_indent(text, parent)
        entry = self._render(value, child_indent, inline and bool(parent.children))
        return self._append_entry(text, parent, entry, child_indent, inline)

    def _append_entry(
        self, text: str, parent: TreeNode, entry: str, child_indent: str, inline: bool
    ) -> Splice:
        """Insert ``entry`` as the new last child of ``parent``."""
        eol = self._formatting.eol
        if parent.children:
            last = parent.children[-1]
            separator = " " if inline else eol + child_indent
            return Splice(last.end, last.end, "," + separator + entry)

        interior_start = parent.offset + 1
        interior_end = parent.end - 1
        opened = eol + child_indent + entry
        if _BLANK.fullmatch(text, interior_start, interior_end):
            closing = eol + line_indent(text, parent.offset)
            return Splice(interior_start, interior_end, opened + closing)
        # Comments inside the empty container stay after the new entry.
        return Splice(interior_start, interior_start, opened)

    def _child_indent(self, text: str, parent: TreeNode) -> str:
        if parent.children and _is_multiline(text, parent):
            return line_indent(text, parent.children[-1].offset)
        return line_indent(text, parent.offset) + self._formatting.indent_unit

    def _render(self, value: Any, indent: str, inline: bool) -> str:
        """Serialise ``value``; multi-line output is re-indented to ``indent``."""
        try:
            if inline:
                return json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(", ", ": "))
            rendered = json.dumps(
                value, ensure_ascii=False, allow_nan=False, indent=self._formatting.indent_unit
            )
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"value is not JSON serialisable: {exc}", fmt="json") from exc
        return rendered.replace("\n", self._formatting.eol + indent)
