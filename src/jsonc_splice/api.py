"""Public API functions for jsonc-splice.

This module provides the user-facing patch functions: apply_edit, apply_all,
read_value and loads.  Each call creates a fresh DocumentPatcher to guarantee
zero global state between calls.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from jsonc_splice.edits.config import FormattingOptions
from jsonc_splice.edits.edit import EditLike
from jsonc_splice.patcher import DocumentPatcher
from jsonc_splice.paths import Segment
from jsonc_splice.tree.locate import node_value
from jsonc_splice.tree.parser import parse_tree

__all__ = ["apply_all", "apply_edit", "loads", "read_value"]


def apply_edit(
    doc: str,
    path: Sequence[Segment],
    value: Any,
    formatting: FormattingOptions | None = None,
) -> str:
    """Set the value at ``path`` and return the new document text.

    Only the span needed to express the change is rewritten; comments, key
    order and formatting elsewhere are left byte-identical.  Missing
    intermediate levels are created as objects (string segments) or arrays
    (integer segments).

    Args:
        doc:        JSONC document text.
        path:       Sequence of ``str`` keys and non-negative ``int`` indices.
        value:      Any JSON-serialisable value.
        formatting: Layout for inserted text.  Defaults to 2 spaces and ``\\n``.

    Returns:
        The patched text.

    Raises:
        PathConflictError: If a segment addresses a node of the wrong kind.
            Nothing is applied.
        DocumentSyntaxError: If ``doc`` is not valid JSONC.
    """
    return DocumentPatcher(formatting=formatting).apply_edit(doc, path, value)


def apply_all(
    doc: str,
    edits: Iterable[EditLike],
    formatting: FormattingOptions | None = None,
) -> str:
    """Apply an ordered list of edits, feeding each result into the next.

    Args:
        doc:        JSONC document text.
        edits:      ``Edit`` objects or ``(path, value)`` pairs, applied in
                    order.  When two edits target the same path the later
                    one wins.
        formatting: Layout for inserted text.

    Returns:
        The patched text; ``doc`` itself when ``edits`` is empty.

    Raises:
        PatchError: The first failing edit aborts the batch and no
            intermediate text is returned.
    """
    return DocumentPatcher(formatting=formatting).patch(doc, edits).text


def read_value(doc: str, path: Sequence[Segment]) -> Any:
    """Return the plain Python value at ``path`` in ``doc``.

    Raises:
        KeyError: If the path does not resolve.
    """
    return DocumentPatcher().read_value(doc, path)


def loads(doc: str) -> Any:
    """Parse a whole JSONC document into plain Python values.

    An empty (or comment-only) document loads as None.
    """
    return node_value(parse_tree(doc))
