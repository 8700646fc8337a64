"""Row and NodeData: the display projection of one tree node.

A selection provider describes the node of interest as a path plus a list of
rows.  Each row is one directly assigned child (``key`` set) or, for a bare
scalar node, a single unkeyed row.  Rows typed ``array`` or ``object`` stand
for nested containers: they are listed for context but never edited or
previewed.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from jsonc_splice.paths import Segment
from jsonc_splice.values import ScalarKind

__all__ = ["NodeData", "Row", "RowType", "display_text", "normalize"]


class RowType(StrEnum):
    """Declared type of a row: the four scalar kinds plus the two containers."""

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    ARRAY = auto()
    OBJECT = auto()


@dataclass(frozen=True, slots=True)
class Row:
    """One row of a node.

    Attributes:
        key:   Property name or element index; None for a bare scalar node.
        type:  Declared row type.
        value: Current value (absent for container rows).
    """

    key: Segment | None
    type: RowType | str
    value: Any = None

    @property
    def is_keyed(self) -> bool:
        return self.key is not None and self.key != ""

    @property
    def is_container(self) -> bool:
        return self.type in (RowType.ARRAY, RowType.OBJECT)

    @property
    def scalar_kind(self) -> ScalarKind | str:
        """Kind used to coerce edited text; unknown types pass through as-is."""
        try:
            return ScalarKind(self.type)
        except ValueError:
            return self.type


@dataclass(frozen=True, slots=True)
class NodeData:
    """A selected node: its path in the document and its rows."""

    path: tuple[Segment, ...] = ()
    text: Sequence[Row] = field(default_factory=tuple)

    @property
    def is_scalar(self) -> bool:
        """True when the node is a bare scalar (one unkeyed row)."""
        return len(self.text) == 1 and not self.text[0].is_keyed


def display_text(value: Any) -> str:
    """Render a scalar the way a JavaScript template string would."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize(rows: Sequence[Row] | None) -> str:
    """Render a node's rows as preview text.

    - No rows: ``"{}"``.
    - One unkeyed row: the bare value as text.
    - Otherwise: keyed scalar rows as a JSON object indented by 2 spaces;
      container rows and unkeyed rows are left out.

    Example::
        normalize([])                                          # '{}'
        normalize([Row(None, "number", 5)])                    # '5'
        normalize([Row("a", "number", 1), Row("b", "array")])  # '{\\n  "a": 1\\n}'
    """
    if not rows:
        return "{}"
    if len(rows) == 1 and not rows[0].is_keyed:
        return display_text(rows[0].value)

    preview: dict[str, Any] = {}
    for row in rows:
        if row.is_container or not row.is_keyed:
            continue
        preview[str(row.key)] = row.value
    return json.dumps(preview, indent=2, ensure_ascii=False)
