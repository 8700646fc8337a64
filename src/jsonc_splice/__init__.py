"""jsonc-splice - format-preserving value replacement for JSON-with-comments text."""

from __future__ import annotations

from jsonc_splice.api import apply_all, apply_edit, loads, read_value
from jsonc_splice.edits import Edit, FormattingOptions, Splice
from jsonc_splice.errors import (
    DocumentSyntaxError,
    InvalidPathError,
    PatchError,
    PathConflictError,
    SerializationError,
    SpliceOverlapError,
)
from jsonc_splice.patcher import DocumentPatcher
from jsonc_splice.paths import to_display_string
from jsonc_splice.result import PatchResult
from jsonc_splice.rows import NodeData, Row, RowType, normalize
from jsonc_splice.session import EditSession, KeyedBuffer, ScalarBuffer, build_edits, initial_buffer
from jsonc_splice.values import Coerced, Fallback, ScalarKind, coerce, coerce_value

__version__: str = "0.1.0"
__all__: list[str] = [
    "Coerced",
    "DocumentPatcher",
    "DocumentSyntaxError",
    "Edit",
    "EditSession",
    "Fallback",
    "FormattingOptions",
    "InvalidPathError",
    "KeyedBuffer",
    "NodeData",
    "PatchError",
    "PatchResult",
    "PathConflictError",
    "Row",
    "RowType",
    "ScalarBuffer",
    "ScalarKind",
    "SerializationError",
    "Splice",
    "SpliceOverlapError",
    "apply_all",
    "apply_edit",
    "build_edits",
    "coerce",
    "coerce_value",
    "initial_buffer",
    "loads",
    "normalize",
    "read_value",
    "to_display_string",
]
