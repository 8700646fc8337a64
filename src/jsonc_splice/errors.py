"""Exception hierarchy for jsonc-splice.

Every condition the package raises on purpose derives from ``PatchError`` so
callers can keep their prior document state with a single ``except`` clause.
Malformed numeric input during coercion is not an error; see
``jsonc_splice.values.Fallback``.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "DocumentSyntaxError",
    "InvalidPathError",
    "PatchError",
    "PathConflictError",
    "SerializationError",
    "SpliceOverlapError",
]


class PatchError(Exception):
    """Base class for all jsonc-splice errors."""


class PathConflictError(PatchError):
    """A path segment cannot be navigated because its parent has the wrong kind.

    Raised when a string key addresses an array, an integer index addresses an
    object, any segment addresses a scalar, or an index lies past the end of
    an array.

    Attributes:
        path:      The full path of the failing edit.
        segment:   The segment that could not be applied.
        node_type: Type name of the node the segment was applied to.
    """

    def __init__(
        self, path: Sequence[str | int], segment: str | int, node_type: str
    ) -> None:
        self.path = tuple(path)
        self.segment = segment
        self.node_type = node_type
        kind = "index" if isinstance(segment, int) else "property"
        super().__init__(
            f"cannot set {kind} {segment!r} of {node_type} at path {list(self.path)!r}"
        )


class DocumentSyntaxError(PatchError, ValueError):
    """The document text cannot be parsed, even permissively.

    Attributes:
        offset: Character offset where parsing stopped.
    """

    def __init__(self, message: str, offset: int) -> None:
        self.offset = offset
        super().__init__(f"{message} at offset {offset}")


class InvalidPathError(PatchError, ValueError):
    """A path contains a segment that is neither a str nor a non-negative int."""


class SpliceOverlapError(PatchError, ValueError):
    """Two splices of one offset-consistent set cover overlapping ranges."""


class SerializationError(PatchError):
    """A format adapter could not render the patched document.

    Attributes:
        fmt: The target format name.
    """

    def __init__(self, message: str, fmt: str) -> None:
        self.fmt = fmt
        super().__init__(message)
