"""Path segments and their human-facing display form.

A path is an ordered sequence of segments: ``str`` keys address object
properties and non-negative ``int`` indices address array elements.  The
empty path addresses the document root.

The display form ``$["customer"]["items"][0]`` is for people only.  It is
never parsed back into a path, so keys are wrapped in double quotes without
any further escaping.
"""

from __future__ import annotations

from collections.abc import Sequence

from jsonc_splice.errors import InvalidPathError

__all__ = ["Path", "Segment", "to_display_string", "validate_path"]

Segment = str | int
Path = Sequence[Segment]


def validate_path(path: Path) -> tuple[Segment, ...]:
    """Return ``path`` as a tuple after checking every segment.

    Raises:
        InvalidPathError: If a segment is not a ``str`` or a non-negative
            ``int``.  ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(path, str):
        msg = f"path must be a sequence of segments, not a string: {path!r}"
        raise InvalidPathError(msg)
    segments = tuple(path)
    for segment in segments:
        if isinstance(segment, bool) or not isinstance(segment, (str, int)):
            msg = f"path segment must be str or int, got {type(segment).__name__}: {segment!r}"
            raise InvalidPathError(msg)
        if isinstance(segment, int) and segment < 0:
            msg = f"path index must be non-negative, got {segment}"
            raise InvalidPathError(msg)
    return segments


def to_display_string(path: Path | None) -> str:
    """Render a path as ``$["key"][0]`` for display.

    Example::
        to_display_string([])                 # '$'
        to_display_string(["customer"])       # '$["customer"]'
        to_display_string(["items", 0])       # '$["items"][0]'
    """
    if not path:
        return "$"
    parts = [str(seg) if isinstance(seg, int) else f'"{seg}"' for seg in path]
    return "$[" + "][".join(parts) + "]"
