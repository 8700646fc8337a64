"""Splice dataclass and the applier for offset-consistent splice sets.

All splices in one set are computed against the same text snapshot.  They
are applied from the highest offset to the lowest so that no application
shifts the offsets of a splice that has not been applied yet.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from jsonc_splice.errors import SpliceOverlapError

__all__ = ["Splice", "apply_splices"]


@dataclass(frozen=True, slots=True)
class Splice:
    """Replace ``text[start:end]`` with ``content``.

    ``start == end`` is a pure insertion.
    """

    start: int
    end: int
    content: str

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end:
            msg = f"invalid splice range [{self.start}, {self.end})"
            raise ValueError(msg)


def apply_splices(text: str, splices: Iterable[Splice]) -> str:
    """Apply an offset-consistent set of splices to ``text``.

    Args:
        text:    The snapshot every splice was computed against.
        splices: Splices in any order.  Ranges must not overlap; two
                 insertions at the same offset are applied in the order given.

    Returns:
        The new text.  ``text`` itself is never modified.

    Raises:
        SpliceOverlapError: If two splices overlap.
        ValueError: If a splice reaches past the end of ``text``.
    """
    ordered = sorted(enumerate(splices), key=lambda item: (item[1].start, item[1].end, item[0]))
    previous_end = 0
    for _, splice in ordered:
        if splice.end > len(text):
            msg = f"splice end {splice.end} is past the end of the text ({len(text)})"
            raise ValueError(msg)
        if splice.start < previous_end:
            msg = f"splice at [{splice.start}, {splice.end}) overlaps a previous splice"
            raise SpliceOverlapError(msg)
        previous_end = splice.end

    result = text
    for _, splice in reversed(ordered):
        result = result[: splice.start] + splice.content + result[splice.end :]
    return result
