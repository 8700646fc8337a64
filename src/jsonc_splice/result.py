"""PatchResult dataclass for patch output.

This module provides the rich result type returned by
``DocumentPatcher.patch()`` calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from jsonc_splice.edits.splice import Splice

__all__ = ["PatchResult"]


@dataclass(frozen=True, slots=True)
class PatchResult:
    """Rich result of a ``DocumentPatcher.patch()`` call.

    Attributes:
        text: The patched document text.
        steps: One tuple of splices per applied edit, in edit order.  The
            splices of step ``i`` are offsets into the text produced by step
            ``i - 1`` (the original text for step 0).
        changed: True when ``text`` differs from the input text.
        computation_time_ms: Wall-clock duration of the batch in milliseconds.
    """

    text: str
    steps: tuple[tuple[Splice, ...], ...]
    changed: bool
    computation_time_ms: float
