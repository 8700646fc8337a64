"""DocumentPatcher: orchestrator that wires ParseCache + EditPlanner + apply_splices.

This is the central wiring layer between the planner and the public API.

Architecture:
- ``apply_edit()`` parses the current text (through the per-instance
  ``ParseCache``), asks the ``EditPlanner`` for a splice set computed against
  that one snapshot, and applies it.
- ``patch()`` folds ``apply_edit`` over an ordered edit list.  Every step
  re-parses and re-plans against the text the previous step produced;
  splices are never computed up front against the original offsets, because
  an earlier edit that changes the document length invalidates them.
- A batch is all-or-nothing: the first failing edit raises, and the texts
  produced by earlier steps are discarded.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence
from functools import reduce
from typing import Any

from jsonc_splice.cache import ParseCache
from jsonc_splice.edits.config import FormattingOptions
from jsonc_splice.edits.edit import Edit, EditLike, as_edit
from jsonc_splice.edits.planner import EditPlanner
from jsonc_splice.edits.splice import Splice, apply_splices
from jsonc_splice.errors import PatchError
from jsonc_splice.paths import Segment, to_display_string, validate_path
from jsonc_splice.result import PatchResult
from jsonc_splice.tree.locate import find_node, node_value

__all__ = ["DocumentPatcher"]

logger = logging.getLogger(__name__)


class DocumentPatcher:
    """Orchestrator for format-preserving value replacement.

    Two separate ``DocumentPatcher`` instances never share cache state; each
    instance maintains its own ``ParseCache``.

    Example::

        from jsonc_splice.patcher import DocumentPatcher

        patcher = DocumentPatcher()
        result = patcher.patch('{"a": 1, // one\\n "b": 2}', [(["a"], 10)])
        print(result.text)      # '{"a": 10, // one\\n "b": 2}'
        print(result.changed)   # True
    """

    def __init__(
        self,
        formatting: FormattingOptions | None = None,
        max_cache_size: int = 32,
    ) -> None:
        """Initialise the patcher.

        Args:
            formatting: Layout used for inserted text.  Defaults to
                ``FormattingOptions()`` (2 spaces, ``\\n``).
            max_cache_size: Maximum number of parsed documents held in the
                per-instance LRU cache.  This is an infrastructure parameter;
                it never changes results.
        """
        self._formatting = formatting if formatting is not None else FormattingOptions()
        self._planner = EditPlanner(self._formatting)
        self._cache = ParseCache(max_size=max_cache_size)

    @property
    def formatting(self) -> FormattingOptions:
        return self._formatting

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def plan(self, text: str, path: Sequence[Segment], value: Any) -> list[Splice]:
        """Return the splices that would set ``path`` to ``value`` in ``text``."""
        return self._planner.plan(text, self._cache.parse(text), path, value)

    def apply_edit(self, text: str, path: Sequence[Segment], value: Any) -> str:
        """Set ``path`` to ``value`` and return the new text.

        Raises:
            PathConflictError: If the path cannot be navigated.
            DocumentSyntaxError: If ``text`` is not valid JSONC.
        """
        return apply_splices(text, self.plan(text, path, value))

    def patch(self, text: str, edits: Iterable[EditLike]) -> PatchResult:
        """Apply ``edits`` in order and return a rich PatchResult.

        Args:
            text:  Original document text.
            edits: ``Edit`` objects or ``(path, value)`` pairs.  Later edits
                   see the output of earlier ones, so when two edits target
                   the same path the last one wins.

        Returns:
            A ``PatchResult``.  An empty edit list returns ``text`` unchanged.

        Raises:
            PatchError: The first failure aborts the whole batch.
        """
        t0 = time.perf_counter()
        batch = [as_edit(item) for item in edits]
        steps: list[tuple[Splice, ...]] = []

        def step(current: str, edit: Edit) -> str:
            splices = self.plan(current, edit.path, edit.value)
            steps.append(tuple(splices))
            logger.debug(
                "set %s with %d splice(s)", to_display_string(edit.path), len(splices)
            )
            return apply_splices(current, splices)

        try:
            patched = reduce(step, batch, text)
        except PatchError as exc:
            logger.warning(
                "patch batch aborted at edit %d of %d: %s", len(steps) + 1, len(batch), exc
            )
            raise

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        return PatchResult(
            text=patched,
            steps=tuple(steps),
            changed=patched != text,
            computation_time_ms=elapsed_ms,
        )

    def read_value(self, text: str, path: Sequence[Segment]) -> Any:
        """Return the plain value stored at ``path``.

        Raises:
            KeyError: If ``path`` does not resolve to a node.
        """
        node = find_node(self._cache.parse(text), validate_path(path))
        if node is None:
            raise KeyError(to_display_string(path))
        return node_value(node)
