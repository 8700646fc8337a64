"""EditSession: the edit-and-save flow for one selected node.

An editor shows the rows of the selected node, lets the user change the
scalar ones as text, and on save turns that text back into a batch of edits:

1. ``initial_buffer(node)`` seeds the text buffer from the rows.
2. The user changes buffer slots (``EditSession.update``).
3. ``build_edits(node, buffer)`` coerces every slot by its row's kind and
   addresses it: the node path itself for a bare scalar node, ``path + [key]``
   for each keyed scalar row.
4. ``apply_all`` patches the current document text, the format adapter
   renders it in the document's active format, and only then is the
   document accessor updated.

Any failure along the way leaves the document accessor untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from jsonc_splice.edits.config import FormattingOptions
from jsonc_splice.edits.edit import Edit
from jsonc_splice.errors import PatchError
from jsonc_splice.patcher import DocumentPatcher
from jsonc_splice.paths import Segment, to_display_string
from jsonc_splice.protocols import DocumentAccessor, FormatAdapter, SelectionProvider
from jsonc_splice.rows import NodeData, display_text
from jsonc_splice.values import coerce_value

__all__ = [
    "EditBuffer",
    "EditSession",
    "KeyedBuffer",
    "ScalarBuffer",
    "build_edits",
    "initial_buffer",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScalarBuffer:
    """Edited text of a bare scalar node."""

    value: str


@dataclass(frozen=True, slots=True)
class KeyedBuffer:
    """Edited text of each editable keyed row, by row key."""

    values: dict[Segment, str] = field(default_factory=dict)


EditBuffer = ScalarBuffer | KeyedBuffer


def _buffer_text(value: object) -> str:
    return "" if value is None else display_text(value)


def initial_buffer(node: NodeData) -> EditBuffer:
    """Seed an edit buffer from the node's current row values."""
    if node.is_scalar:
        return ScalarBuffer(_buffer_text(node.text[0].value))
    return KeyedBuffer(
        {
            row.key: _buffer_text(row.value)
            for row in node.text
            if row.is_keyed and not row.is_container and row.key is not None
        }
    )


def build_edits(node: NodeData, buffer: EditBuffer) -> list[Edit]:
    """Turn a buffer into an ordered edit list.

    Rows without a slot in a ``KeyedBuffer`` are left alone.  A
    ``ScalarBuffer`` for a keyed node (or the reverse) produces no edits.
    """
    if node.is_scalar:
        if not isinstance(buffer, ScalarBuffer):
            return []
        row = node.text[0]
        return [Edit(tuple(node.path), coerce_value(buffer.value, row.scalar_kind))]

    if not isinstance(buffer, KeyedBuffer):
        return []
    edits: list[Edit] = []
    for row in node.text:
        if not row.is_keyed or row.is_container or row.key is None:
            continue
        if row.key not in buffer.values:
            continue
        value = coerce_value(buffer.values[row.key], row.scalar_kind)
        edits.append(Edit((*node.path, row.key), value))
    return edits


class EditSession:
    """Edits the currently selected node of one document.

    Args:
        provider:   Supplies the selected node.
        accessor:   Reads the current document text and receives the result.
        adapter:    Renders the patched JSON text in ``fmt``.
        fmt:        Active serialisation format of the document.
        formatting: Layout for inserted text.

    Example::

        session = EditSession(provider, accessor, JsonAdapter())
        session.begin()
        session.update("name", "Ada")
        session.save()   # accessor.set_contents(..., has_changes=True)
    """

    def __init__(
        self,
        provider: SelectionProvider,
        accessor: DocumentAccessor,
        adapter: FormatAdapter,
        fmt: str = "json",
        formatting: FormattingOptions | None = None,
    ) -> None:
        self._provider = provider
        self._accessor = accessor
        self._adapter = adapter
        self._fmt = fmt
        self._formatting = formatting
        self._node: NodeData | None = None
        self._buffer: EditBuffer | None = None

    @property
    def node(self) -> NodeData | None:
        return self._node

    @property
    def buffer(self) -> EditBuffer | None:
        return self._buffer

    @property
    def is_editing(self) -> bool:
        return self._buffer is not None

    def begin(self) -> EditBuffer | None:
        """Snapshot the selected node and seed the buffer from it."""
        self._node = self._provider.selected_node()
        self._buffer = initial_buffer(self._node) if self._node is not None else None
        return self._buffer

    def update(self, key: Segment | None, raw: str) -> None:
        """Replace one buffer slot.  ``key`` is ignored for a scalar node.

        Raises:
            RuntimeError: If no edit is in progress.
            KeyError: If ``key`` is not an editable row of the node.
        """
        if self._buffer is None:
            raise RuntimeError("no edit in progress; call begin() first")
        if isinstance(self._buffer, ScalarBuffer):
            self._buffer = ScalarBuffer(raw)
            return
        if key not in self._buffer.values:
            raise KeyError(key)
        self._buffer = KeyedBuffer({**self._buffer.values, key: raw})

    def cancel(self) -> None:
        """Drop local edits without touching the document."""
        self._buffer = None

    def save(self) -> str | None:
        """Patch the document with the buffered values.

        Returns:
            The contents handed to ``set_contents``, or None when there was
            no edit in progress.

        Raises:
            PatchError: Path conflicts, unparsable documents and adapter
                failures are logged and re-raised.  ``set_contents`` is not
                called and the buffer is kept so the user can retry.
        """
        if self._node is None or self._buffer is None:
            return None

        edits = build_edits(self._node, self._buffer)
        base = self._accessor.get_document()
        patcher = DocumentPatcher(formatting=self._formatting)
        try:
            patched = patcher.patch(base, edits).text
            contents = self._adapter.to_formatted_text(patched, self._fmt)
        except PatchError:
            logger.exception("failed to save edits to %s", to_display_string(self._node.path))
            raise

        self._accessor.set_contents(contents, has_changes=True)
        self._buffer = None
        logger.debug("saved %d edit(s) to %s", len(edits), to_display_string(self._node.path))
        return contents
