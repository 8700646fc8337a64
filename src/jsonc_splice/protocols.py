"""Protocols for the collaborators around the patch engine.

The engine itself only transforms text.  An editing front end plugs in three
collaborators, none of which needs to inherit from anything: any object with
conformant methods passes ``isinstance`` checks.

Example::

    from jsonc_splice.protocols import DocumentAccessor

    class InMemoryDocument:
        def __init__(self, text: str) -> None:
            self.text = text
            self.dirty = False

        def get_document(self) -> str:
            return self.text

        def set_contents(self, contents: str, has_changes: bool) -> None:
            self.text, self.dirty = contents, has_changes

    assert isinstance(InMemoryDocument("{}"), DocumentAccessor)  # True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from jsonc_splice.rows import NodeData

__all__ = ["DocumentAccessor", "FormatAdapter", "SelectionProvider"]


@runtime_checkable
class SelectionProvider(Protocol):
    """Supplies the node currently of interest, or None when nothing is selected."""

    def selected_node(self) -> NodeData | None: ...


@runtime_checkable
class DocumentAccessor(Protocol):
    """Reads and replaces the whole document.

    ``get_document`` returns the current JSON-family text of the document.
    ``set_contents`` receives the final text in the document's active format
    together with the unsaved-changes flag.
    """

    def get_document(self) -> str: ...

    def set_contents(self, contents: str, has_changes: bool) -> None: ...


@runtime_checkable
class FormatAdapter(Protocol):
    """Renders JSON-family text in a target serialisation format.

    Implementations raise ``SerializationError`` when the document cannot be
    represented in ``fmt``.
    """

    def to_formatted_text(self, json_text: str, fmt: str) -> str: ...
