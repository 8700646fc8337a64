"""JsonAdapter: the format adapter for documents whose active format is JSON.

The patch engine already produces JSON-family text, so for ``"json"`` the
text is handed back untouched; re-serialising it would throw away the
comments and layout the engine just preserved.
"""

from __future__ import annotations

from jsonc_splice.errors import SerializationError

JSON_FORMATS = frozenset({"json", "jsonc"})


class JsonAdapter:
    """Pass-through adapter for JSON documents.

    Satisfies the ``FormatAdapter`` Protocol structurally.

    Example::

        JsonAdapter().to_formatted_text('{"a": 1} // c', "json")   # unchanged
    """

    formats = JSON_FORMATS

    def to_formatted_text(self, json_text: str, fmt: str) -> str:
        """Return ``json_text`` unchanged for JSON formats.

        Raises:
            SerializationError: For any other format.
        """
        if fmt.lower() not in self.formats:
            raise SerializationError(f"JsonAdapter cannot render format {fmt!r}", fmt=fmt)
        return json_text
