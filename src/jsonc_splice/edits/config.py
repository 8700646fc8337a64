"""FormattingOptions for text inserted by the edit planner.

FormattingOptions is a frozen (immutable) dataclass holding the layout
parameters used when new values, properties or scaffolding containers have
to be written into a document.  Text that is already in the document is
never reformatted.
"""

from __future__ import annotations

from dataclasses import dataclass

_VALID_EOLS = ("\n", "\r\n", "\r")


@dataclass(frozen=True, slots=True)
class FormattingOptions:
    """Immutable layout configuration for inserted text.

    Attributes:
        tab_size: Width of one indentation level when ``insert_spaces`` is
            True (>= 1).  Default 2.
        insert_spaces: Indent with spaces when True, with one tab per level
            when False.  Default True.
        eol: Line terminator used for inserted line breaks.  One of ``"\\n"``,
            ``"\\r\\n"`` or ``"\\r"``.  Default ``"\\n"``.
    """

    tab_size: int = 2
    insert_spaces: bool = True
    eol: str = "\n"

    def __post_init__(self) -> None:
        if self.tab_size < 1:
            msg = f"tab_size must be >= 1, got {self.tab_size}"
            raise ValueError(msg)
        if self.eol not in _VALID_EOLS:
            msg = f"eol must be one of {_VALID_EOLS!r}, got {self.eol!r}"
            raise ValueError(msg)

    @property
    def indent_unit(self) -> str:
        """The text of one indentation level."""
        return " " * self.tab_size if self.insert_spaces else "\t"
