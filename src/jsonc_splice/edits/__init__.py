"""edits subpackage: planning and applying text splices.

Provides the single-edit planner, the splice applier and the formatting
configuration for inserted text.  Import from this module (not from
sub-modules directly) to stay on the stable public interface.

Example::

    from jsonc_splice.edits import EditPlanner, apply_splices
    from jsonc_splice.tree import parse_tree

    text = '{"a": 1 /* keep */}'
    splices = EditPlanner().plan(text, parse_tree(text), ["a"], 2)
    apply_splices(text, splices)   # '{"a": 2 /* keep */}'
"""

from __future__ import annotations

from jsonc_splice.edits.config import FormattingOptions
from jsonc_splice.edits.edit import Edit, EditLike, as_edit
from jsonc_splice.edits.planner import EditPlanner, line_indent
from jsonc_splice.edits.splice import Splice, apply_splices

__all__ = [
    "Edit",
    "EditLike",
    "EditPlanner",
    "FormattingOptions",
    "Splice",
    "apply_splices",
    "as_edit",
    "line_indent",
]
