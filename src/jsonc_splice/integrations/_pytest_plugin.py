"""pytest plugin for jsonc-splice.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pytest

from jsonc_splice import DocumentPatcher, FormattingOptions
from jsonc_splice.edits import Edit, EditLike, apply_splices, as_edit
from jsonc_splice.paths import to_display_string


def _overlaps(a: tuple[Any, ...], b: tuple[Any, ...]) -> bool:
    """True when one path is a prefix of the other."""
    size = min(len(a), len(b))
    return a[:size] == b[:size]


@pytest.fixture(scope="session")
def assert_patch_preserves() -> Any:
    """Fixture that returns a callable patch-and-verify asserter.

    The fixture is session-scoped because the returned callable is stateless
    (it creates a fresh DocumentPatcher per call).

    Usage in tests::

        def test_bump_version(assert_patch_preserves):
            patched = assert_patch_preserves(
                '{"version": 1, // bumped by CI\\n "name": "x"}',
                [(["version"], 2)],
            )
            assert "// bumped by CI" in patched

    Returns:
        A callable ``_assert(doc, edits, formatting=None) -> str`` that applies
        the edits step by step and returns the patched text.  It raises
        ``AssertionError`` when a step changes text before its first splice or
        after its last one, or when an edit's path does not read back the
        value that was written (edits superseded by a later edit on an
        overlapping path are not read back).
    """

    def _assert(
        doc: str,
        edits: Iterable[EditLike],
        formatting: FormattingOptions | None = None,
    ) -> str:
        batch: list[Edit] = [as_edit(item) for item in edits]
        patcher = DocumentPatcher(formatting=formatting)

        current = doc
        for index, edit in enumerate(batch):
            splices = patcher.plan(current, edit.path, edit.value)
            patched = apply_splices(current, splices)
            first = min(s.start for s in splices)
            last = max(s.end for s in splices)
            tail = current[last:]
            if patched[:first] != current[:first] or not patched.endswith(tail):
                raise AssertionError(
                    f"edit {index} at {to_display_string(edit.path)} changed text "
                    f"outside [{first}, {last})\n"
                    f"  before: {current!r}\n"
                    f"  after:  {patched!r}"
                )
            current = patched

        for index, edit in enumerate(batch):
            if any(_overlaps(edit.path, later.path) for later in batch[index + 1 :]):
                continue
            actual = patcher.read_value(current, edit.path)
            if actual != edit.value:
                raise AssertionError(
                    f"value at {to_display_string(edit.path)} reads back as "
                    f"{actual!r}, expected {edit.value!r}\n"
                    f"  document: {current!r}"
                )
        return current

    return _assert
