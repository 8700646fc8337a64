"""Unit tests for the public API functions: apply_edit, apply_all, read_value, loads."""

from __future__ import annotations

from typing import Any

import pytest

from jsonc_splice import (
    DocumentPatcher,
    DocumentSyntaxError,
    Edit,
    FormattingOptions,
    InvalidPathError,
    PatchError,
    PathConflictError,
    apply_all,
    apply_edit,
    loads,
    read_value,
)
from jsonc_splice.edits import apply_splices

SETTINGS = """{
  // editor settings
  "editor.fontSize": 14,
  "editor.rulers": [80, 120], /* columns */
  "files.exclude": {
    "**/.git": true,
  },
}
"""


class TestApplyAll:
    def test_empty_batch_is_byte_identical(self) -> None:
        assert apply_all(SETTINGS, []) == SETTINGS

    def test_empty_batch_on_unparsable_text(self) -> None:
        # Nothing is parsed when there is nothing to apply.
        assert apply_all("{not json", []) == "{not json"

    def test_accepts_edit_objects_and_tuples(self) -> None:
        result = apply_all('{"a": 1, "b": 2}', [Edit(("a",), 10), (["b"], 20)])
        assert result == '{"a": 10, "b": 20}'

    def test_accepts_generators(self) -> None:
        edits = ((["a"], n) for n in range(3))
        assert apply_all('{"a": 0}', edits) == '{"a": 2}'

    def test_last_write_wins(self) -> None:
        assert apply_all('{"a": 1}', [(["a"], "first"), (["a"], "second")]) == '{"a": "second"}'

    def test_later_edit_sees_earlier_structure(self) -> None:
        result = apply_all("{}", [(["cfg", "a"], 1), (["cfg", "b"], 2)])
        assert result == '{\n  "cfg": {\n    "a": 1,\n    "b": 2\n  }\n}'

    def test_formatting_is_forwarded(self) -> None:
        result = apply_all("{}", [(["a"], 1)], formatting=FormattingOptions(tab_size=4))
        assert result == '{\n    "a": 1\n}'

    def test_settings_file_round_trip(self) -> None:
        result = apply_all(
            SETTINGS,
            [
                (["editor.fontSize"], 16),
                (["editor.rulers", 1], 100),
                (["files.exclude", "**/node_modules"], True),
            ],
        )
        assert result == SETTINGS.replace("14", "16").replace("120", "100").replace(
            '"**/.git": true,', '"**/.git": true,\n    "**/node_modules": true,'
        )

    def test_conflict_aborts_whole_batch(self) -> None:
        doc = '{"a": 1, "b": "text"}'
        with pytest.raises(PathConflictError):
            apply_all(doc, [(["a"], 2), (["b", "c"], 3), (["a"], 4)])

    def test_bare_string_path_is_rejected(self) -> None:
        with pytest.raises(InvalidPathError):
            apply_all('{"ab": 1}', [("ab", 2)])

    def test_syntax_error(self) -> None:
        with pytest.raises(DocumentSyntaxError):
            apply_all('{"a": }', [(["a"], 1)])

    def test_malformed_batch_item_is_a_patch_error(self) -> None:
        with pytest.raises(InvalidPathError, match="pair"):
            apply_all('{"a": 1}', [(["a"], 2, 3)])  # type: ignore[list-item]
        with pytest.raises(PatchError):
            apply_all('{"a": 1}', [42])  # type: ignore[list-item]


class TestCarriageReturnLineEndings:
    """Documents whose lines end in a bare CR, comments included."""

    DOC = '{\r  // note\r  "a": 1\r}'

    def test_loads(self) -> None:
        assert loads(self.DOC) == {"a": 1}

    def test_replace_keeps_comment(self) -> None:
        assert apply_all(self.DOC, [(["a"], 2)]) == '{\r  // note\r  "a": 2\r}'

    def test_append_uses_configured_eol(self) -> None:
        result = apply_all(self.DOC, [(["b"], 3)], formatting=FormattingOptions(eol="\r"))
        assert result == '{\r  // note\r  "a": 1,\r  "b": 3\r}'
        assert read_value(result, ["b"]) == 3


class TestSequentialDependency:
    """Edits whose original offsets go stale after an earlier length change."""

    DOC = '{"a": "x", "b": "y"}'
    EDITS = [(["a"], "a much longer value"), (["b"], "z")]
    EXPECTED = '{"a": "a much longer value", "b": "z"}'

    def test_sequential_driver_is_correct(self) -> None:
        assert apply_all(self.DOC, self.EDITS) == self.EXPECTED

    def test_stale_offsets_would_corrupt_the_document(self) -> None:
        patcher = DocumentPatcher()
        stale = patcher.plan(self.DOC, ["b"], "z")
        after_first = patcher.apply_edit(self.DOC, ["a"], "a much longer value")
        corrupted = apply_splices(after_first, stale)
        assert corrupted != self.EXPECTED
        with pytest.raises(DocumentSyntaxError):
            loads(corrupted)

    def test_shrinking_edit(self) -> None:
        doc = '{"a": "a long value here", "b": [1, 2, 3]}'
        result = apply_all(doc, [(["a"], ""), (["b", 2], 30), (["b", 3], 40)])
        assert result == '{"a": "", "b": [1, 2, 30, 40]}'


class TestApplyEdit:
    def test_single_edit(self) -> None:
        assert apply_edit('{"a": 1}', ["a"], 2) == '{"a": 2}'

    def test_conflict(self) -> None:
        with pytest.raises(PathConflictError):
            apply_edit("[1]", ["a"], 2)


class TestPathRoundTrip:
    @pytest.mark.parametrize(
        ("path", "value"),
        [
            (["editor.fontSize"], 18),
            (["editor.rulers", 0], 72),
            (["editor.rulers", 2], 160),
            (["files.exclude", "**/.git"], False),
            (["new", "nested", 0, "key"], {"x": [1, None]}),
            (["editor.fontSize"], "large"),
            ([], {"replaced": True}),
        ],
    )
    def test_written_value_reads_back(self, path: list[Any], value: Any) -> None:
        patched = apply_all(SETTINGS, [(path, value)])
        assert read_value(patched, path) == value


class TestFormattingPreservation:
    def test_text_outside_the_span_is_unchanged(self) -> None:
        patched = apply_all(SETTINGS, [(["editor.fontSize"], 1400)])
        start = SETTINGS.index("14")
        assert patched[:start] == SETTINGS[:start]
        assert patched[start + 4 :] == SETTINGS[start + 2 :]


class TestReadValue:
    def test_missing_path(self) -> None:
        with pytest.raises(KeyError):
            read_value(SETTINGS, ["nope"])

    def test_container(self) -> None:
        assert read_value(SETTINGS, ["files.exclude"]) == {"**/.git": True}


class TestLoads:
    def test_whole_document(self) -> None:
        assert loads(SETTINGS) == {
            "editor.fontSize": 14,
            "editor.rulers": [80, 120],
            "files.exclude": {"**/.git": True},
        }

    def test_blank(self) -> None:
        assert loads("  // nothing\n") is None
