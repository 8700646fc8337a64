"""Unit tests for Splice and apply_splices."""

from __future__ import annotations

import pytest

from jsonc_splice.edits.splice import Splice, apply_splices
from jsonc_splice.errors import SpliceOverlapError


class TestSplice:
    def test_insertion_is_empty_range(self) -> None:
        splice = Splice(3, 3, "x")
        assert splice.start == splice.end

    @pytest.mark.parametrize(("start", "end"), [(-1, 0), (5, 4)])
    def test_invalid_range(self, start: int, end: int) -> None:
        with pytest.raises(ValueError, match="invalid splice range"):
            Splice(start, end, "")


class TestApplySplices:
    def test_no_splices_returns_text(self) -> None:
        assert apply_splices("abc", []) == "abc"

    def test_single_replacement(self) -> None:
        assert apply_splices("hello world", [Splice(6, 11, "there")]) == "hello there"

    def test_offsets_refer_to_original_snapshot(self) -> None:
        # The first splice grows the text; the second must still land on "c".
        splices = [Splice(0, 1, "AAAA"), Splice(2, 3, "C")]
        assert apply_splices("abc", splices) == "AAAAbC"

    def test_order_of_input_does_not_matter(self) -> None:
        splices = [Splice(2, 3, "C"), Splice(0, 1, "AAAA")]
        assert apply_splices("abc", splices) == "AAAAbC"

    def test_adjacent_splices(self) -> None:
        assert apply_splices("abcd", [Splice(0, 2, "x"), Splice(2, 4, "y")]) == "xy"

    def test_insertions_at_same_offset_keep_input_order(self) -> None:
        assert apply_splices("ab", [Splice(1, 1, "1"), Splice(1, 1, "2")]) == "a12b"

    def test_overlap_raises(self) -> None:
        with pytest.raises(SpliceOverlapError):
            apply_splices("abcdef", [Splice(0, 3, "x"), Splice(2, 4, "y")])

    def test_past_end_raises(self) -> None:
        with pytest.raises(ValueError, match="past the end"):
            apply_splices("abc", [Splice(1, 9, "")])

    def test_input_text_is_not_modified(self) -> None:
        text = "abc"
        apply_splices(text, [Splice(0, 3, "xyz")])
        assert text == "abc"
