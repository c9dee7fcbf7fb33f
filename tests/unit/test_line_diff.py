"""Unit tests for the line diff computer."""

import pytest

from doclineage.domain.services.line_diff import MAX_DIFF_LINES, compute_line_diff, split_lines
from doclineage.domain.value_objects import DiffHunk, HunkKind

SAMPLES = [
    ("", ""),
    ("", "a"),
    ("a", ""),
    ("a\nb\nc", "a\nb\nc"),
    ("a\nb\nc", "a\nx\nc"),
    ("a\nb\nc", "c\nb\na"),
    ("header\nbody\nfooter", "header\nintro\nbody\nfooter\nappendix"),
    ("one\ntwo\nthree\nfour", "two\nfour"),
    ("x\nx\nx", "x\ny\nx"),
    ("line\n", "line\n\n"),
    ("same\nsame", "different\nlines\nentirely"),
]


def _reconstruct(hunks: list[DiffHunk], keep: set[HunkKind]) -> str:
    lines: list[str] = []
    for hunk in hunks:
        if hunk.kind in keep:
            lines.extend(hunk.lines)
    return "\n".join(lines)


class TestSplitLines:
    def test_empty_text_is_single_empty_line(self) -> None:
        assert split_lines("") == [""]

    def test_none_treated_as_empty(self) -> None:
        assert split_lines(None) == [""]

    def test_trailing_newline_keeps_empty_last_line(self) -> None:
        assert split_lines("a\n") == ["a", ""]


class TestReconstruction:
    @pytest.mark.parametrize(("old", "new"), SAMPLES)
    def test_old_text_from_unchanged_and_removed(self, old: str, new: str) -> None:
        hunks = compute_line_diff(old, new)
        assert _reconstruct(hunks, {HunkKind.UNCHANGED, HunkKind.REMOVED}) == old

    @pytest.mark.parametrize(("old", "new"), SAMPLES)
    def test_new_text_from_unchanged_and_added(self, old: str, new: str) -> None:
        hunks = compute_line_diff(old, new)
        assert _reconstruct(hunks, {HunkKind.UNCHANGED, HunkKind.ADDED}) == new

    @pytest.mark.parametrize(("old", "new"), SAMPLES)
    def test_adjacent_hunks_differ_in_kind(self, old: str, new: str) -> None:
        hunks = compute_line_diff(old, new)
        for left, right in zip(hunks, hunks[1:]):
            assert left.kind != right.kind

    @pytest.mark.parametrize(("old", "new"), SAMPLES)
    def test_deterministic(self, old: str, new: str) -> None:
        assert compute_line_diff(old, new) == compute_line_diff(old, new)


class TestHunks:
    def test_identical_text_is_single_unchanged_hunk(self) -> None:
        text = "alpha\nbeta\ngamma"
        assert compute_line_diff(text, text) == [
            DiffHunk(kind=HunkKind.UNCHANGED, lines=("alpha", "beta", "gamma"))
        ]

    def test_empty_texts_are_one_unchanged_empty_line(self) -> None:
        assert compute_line_diff("", "") == [DiffHunk(kind=HunkKind.UNCHANGED, lines=("",))]

    def test_changed_middle_line(self) -> None:
        hunks = compute_line_diff("a\nb\nc", "a\nx\nc")
        assert [h.kind for h in hunks] == [
            HunkKind.UNCHANGED,
            HunkKind.REMOVED,
            HunkKind.ADDED,
            HunkKind.UNCHANGED,
        ]
        assert hunks[1].lines == ("b",)
        assert hunks[2].lines == ("x",)

    def test_tie_prefers_added_during_backtrack(self) -> None:
        # Backtracking from the end, "added" is taken first, so the removed
        # line ends up before the added one in the output.
        hunks = compute_line_diff("a", "b")
        assert hunks == [
            DiffHunk(kind=HunkKind.REMOVED, lines=("a",)),
            DiffHunk(kind=HunkKind.ADDED, lines=("b",)),
        ]

    def test_swapped_lines_tie_break(self) -> None:
        hunks = compute_line_diff("a\nb", "b\na")
        assert hunks == [
            DiffHunk(kind=HunkKind.REMOVED, lines=("a",)),
            DiffHunk(kind=HunkKind.UNCHANGED, lines=("b",)),
            DiffHunk(kind=HunkKind.ADDED, lines=("a",)),
        ]

    def test_comparison_is_exact(self) -> None:
        hunks = compute_line_diff("Hello", "hello ")
        assert HunkKind.UNCHANGED not in {h.kind for h in hunks}

    def test_pure_append(self) -> None:
        hunks = compute_line_diff("a\nb", "a\nb\nc\nd")
        assert hunks == [
            DiffHunk(kind=HunkKind.UNCHANGED, lines=("a", "b")),
            DiffHunk(kind=HunkKind.ADDED, lines=("c", "d")),
        ]


class TestSizeGuard:
    def test_oversized_old_text_returns_whole_replace(self) -> None:
        old_lines = [f"line {i}" for i in range(MAX_DIFF_LINES + 1)]
        hunks = compute_line_diff("\n".join(old_lines), "")
        assert hunks == [
            DiffHunk(kind=HunkKind.REMOVED, lines=tuple(old_lines)),
            DiffHunk(kind=HunkKind.ADDED, lines=("",)),
        ]

    def test_oversized_new_text_returns_whole_replace(self) -> None:
        new_lines = ["same"] * (MAX_DIFF_LINES + 5)
        hunks = compute_line_diff("same", "\n".join(new_lines))
        assert [h.kind for h in hunks] == [HunkKind.REMOVED, HunkKind.ADDED]
        assert hunks[0].lines == ("same",)
        assert len(hunks[1].lines) == MAX_DIFF_LINES + 5

    def test_exactly_at_limit_uses_lcs(self) -> None:
        text = "\n".join(f"line {i}" for i in range(MAX_DIFF_LINES))
        hunks = compute_line_diff(text, text)
        assert len(hunks) == 1
        assert hunks[0].kind == HunkKind.UNCHANGED


class TestDiffHunkSerialization:
    def test_to_dict(self) -> None:
        hunk = DiffHunk(kind=HunkKind.ADDED, lines=("x", "y"))
        assert hunk.to_dict() == {"kind": "added", "lines": ["x", "y"]}

    def test_from_dict(self) -> None:
        assert DiffHunk.from_dict({"kind": "removed", "lines": ["a"]}) == DiffHunk(
            kind=HunkKind.REMOVED, lines=("a",)
        )
