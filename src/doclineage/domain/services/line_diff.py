"""Line-level diff between two texts.

Longest-common-subsequence over lines. The backtrack prefers an "added" step
over a "removed" step when both keep the LCS length, which fixes the edit
script returned among several minimal ones.
"""

import logging

from doclineage.domain.value_objects import DiffHunk, HunkKind

logger = logging.getLogger(__name__)

# Either side above this many lines skips the O(m*n) table.
MAX_DIFF_LINES = 3000


def split_lines(text: str | None) -> list[str]:
    """Split on newline. Empty (or None) text yields a single empty line."""
    return (text or "").split("\n")


def compute_line_diff(old_text: str | None, new_text: str | None) -> list[DiffHunk]:
    """Return ordered hunks turning old_text into new_text.

    Oversized inputs return exactly two hunks: all old lines removed, then all
    new lines added. Both hunks are always present.
    """
    old_lines = split_lines(old_text)
    new_lines = split_lines(new_text)

    if len(old_lines) > MAX_DIFF_LINES or len(new_lines) > MAX_DIFF_LINES:
        logger.warning(
            "Diff size guard hit (%d old / %d new lines), returning whole-document replace",
            len(old_lines),
            len(new_lines),
        )
        return [
            DiffHunk(kind=HunkKind.REMOVED, lines=tuple(old_lines)),
            DiffHunk(kind=HunkKind.ADDED, lines=tuple(new_lines)),
        ]

    table = _lcs_table(old_lines, new_lines)
    ops = _backtrack(table, old_lines, new_lines)
    return _coalesce(ops)


def _lcs_table(old_lines: list[str], new_lines: list[str]) -> list[list[int]]:
    m, n = len(old_lines), len(new_lines)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        old_line = old_lines[i - 1]
        row, prev = table[i], table[i - 1]
        for j in range(1, n + 1):
            if old_line == new_lines[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])
    return table


def _backtrack(
    table: list[list[int]], old_lines: list[str], new_lines: list[str]
) -> list[tuple[HunkKind, str]]:
    ops: list[tuple[HunkKind, str]] = []
    i, j = len(old_lines), len(new_lines)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and old_lines[i - 1] == new_lines[j - 1]:
            ops.append((HunkKind.UNCHANGED, old_lines[i - 1]))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            ops.append((HunkKind.ADDED, new_lines[j - 1]))
            j -= 1
        else:
            ops.append((HunkKind.REMOVED, old_lines[i - 1]))
            i -= 1
    ops.reverse()
    return ops


def _coalesce(ops: list[tuple[HunkKind, str]]) -> list[DiffHunk]:
    grouped: list[tuple[HunkKind, list[str]]] = []
    for kind, line in ops:
        if grouped and grouped[-1][0] == kind:
            grouped[-1][1].append(line)
        else:
            grouped.append((kind, [line]))
    return [DiffHunk(kind=kind, lines=tuple(lines)) for kind, lines in grouped]
