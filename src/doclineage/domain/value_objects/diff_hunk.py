"""Diff hunk - run of lines sharing one kind of change."""

from dataclasses import dataclass
from enum import StrEnum


class HunkKind(StrEnum):
    """Kind of change a hunk represents."""

    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class DiffHunk:
    """Consecutive lines with the same kind."""

    kind: HunkKind
    lines: tuple[str, ...]

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "lines": list(self.lines)}

    @classmethod
    def from_dict(cls, data: dict) -> "DiffHunk":
        return cls(kind=HunkKind(data["kind"]), lines=tuple(data["lines"]))
