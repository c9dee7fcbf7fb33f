"""Scope used when scanning for replacement candidates."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentScope:
    """Folder/category a document is filed under. None means unfiled, so a
    scope with folder=None only matches documents without a folder."""

    folder: str | None = None
    category: str | None = None
