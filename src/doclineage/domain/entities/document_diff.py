"""Document diff cache entry."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from doclineage.domain.value_objects import DiffHunk


@dataclass
class DocumentDiff:
    """Cached line diff from old_document_id to new_document_id."""

    old_document_id: UUID
    new_document_id: UUID
    hunks: list[DiffHunk]
    created_at: datetime
