"""Diff cache repository port."""

from typing import Protocol
from uuid import UUID

from doclineage.domain.entities import DocumentDiff


class DiffRepository(Protocol):
    """Port for cached diffs keyed by (old, new)."""

    async def get(self, old_document_id: UUID, new_document_id: UUID) -> DocumentDiff | None: ...

    async def upsert(self, diff: DocumentDiff) -> DocumentDiff: ...
