"""Document repository port - the Document Store contract."""

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from doclineage.domain.entities import Document
from doclineage.domain.value_objects import DocumentScope, DocumentStatus


class DocumentRepository(Protocol):
    """Port for reading documents and writing lineage-owned fields."""

    async def get_by_id(self, document_id: UUID) -> Document | None: ...

    async def list_live(self, scope: DocumentScope) -> list[Document]:
        """Active documents whose folder and category equal the scope's (None
        matches None). full_text is not guaranteed to be loaded."""
        ...

    async def lock(self, document_ids: Sequence[UUID]) -> None:
        """Serialize concurrent transitions touching the same documents."""
        ...

    async def set_version_and_status(
        self, document_id: UUID, version: int, status: DocumentStatus
    ) -> None: ...

    async def get_full_text(self, document_id: UUID) -> str | None: ...

    async def cache_full_text(self, document_id: UUID, text: str) -> None: ...
