"""Document entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from doclineage.domain.value_objects import DocumentScope, DocumentStatus


@dataclass
class Document:
    """Ingested document as seen by the lineage engine.

    full_text is None until the document has been processed (or when a
    listing did not load it; use DocumentRepository.get_full_text).
    """

    id: UUID
    name: str
    storage_path: str
    version: int
    status: DocumentStatus
    created_at: datetime
    updated_at: datetime
    full_text: str | None = None
    folder: str | None = None
    category: str | None = None

    @property
    def is_live(self) -> bool:
        return self.status == DocumentStatus.ACTIVE

    @property
    def scope(self) -> DocumentScope:
        return DocumentScope(folder=self.folder, category=self.category)
