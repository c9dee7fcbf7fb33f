"""List audit entries use case."""

from uuid import UUID

from doclineage.domain.entities import AuditEntry
from doclineage.domain.exceptions import NotFound


class ListAuditEntriesUseCase:
    """Audit trail of a document (detections, confirmations, dismissals, manual links)."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, document_id: UUID) -> list[AuditEntry]:
        """Entries recorded against the document, oldest first."""
        async with self._uow_factory() as uow:
            if not await uow.documents.get_by_id(document_id):
                raise NotFound("Document", str(document_id))
            entries = await uow.audit.list_for_entity("document", document_id)
        return sorted(entries, key=lambda e: e.created_at)
