"""Get lineage use case."""

from uuid import UUID

from doclineage.domain.entities import LineageEdge
from doclineage.domain.exceptions import NotFound


class GetLineageUseCase:
    """All lineage edges touching a document, oldest first."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, document_id: UUID) -> list[LineageEdge]:
        async with self._uow_factory() as uow:
            if not await uow.documents.get_by_id(document_id):
                raise NotFound("Document", str(document_id))
            edges = await uow.lineage.list_for_document(document_id)
        return sorted(edges, key=lambda e: e.created_at)
