"""Get pending candidate for a document use case."""

from uuid import UUID

from doclineage.domain.entities import ReplacementCandidate
from doclineage.domain.exceptions import NotFound


class GetCandidateForDocumentUseCase:
    """Pending candidate proposed for new_document_id."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, new_document_id: UUID) -> ReplacementCandidate:
        async with self._uow_factory() as uow:
            candidate = await uow.candidates.get_pending_for_document(new_document_id)
        if not candidate:
            raise NotFound("Pending replacement for document", str(new_document_id))
        return candidate
