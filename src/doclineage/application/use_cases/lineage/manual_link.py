"""Manual link use case - operator names the document being replaced."""

from uuid import UUID

from doclineage.application.dto.lineage_dto import VersionLinkOutput
from doclineage.application.use_cases.lineage.version_link import (
    MANUAL_CONFIDENCE,
    apply_version_link,
    load_link_pair,
)


class ManualLinkUseCase:
    """Link new_document_id as the next version of old_document_id, no candidate needed."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, new_document_id: UUID, old_document_id: UUID) -> VersionLinkOutput:
        async with self._uow_factory() as uow:
            new_doc, old_doc = await load_link_pair(uow, new_document_id, old_document_id)
            result = await apply_version_link(uow, new_doc, old_doc, MANUAL_CONFIDENCE)
            await uow.audit.record(
                "document",
                new_document_id,
                "version_confirmed",
                {
                    "source": "manual",
                    "old_document_id": str(old_document_id),
                    "old_version": result.archived_document.version,
                    "new_version": result.promoted_document.version,
                    "confidence": MANUAL_CONFIDENCE,
                },
            )
        return result
