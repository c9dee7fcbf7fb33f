"""Get diff use case - cached, computed lazily on first read."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from doclineage.application.ports import TextExtractor
from doclineage.domain.entities import Document, DocumentDiff
from doclineage.domain.exceptions import NotFound, UnprocessableInput
from doclineage.domain.services import compute_line_diff

logger = logging.getLogger(__name__)


class GetDiffUseCase:
    """Return the diff from old_document_id to new_document_id.

    Cache hits are returned as stored. On a miss the full text of both
    documents is loaded, falling back to the text extractor for documents
    whose text was never stored. Extracted text is cached on the document in
    its own unit of work, so it survives a diff that cannot be computed.
    The computed diff is persisted.
    """

    def __init__(self, unit_of_work_factory: type, text_extractor: TextExtractor) -> None:
        self._uow_factory = unit_of_work_factory
        self._text_extractor = text_extractor

    async def execute(self, old_document_id: UUID, new_document_id: UUID) -> DocumentDiff:
        async with self._uow_factory() as uow:
            cached = await uow.diffs.get(old_document_id, new_document_id)
            if cached:
                return cached

            old_doc = await uow.documents.get_by_id(old_document_id)
            if not old_doc:
                raise NotFound("Document", str(old_document_id))
            new_doc = await uow.documents.get_by_id(new_document_id)
            if not new_doc:
                raise NotFound("Document", str(new_document_id))

            old_text = await uow.documents.get_full_text(old_doc.id)
            new_text = await uow.documents.get_full_text(new_doc.id)

        # Extraction runs outside any unit of work; each result is committed on its own.
        if not old_text:
            old_text = await self._extract_and_cache(old_doc)
        if not new_text:
            new_text = await self._extract_and_cache(new_doc)
        if old_text is None or new_text is None:
            raise UnprocessableInput("Full text not available for diff")

        diff = DocumentDiff(
            old_document_id=old_document_id,
            new_document_id=new_document_id,
            hunks=compute_line_diff(old_text, new_text),
            created_at=datetime.now(UTC),
        )
        async with self._uow_factory() as uow:
            await uow.diffs.upsert(diff)

        logger.info("Computed diff %s -> %s (%d hunks)", old_document_id, new_document_id, len(diff.hunks))
        return diff

    async def _extract_and_cache(self, document: Document) -> str | None:
        text = await self._text_extractor.extract(document.storage_path)
        if not text:
            logger.warning("Text extraction produced nothing for document %s", document.id)
            return None
        async with self._uow_factory() as uow:
            await uow.documents.cache_full_text(document.id, text)
        return text
