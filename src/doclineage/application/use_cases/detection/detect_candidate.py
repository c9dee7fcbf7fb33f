"""Detect replacement candidate use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from doclineage.application.use_cases.lineage.confirm_replacement import (
    ConfirmReplacementUseCase,
)
from doclineage.domain.entities import Document, ReplacementCandidate
from doclineage.domain.exceptions import Conflict, NotFound
from doclineage.domain.services import SIMILARITY_THRESHOLD, name_similarity
from doclineage.domain.value_objects import CandidateStatus

logger = logging.getLogger(__name__)


class DetectCandidateUseCase:
    """Find the live document that a newly ingested document most likely replaces.

    Scans live documents sharing the new document's folder/category, scores
    names, and records the best match scoring above the threshold as a pending
    candidate. Equal scores go to the most recently modified document, then to
    the smallest id. At most one pending candidate exists per document: an
    existing one is returned as is.

    When auto_confirm_threshold is set and the best score reaches it, the
    candidate is confirmed right away through confirm_replacement.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        similarity_threshold: float = SIMILARITY_THRESHOLD,
        confirm_replacement: ConfirmReplacementUseCase | None = None,
        auto_confirm_threshold: float | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._similarity_threshold = similarity_threshold
        self._confirm_replacement = confirm_replacement
        self._auto_confirm_threshold = auto_confirm_threshold

    async def execute(self, new_document_id: UUID) -> ReplacementCandidate | None:
        """Return the pending candidate for the document, or None if no suggestion."""
        try:
            candidate = await self._detect(new_document_id)
        except Conflict:
            # Another detection run inserted the pending row first.
            async with self._uow_factory() as uow:
                candidate = await uow.candidates.get_pending_for_document(new_document_id)
            if not candidate:
                raise
            return candidate

        if candidate and self._should_auto_confirm(candidate):
            logger.info(
                "Auto-confirming candidate %s (score %.2f)", candidate.id, candidate.similarity_score
            )
            try:
                await self._confirm_replacement.execute(candidate.id, automatic=True)
            except (Conflict, NotFound) as e:
                # The suggestion stays pending for an operator to decide.
                logger.warning("Auto-confirm of candidate %s failed: %s", candidate.id, e)
            else:
                candidate.status = CandidateStatus.CONFIRMED
        return candidate

    async def _detect(self, new_document_id: UUID) -> ReplacementCandidate | None:
        async with self._uow_factory() as uow:
            document = await uow.documents.get_by_id(new_document_id)
            if not document:
                raise NotFound("Document", str(new_document_id))

            existing = await uow.candidates.get_pending_for_document(new_document_id)
            if existing:
                return existing

            text = await uow.documents.get_full_text(new_document_id)
            if not text or not text.strip():
                logger.debug("No text for document %s, skipping detection", new_document_id)
                return None
            if await uow.lineage.get_parent_edge(new_document_id):
                return None
            if await uow.lineage.list_child_edges(new_document_id):
                return None

            others = [d for d in await uow.documents.list_live(document.scope) if d.id != document.id]
            best = self._best_match(document, others)
            if not best:
                return None
            match, score = best

            candidate = ReplacementCandidate(
                id=uuid4(),
                new_document_id=new_document_id,
                candidate_document_id=match.id,
                similarity_score=score,
                status=CandidateStatus.PENDING,
                created_at=datetime.now(UTC),
            )
            await uow.candidates.create(candidate)
            await uow.audit.record(
                "document",
                new_document_id,
                "version_candidate_detected",
                {"candidate_id": str(match.id), "confidence": score},
            )

        logger.info(
            "Document %s looks like a new version of %s (score %.2f)",
            new_document_id,
            match.id,
            score,
        )
        return candidate

    def _best_match(
        self, document: Document, others: list[Document]
    ) -> tuple[Document, float] | None:
        scored = [(other, name_similarity(document.name, other.name)) for other in others]
        accepted = [(other, score) for other, score in scored if score > self._similarity_threshold]
        if not accepted:
            return None
        # Highest score, then latest modification, then smallest id.
        accepted.sort(key=lambda item: str(item[0].id))
        accepted.sort(key=lambda item: (item[1], item[0].updated_at), reverse=True)
        return accepted[0]

    def _should_auto_confirm(self, candidate: ReplacementCandidate) -> bool:
        return (
            self._confirm_replacement is not None
            and self._auto_confirm_threshold is not None
            and candidate.status == CandidateStatus.PENDING
            and candidate.similarity_score >= self._auto_confirm_threshold
        )
