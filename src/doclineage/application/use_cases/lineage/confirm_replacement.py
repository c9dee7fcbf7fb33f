"""Confirm replacement use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from doclineage.application.dto.lineage_dto import VersionLinkOutput
from doclineage.application.use_cases.lineage.version_link import (
    MANUAL_CONFIDENCE,
    apply_version_link,
    load_link_pair,
)
from doclineage.domain.exceptions import Conflict, NotFound
from doclineage.domain.value_objects import CandidateStatus

logger = logging.getLogger(__name__)


class ConfirmReplacementUseCase:
    """Turn a pending candidate into a confirmed version link."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, candidate_id: UUID, automatic: bool = False) -> VersionLinkOutput:
        """Confirm candidate. Operator confirmations record confidence 1.0,
        automatic ones the detector score."""
        async with self._uow_factory() as uow:
            candidate = await uow.candidates.get_by_id(candidate_id)
            if not candidate:
                raise NotFound("ReplacementCandidate", str(candidate_id))
            if candidate.status != CandidateStatus.PENDING:
                raise Conflict(f"Replacement candidate {candidate_id} is already {candidate.status}")

            new_doc, old_doc = await load_link_pair(
                uow, candidate.new_document_id, candidate.candidate_document_id
            )

            claimed = await uow.candidates.resolve(
                candidate.id, CandidateStatus.CONFIRMED, datetime.now(UTC)
            )
            if not claimed:
                raise Conflict(f"Replacement candidate {candidate_id} was resolved concurrently")

            confidence = candidate.similarity_score if automatic else MANUAL_CONFIDENCE
            result = await apply_version_link(uow, new_doc, old_doc, confidence)

            await uow.audit.record(
                "document",
                new_doc.id,
                "version_confirmed",
                {
                    "source": "automatic" if automatic else "detected",
                    "candidate_id": str(candidate.id),
                    "old_document_id": str(old_doc.id),
                    "old_version": result.archived_document.version,
                    "new_version": result.promoted_document.version,
                    "confidence": confidence,
                },
            )

        return result
