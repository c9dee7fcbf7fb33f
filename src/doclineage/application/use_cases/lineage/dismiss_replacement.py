"""Dismiss replacement use case."""

import logging
from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID

from doclineage.domain.entities import ReplacementCandidate
from doclineage.domain.exceptions import Conflict, NotFound
from doclineage.domain.value_objects import CandidateStatus

logger = logging.getLogger(__name__)


class DismissReplacementUseCase:
    """Mark a pending candidate as dismissed. Nothing else changes."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, candidate_id: UUID) -> ReplacementCandidate:
        async with self._uow_factory() as uow:
            candidate = await uow.candidates.get_by_id(candidate_id)
            if not candidate:
                raise NotFound("ReplacementCandidate", str(candidate_id))
            if candidate.status != CandidateStatus.PENDING:
                raise Conflict(f"Replacement candidate {candidate_id} is already {candidate.status}")

            resolved_at = datetime.now(UTC)
            if not await uow.candidates.resolve(candidate.id, CandidateStatus.DISMISSED, resolved_at):
                raise Conflict(f"Replacement candidate {candidate_id} was resolved concurrently")

            await uow.audit.record(
                "document",
                candidate.new_document_id,
                "version_dismissed",
                {
                    "candidate_id": str(candidate.id),
                    "candidate_document_id": str(candidate.candidate_document_id),
                },
            )

        logger.info("Dismissed replacement candidate %s", candidate_id)
        return replace(candidate, status=CandidateStatus.DISMISSED, resolved_at=resolved_at)
