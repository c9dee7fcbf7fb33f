"""Replacement candidate entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from doclineage.domain.value_objects import CandidateStatus


@dataclass
class ReplacementCandidate:
    """Suggestion that new_document_id replaces candidate_document_id."""

    id: UUID
    new_document_id: UUID
    candidate_document_id: UUID
    similarity_score: float
    status: CandidateStatus
    created_at: datetime
    resolved_at: datetime | None = None
