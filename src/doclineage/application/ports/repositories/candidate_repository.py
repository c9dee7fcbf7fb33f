"""Replacement candidate repository port."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from doclineage.domain.entities import ReplacementCandidate
from doclineage.domain.value_objects import CandidateStatus


class CandidateRepository(Protocol):
    """Port for pending/terminated replacement candidates."""

    async def get_by_id(self, candidate_id: UUID) -> ReplacementCandidate | None: ...

    async def get_pending_for_document(
        self, new_document_id: UUID
    ) -> ReplacementCandidate | None: ...

    async def list_pending(self) -> list[ReplacementCandidate]: ...

    async def create(self, candidate: ReplacementCandidate) -> ReplacementCandidate:
        """Insert a pending candidate. Raises Conflict if one is already pending."""
        ...

    async def resolve(
        self, candidate_id: UUID, status: CandidateStatus, resolved_at: datetime
    ) -> bool:
        """Compare-and-swap pending -> status. False if no longer pending."""
        ...
