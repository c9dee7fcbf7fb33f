"""PostgreSQL replacement candidate repository implementation."""

from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation

from doclineage.domain.entities import ReplacementCandidate
from doclineage.domain.exceptions import Conflict
from doclineage.domain.value_objects import CandidateStatus

_COLUMNS = (
    "id, new_document_id, candidate_document_id, similarity_score, status, created_at, resolved_at"
)


def _row_to_candidate(r: tuple) -> ReplacementCandidate:
    return ReplacementCandidate(
        id=r[0],
        new_document_id=r[1],
        candidate_document_id=r[2],
        similarity_score=r[3],
        status=CandidateStatus(r[4]),
        created_at=r[5],
        resolved_at=r[6],
    )


class PostgresCandidateRepository:
    """Replacement candidate repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, candidate_id: UUID) -> ReplacementCandidate | None:
        """Get candidate by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM replacement_candidate WHERE id = %s", (candidate_id,)
        )
        r = await cur.fetchone()
        return _row_to_candidate(r) if r else None

    async def get_pending_for_document(
        self, new_document_id: UUID
    ) -> ReplacementCandidate | None:
        """Get the pending candidate for a new document."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM replacement_candidate "
            "WHERE new_document_id = %s AND status = %s",
            (new_document_id, CandidateStatus.PENDING.value),
        )
        r = await cur.fetchone()
        return _row_to_candidate(r) if r else None

    async def list_pending(self) -> list[ReplacementCandidate]:
        """List pending candidates, newest first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM replacement_candidate "
            "WHERE status = %s ORDER BY created_at DESC",
            (CandidateStatus.PENDING.value,),
        )
        return [_row_to_candidate(r) for r in await cur.fetchall()]

    async def create(self, candidate: ReplacementCandidate) -> ReplacementCandidate:
        """Create candidate. The partial unique index allows one pending row per document."""
        try:
            await self._conn.execute(
                f"INSERT INTO replacement_candidate ({_COLUMNS}) "
                "VALUES (%s, %s, %s, %s, %s, %s, %s)",
                (
                    candidate.id,
                    candidate.new_document_id,
                    candidate.candidate_document_id,
                    candidate.similarity_score,
                    candidate.status.value,
                    candidate.created_at,
                    candidate.resolved_at,
                ),
            )
        except UniqueViolation as e:
            raise Conflict(
                f"Document {candidate.new_document_id} already has a pending replacement"
            ) from e
        return candidate

    async def resolve(
        self, candidate_id: UUID, status: CandidateStatus, resolved_at: datetime
    ) -> bool:
        """Compare-and-swap pending -> status."""
        cur = await self._conn.execute(
            "UPDATE replacement_candidate SET status = %s, resolved_at = %s "
            "WHERE id = %s AND status = %s",
            (status.value, resolved_at, candidate_id, CandidateStatus.PENDING.value),
        )
        return cur.rowcount == 1
