"""PostgreSQL diff cache repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from doclineage.domain.entities import DocumentDiff
from doclineage.domain.value_objects import DiffHunk


class PostgresDiffRepository:
    """Diff cache repository implementation. Hunks are stored as JSONB."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, old_document_id: UUID, new_document_id: UUID) -> DocumentDiff | None:
        """Get cached diff."""
        cur = await self._conn.execute(
            "SELECT hunks, created_at FROM document_diff "
            "WHERE old_document_id = %s AND new_document_id = %s",
            (old_document_id, new_document_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return DocumentDiff(
            old_document_id=old_document_id,
            new_document_id=new_document_id,
            hunks=[DiffHunk.from_dict(h) for h in r[0]],
            created_at=r[1],
        )

    async def upsert(self, diff: DocumentDiff) -> DocumentDiff:
        """Insert or replace cached diff in a single statement."""
        await self._conn.execute(
            "INSERT INTO document_diff (old_document_id, new_document_id, hunks, created_at) "
            "VALUES (%s, %s, %s, %s) "
            "ON CONFLICT (old_document_id, new_document_id) "
            "DO UPDATE SET hunks = EXCLUDED.hunks, created_at = EXCLUDED.created_at",
            (
                diff.old_document_id,
                diff.new_document_id,
                Jsonb([h.to_dict() for h in diff.hunks]),
                diff.created_at,
            ),
        )
        return diff
