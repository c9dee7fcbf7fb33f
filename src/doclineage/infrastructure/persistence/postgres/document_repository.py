"""PostgreSQL document repository implementation."""

import logging
from collections.abc import Sequence
from uuid import UUID

import psycopg
from psycopg import AsyncConnection

from doclineage.domain.entities import Document
from doclineage.domain.value_objects import DocumentScope, DocumentStatus

logger = logging.getLogger(__name__)

_COLUMNS = (
    "id, name, storage_path, version, status, created_at, updated_at, full_text, folder, category"
)


def _row_to_document(r: tuple) -> Document:
    return Document(
        id=r[0],
        name=r[1],
        storage_path=r[2],
        version=r[3],
        status=DocumentStatus(r[4]),
        created_at=r[5],
        updated_at=r[6],
        full_text=r[7],
        folder=r[8],
        category=r[9],
    )


class PostgresDocumentRepository:
    """Document repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, document_id: UUID) -> Document | None:
        """Get document by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document WHERE id = %s", (document_id,)
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_document(r)

    async def list_live(self, scope: DocumentScope) -> list[Document]:
        """List active documents in scope (unfiled matches unfiled). full_text is not loaded."""
        cur = await self._conn.execute(
            "SELECT id, name, storage_path, version, status, created_at, updated_at, "
            "NULL, folder, category FROM document "
            "WHERE status = %s "
            "AND folder IS NOT DISTINCT FROM %s::text "
            "AND category IS NOT DISTINCT FROM %s::text",
            (DocumentStatus.ACTIVE.value, scope.folder, scope.category),
        )
        return [_row_to_document(r) for r in await cur.fetchall()]

    async def lock(self, document_ids: Sequence[UUID]) -> None:
        """Row-lock documents in id order to avoid deadlocks."""
        await self._conn.execute(
            "SELECT id FROM document WHERE id = ANY(%s) ORDER BY id FOR UPDATE",
            (list(document_ids),),
        )

    async def set_version_and_status(
        self, document_id: UUID, version: int, status: DocumentStatus
    ) -> None:
        """Set version and status in one statement."""
        await self._conn.execute(
            "UPDATE document SET version = %s, status = %s, updated_at = NOW() WHERE id = %s",
            (version, status.value, document_id),
        )

    async def get_full_text(self, document_id: UUID) -> str | None:
        """Get stored full text."""
        cur = await self._conn.execute(
            "SELECT full_text FROM document WHERE id = %s", (document_id,)
        )
        r = await cur.fetchone()
        return r[0] if r else None

    async def cache_full_text(self, document_id: UUID, text: str) -> None:
        """Store extracted text. Best-effort: failures roll back a savepoint only."""
        try:
            async with self._conn.transaction():
                await self._conn.execute(
                    "UPDATE document SET full_text = %s WHERE id = %s", (text, document_id)
                )
        except psycopg.Error as e:
            logger.warning("Could not cache full text for document %s: %s", document_id, e)
