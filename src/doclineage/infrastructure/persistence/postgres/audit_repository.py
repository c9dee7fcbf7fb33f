"""PostgreSQL audit repository implementation."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from doclineage.domain.entities import AuditEntry


class PostgresAuditRepository:
    """Audit log repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def record(
        self,
        entity_type: str,
        entity_id: UUID,
        action: str,
        details: dict[str, Any] | None = None,
    ) -> AuditEntry:
        """Append audit entry."""
        entry = AuditEntry(
            id=uuid4(),
            entity_type=entity_type,
            entity_id=entity_id,
            action=action,
            created_at=datetime.now(UTC),
            details=details or {},
        )
        await self._conn.execute(
            "INSERT INTO audit_log (id, entity_type, entity_id, action, details, created_at) "
            "VALUES (%s, %s, %s, %s, %s, %s)",
            (
                entry.id,
                entry.entity_type,
                entry.entity_id,
                entry.action,
                Jsonb(entry.details),
                entry.created_at,
            ),
        )
        return entry

    async def list_for_entity(self, entity_type: str, entity_id: UUID) -> list[AuditEntry]:
        """List audit entries for entity, oldest first."""
        cur = await self._conn.execute(
            "SELECT id, entity_type, entity_id, action, created_at, details FROM audit_log "
            "WHERE entity_type = %s AND entity_id = %s ORDER BY created_at",
            (entity_type, entity_id),
        )
        return [
            AuditEntry(
                id=r[0],
                entity_type=r[1],
                entity_id=r[2],
                action=r[3],
                created_at=r[4],
                details=r[5] or {},
            )
            for r in await cur.fetchall()
        ]
