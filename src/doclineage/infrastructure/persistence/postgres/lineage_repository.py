"""PostgreSQL lineage edge repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation

from doclineage.domain.entities import LineageEdge
from doclineage.domain.exceptions import Conflict
from doclineage.domain.value_objects import RelationKind

_COLUMNS = "id, newer_document_id, older_document_id, relation_kind, confidence, created_at"


def _row_to_edge(r: tuple) -> LineageEdge:
    return LineageEdge(
        id=r[0],
        newer_document_id=r[1],
        older_document_id=r[2],
        relation_kind=RelationKind(r[3]),
        confidence=r[4],
        created_at=r[5],
    )


class PostgresLineageRepository:
    """Lineage edge repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, edge: LineageEdge) -> LineageEdge:
        """Create edge. Unique indexes keep the chain linear."""
        try:
            await self._conn.execute(
                f"INSERT INTO lineage_edge ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s)",
                (
                    edge.id,
                    edge.newer_document_id,
                    edge.older_document_id,
                    edge.relation_kind.value,
                    edge.confidence,
                    edge.created_at,
                ),
            )
        except UniqueViolation as e:
            raise Conflict("Version link already exists for one of the documents") from e
        return edge

    async def get_parent_edge(self, document_id: UUID) -> LineageEdge | None:
        """Get outgoing version_of edge."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM lineage_edge "
            "WHERE newer_document_id = %s AND relation_kind = %s",
            (document_id, RelationKind.VERSION_OF.value),
        )
        r = await cur.fetchone()
        return _row_to_edge(r) if r else None

    async def list_child_edges(self, document_id: UUID) -> list[LineageEdge]:
        """List version_of edges pointing at document."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM lineage_edge "
            "WHERE older_document_id = %s AND relation_kind = %s ORDER BY created_at",
            (document_id, RelationKind.VERSION_OF.value),
        )
        return [_row_to_edge(r) for r in await cur.fetchall()]

    async def list_for_document(self, document_id: UUID) -> list[LineageEdge]:
        """List all edges touching document."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM lineage_edge "
            "WHERE newer_document_id = %s OR older_document_id = %s ORDER BY created_at",
            (document_id, document_id),
        )
        return [_row_to_edge(r) for r in await cur.fetchall()]
