"""Lineage edge repository port."""

from typing import Protocol
from uuid import UUID

from doclineage.domain.entities import LineageEdge


class LineageRepository(Protocol):
    """Port for version_of edges."""

    async def create(self, edge: LineageEdge) -> LineageEdge: ...

    async def get_parent_edge(self, document_id: UUID) -> LineageEdge | None:
        """Outgoing version_of edge (document -> its previous version)."""
        ...

    async def list_child_edges(self, document_id: UUID) -> list[LineageEdge]:
        """Edges of documents that are a version_of this document."""
        ...

    async def list_for_document(self, document_id: UUID) -> list[LineageEdge]: ...
