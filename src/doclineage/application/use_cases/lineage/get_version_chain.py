"""Get version chain use case."""

import logging
from typing import NoReturn
from uuid import UUID

from doclineage.application.ports import UnitOfWork
from doclineage.domain.entities import Document
from doclineage.domain.exceptions import InvariantViolation, NotFound

logger = logging.getLogger(__name__)

DEFAULT_MAX_CHAIN_LENGTH = 1000


class GetVersionChainUseCase:
    """Walk version_of edges both ways and return the chain oldest -> newest.

    The chain is linear. Revisiting a document, a chain longer than
    max_chain_length, a document with two successors or an edge to a missing
    document all mean the stored lineage is corrupt and raise
    InvariantViolation.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        max_chain_length: int = DEFAULT_MAX_CHAIN_LENGTH,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._max_chain_length = max_chain_length

    async def execute(self, document_id: UUID) -> list[Document]:
        async with self._uow_factory() as uow:
            document = await uow.documents.get_by_id(document_id)
            if not document:
                raise NotFound("Document", str(document_id))

            visited = {document.id}
            ancestors = await self._walk_back(uow, document, visited)
            descendants = await self._walk_forward(uow, document, visited)

        ancestors.reverse()
        return ancestors + [document] + descendants

    async def _walk_back(
        self, uow: UnitOfWork, start: Document, visited: set[UUID]
    ) -> list[Document]:
        chain: list[Document] = []
        current = start
        while True:
            edge = await uow.lineage.get_parent_edge(current.id)
            if not edge:
                return chain
            current = await self._step(uow, edge.older_document_id, visited)
            chain.append(current)

    async def _walk_forward(
        self, uow: UnitOfWork, start: Document, visited: set[UUID]
    ) -> list[Document]:
        chain: list[Document] = []
        current = start
        while True:
            edges = await uow.lineage.list_child_edges(current.id)
            if not edges:
                return chain
            if len(edges) > 1:
                self._fail(f"Document {current.id} has {len(edges)} successors")
            current = await self._step(uow, edges[0].newer_document_id, visited)
            chain.append(current)

    async def _step(self, uow: UnitOfWork, document_id: UUID, visited: set[UUID]) -> Document:
        if document_id in visited:
            self._fail(f"Lineage cycle through document {document_id}")
        if len(visited) >= self._max_chain_length:
            self._fail(f"Version chain exceeds {self._max_chain_length} documents")
        visited.add(document_id)
        document = await uow.documents.get_by_id(document_id)
        if not document:
            self._fail(f"Lineage edge points at missing document {document_id}")
        return document

    @staticmethod
    def _fail(message: str) -> NoReturn:
        logger.error("Lineage invariant violated: %s", message)
        raise InvariantViolation(message)
