"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from doclineage.application.ports.repositories import (
    AuditRepository,
    CandidateRepository,
    DiffRepository,
    DocumentRepository,
    LineageRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def documents(self) -> DocumentRepository: ...

    @property
    def lineage(self) -> LineageRepository: ...

    @property
    def candidates(self) -> CandidateRepository: ...

    @property
    def diffs(self) -> DiffRepository: ...

    @property
    def audit(self) -> AuditRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
