"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg_pool import AsyncConnectionPool

from doclineage.domain.exceptions import StoreError
from doclineage.infrastructure.persistence.postgres.audit_repository import (
    PostgresAuditRepository,
)
from doclineage.infrastructure.persistence.postgres.candidate_repository import (
    PostgresCandidateRepository,
)
from doclineage.infrastructure.persistence.postgres.diff_repository import (
    PostgresDiffRepository,
)
from doclineage.infrastructure.persistence.postgres.document_repository import (
    PostgresDocumentRepository,
)
from doclineage.infrastructure.persistence.postgres.lineage_repository import (
    PostgresLineageRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._documents = PostgresDocumentRepository(self._conn)
        self._lineage = PostgresLineageRepository(self._conn)
        self._candidates = PostgresCandidateRepository(self._conn)
        self._diffs = PostgresDiffRepository(self._conn)
        self._audit = PostgresAuditRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def documents(self) -> PostgresDocumentRepository:
        return self._documents

    @property
    def lineage(self) -> PostgresLineageRepository:
        return self._lineage

    @property
    def candidates(self) -> PostgresCandidateRepository:
        return self._candidates

    @property
    def diffs(self) -> PostgresDiffRepository:
        return self._diffs

    @property
    def audit(self) -> PostgresAuditRepository:
        return self._audit

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    Database errors not already mapped to a domain exception surface as
    StoreError.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        try:
            async with uow:
                try:
                    yield uow
                    await uow.commit()
                except BaseException:
                    await uow.rollback()
                    raise
        except psycopg.Error as e:
            raise StoreError(str(e)) from e

    return factory
