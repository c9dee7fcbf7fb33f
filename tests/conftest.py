"""Pytest fixtures for doclineage tests."""

from __future__ import annotations

import asyncio
import copy
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID, uuid4

import pytest

from doclineage.domain.entities import (
    AuditEntry,
    Document,
    DocumentDiff,
    LineageEdge,
    ReplacementCandidate,
)
from doclineage.domain.exceptions import Conflict
from doclineage.domain.value_objects import (
    CandidateStatus,
    DocumentScope,
    DocumentStatus,
    RelationKind,
)


# --- Fake repositories ---


class FakeDocumentRepository:
    """In-memory document repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Document] = {}

    def add(self, document: Document) -> Document:
        self._by_id[document.id] = document
        return document

    async def get_by_id(self, document_id: UUID) -> Document | None:
        doc = self._by_id.get(document_id)
        return replace(doc) if doc else None

    async def list_live(self, scope: DocumentScope) -> list[Document]:
        return [
            replace(d)
            for d in self._by_id.values()
            if d.is_live
            and d.folder == scope.folder
            and d.category == scope.category
        ]

    async def lock(self, document_ids: Sequence[UUID]) -> None:
        pass

    async def set_version_and_status(
        self, document_id: UUID, version: int, status: DocumentStatus
    ) -> None:
        doc = self._by_id[document_id]
        doc.version = version
        doc.status = status
        doc.updated_at = datetime.now(UTC)

    async def get_full_text(self, document_id: UUID) -> str | None:
        doc = self._by_id.get(document_id)
        return doc.full_text if doc else None

    async def cache_full_text(self, document_id: UUID, text: str) -> None:
        self._by_id[document_id].full_text = text


class FakeLineageRepository:
    """In-memory lineage edge repository."""

    def __init__(self) -> None:
        self.edges: list[LineageEdge] = []

    def add(self, newer: UUID, older: UUID, confidence: float = 1.0) -> LineageEdge:
        edge = LineageEdge(
            id=uuid4(),
            newer_document_id=newer,
            older_document_id=older,
            relation_kind=RelationKind.VERSION_OF,
            confidence=confidence,
            created_at=datetime.now(UTC),
        )
        self.edges.append(edge)
        return edge

    async def create(self, edge: LineageEdge) -> LineageEdge:
        if any(e.newer_document_id == edge.newer_document_id for e in self.edges):
            raise Conflict("duplicate outgoing edge")
        self.edges.append(edge)
        return edge

    async def get_parent_edge(self, document_id: UUID) -> LineageEdge | None:
        return next((e for e in self.edges if e.newer_document_id == document_id), None)

    async def list_child_edges(self, document_id: UUID) -> list[LineageEdge]:
        return [e for e in self.edges if e.older_document_id == document_id]

    async def list_for_document(self, document_id: UUID) -> list[LineageEdge]:
        return [
            e
            for e in self.edges
            if document_id in (e.newer_document_id, e.older_document_id)
        ]


class FakeCandidateRepository:
    """In-memory candidate repository. get_by_id yields to the loop so that
    concurrent transitions interleave before the compare-and-swap."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, ReplacementCandidate] = {}

    def add(self, candidate: ReplacementCandidate) -> ReplacementCandidate:
        self._by_id[candidate.id] = candidate
        return candidate

    async def get_by_id(self, candidate_id: UUID) -> ReplacementCandidate | None:
        await asyncio.sleep(0)
        c = self._by_id.get(candidate_id)
        return replace(c) if c else None

    async def get_pending_for_document(
        self, new_document_id: UUID
    ) -> ReplacementCandidate | None:
        c = next(
            (
                c
                for c in self._by_id.values()
                if c.new_document_id == new_document_id and c.status == CandidateStatus.PENDING
            ),
            None,
        )
        return replace(c) if c else None

    async def list_pending(self) -> list[ReplacementCandidate]:
        return [replace(c) for c in self._by_id.values() if c.status == CandidateStatus.PENDING]

    async def create(self, candidate: ReplacementCandidate) -> ReplacementCandidate:
        if await self.get_pending_for_document(candidate.new_document_id):
            raise Conflict("pending candidate exists")
        self._by_id[candidate.id] = replace(candidate)
        return candidate

    async def resolve(
        self, candidate_id: UUID, status: CandidateStatus, resolved_at: datetime
    ) -> bool:
        c = self._by_id.get(candidate_id)
        if not c or c.status != CandidateStatus.PENDING:
            return False
        c.status = status
        c.resolved_at = resolved_at
        return True

    def all(self) -> list[ReplacementCandidate]:
        return list(self._by_id.values())


class FakeDiffRepository:
    """In-memory diff cache with counters."""

    def __init__(self) -> None:
        self._by_key: dict[tuple[UUID, UUID], DocumentDiff] = {}
        self.upserts = 0

    async def get(self, old_document_id: UUID, new_document_id: UUID) -> DocumentDiff | None:
        return self._by_key.get((old_document_id, new_document_id))

    async def upsert(self, diff: DocumentDiff) -> DocumentDiff:
        self.upserts += 1
        self._by_key[(diff.old_document_id, diff.new_document_id)] = diff
        return diff


class FakeAuditRepository:
    """In-memory audit log."""

    def __init__(self) -> None:
        self.entries: list[AuditEntry] = []

    async def record(
        self,
        entity_type: str,
        entity_id: UUID,
        action: str,
        details: dict[str, Any] | None = None,
    ) -> AuditEntry:
        entry = AuditEntry(
            id=uuid4(),
            entity_type=entity_type,
            entity_id=entity_id,
            action=action,
            created_at=datetime.now(UTC),
            details=details or {},
        )
        self.entries.append(entry)
        return entry

    async def list_for_entity(self, entity_type: str, entity_id: UUID) -> list[AuditEntry]:
        return [
            e for e in self.entries if e.entity_type == entity_type and e.entity_id == entity_id
        ]

    def actions(self) -> list[str]:
        return [e.action for e in self.entries]


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories.

    snapshot/restore stand in for a database transaction: the factory fixture
    restores the snapshot when the unit of work exits with an exception.
    """

    def __init__(self) -> None:
        self.documents = FakeDocumentRepository()
        self.lineage = FakeLineageRepository()
        self.candidates = FakeCandidateRepository()
        self.diffs = FakeDiffRepository()
        self.audit = FakeAuditRepository()
        self.lock = asyncio.Lock()

    def _repositories(self) -> tuple:
        return (self.documents, self.lineage, self.candidates, self.diffs, self.audit)

    def snapshot(self) -> list[dict[str, Any]]:
        return [copy.deepcopy(vars(repo)) for repo in self._repositories()]

    def restore(self, state: list[dict[str, Any]]) -> None:
        for repo, saved in zip(self._repositories(), state):
            vars(repo).clear()
            vars(repo).update(saved)

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


# --- Builders ---


_BASE_TIME = datetime(2025, 1, 1, tzinfo=UTC)


def make_document(
    name: str,
    full_text: str | None = "text",
    *,
    version: int = 1,
    status: DocumentStatus = DocumentStatus.ACTIVE,
    folder: str | None = None,
    category: str | None = "policy",
    storage_path: str | None = None,
    age_days: int = 0,
) -> Document:
    """Build a document; larger age_days means modified longer ago."""
    ts = _BASE_TIME - timedelta(days=age_days)
    return Document(
        id=uuid4(),
        name=name,
        storage_path=storage_path or f"docs/{name}",
        version=version,
        status=status,
        created_at=ts,
        updated_at=ts,
        full_text=full_text,
        folder=folder,
        category=category,
    )


def make_candidate(
    new_document_id: UUID,
    candidate_document_id: UUID,
    score: float = 0.9,
    status: CandidateStatus = CandidateStatus.PENDING,
) -> ReplacementCandidate:
    return ReplacementCandidate(
        id=uuid4(),
        new_document_id=new_document_id,
        candidate_document_id=candidate_document_id,
        similarity_score=score,
        status=status,
        created_at=datetime.now(UTC),
    )


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory yielding the shared FakeUnitOfWork.

    Units of work run one at a time, like transactions holding row locks, and
    changes are undone when the block raises.
    """

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        async with fake_uow.lock:
            state = fake_uow.snapshot()
            try:
                yield fake_uow
            except BaseException:
                fake_uow.restore(state)
                raise

    return _factory


@pytest.fixture
def mock_text_extractor():
    """AsyncMock for TextExtractor - returns None (nothing extractable) by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.extract.return_value = None
    return mock
