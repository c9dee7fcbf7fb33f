"""Lineage edge entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from doclineage.domain.value_objects import RelationKind


@dataclass(frozen=True)
class LineageEdge:
    """Immutable edge: newer document is a version of older document."""

    id: UUID
    newer_document_id: UUID
    older_document_id: UUID
    relation_kind: RelationKind
    confidence: float
    created_at: datetime
