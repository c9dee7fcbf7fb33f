"""JSON shapes for API responses."""

from uuid import UUID

from doclineage.application.dto.lineage_dto import VersionLinkOutput
from doclineage.domain.entities import (
    AuditEntry,
    Document,
    DocumentDiff,
    LineageEdge,
    ReplacementCandidate,
)


def parse_uuid(value: str | None) -> UUID | None:
    """Parse UUID, returning None for missing or malformed values."""
    if not value:
        return None
    try:
        return UUID(str(value))
    except ValueError:
        return None


def document_to_dict(d: Document) -> dict:
    return {
        "id": str(d.id),
        "name": d.name,
        "storage_path": d.storage_path,
        "version": d.version,
        "status": d.status.value,
        "folder": d.folder,
        "category": d.category,
        "created_at": d.created_at.isoformat(),
        "updated_at": d.updated_at.isoformat(),
    }


def candidate_to_dict(c: ReplacementCandidate) -> dict:
    return {
        "id": str(c.id),
        "new_document_id": str(c.new_document_id),
        "candidate_document_id": str(c.candidate_document_id),
        "similarity_score": c.similarity_score,
        "status": c.status.value,
        "created_at": c.created_at.isoformat(),
        "resolved_at": c.resolved_at.isoformat() if c.resolved_at else None,
    }


def edge_to_dict(e: LineageEdge) -> dict:
    return {
        "id": str(e.id),
        "newer_document_id": str(e.newer_document_id),
        "older_document_id": str(e.older_document_id),
        "relation_kind": e.relation_kind.value,
        "confidence": e.confidence,
        "created_at": e.created_at.isoformat(),
    }


def audit_entry_to_dict(a: AuditEntry) -> dict:
    return {
        "id": str(a.id),
        "entity_type": a.entity_type,
        "entity_id": str(a.entity_id),
        "action": a.action,
        "details": a.details,
        "created_at": a.created_at.isoformat(),
    }


def diff_to_dict(d: DocumentDiff) -> dict:
    return {
        "old_document_id": str(d.old_document_id),
        "new_document_id": str(d.new_document_id),
        "hunks": [h.to_dict() for h in d.hunks],
        "created_at": d.created_at.isoformat(),
    }


def version_link_to_dict(result: VersionLinkOutput) -> dict:
    return {
        "message": (
            f"Document set as v{result.promoted_document.version}, previous version archived"
        ),
        "archived_document": document_to_dict(result.archived_document),
        "promoted_document": document_to_dict(result.promoted_document),
        "edge": edge_to_dict(result.edge),
    }
