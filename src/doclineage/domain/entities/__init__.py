"""Domain entities."""

from doclineage.domain.entities.audit_entry import AuditEntry
from doclineage.domain.entities.document import Document
from doclineage.domain.entities.document_diff import DocumentDiff
from doclineage.domain.entities.lineage_edge import LineageEdge
from doclineage.domain.entities.replacement_candidate import ReplacementCandidate

__all__ = [
    "AuditEntry",
    "Document",
    "DocumentDiff",
    "LineageEdge",
    "ReplacementCandidate",
]
