"""Repository ports."""

from doclineage.application.ports.repositories.audit_repository import AuditRepository
from doclineage.application.ports.repositories.candidate_repository import (
    CandidateRepository,
)
from doclineage.application.ports.repositories.diff_repository import DiffRepository
from doclineage.application.ports.repositories.document_repository import (
    DocumentRepository,
)
from doclineage.application.ports.repositories.lineage_repository import (
    LineageRepository,
)

__all__ = [
    "AuditRepository",
    "CandidateRepository",
    "DiffRepository",
    "DocumentRepository",
    "LineageRepository",
]
