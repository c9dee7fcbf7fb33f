"""Domain value objects."""

from doclineage.domain.value_objects.candidate_status import CandidateStatus
from doclineage.domain.value_objects.diff_hunk import DiffHunk, HunkKind
from doclineage.domain.value_objects.document_scope import DocumentScope
from doclineage.domain.value_objects.document_status import DocumentStatus
from doclineage.domain.value_objects.relation_kind import RelationKind

__all__ = [
    "CandidateStatus",
    "DiffHunk",
    "DocumentScope",
    "DocumentStatus",
    "HunkKind",
    "RelationKind",
]
