"""Pure domain services: line diff and name similarity."""

from doclineage.domain.services.line_diff import MAX_DIFF_LINES, compute_line_diff
from doclineage.domain.services.name_similarity import (
    SIMILARITY_THRESHOLD,
    name_similarity,
    normalize_name,
)

__all__ = [
    "MAX_DIFF_LINES",
    "SIMILARITY_THRESHOLD",
    "compute_line_diff",
    "name_similarity",
    "normalize_name",
]
