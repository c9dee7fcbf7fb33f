"""Name similarity heuristic for spotting revised versions of a document."""

import re

from rapidfuzz.distance import Levenshtein

# A name match must score above this to become a replacement candidate.
SIMILARITY_THRESHOLD = 0.55

_EXTENSION = re.compile(r"\.(pdf|docx)$", re.IGNORECASE)
_SEPARATORS = re.compile(r"[-_]+")
_NOISE_TOKENS = re.compile(
    r"\b(v[0-9]+|version\s*[0-9]+|[0-9]{4}|final|revised|draft|new|updated|old|copy|backup)\b",
    re.IGNORECASE,
)
_WHITESPACE = re.compile(r"\s+")


def normalize_name(name: str) -> str:
    """Lowercase, drop extension and version/noise markers, squash separators."""
    normalized = _EXTENSION.sub("", name.lower())
    # Separators first: "_" is a word character, so "contract_v2" would hide "v2".
    normalized = _SEPARATORS.sub(" ", normalized)
    normalized = _NOISE_TOKENS.sub("", normalized)
    return _WHITESPACE.sub(" ", normalized).strip()


def name_similarity(name_a: str, name_b: str) -> float:
    """Score in [0, 1]; 1.0 when the normalized names are equal."""
    a = normalize_name(name_a)
    b = normalize_name(name_b)
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    distance = Levenshtein.distance(a, b)
    return 1 - distance / max(len(a), len(b))
