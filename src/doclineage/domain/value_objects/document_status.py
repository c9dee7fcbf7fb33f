"""Document lifecycle status."""

from enum import StrEnum


class DocumentStatus(StrEnum):
    """Lifecycle status of a document. Only ACTIVE is the live version."""

    ACTIVE = "active"
    ARCHIVED = "archived"
    SUPERSEDED = "superseded"
