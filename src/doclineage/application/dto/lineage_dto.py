"""Lineage DTOs."""

from dataclasses import dataclass

from doclineage.domain.entities import Document, LineageEdge


@dataclass
class VersionLinkOutput:
    """Result of confirming or manually setting a version link."""

    archived_document: Document
    promoted_document: Document
    edge: LineageEdge
