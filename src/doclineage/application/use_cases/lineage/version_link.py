"""Version link transition shared by confirm and manual override.

Archive the old version, promote the new one, append the version_of edge and
cache the diff. Callers run this inside one unit of work so that either all of
it is committed or none of it is.
"""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from doclineage.application.dto.lineage_dto import VersionLinkOutput
from doclineage.application.ports import UnitOfWork
from doclineage.domain.entities import Document, DocumentDiff, LineageEdge
from doclineage.domain.exceptions import Conflict, NotFound, SelfReference
from doclineage.domain.services import compute_line_diff
from doclineage.domain.value_objects import DocumentStatus, RelationKind

logger = logging.getLogger(__name__)

MANUAL_CONFIDENCE = 1.0


async def load_link_pair(
    uow: UnitOfWork, new_document_id: UUID, old_document_id: UUID
) -> tuple[Document, Document]:
    """Lock and re-validate both documents. Returns (new, old)."""
    if new_document_id == old_document_id:
        raise SelfReference("A document cannot replace itself")

    await uow.documents.lock([new_document_id, old_document_id])

    new_doc = await uow.documents.get_by_id(new_document_id)
    if not new_doc:
        raise NotFound("Document", str(new_document_id))
    old_doc = await uow.documents.get_by_id(old_document_id)
    if not old_doc:
        raise NotFound("Document", str(old_document_id))

    if not old_doc.is_live:
        raise Conflict(f"Document {old_document_id} is not the live version ({old_doc.status})")
    if await uow.lineage.get_parent_edge(new_document_id):
        raise Conflict(f"Document {new_document_id} already has a previous version")
    if await uow.lineage.list_child_edges(new_document_id):
        raise Conflict(f"Document {new_document_id} has already been replaced")

    return new_doc, old_doc


async def apply_version_link(
    uow: UnitOfWork, new_doc: Document, old_doc: Document, confidence: float
) -> VersionLinkOutput:
    """Archive old_doc, promote new_doc to old_doc.version + 1, record the edge."""
    now = datetime.now(UTC)

    await uow.documents.set_version_and_status(old_doc.id, old_doc.version, DocumentStatus.ARCHIVED)
    await uow.documents.set_version_and_status(
        new_doc.id, old_doc.version + 1, DocumentStatus.ACTIVE
    )

    edge = LineageEdge(
        id=uuid4(),
        newer_document_id=new_doc.id,
        older_document_id=old_doc.id,
        relation_kind=RelationKind.VERSION_OF,
        confidence=confidence,
        created_at=now,
    )
    await uow.lineage.create(edge)

    old_text = await uow.documents.get_full_text(old_doc.id)
    new_text = await uow.documents.get_full_text(new_doc.id)
    if old_text and new_text:
        await uow.diffs.upsert(
            DocumentDiff(
                old_document_id=old_doc.id,
                new_document_id=new_doc.id,
                hunks=compute_line_diff(old_text, new_text),
                created_at=now,
            )
        )
    else:
        logger.debug("Skipping diff cache for %s -> %s: full text missing", old_doc.id, new_doc.id)

    archived = await uow.documents.get_by_id(old_doc.id)
    promoted = await uow.documents.get_by_id(new_doc.id)
    logger.info(
        "Linked document %s as v%d of %s (confidence %.2f)",
        new_doc.id,
        old_doc.version + 1,
        old_doc.id,
        confidence,
    )
    return VersionLinkOutput(archived_document=archived, promoted_document=promoted, edge=edge)
