"""Version chain, lineage, audit trail and diff API resources."""

import falcon.asgi

from doclineage.application.use_cases.audit.list_audit_entries import ListAuditEntriesUseCase
from doclineage.application.use_cases.diff.get_diff import GetDiffUseCase
from doclineage.application.use_cases.lineage.get_lineage import GetLineageUseCase
from doclineage.application.use_cases.lineage.get_version_chain import GetVersionChainUseCase
from doclineage.domain.exceptions import NotFound, UnprocessableInput
from doclineage.interfaces.api.resources.serialization import (
    audit_entry_to_dict,
    diff_to_dict,
    document_to_dict,
    edge_to_dict,
    parse_uuid,
)


class VersionsResource:
    """GET /v1/documents/{document_id}/versions - version chain oldest to newest."""

    def __init__(self, get_version_chain: GetVersionChainUseCase) -> None:
        self._get_version_chain = get_version_chain

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        doc_id = parse_uuid(document_id)
        if not doc_id:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid UUID"}
            return
        try:
            chain = await self._get_version_chain.execute(doc_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
            return
        resp.status = falcon.HTTP_200
        resp.media = {"versions": [document_to_dict(d) for d in chain]}


class LineageResource:
    """GET /v1/documents/{document_id}/lineage - edges touching a document."""

    def __init__(self, get_lineage: GetLineageUseCase) -> None:
        self._get_lineage = get_lineage

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        doc_id = parse_uuid(document_id)
        if not doc_id:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid UUID"}
            return
        try:
            edges = await self._get_lineage.execute(doc_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
            return
        resp.status = falcon.HTTP_200
        resp.media = {"lineage": [edge_to_dict(e) for e in edges]}


class AuditResource:
    """GET /v1/documents/{document_id}/audit - audit trail of a document."""

    def __init__(self, list_audit_entries: ListAuditEntriesUseCase) -> None:
        self._list_audit_entries = list_audit_entries

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        doc_id = parse_uuid(document_id)
        if not doc_id:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid UUID"}
            return
        try:
            entries = await self._list_audit_entries.execute(doc_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
            return
        resp.status = falcon.HTTP_200
        resp.media = {"entries": [audit_entry_to_dict(e) for e in entries]}

class DiffResource:
    """GET /v1/documents/{document_id}/diff/{old_document_id} - line diff old -> new."""

    def __init__(self, get_diff: GetDiffUseCase) -> None:
        self._get_diff = get_diff

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
        old_document_id: str,
    ) -> None:
        new_id = parse_uuid(document_id)
        old_id = parse_uuid(old_document_id)
        if not new_id or not old_id:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid UUID"}
            return
        try:
            diff = await self._get_diff.execute(old_id, new_id)
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        except UnprocessableInput as e:
            resp.status = falcon.HTTP_422
            resp.media = {"error": str(e)}
            return
        resp.status = falcon.HTTP_200
        resp.media = diff_to_dict(diff)
