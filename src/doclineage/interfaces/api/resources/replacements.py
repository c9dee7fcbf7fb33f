"""Replacement candidate API resources."""

import falcon.asgi

from doclineage.application.use_cases.detection.detect_candidate import DetectCandidateUseCase
from doclineage.application.use_cases.detection.get_candidate import (
    GetCandidateForDocumentUseCase,
)
from doclineage.application.use_cases.detection.list_pending_candidates import (
    ListPendingCandidatesUseCase,
)
from doclineage.application.use_cases.lineage.confirm_replacement import (
    ConfirmReplacementUseCase,
)
from doclineage.application.use_cases.lineage.dismiss_replacement import (
    DismissReplacementUseCase,
)
from doclineage.application.use_cases.lineage.manual_link import ManualLinkUseCase
from doclineage.domain.exceptions import Conflict, NotFound, SelfReference
from doclineage.interfaces.api.resources.serialization import (
    candidate_to_dict,
    parse_uuid,
    version_link_to_dict,
)


class DetectReplacementResource:
    """POST /v1/documents/{document_id}/detect-replacement - run candidate detection."""

    def __init__(self, detect_candidate: DetectCandidateUseCase) -> None:
        self._detect_candidate = detect_candidate

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        doc_id = parse_uuid(document_id)
        if not doc_id:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid UUID"}
            return
        try:
            candidate = await self._detect_candidate.execute(doc_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
            return
        except Conflict as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}
            return
        resp.status = falcon.HTTP_200
        resp.media = {"candidate": candidate_to_dict(candidate) if candidate else None}


class PendingReplacementsResource:
    """GET /v1/documents/pending-replacements - list undecided suggestions."""

    def __init__(self, list_pending: ListPendingCandidatesUseCase) -> None:
        self._list_pending = list_pending

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        pending = await self._list_pending.execute()
        resp.status = falcon.HTTP_200
        resp.media = {"pending": [candidate_to_dict(c) for c in pending]}


class ConfirmReplacementResource:
    """POST /v1/documents/{document_id}/confirm-replacement - accept the pending suggestion."""

    def __init__(
        self,
        get_candidate: GetCandidateForDocumentUseCase,
        confirm_replacement: ConfirmReplacementUseCase,
    ) -> None:
        self._get_candidate = get_candidate
        self._confirm_replacement = confirm_replacement

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        doc_id = parse_uuid(document_id)
        if not doc_id:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid UUID"}
            return
        try:
            candidate = await self._get_candidate.execute(doc_id)
            result = await self._confirm_replacement.execute(candidate.id)
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        except Conflict as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}
            return
        resp.status = falcon.HTTP_200
        resp.media = version_link_to_dict(result)


class DismissReplacementResource:
    """POST /v1/documents/{document_id}/dismiss-replacement - reject the pending suggestion."""

    def __init__(
        self,
        get_candidate: GetCandidateForDocumentUseCase,
        dismiss_replacement: DismissReplacementUseCase,
    ) -> None:
        self._get_candidate = get_candidate
        self._dismiss_replacement = dismiss_replacement

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        doc_id = parse_uuid(document_id)
        if not doc_id:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid UUID"}
            return
        try:
            candidate = await self._get_candidate.execute(doc_id)
            dismissed = await self._dismiss_replacement.execute(candidate.id)
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        except Conflict as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}
            return
        resp.status = falcon.HTTP_200
        resp.media = {
            "message": "Replacement suggestion dismissed",
            "candidate": candidate_to_dict(dismissed),
        }


class SetReplacementResource:
    """POST /v1/documents/{document_id}/set-replacement - operator picks the old version."""

    def __init__(self, manual_link: ManualLinkUseCase) -> None:
        self._manual_link = manual_link

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        new_id = parse_uuid(document_id)
        if not new_id:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid UUID"}
            return
        try:
            body = await req.get_media()
            old_id = parse_uuid(body["old_document_id"])
        except (KeyError, TypeError, falcon.MediaNotFoundError, falcon.MediaMalformedError):
            old_id = None
        if not old_id:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "old_document_id is required"}
            return

        try:
            result = await self._manual_link.execute(new_id, old_id)
        except SelfReference as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        except Conflict as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}
            return
        resp.status = falcon.HTTP_200
        resp.media = version_link_to_dict(result)
