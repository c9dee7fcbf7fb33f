"""Fixtures for API tests."""

import falcon.asgi
import pytest

from doclineage.application.use_cases.audit.list_audit_entries import ListAuditEntriesUseCase
from doclineage.application.use_cases.detection.detect_candidate import DetectCandidateUseCase
from doclineage.application.use_cases.detection.get_candidate import (
    GetCandidateForDocumentUseCase,
)
from doclineage.application.use_cases.detection.list_pending_candidates import (
    ListPendingCandidatesUseCase,
)
from doclineage.application.use_cases.diff.get_diff import GetDiffUseCase
from doclineage.application.use_cases.lineage.confirm_replacement import (
    ConfirmReplacementUseCase,
)
from doclineage.application.use_cases.lineage.dismiss_replacement import (
    DismissReplacementUseCase,
)
from doclineage.application.use_cases.lineage.get_lineage import GetLineageUseCase
from doclineage.application.use_cases.lineage.get_version_chain import GetVersionChainUseCase
from doclineage.application.use_cases.lineage.manual_link import ManualLinkUseCase


@pytest.fixture
def app(uow_factory, mock_text_extractor):
    """Falcon ASGI app with API resources over the in-memory UoW."""
    from doclineage.interfaces.api.resources.health import HealthResource
    from doclineage.interfaces.api.resources.replacements import (
        ConfirmReplacementResource,
        DetectReplacementResource,
        DismissReplacementResource,
        PendingReplacementsResource,
        SetReplacementResource,
    )
    from doclineage.interfaces.api.resources.versions import (
        AuditResource,
        DiffResource,
        LineageResource,
        VersionsResource,
    )

    confirm_replacement = ConfirmReplacementUseCase(unit_of_work_factory=uow_factory)
    get_candidate = GetCandidateForDocumentUseCase(unit_of_work_factory=uow_factory)

    app = falcon.asgi.App()
    app.add_route("/v1/health", HealthResource())
    app.add_route(
        "/v1/documents/pending-replacements",
        PendingReplacementsResource(ListPendingCandidatesUseCase(uow_factory)),
    )
    app.add_route(
        "/v1/documents/{document_id}/detect-replacement",
        DetectReplacementResource(DetectCandidateUseCase(uow_factory)),
    )
    app.add_route(
        "/v1/documents/{document_id}/confirm-replacement",
        ConfirmReplacementResource(get_candidate, confirm_replacement),
    )
    app.add_route(
        "/v1/documents/{document_id}/dismiss-replacement",
        DismissReplacementResource(get_candidate, DismissReplacementUseCase(uow_factory)),
    )
    app.add_route(
        "/v1/documents/{document_id}/set-replacement",
        SetReplacementResource(ManualLinkUseCase(uow_factory)),
    )
    app.add_route(
        "/v1/documents/{document_id}/diff/{old_document_id}",
        DiffResource(GetDiffUseCase(uow_factory, mock_text_extractor)),
    )
    app.add_route(
        "/v1/documents/{document_id}/versions",
        VersionsResource(GetVersionChainUseCase(uow_factory)),
    )
    app.add_route(
        "/v1/documents/{document_id}/lineage",
        LineageResource(GetLineageUseCase(uow_factory)),
    )
    app.add_route(
        "/v1/documents/{document_id}/audit",
        AuditResource(ListAuditEntriesUseCase(uow_factory)),
    )
    return app


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)
