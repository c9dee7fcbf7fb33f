"""Application entry point and composition root."""

import logging

import falcon
import falcon.asgi

from doclineage import __version__
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
from doclineage.config import Settings, get_settings
from doclineage.infrastructure.persistence.postgres.connection import create_pool
from doclineage.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from doclineage.infrastructure.text_extraction.file_text_extractor import FileTextExtractor
from doclineage.interfaces.api.middleware.cors import CORSMiddleware
from doclineage.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
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

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def handle_unexpected_error(req, resp, ex, params):
    """Log unhandled errors (store failures, lineage corruption) and answer 500."""
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_doclineage_app(settings: Settings | None = None) -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    pool = create_pool(settings.database_url)
    uow_factory = create_uow_factory(pool)
    text_extractor = FileTextExtractor(settings.storage_root)

    confirm_replacement = ConfirmReplacementUseCase(unit_of_work_factory=uow_factory)
    detect_candidate = DetectCandidateUseCase(
        unit_of_work_factory=uow_factory,
        similarity_threshold=settings.similarity_threshold,
        confirm_replacement=confirm_replacement,
        auto_confirm_threshold=settings.auto_confirm_threshold,
    )
    dismiss_replacement = DismissReplacementUseCase(unit_of_work_factory=uow_factory)
    manual_link = ManualLinkUseCase(unit_of_work_factory=uow_factory)
    get_candidate = GetCandidateForDocumentUseCase(unit_of_work_factory=uow_factory)
    list_pending = ListPendingCandidatesUseCase(unit_of_work_factory=uow_factory)
    get_diff = GetDiffUseCase(unit_of_work_factory=uow_factory, text_extractor=text_extractor)
    get_version_chain = GetVersionChainUseCase(
        unit_of_work_factory=uow_factory,
        max_chain_length=settings.max_chain_length,
    )
    get_lineage = GetLineageUseCase(unit_of_work_factory=uow_factory)
    list_audit_entries = ListAuditEntriesUseCase(unit_of_work_factory=uow_factory)

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
        ],
    )
    app.add_error_handler(Exception, handle_unexpected_error)

    health_resource = HealthResource()
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route(
        "/v1/documents/pending-replacements", PendingReplacementsResource(list_pending)
    )
    app.add_route(
        "/v1/documents/{document_id}/detect-replacement",
        DetectReplacementResource(detect_candidate),
    )
    app.add_route(
        "/v1/documents/{document_id}/confirm-replacement",
        ConfirmReplacementResource(get_candidate, confirm_replacement),
    )
    app.add_route(
        "/v1/documents/{document_id}/dismiss-replacement",
        DismissReplacementResource(get_candidate, dismiss_replacement),
    )
    app.add_route(
        "/v1/documents/{document_id}/set-replacement", SetReplacementResource(manual_link)
    )
    app.add_route(
        "/v1/documents/{document_id}/diff/{old_document_id}", DiffResource(get_diff)
    )
    app.add_route("/v1/documents/{document_id}/versions", VersionsResource(get_version_chain))
    app.add_route("/v1/documents/{document_id}/lineage", LineageResource(get_lineage))
    app.add_route("/v1/documents/{document_id}/audit", AuditResource(list_audit_entries))
    return app


def main() -> None:
    """CLI entry point - run the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings)
    logger.info("doclineage v%s starting (%s)", __version__, settings.environment)
    uvicorn.run(create_doclineage_app(settings), host="0.0.0.0", port=8000)
