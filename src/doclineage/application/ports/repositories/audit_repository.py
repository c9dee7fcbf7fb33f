"""Audit repository port."""

from typing import Any, Protocol
from uuid import UUID

from doclineage.domain.entities import AuditEntry


class AuditRepository(Protocol):
    """Port for the lineage audit trail."""

    async def record(
        self,
        entity_type: str,
        entity_id: UUID,
        action: str,
        details: dict[str, Any] | None = None,
    ) -> AuditEntry: ...

    async def list_for_entity(self, entity_type: str, entity_id: UUID) -> list[AuditEntry]: ...
