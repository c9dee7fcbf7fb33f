"""Audit entry entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass
class AuditEntry:
    """Record of a lineage action (detection, confirmation, dismissal)."""

    id: UUID
    entity_type: str
    entity_id: UUID
    action: str
    created_at: datetime
    details: dict[str, Any] = field(default_factory=dict)
