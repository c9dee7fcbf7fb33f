"""Initial schema - document, lineage_edge, replacement_candidate, document_diff, audit_log.

Revision ID: 001
Revises:
Create Date: 2025-02-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "document",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(512), nullable=False),
        sa.Column("storage_path", sa.String(1024), nullable=False),
        sa.Column("full_text", sa.Text(), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        sa.Column("folder", sa.String(512), nullable=True),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("version >= 1", name="ck_document_version_positive"),
        sa.CheckConstraint(
            "status IN ('active', 'archived', 'superseded')", name="ck_document_status"
        ),
    )
    op.create_index("ix_document_status_category", "document", ["status", "category"])

    op.create_table(
        "lineage_edge",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "newer_document_id",
            sa.UUID(),
            sa.ForeignKey("document.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column(
            "older_document_id",
            sa.UUID(),
            sa.ForeignKey("document.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("relation_kind", sa.String(20), nullable=False),
        sa.Column("confidence", sa.Float(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("newer_document_id <> older_document_id", name="ck_lineage_no_self"),
        sa.CheckConstraint("confidence >= 0 AND confidence <= 1", name="ck_lineage_confidence"),
    )
    # Version chains are linear: one predecessor and one successor per document.
    op.create_index(
        "ux_lineage_edge_newer",
        "lineage_edge",
        ["newer_document_id", "relation_kind"],
        unique=True,
    )
    op.create_index(
        "ux_lineage_edge_older",
        "lineage_edge",
        ["older_document_id", "relation_kind"],
        unique=True,
    )

    op.create_table(
        "replacement_candidate",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "new_document_id",
            sa.UUID(),
            sa.ForeignKey("document.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "candidate_document_id",
            sa.UUID(),
            sa.ForeignKey("document.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("similarity_score", sa.Float(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("resolved_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint(
            "status IN ('pending', 'confirmed', 'dismissed')", name="ck_candidate_status"
        ),
    )
    op.create_index(
        "ux_replacement_candidate_pending",
        "replacement_candidate",
        ["new_document_id"],
        unique=True,
        postgresql_where=sa.text("status = 'pending'"),
    )

    op.create_table(
        "document_diff",
        sa.Column(
            "old_document_id",
            sa.UUID(),
            sa.ForeignKey("document.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "new_document_id",
            sa.UUID(),
            sa.ForeignKey("document.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("hunks", JSONB(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "audit_log",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("entity_type", sa.String(50), nullable=False),
        sa.Column("entity_id", sa.UUID(), nullable=False),
        sa.Column("action", sa.String(50), nullable=False),
        sa.Column("details", JSONB(), nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_audit_log_entity", "audit_log", ["entity_type", "entity_id"])


def downgrade() -> None:
    op.drop_index("ix_audit_log_entity", table_name="audit_log")
    op.drop_table("audit_log")
    op.drop_table("document_diff")
    op.drop_index("ux_replacement_candidate_pending", table_name="replacement_candidate")
    op.drop_table("replacement_candidate")
    op.drop_index("ux_lineage_edge_older", table_name="lineage_edge")
    op.drop_index("ux_lineage_edge_newer", table_name="lineage_edge")
    op.drop_table("lineage_edge")
    op.drop_index("ix_document_status_category", table_name="document")
    op.drop_table("document")
