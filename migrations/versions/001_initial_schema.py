"""Initial database schema

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers
revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    # Create policy_acceptances table
    op.create_table(
        "policy_acceptances",
        sa.Column("acceptance_id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("policy_key", sa.String(100), nullable=False),
        sa.Column("policy_version", sa.String(20), nullable=False),
        sa.Column("ip_hash", sa.String(64), nullable=True),
        sa.Column("user_agent", sa.Text, nullable=True),
        sa.Column(
            "accepted_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        *_timestamps(),
        sa.UniqueConstraint(
            "user_id", "policy_key", "policy_version", name="uq_policy_acceptance_user_policy"
        ),
    )
    op.create_index("idx_policy_acceptance_user", "policy_acceptances", ["user_id"])

    # Create screening_consents table
    op.create_table(
        "screening_consents",
        sa.Column("consent_id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("booking_id", sa.String(255), nullable=True),
        sa.Column("consent_type", sa.String(20), nullable=False),
        sa.Column("policy_key", sa.String(100), nullable=False),
        sa.Column("policy_version", sa.String(20), nullable=False),
        sa.Column("ip_hash", sa.String(64), nullable=True),
        sa.Column("user_agent", sa.Text, nullable=True),
        sa.Column(
            "consented_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        *_timestamps(),
        sa.UniqueConstraint(
            "user_id",
            "booking_id",
            "consent_type",
            "policy_version",
            name="uq_screening_consent_user_booking_type",
        ),
    )
    op.create_index("idx_screening_consent_user", "screening_consents", ["user_id"])
    op.create_index(
        "uq_screening_consent_general",
        "screening_consents",
        ["user_id", "consent_type", "policy_version"],
        unique=True,
        sqlite_where=sa.text("booking_id IS NULL"),
        postgresql_where=sa.text("booking_id IS NULL"),
    )

    # Create renter_profiles table
    op.create_table(
        "renter_profiles",
        sa.Column("renter_id", sa.String(255), primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("full_name", sa.String(255), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("drivers_license_number", sa.String(50), nullable=True),
        sa.Column("drivers_license_state", sa.String(10), nullable=True),
        *_timestamps(),
    )
    op.create_index("idx_renter_profile_user", "renter_profiles", ["user_id"])

    # Create renter_screenings table
    op.create_table(
        "renter_screenings",
        sa.Column("screening_id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("renter_id", sa.String(255), nullable=False),
        sa.Column("booking_id", sa.String(255), nullable=True),
        sa.Column("screening_type", sa.String(20), nullable=False),
        sa.Column("provider", sa.String(50), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="requested"),
        sa.Column("provider_ref", sa.String(255), nullable=True),
        sa.Column("result", sa.String(20), nullable=True),
        sa.Column("risk_level", sa.String(20), nullable=True),
        sa.Column("signals", postgresql.JSONB, nullable=False),
        *_timestamps(),
    )
    op.create_index("idx_screening_renter", "renter_screenings", ["renter_id"])
    op.create_index(
        "idx_screening_renter_type", "renter_screenings", ["renter_id", "screening_type"]
    )
    op.create_index("idx_screening_booking", "renter_screenings", ["booking_id"])
    op.create_index("idx_screening_created", "renter_screenings", ["created_at"])

    # Create adverse_actions table
    op.create_table(
        "adverse_actions",
        sa.Column("adverse_action_id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("renter_id", sa.String(255), nullable=False),
        sa.Column("booking_id", sa.String(255), nullable=True),
        sa.Column(
            "screening_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("renter_screenings.screening_id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("reason_codes", postgresql.JSONB, nullable=False),
        sa.Column("provider", sa.String(50), nullable=False),
        sa.Column("notice_status", sa.String(20), nullable=False, server_default="draft"),
        *_timestamps(),
    )
    op.create_index("idx_adverse_action_renter", "adverse_actions", ["renter_id"])
    op.create_index("idx_adverse_action_screening", "adverse_actions", ["screening_id"])

    # Create audit_events table (append-only)
    op.create_table(
        "audit_events",
        sa.Column("audit_id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("action", sa.String(100), nullable=False),
        sa.Column("severity", sa.String(20), nullable=False, server_default="info"),
        sa.Column("correlation_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=True),
        sa.Column("resource_type", sa.String(50), nullable=True),
        sa.Column("resource_id", sa.String(255), nullable=True),
        sa.Column("details", postgresql.JSONB, nullable=False),
        sa.Column("success", sa.Boolean, nullable=False),
        sa.Column("error_message", sa.Text, nullable=True),
        sa.Column("ip_address", sa.String(45), nullable=True),
        sa.Column("user_agent", sa.Text, nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("idx_audit_user", "audit_events", ["user_id"])
    op.create_index("idx_audit_action", "audit_events", ["action"])
    op.create_index("idx_audit_correlation", "audit_events", ["correlation_id"])
    op.create_index("idx_audit_resource", "audit_events", ["resource_type", "resource_id"])
    op.create_index("idx_audit_created", "audit_events", ["created_at"])


def downgrade() -> None:
    op.drop_table("audit_events")
    op.drop_table("adverse_actions")
    op.drop_table("renter_screenings")
    op.drop_table("renter_profiles")
    op.drop_table("screening_consents")
    op.drop_table("policy_acceptances")
