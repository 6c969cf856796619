"""Audit event models for compliance and accountability."""

from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID

from sqlalchemy import Boolean, DateTime, Index, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column
from uuid_utils.compat import uuid7

from .base import Base


class AuditAction(str, Enum):
    """Actions recorded in the audit trail by the screening workflows."""

    SCREENING_MVR_COMPLETED = "SCREENING_MVR_COMPLETED"
    SCREENING_MVR_FAILED = "SCREENING_MVR_FAILED"
    SCREENING_SOFT_CREDIT_COMPLETED = "SCREENING_SOFT_CREDIT_COMPLETED"
    SCREENING_SOFT_CREDIT_FAILED = "SCREENING_SOFT_CREDIT_FAILED"


class AuditSeverity(str, Enum):
    """Severity levels for audit events."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(Base):
    """Immutable audit log entry for compliance tracking.

    Audit events are append-only and record every screening outcome,
    successful or not, with the network metadata of the triggering request.
    """

    __tablename__ = "audit_events"

    # UUIDv7 is time-ordered, making audit events naturally sortable by ID
    audit_id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid7)
    action: Mapped[str] = mapped_column(String(100), nullable=False)
    severity: Mapped[str] = mapped_column(String(20), nullable=False, default="info")
    correlation_id: Mapped[UUID] = mapped_column(nullable=False)

    user_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    resource_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    resource_id: Mapped[str | None] = mapped_column(String(255), nullable=True)

    details: Mapped[dict[str, Any]] = mapped_column(nullable=False, default=dict)

    success: Mapped[bool] = mapped_column(Boolean, nullable=False)
    error_message: Mapped[str | None] = mapped_column(Text, nullable=True)

    ip_address: Mapped[str | None] = mapped_column(String(45), nullable=True)  # IPv6 support
    user_agent: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        Index("idx_audit_user", "user_id"),
        Index("idx_audit_action", "action"),
        Index("idx_audit_correlation", "correlation_id"),
        Index("idx_audit_resource", "resource_type", "resource_id"),
        Index("idx_audit_created", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<AuditEvent(id={self.audit_id}, action={self.action}, success={self.success})>"
