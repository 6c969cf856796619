"""Audit logging service for compliance and accountability."""

from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from pydantic import BaseModel, Field
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils.compat import uuid7

from trustgate.core.context import get_current_context_or_none
from trustgate.core.logging import get_logger
from trustgate.db.models.audit import AuditAction, AuditEvent, AuditSeverity

logger = get_logger(__name__)


class AuditEventInput(BaseModel):
    """A single audit event as produced by a workflow."""

    user_id: str | None = None
    action: AuditAction
    resource_type: str | None = None
    resource_id: str | None = None
    details: dict[str, Any] = Field(default_factory=dict)
    ip_address: str | None = None
    user_agent: str | None = None
    success: bool = True
    error_message: str | None = None


@runtime_checkable
class AuditSink(Protocol):
    """Destination for workflow audit events."""

    async def log_audit_event(self, event: AuditEventInput) -> None:
        """Record one audit event."""
        ...


class AuditLogger:
    """Service for creating and querying audit events.

    Audit events are immutable, append-only logs of every screening
    outcome. Each event is committed on its own so that events describing
    a failed workflow survive even when the caller's unit of work does not.
    """

    def __init__(self, db: AsyncSession, *, commit: bool = True):
        """Initialize audit logger with database session.

        Args:
            db: Async SQLAlchemy session for database operations
            commit: Commit each event (False only flushes)
        """
        self.db = db
        self.commit = commit

    async def log_audit_event(self, event: AuditEventInput) -> None:
        """Append an audit event; satisfies the AuditSink protocol."""
        await self.log_event(event)

    async def log_event(
        self,
        event: AuditEventInput,
        correlation_id: UUID | None = None,
    ) -> AuditEvent:
        """Create an immutable audit log entry.

        Args:
            event: The event to record
            correlation_id: Correlation ID; defaults to the current request's,
                or a fresh one outside a request

        Returns:
            Created AuditEvent instance
        """
        if correlation_id is None:
            ctx = get_current_context_or_none()
            correlation_id = ctx.correlation_id if ctx else uuid7()

        severity = AuditSeverity.INFO if event.success else AuditSeverity.ERROR

        record = AuditEvent(
            action=event.action.value,
            severity=severity.value,
            correlation_id=correlation_id,
            user_id=event.user_id,
            resource_type=event.resource_type,
            resource_id=event.resource_id,
            details=event.details,
            success=event.success,
            error_message=event.error_message,
            ip_address=event.ip_address,
            user_agent=event.user_agent,
        )

        self.db.add(record)
        try:
            if self.commit:
                await self.db.commit()
            else:
                await self.db.flush()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            "audit_event_logged",
            action=record.action,
            resource_id=record.resource_id,
            success=record.success,
        )
        return record

    async def query_events(
        self,
        user_id: str | None = None,
        action: AuditAction | str | None = None,
        resource_id: str | None = None,
        success: bool | None = None,
        limit: int = 100,
    ) -> list[AuditEvent]:
        """Query audit events with filters.

        Returns:
            Matching audit events, newest first
        """
        if isinstance(action, AuditAction):
            action = action.value

        query = select(AuditEvent).order_by(
            AuditEvent.created_at.desc(),
            AuditEvent.audit_id.desc(),  # Secondary sort for equal timestamps
        )

        if user_id is not None:
            query = query.where(AuditEvent.user_id == user_id)
        if action is not None:
            query = query.where(AuditEvent.action == action)
        if resource_id is not None:
            query = query.where(AuditEvent.resource_id == resource_id)
        if success is not None:
            query = query.where(AuditEvent.success == success)

        query = query.limit(min(limit, 1000))

        result = await self.db.execute(query)
        return list(result.scalars().all())
