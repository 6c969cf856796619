"""Core services and utilities for TrustGate."""

from .audit import AuditEventInput, AuditLogger, AuditSink
from .context import (
    RequestContext,
    get_current_context_or_none,
    request_context,
    reset_context,
    set_context,
)
from .exceptions import (
    ConsentRequiredError,
    InvalidStatusTransitionError,
    MissingLicenseDataError,
    PersistenceError,
    ProfileNotFoundError,
    ScreeningNotFoundError,
)

__all__ = [
    # Audit
    "AuditEventInput",
    "AuditLogger",
    "AuditSink",
    # Context
    "RequestContext",
    "get_current_context_or_none",
    "request_context",
    "reset_context",
    "set_context",
    # Exceptions
    "ConsentRequiredError",
    "InvalidStatusTransitionError",
    "MissingLicenseDataError",
    "PersistenceError",
    "ProfileNotFoundError",
    "ScreeningNotFoundError",
]
