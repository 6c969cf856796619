"""Database models for TrustGate."""

from .audit import AuditAction, AuditEvent, AuditSeverity
from .base import Base, TimestampMixin
from .consent import PolicyAcceptance, ScreeningConsent
from .profile import RenterProfile
from .screening import AdverseAction, RenterScreening

__all__ = [
    "Base",
    "TimestampMixin",
    "AuditAction",
    "AuditEvent",
    "AuditSeverity",
    "PolicyAcceptance",
    "ScreeningConsent",
    "RenterProfile",
    "RenterScreening",
    "AdverseAction",
]
