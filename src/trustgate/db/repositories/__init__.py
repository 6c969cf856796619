"""Repositories for TrustGate database models."""

from .base import BaseRepository
from .consent import PolicyAcceptanceRepository, ScreeningConsentRepository
from .profile import ProfileRepository
from .screening import AdverseActionRepository, ScreeningRepository, can_transition

__all__ = [
    "BaseRepository",
    "PolicyAcceptanceRepository",
    "ScreeningConsentRepository",
    "ProfileRepository",
    "ScreeningRepository",
    "AdverseActionRepository",
    "can_transition",
]
