"""Renter screening workflows.

Usage:
    from trustgate.screening import ScreeningOrchestrator, get_screening_summary

    orchestrator = ScreeningOrchestrator(db, ScreeningProviderConfig())
    outcome = await orchestrator.run_soft_credit_screening(
        renter_id, booking_id, reason="High-value rental"
    )
    summary = await get_screening_summary(db, renter_id, booking_id)
"""

from .orchestrator import (
    PLACEHOLDER_DATE_OF_BIRTH,
    ScreeningOrchestrator,
    create_screening_orchestrator,
    mvr_adverse_reason_codes,
    soft_credit_adverse_reason_codes,
    split_full_name,
)
from .profiles import DatabaseProfileStore
from .summary import get_screening_summary
from .types import (
    ProfileStore,
    RenterProfileData,
    ScreeningSummary,
    ScreeningSummaryEntry,
    WorkflowResult,
)

__all__ = [
    "ScreeningOrchestrator",
    "create_screening_orchestrator",
    "get_screening_summary",
    "split_full_name",
    "mvr_adverse_reason_codes",
    "soft_credit_adverse_reason_codes",
    "PLACEHOLDER_DATE_OF_BIRTH",
    "DatabaseProfileStore",
    "ProfileStore",
    "RenterProfileData",
    "WorkflowResult",
    "ScreeningSummary",
    "ScreeningSummaryEntry",
]
