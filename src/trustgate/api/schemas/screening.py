"""API schemas for consent and screening endpoints.

These are kept separate from the domain models so the wire format can be
versioned independently.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from trustgate.db.models.screening import RenterScreening
from trustgate.providers.types import RiskLevel, ScreeningOutcome, ScreeningStatus, ScreeningType

# =============================================================================
# Policies
# =============================================================================


class PolicyResponse(BaseModel):
    """A policy document renters must accept before screening."""

    key: str
    version: str
    title: str
    content: str


class PolicyAcceptRequest(BaseModel):
    """Request body for accepting a policy.

    When consent_type is given, a screening consent is recorded alongside
    the acceptance.
    """

    policy_key: str = Field(..., min_length=1, max_length=100)
    policy_version: str = Field(..., min_length=1, max_length=20)
    consent_type: ScreeningType | None = None
    booking_id: str | None = Field(default=None, max_length=255)


class PolicyAcceptResponse(BaseModel):
    """Confirmation of a recorded acceptance."""

    success: bool = True
    message: str = "Policy accepted"


# =============================================================================
# Screenings
# =============================================================================


class MvrScreeningRequest(BaseModel):
    """Request body for an MVR screening."""

    booking_id: str | None = Field(default=None, max_length=255)


class SoftCreditScreeningRequest(BaseModel):
    """Request body for a soft credit screening."""

    booking_id: str | None = Field(default=None, max_length=255)
    reason: str = Field(..., description="Why the check is being run")

    @field_validator("reason")
    @classmethod
    def validate_reason(cls, v: str) -> str:
        """Reject blank reasons."""
        if not v.strip():
            raise ValueError("reason is required for soft credit screening")
        return v


class ScreeningOutcomeResponse(BaseModel):
    """Outcome of a screening workflow run."""

    success: bool = True
    screening_id: UUID
    status: ScreeningStatus
    result: ScreeningOutcome | None = None
    risk_level: RiskLevel | None = None


class ScreeningSummaryResponse(BaseModel):
    """Latest MVR and soft credit state; kinds never run are omitted."""

    renter_id: str
    booking_id: str | None = None
    summary: dict[str, dict[str, Any]]


class ScreeningDetailResponse(BaseModel):
    """A single screening record."""

    screening_id: UUID
    renter_id: str
    booking_id: str | None = None
    screening_type: ScreeningType
    provider: str
    status: ScreeningStatus
    result: ScreeningOutcome | None = None
    risk_level: RiskLevel | None = None
    signals: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime


def screening_detail_from_record(record: RenterScreening) -> ScreeningDetailResponse:
    """Convert a stored screening record into its API representation."""
    return ScreeningDetailResponse(
        screening_id=record.screening_id,
        renter_id=record.renter_id,
        booking_id=record.booking_id,
        screening_type=ScreeningType(record.screening_type),
        provider=record.provider,
        status=ScreeningStatus(record.status),
        result=ScreeningOutcome(record.result) if record.result else None,
        risk_level=RiskLevel(record.risk_level) if record.risk_level else None,
        signals=record.signals,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )
