"""Types exchanged by the screening workflows and their collaborators."""

from typing import Protocol, runtime_checkable
from uuid import UUID

from pydantic import BaseModel

from trustgate.providers.types import RiskLevel, ScreeningOutcome, ScreeningStatus


class RenterProfileData(BaseModel):
    """Profile fields the workflows need from the profile store."""

    user_id: str
    full_name: str | None = None
    email: str | None = None
    drivers_license_number: str | None = None
    drivers_license_state: str | None = None


@runtime_checkable
class ProfileStore(Protocol):
    """Source of renter identity and license data."""

    async def get_profile(self, renter_id: str) -> RenterProfileData | None:
        """Load a renter's profile, or None if the renter is unknown."""
        ...


class WorkflowResult(BaseModel):
    """What a screening workflow returns to its caller."""

    screening_id: UUID
    status: ScreeningStatus
    result: ScreeningOutcome | None = None
    risk_level: RiskLevel | None = None


class ScreeningSummaryEntry(BaseModel):
    """Latest state of one kind of screening for a renter."""

    status: ScreeningStatus
    result: ScreeningOutcome | None = None
    risk_level: RiskLevel | None = None


class ScreeningSummary(BaseModel):
    """Latest MVR and soft credit state for a renter; absent kinds stay None."""

    mvr: ScreeningSummaryEntry | None = None
    soft_credit: ScreeningSummaryEntry | None = None
