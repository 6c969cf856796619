"""Provider types and enums for the screening provider abstraction.

This module defines the core types shared by every screening provider:
- Enums for screening type, lifecycle status, outcome and risk level
- Request inputs for MVR and soft credit checks
- The normalized ScreeningResult returned by providers
- The provider error hierarchy
"""

from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from trustgate.utils.exceptions import ConfigurationError, TrustGateError


class ScreeningType(str, Enum):
    """Kinds of screening a renter can undergo."""

    MVR = "mvr"  # Motor Vehicle Record
    SOFT_CREDIT = "soft_credit"  # Credit inquiry with no score impact


class ScreeningStatus(str, Enum):
    """Lifecycle status of a screening request."""

    REQUESTED = "requested"  # Record created, provider not yet called
    PENDING = "pending"  # Provider accepted the request
    COMPLETE = "complete"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """Check if no further transitions are allowed."""
        return self in (ScreeningStatus.COMPLETE, ScreeningStatus.FAILED)


class ScreeningOutcome(str, Enum):
    """Decision produced by a completed screening."""

    PASS = "pass"
    CONDITIONAL = "conditional"  # Booking may proceed with restrictions
    FAIL = "fail"


class RiskLevel(str, Enum):
    """Risk tier attached to a screening outcome."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PostalAddress(BaseModel):
    """Postal address submitted with a soft credit request."""

    street: str
    city: str
    state: str
    zip: str


class MvrRequestInput(BaseModel):
    """Input for a Motor Vehicle Record check."""

    renter_id: str
    booking_id: str | None = None
    first_name: str
    last_name: str
    date_of_birth: date
    drivers_license_number: str
    drivers_license_state: str


class SoftCreditRequestInput(BaseModel):
    """Input for a soft credit check."""

    renter_id: str
    booking_id: str | None = None
    first_name: str
    last_name: str
    date_of_birth: date
    email: str | None = None
    address: PostalAddress | None = None


class ProviderReference(BaseModel):
    """Opaque reference returned when a provider accepts a request."""

    provider_ref: str = Field(min_length=1)


class ScreeningResult(BaseModel):
    """Normalized screening result returned by a provider.

    Signals carry provider-specific findings, e.g. license_status and
    major_violations_count for MVR, credit_risk_score and payment_behavior
    for soft credit, and fraud_risk for both.
    """

    status: ScreeningStatus
    result: ScreeningOutcome | None = None
    risk_level: RiskLevel | None = None
    signals: dict[str, Any] = Field(default_factory=dict)
    provider_ref: str | None = None


class ProviderError(TrustGateError):
    """Base error for screening provider failures.

    Attributes:
        provider_id: Provider that failed
    """

    def __init__(self, message: str, provider_id: str):
        super().__init__(message)
        self.provider_id = provider_id

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.provider_id}): {self.args[0]}"


class ProviderRequestError(ProviderError):
    """The provider could not accept a screening request."""

    pass


class ProviderResultError(ProviderError):
    """The provider accepted a request but could not return its result."""

    pass


class ProviderConfigurationError(ConfigurationError):
    """A provider was constructed without the settings it requires.

    Attributes:
        provider_id: Provider being constructed
        missing_setting: Name of the absent setting
    """

    def __init__(self, provider_id: str, missing_setting: str):
        super().__init__(f"{provider_id} provider requires {missing_setting}")
        self.provider_id = provider_id
        self.missing_setting = missing_setting
