"""Screening provider abstraction for TrustGate.

This package provides the interface and implementations used to run
MVR and soft credit checks against an external screening provider.

Usage:
    from trustgate.providers import (
        ScreeningProviderConfig,
        ScreeningType,
        get_screening_provider,
    )

    provider = get_screening_provider(ScreeningProviderConfig())
    ref = await provider.request_mvr(mvr_input)
    result = await provider.get_result(ref.provider_ref, ScreeningType.MVR)
"""

from .checkr import CHECKR_PROVIDER_ID, CheckrProvider
from .factory import ScreeningProviderConfig, get_screening_provider, is_checkr_available
from .mock import MOCK_PROVIDER_ID, MockScreeningProvider, create_mock_provider
from .protocol import BaseScreeningProvider, ScreeningProvider
from .types import (
    MvrRequestInput,
    PostalAddress,
    ProviderConfigurationError,
    ProviderError,
    ProviderReference,
    ProviderRequestError,
    ProviderResultError,
    RiskLevel,
    ScreeningOutcome,
    ScreeningResult,
    ScreeningStatus,
    ScreeningType,
    SoftCreditRequestInput,
)

__all__ = [
    # Protocol
    "ScreeningProvider",
    "BaseScreeningProvider",
    # Implementations
    "MockScreeningProvider",
    "create_mock_provider",
    "MOCK_PROVIDER_ID",
    "CheckrProvider",
    "CHECKR_PROVIDER_ID",
    # Selection
    "ScreeningProviderConfig",
    "get_screening_provider",
    "is_checkr_available",
    # Types
    "ScreeningType",
    "ScreeningStatus",
    "ScreeningOutcome",
    "RiskLevel",
    "MvrRequestInput",
    "SoftCreditRequestInput",
    "PostalAddress",
    "ProviderReference",
    "ScreeningResult",
    # Errors
    "ProviderError",
    "ProviderRequestError",
    "ProviderResultError",
    "ProviderConfigurationError",
]
