"""Deterministic mock screening provider.

Example:
    from trustgate.providers.mock import create_mock_provider

    provider = create_mock_provider()
    ref = await provider.request_mvr(mvr_input)
    result = await provider.get_result(ref.provider_ref, ScreeningType.MVR)
"""

from .outcomes import (
    CONDITIONAL_MARKERS,
    FAIL_MARKERS,
    MockOutcome,
    classify_identifier,
    determine_outcome,
)
from .provider import (
    MAX_STORED_RESULTS,
    MOCK_PROVIDER_ID,
    MockScreeningProvider,
    create_mock_provider,
)

__all__ = [
    "MOCK_PROVIDER_ID",
    "MAX_STORED_RESULTS",
    "MockScreeningProvider",
    "create_mock_provider",
    "MockOutcome",
    "FAIL_MARKERS",
    "CONDITIONAL_MARKERS",
    "classify_identifier",
    "determine_outcome",
]
