"""Deterministic mock screening provider.

This module provides the MockScreeningProvider used by default in
development and tests. It makes no network calls: every request resolves
immediately to an outcome chosen by the marker rules in outcomes.py.

The result store is bounded. Once it holds max_results entries, each new
request evicts the oldest result, and an evicted reference reads as pending.
"""

import itertools
import threading
import time
from collections import OrderedDict

from trustgate.core.logging import get_logger
from trustgate.providers.protocol import BaseScreeningProvider
from trustgate.providers.types import (
    MvrRequestInput,
    ProviderReference,
    ScreeningResult,
    ScreeningStatus,
    ScreeningType,
    SoftCreditRequestInput,
)

from .outcomes import determine_outcome

logger = get_logger(__name__)

MOCK_PROVIDER_ID = "mock"
MAX_STORED_RESULTS = 10_000

_REF_PREFIXES = {
    ScreeningType.MVR: "mock_mvr",
    ScreeningType.SOFT_CREDIT: "mock_credit",
}


class MockScreeningProvider(BaseScreeningProvider):
    """In-memory provider with rule-based outcomes.

    Results are kept in a store owned by the instance, so a result can only
    be fetched from the provider instance that accepted the request.

    Usage:
        provider = MockScreeningProvider()
        ref = await provider.request_mvr(mvr_input)
        result = await provider.get_result(ref.provider_ref, ScreeningType.MVR)
    """

    def __init__(self, max_results: int = MAX_STORED_RESULTS) -> None:
        """Initialize the provider with an empty result store.

        Args:
            max_results: Results kept before the oldest are evicted
        """
        if max_results < 1:
            raise ValueError("max_results must be at least 1")
        super().__init__(MOCK_PROVIDER_ID)
        self._max_results = max_results
        self._results: OrderedDict[str, ScreeningResult] = OrderedDict()
        self._lock = threading.Lock()
        self._sequence = itertools.count(1)

    @property
    def stored_result_count(self) -> int:
        """Number of results held in the store."""
        with self._lock:
            return len(self._results)

    async def request_mvr(self, input: MvrRequestInput) -> ProviderReference:
        """Accept an MVR request and resolve it from the renter identifier."""
        return self._resolve(ScreeningType.MVR, input.renter_id, input.renter_id)

    async def request_soft_credit(self, input: SoftCreditRequestInput) -> ProviderReference:
        """Accept a soft credit request and resolve it from the email, or the renter ID."""
        identifier = input.email or input.renter_id
        return self._resolve(ScreeningType.SOFT_CREDIT, input.renter_id, identifier)

    async def get_result(
        self,
        provider_ref: str,
        screening_type: ScreeningType,  # noqa: ARG002
    ) -> ScreeningResult:
        """Look up a stored result; unknown references are reported as pending."""
        with self._lock:
            result = self._results.get(provider_ref)

        if result is None:
            logger.debug("mock_result_not_found", provider_ref=provider_ref)
            return ScreeningResult(
                status=ScreeningStatus.PENDING,
                signals={},
                provider_ref=provider_ref,
            )

        return result.model_copy(deep=True)

    def _resolve(
        self, screening_type: ScreeningType, renter_id: str, identifier: str
    ) -> ProviderReference:
        """Store the outcome for a new request and return its reference."""
        outcome = determine_outcome(screening_type, identifier)

        with self._lock:
            provider_ref = self._next_ref(screening_type, renter_id)
            self._results[provider_ref] = ScreeningResult(
                status=ScreeningStatus.COMPLETE,
                result=outcome.result,
                risk_level=outcome.risk_level,
                signals=outcome.signals,
                provider_ref=provider_ref,
            )
            while len(self._results) > self._max_results:
                evicted_ref, _ = self._results.popitem(last=False)
                logger.debug("mock_result_evicted", provider_ref=evicted_ref)

        logger.info(
            "mock_screening_resolved",
            screening_type=screening_type.value,
            provider_ref=provider_ref,
            result=outcome.result.value,
        )
        return ProviderReference(provider_ref=provider_ref)

    def _next_ref(self, screening_type: ScreeningType, renter_id: str) -> str:
        """Build a reference unique within this process. Caller holds the lock."""
        timestamp_ms = time.time_ns() // 1_000_000
        return f"{_REF_PREFIXES[screening_type]}_{renter_id}_{timestamp_ms}_{next(self._sequence)}"


def create_mock_provider() -> MockScreeningProvider:
    """Create a new mock screening provider."""
    return MockScreeningProvider()
