"""Checkr screening provider.

Sandbox-ready construction contract for the Checkr integration. The
provider validates its credentials up front; the screening operations are
not wired to the Checkr API yet and fail with provider errors.
"""

from pydantic import SecretStr

from trustgate.core.logging import get_logger
from trustgate.providers.protocol import BaseScreeningProvider
from trustgate.providers.types import (
    MvrRequestInput,
    ProviderConfigurationError,
    ProviderReference,
    ProviderRequestError,
    ProviderResultError,
    ScreeningResult,
    ScreeningType,
    SoftCreditRequestInput,
)

logger = get_logger(__name__)

CHECKR_PROVIDER_ID = "checkr"
DEFAULT_CHECKR_BASE_URL = "https://api.checkr.com/v1"


class CheckrProvider(BaseScreeningProvider):
    """Checkr-backed screening provider.

    Construction fails immediately when no API key is supplied, independent
    of any screening call.
    """

    def __init__(
        self,
        api_key: SecretStr | None,
        base_url: str = DEFAULT_CHECKR_BASE_URL,
    ) -> None:
        """Initialize the provider.

        Args:
            api_key: Checkr API key.
            base_url: Checkr API base URL.

        Raises:
            ProviderConfigurationError: If api_key is missing or empty.
        """
        if api_key is None or not api_key.get_secret_value():
            raise ProviderConfigurationError(CHECKR_PROVIDER_ID, "CHECKR_API_KEY")

        super().__init__(CHECKR_PROVIDER_ID)
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

        logger.info("checkr_provider_initialized", base_url=self._base_url)

    @property
    def base_url(self) -> str:
        """Get the Checkr API base URL."""
        return self._base_url

    async def request_mvr(self, input: MvrRequestInput) -> ProviderReference:
        raise ProviderRequestError("Checkr MVR request is not yet implemented", self.provider_id)

    async def request_soft_credit(self, input: SoftCreditRequestInput) -> ProviderReference:
        raise ProviderRequestError(
            "Checkr soft credit request is not yet implemented", self.provider_id
        )

    async def get_result(
        self, provider_ref: str, screening_type: ScreeningType
    ) -> ScreeningResult:
        raise ProviderResultError(
            f"Checkr {screening_type.value} result retrieval is not yet implemented",
            self.provider_id,
        )
