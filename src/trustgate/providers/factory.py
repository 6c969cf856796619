"""Screening provider selection.

Providers are chosen from an explicit ScreeningProviderConfig rather than
from the process environment, so tests can build either implementation
deterministically. The mock provider is the default; Checkr is opt-in.
"""

from collections.abc import Callable

from pydantic import BaseModel, Field, SecretStr

from trustgate.config.settings import Settings
from trustgate.core.logging import get_logger

from .checkr import CHECKR_PROVIDER_ID, DEFAULT_CHECKR_BASE_URL, CheckrProvider
from .mock import MOCK_PROVIDER_ID, MockScreeningProvider
from .protocol import ScreeningProvider

logger = get_logger(__name__)


class ScreeningProviderConfig(BaseModel):
    """Configuration that selects and builds the screening provider."""

    use_checkr: bool = Field(default=False, description="Select Checkr instead of the mock")
    checkr_api_key: SecretStr | None = None
    checkr_base_url: str = DEFAULT_CHECKR_BASE_URL
    provider_timeout_seconds: float | None = Field(
        default=None, gt=0, description="Bound on each provider call; None waits indefinitely"
    )

    @property
    def provider_id(self) -> str:
        """Identifier of the provider this configuration selects."""
        return CHECKR_PROVIDER_ID if self.use_checkr else MOCK_PROVIDER_ID

    @classmethod
    def from_settings(cls, settings: Settings) -> "ScreeningProviderConfig":
        """Build the provider configuration from application settings."""
        return cls(
            use_checkr=settings.use_checkr,
            checkr_api_key=settings.checkr_api_key,
            checkr_base_url=settings.checkr_base_url,
            provider_timeout_seconds=settings.provider_timeout_seconds,
        )


ProviderBuilder = Callable[[ScreeningProviderConfig], ScreeningProvider]

_PROVIDER_BUILDERS: dict[str, ProviderBuilder] = {
    MOCK_PROVIDER_ID: lambda config: MockScreeningProvider(),
    CHECKR_PROVIDER_ID: lambda config: CheckrProvider(
        api_key=config.checkr_api_key,
        base_url=config.checkr_base_url,
    ),
}


def is_checkr_available(config: ScreeningProviderConfig) -> bool:
    """Check if Checkr credentials are configured."""
    return config.checkr_api_key is not None and bool(config.checkr_api_key.get_secret_value())


def get_screening_provider(config: ScreeningProviderConfig | None = None) -> ScreeningProvider:
    """Build the screening provider selected by the configuration.

    Args:
        config: Provider configuration (defaults select the mock provider)

    Returns:
        A new provider instance

    Raises:
        ProviderConfigurationError: If Checkr is selected without an API key
    """
    config = config or ScreeningProviderConfig()
    provider = _PROVIDER_BUILDERS[config.provider_id](config)

    logger.info("screening_provider_selected", provider_id=provider.provider_id)
    return provider
