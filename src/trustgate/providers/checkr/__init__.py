"""Checkr screening provider."""

from .provider import CHECKR_PROVIDER_ID, DEFAULT_CHECKR_BASE_URL, CheckrProvider

__all__ = ["CHECKR_PROVIDER_ID", "DEFAULT_CHECKR_BASE_URL", "CheckrProvider"]
