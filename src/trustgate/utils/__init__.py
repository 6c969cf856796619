"""Shared utilities for TrustGate."""

from .exceptions import ConfigurationError, TrustGateError

__all__ = ["ConfigurationError", "TrustGateError"]
