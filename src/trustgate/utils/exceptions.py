"""Custom exceptions for TrustGate."""


class TrustGateError(Exception):
    """Base exception for all TrustGate errors."""

    pass


class ConfigurationError(TrustGateError):
    """Error in configuration or settings."""

    pass
