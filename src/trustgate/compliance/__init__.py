"""Consent and policy management for renter screening."""

from .consent import ConsentLedger, hash_ip_address
from .policies import (
    MVR_CONSENT_POLICY,
    SCREENING_DISCLAIMER_POLICY,
    SCREENING_POLICIES,
    SOFT_CREDIT_CONSENT_POLICY,
    ScreeningPolicy,
    get_policy,
)

__all__ = [
    "ConsentLedger",
    "hash_ip_address",
    "ScreeningPolicy",
    "SCREENING_POLICIES",
    "MVR_CONSENT_POLICY",
    "SOFT_CREDIT_CONSENT_POLICY",
    "SCREENING_DISCLAIMER_POLICY",
    "get_policy",
]
