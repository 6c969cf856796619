"""Consent ledger for policy acceptances and per-booking screening consents.

The ledger is the only writer of acceptance and consent rows. Both writes
are idempotent: repeating one refreshes the existing row's network
metadata and timestamp instead of adding a new row.
"""

import hashlib

from sqlalchemy.ext.asyncio import AsyncSession

from trustgate.core.exceptions import ConsentRequiredError
from trustgate.core.logging import get_logger
from trustgate.db.repositories.consent import (
    PolicyAcceptanceRepository,
    ScreeningConsentRepository,
)
from trustgate.providers.types import ScreeningType

logger = get_logger(__name__)

IP_HASH_LENGTH = 16


def hash_ip_address(ip_address: str | None) -> str | None:
    """Pseudonymize a client IP for storage alongside a consent record.

    Returns:
        First 16 hex characters of the SHA-256 digest, or None for no address
    """
    if not ip_address:
        return None
    return hashlib.sha256(ip_address.encode("utf-8")).hexdigest()[:IP_HASH_LENGTH]


class ConsentLedger:
    """Records and checks renters' policy acceptances and screening consents."""

    def __init__(self, db: AsyncSession):
        self.acceptances = PolicyAcceptanceRepository(db)
        self.consents = ScreeningConsentRepository(db)

    async def has_policy_acceptance(
        self, user_id: str, policy_key: str, policy_version: str
    ) -> bool:
        """Check whether the user accepted this exact policy version."""
        return await self.acceptances.find(user_id, policy_key, policy_version) is not None

    async def require_policy_acceptance(
        self, user_id: str, policy_key: str, policy_version: str
    ) -> None:
        """Raise ConsentRequiredError unless the user accepted the policy version."""
        if not await self.has_policy_acceptance(user_id, policy_key, policy_version):
            logger.info(
                "policy_acceptance_missing",
                user_id=user_id,
                policy_key=policy_key,
                policy_version=policy_version,
            )
            raise ConsentRequiredError(user_id, policy_key, policy_version)

    async def record_policy_acceptance(
        self,
        user_id: str,
        policy_key: str,
        policy_version: str,
        ip_hash: str | None = None,
        user_agent: str | None = None,
    ) -> None:
        """Record that the user accepted a policy version."""
        await self.acceptances.upsert(
            user_id, policy_key, policy_version, ip_hash=ip_hash, user_agent=user_agent
        )
        logger.info(
            "policy_acceptance_recorded",
            user_id=user_id,
            policy_key=policy_key,
            policy_version=policy_version,
        )

    async def record_screening_consent(
        self,
        user_id: str,
        booking_id: str | None,
        consent_type: ScreeningType | str,
        policy_key: str,
        policy_version: str,
        ip_hash: str | None = None,
        user_agent: str | None = None,
    ) -> None:
        """Record the user's consent to one kind of screening.

        Args:
            user_id: The consenting user
            booking_id: Booking the consent applies to; None for a general consent
            consent_type: Kind of screening consented to
            policy_key: Policy the consent was given under
            policy_version: Version of that policy
            ip_hash: Pseudonymized client IP (see hash_ip_address)
            user_agent: Client user agent
        """
        consent_type = ScreeningType(consent_type)
        await self.consents.upsert(
            user_id,
            booking_id,
            consent_type.value,
            policy_key,
            policy_version,
            ip_hash=ip_hash,
            user_agent=user_agent,
        )
        logger.info(
            "screening_consent_recorded",
            user_id=user_id,
            booking_id=booking_id,
            consent_type=consent_type.value,
        )
