"""Consent repository for policy acceptances and screening consents.

Writes are "insert, or update the row matching the natural key". Both tables
carry a unique guard on that key; for screening consents a partial unique
index covers the NULL booking case, since SQL unique constraints treat NULLs
as distinct. When a concurrent writer inserts the same key between our lookup
and our insert, the insert is rolled back and the winner's row is updated.
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from trustgate.core.logging import get_logger
from trustgate.db.models.consent import PolicyAcceptance, ScreeningConsent
from trustgate.db.repositories.base import BaseRepository

logger = get_logger(__name__)


class PolicyAcceptanceRepository(BaseRepository[PolicyAcceptance, UUID]):
    """Repository for PolicyAcceptance rows."""

    model = PolicyAcceptance

    async def find(
        self, user_id: str, policy_key: str, policy_version: str
    ) -> PolicyAcceptance | None:
        """Find the acceptance row for a user and policy version."""
        stmt = select(PolicyAcceptance).where(
            PolicyAcceptance.user_id == user_id,
            PolicyAcceptance.policy_key == policy_key,
            PolicyAcceptance.policy_version == policy_version,
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(
        self,
        user_id: str,
        policy_key: str,
        policy_version: str,
        *,
        ip_hash: str | None = None,
        user_agent: str | None = None,
    ) -> PolicyAcceptance:
        """Insert an acceptance, or refresh the existing one.

        Returns:
            The single row for (user_id, policy_key, policy_version)
        """
        updates: dict[str, Any] = {
            "ip_hash": ip_hash,
            "user_agent": user_agent,
            "accepted_at": datetime.now(UTC),
        }

        existing = await self.find(user_id, policy_key, policy_version)
        if existing is not None:
            return await self.update(existing, updates)

        try:
            return await self.create(
                PolicyAcceptance(
                    user_id=user_id,
                    policy_key=policy_key,
                    policy_version=policy_version,
                    **updates,
                )
            )
        except IntegrityError:
            winner = await self.find(user_id, policy_key, policy_version)
            if winner is None:
                raise
            logger.debug(
                "policy_acceptance_conflict_resolved",
                user_id=user_id,
                policy_key=policy_key,
                policy_version=policy_version,
            )
            return await self.update(winner, updates)

    async def list_for_user(self, user_id: str) -> list[PolicyAcceptance]:
        """List all acceptances recorded for a user."""
        stmt = (
            select(PolicyAcceptance)
            .where(PolicyAcceptance.user_id == user_id)
            .order_by(PolicyAcceptance.accepted_at)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())


class ScreeningConsentRepository(BaseRepository[ScreeningConsent, UUID]):
    """Repository for ScreeningConsent rows."""

    model = ScreeningConsent

    async def find(
        self,
        user_id: str,
        booking_id: str | None,
        consent_type: str,
        policy_version: str,
    ) -> ScreeningConsent | None:
        """Find the consent row for the natural key; a None booking matches NULL."""
        booking_clause = (
            ScreeningConsent.booking_id.is_(None)
            if booking_id is None
            else ScreeningConsent.booking_id == booking_id
        )
        stmt = select(ScreeningConsent).where(
            ScreeningConsent.user_id == user_id,
            booking_clause,
            ScreeningConsent.consent_type == consent_type,
            ScreeningConsent.policy_version == policy_version,
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(
        self,
        user_id: str,
        booking_id: str | None,
        consent_type: str,
        policy_key: str,
        policy_version: str,
        *,
        ip_hash: str | None = None,
        user_agent: str | None = None,
    ) -> ScreeningConsent:
        """Insert a screening consent, or refresh the existing one."""
        updates: dict[str, Any] = {
            "policy_key": policy_key,
            "ip_hash": ip_hash,
            "user_agent": user_agent,
            "consented_at": datetime.now(UTC),
        }

        existing = await self.find(user_id, booking_id, consent_type, policy_version)
        if existing is not None:
            return await self.update(existing, updates)

        try:
            return await self.create(
                ScreeningConsent(
                    user_id=user_id,
                    booking_id=booking_id,
                    consent_type=consent_type,
                    policy_version=policy_version,
                    **updates,
                )
            )
        except IntegrityError:
            winner = await self.find(user_id, booking_id, consent_type, policy_version)
            if winner is None:
                raise
            logger.debug(
                "screening_consent_conflict_resolved",
                user_id=user_id,
                booking_id=booking_id,
                consent_type=consent_type,
            )
            return await self.update(winner, updates)

    async def list_for_user(self, user_id: str) -> list[ScreeningConsent]:
        """List all screening consents recorded for a user."""
        stmt = (
            select(ScreeningConsent)
            .where(ScreeningConsent.user_id == user_id)
            .order_by(ScreeningConsent.consented_at)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
