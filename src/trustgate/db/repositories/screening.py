"""Screening and adverse action repositories."""

from typing import Any
from uuid import UUID

from sqlalchemy import or_, select

from trustgate.core.exceptions import InvalidStatusTransitionError
from trustgate.db.models.screening import AdverseAction, RenterScreening
from trustgate.db.repositories.base import BaseRepository
from trustgate.providers.types import ScreeningResult, ScreeningStatus, ScreeningType

# Allowed status moves; terminal statuses have no entry
_TRANSITIONS: dict[ScreeningStatus, frozenset[ScreeningStatus]] = {
    ScreeningStatus.REQUESTED: frozenset({ScreeningStatus.PENDING, ScreeningStatus.FAILED}),
    ScreeningStatus.PENDING: frozenset(
        {ScreeningStatus.PENDING, ScreeningStatus.COMPLETE, ScreeningStatus.FAILED}
    ),
}


def can_transition(current: ScreeningStatus, requested: ScreeningStatus) -> bool:
    """Check if a screening may move from current to requested status."""
    return requested in _TRANSITIONS.get(current, frozenset())


class ScreeningRepository(BaseRepository[RenterScreening, UUID]):
    """Repository for RenterScreening rows.

    All status changes go through _transition(), which rejects moves
    backwards and any change to a complete or failed record.
    """

    model = RenterScreening

    async def create_requested(
        self,
        renter_id: str,
        booking_id: str | None,
        screening_type: ScreeningType,
        provider: str,
        signals: dict[str, Any] | None = None,
    ) -> RenterScreening:
        """Create a screening record in REQUESTED status."""
        return await self.create(
            RenterScreening(
                renter_id=renter_id,
                booking_id=booking_id,
                screening_type=screening_type.value,
                provider=provider,
                status=ScreeningStatus.REQUESTED.value,
                signals=dict(signals or {}),
            )
        )

    async def mark_pending(self, screening: RenterScreening, provider_ref: str) -> RenterScreening:
        """Record the provider reference once the provider accepted the request."""
        return await self._transition(
            screening, ScreeningStatus.PENDING, {"provider_ref": provider_ref}
        )

    async def record_result(
        self,
        screening: RenterScreening,
        result: ScreeningResult,
        signals: dict[str, Any],
    ) -> RenterScreening:
        """Apply the provider's result to the record.

        Result and risk level are only written when the provider reported them.
        """
        updates: dict[str, Any] = {"signals": signals}
        if result.result is not None:
            updates["result"] = result.result.value
        if result.risk_level is not None:
            updates["risk_level"] = result.risk_level.value

        return await self._transition(screening, result.status, updates)

    async def mark_failed(self, screening: RenterScreening) -> RenterScreening:
        """Move a record to FAILED."""
        return await self._transition(screening, ScreeningStatus.FAILED, {})

    async def list_for_renter(
        self,
        renter_id: str,
        booking_id: str | None = None,
    ) -> list[RenterScreening]:
        """List a renter's screenings in insertion order.

        Args:
            renter_id: Renter to list screenings for
            booking_id: When given, keep rows for this booking or with no booking

        Returns:
            Screenings ordered oldest first
        """
        stmt = select(RenterScreening).where(RenterScreening.renter_id == renter_id)
        if booking_id is not None:
            stmt = stmt.where(
                or_(
                    RenterScreening.booking_id.is_(None),
                    RenterScreening.booking_id == booking_id,
                )
            )

        # UUIDv7 ids break ties between rows created in the same second
        stmt = stmt.order_by(RenterScreening.created_at, RenterScreening.screening_id)

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def _transition(
        self,
        screening: RenterScreening,
        status: ScreeningStatus,
        updates: dict[str, Any],
    ) -> RenterScreening:
        current = ScreeningStatus(screening.status)
        if not can_transition(current, status):
            raise InvalidStatusTransitionError(screening.screening_id, current.value, status.value)

        return await self.update(screening, {**updates, "status": status.value})


class AdverseActionRepository(BaseRepository[AdverseAction, UUID]):
    """Repository for AdverseAction rows."""

    model = AdverseAction

    async def create_draft(
        self,
        renter_id: str,
        booking_id: str | None,
        screening_id: UUID,
        reason_codes: list[str],
        provider: str,
    ) -> AdverseAction:
        """Create an adverse action with notice status DRAFT."""
        return await self.create(
            AdverseAction(
                renter_id=renter_id,
                booking_id=booking_id,
                screening_id=screening_id,
                reason_codes=list(reason_codes),
                provider=provider,
                notice_status="draft",
            )
        )

    async def list_for_renter(self, renter_id: str) -> list[AdverseAction]:
        """List adverse actions recorded for a renter, oldest first."""
        stmt = (
            select(AdverseAction)
            .where(AdverseAction.renter_id == renter_id)
            .order_by(AdverseAction.created_at, AdverseAction.adverse_action_id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_screening(self, screening_id: UUID) -> list[AdverseAction]:
        """Get adverse actions triggered by a screening."""
        stmt = select(AdverseAction).where(AdverseAction.screening_id == screening_id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
