"""Read-side view of a renter's latest screening state."""

from sqlalchemy.ext.asyncio import AsyncSession

from trustgate.db.repositories.screening import ScreeningRepository
from trustgate.providers.types import RiskLevel, ScreeningOutcome, ScreeningStatus, ScreeningType

from .types import ScreeningSummary, ScreeningSummaryEntry


async def get_screening_summary(
    db: AsyncSession,
    renter_id: str,
    booking_id: str | None = None,
) -> ScreeningSummary:
    """Summarize the most recent screening of each type for a renter.

    Args:
        db: Async database session
        renter_id: Renter to summarize
        booking_id: When non-empty, only consider screenings for this booking
            and screenings not tied to any booking

    Returns:
        Summary whose mvr / soft_credit entries are None when no screening
        of that type exists
    """
    records = await ScreeningRepository(db).list_for_renter(renter_id, booking_id or None)

    latest: dict[ScreeningType, ScreeningSummaryEntry] = {}
    # Rows arrive oldest first, so later rows overwrite earlier ones
    for record in records:
        latest[ScreeningType(record.screening_type)] = ScreeningSummaryEntry(
            status=ScreeningStatus(record.status),
            result=ScreeningOutcome(record.result) if record.result else None,
            risk_level=RiskLevel(record.risk_level) if record.risk_level else None,
        )

    return ScreeningSummary(
        mvr=latest.get(ScreeningType.MVR),
        soft_credit=latest.get(ScreeningType.SOFT_CREDIT),
    )
