"""Renter screening and adverse action models."""

from typing import Any
from uuid import UUID

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column
from uuid_utils.compat import uuid7

from .base import Base, TimestampMixin


class RenterScreening(Base, TimestampMixin):
    """One screening attempt for a renter.

    Status moves forward only: requested -> pending -> complete | failed.
    A retry is a new row; terminal rows are never rewritten.
    """

    __tablename__ = "renter_screenings"

    screening_id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid7)
    renter_id: Mapped[str] = mapped_column(String(255), nullable=False)
    booking_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    screening_type: Mapped[str] = mapped_column(String(20), nullable=False)
    provider: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="requested")

    # Assigned by the provider once the request is accepted
    provider_ref: Mapped[str | None] = mapped_column(String(255), nullable=True)

    result: Mapped[str | None] = mapped_column(String(20), nullable=True)
    risk_level: Mapped[str | None] = mapped_column(String(20), nullable=True)
    signals: Mapped[dict[str, Any]] = mapped_column(nullable=False, default=dict)

    __table_args__ = (
        Index("idx_screening_renter", "renter_id"),
        Index("idx_screening_renter_type", "renter_id", "screening_type"),
        Index("idx_screening_booking", "booking_id"),
        Index("idx_screening_created", "created_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<RenterScreening(id={self.screening_id}, type={self.screening_type}, "
            f"status={self.status})>"
        )


class AdverseAction(Base, TimestampMixin):
    """Compliance record of an unfavorable decision based on a screening result."""

    __tablename__ = "adverse_actions"

    adverse_action_id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid7)
    renter_id: Mapped[str] = mapped_column(String(255), nullable=False)
    booking_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    screening_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("renter_screenings.screening_id", ondelete="SET NULL"), nullable=True
    )
    reason_codes: Mapped[list[str]] = mapped_column(nullable=False, default=list)
    provider: Mapped[str] = mapped_column(String(50), nullable=False)
    notice_status: Mapped[str] = mapped_column(String(20), nullable=False, default="draft")

    __table_args__ = (
        Index("idx_adverse_action_renter", "renter_id"),
        Index("idx_adverse_action_screening", "screening_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<AdverseAction(id={self.adverse_action_id}, renter_id={self.renter_id}, "
            f"reasons={self.reason_codes})>"
        )
