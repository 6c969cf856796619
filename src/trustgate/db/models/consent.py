"""Policy acceptance and screening consent models.

Both tables are keyed by a natural-key unique constraint. General screening
consents (no booking) are covered by a partial unique index. Writes go through
the consent repositories, which update the matching row instead of inserting a
duplicate.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Index, String, Text, UniqueConstraint, func, text
from sqlalchemy.orm import Mapped, mapped_column
from uuid_utils.compat import uuid7

from .base import Base, TimestampMixin


class PolicyAcceptance(Base, TimestampMixin):
    """A user's acceptance of one version of a policy document."""

    __tablename__ = "policy_acceptances"

    acceptance_id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid7)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    policy_key: Mapped[str] = mapped_column(String(100), nullable=False)
    policy_version: Mapped[str] = mapped_column(String(20), nullable=False)

    ip_hash: Mapped[str | None] = mapped_column(String(64), nullable=True)
    user_agent: Mapped[str | None] = mapped_column(Text, nullable=True)
    accepted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint(
            "user_id", "policy_key", "policy_version", name="uq_policy_acceptance_user_policy"
        ),
        Index("idx_policy_acceptance_user", "user_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<PolicyAcceptance(user_id={self.user_id}, policy={self.policy_key}, "
            f"version={self.policy_version})>"
        )


class ScreeningConsent(Base, TimestampMixin):
    """Consent to run one screening type, optionally scoped to a booking.

    A null booking_id is a general consent not tied to one rental.
    """

    __tablename__ = "screening_consents"

    consent_id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid7)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    booking_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    consent_type: Mapped[str] = mapped_column(String(20), nullable=False)
    policy_key: Mapped[str] = mapped_column(String(100), nullable=False)
    policy_version: Mapped[str] = mapped_column(String(20), nullable=False)

    ip_hash: Mapped[str | None] = mapped_column(String(64), nullable=True)
    user_agent: Mapped[str | None] = mapped_column(Text, nullable=True)
    consented_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint(
            "user_id",
            "booking_id",
            "consent_type",
            "policy_version",
            name="uq_screening_consent_user_booking_type",
        ),
        # NULLs are distinct in the constraint above; this guards general consents
        Index(
            "uq_screening_consent_general",
            "user_id",
            "consent_type",
            "policy_version",
            unique=True,
            sqlite_where=text("booking_id IS NULL"),
            postgresql_where=text("booking_id IS NULL"),
        ),
        Index("idx_screening_consent_user", "user_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<ScreeningConsent(user_id={self.user_id}, booking_id={self.booking_id}, "
            f"type={self.consent_type})>"
        )
