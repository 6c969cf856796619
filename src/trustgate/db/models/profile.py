"""Renter profile model backing the default profile store."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class RenterProfile(Base, TimestampMixin):
    """Identity and license data the screening workflows read for a renter."""

    __tablename__ = "renter_profiles"

    renter_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)

    drivers_license_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    drivers_license_state: Mapped[str | None] = mapped_column(String(10), nullable=True)

    __table_args__ = (Index("idx_renter_profile_user", "user_id"),)

    def __repr__(self) -> str:
        return f"<RenterProfile(renter_id={self.renter_id}, user_id={self.user_id})>"
