"""Renter profile repository."""

from trustgate.db.models.profile import RenterProfile
from trustgate.db.repositories.base import BaseRepository


class ProfileRepository(BaseRepository[RenterProfile, str]):
    """Repository for RenterProfile rows, keyed by renter id."""

    model = RenterProfile
