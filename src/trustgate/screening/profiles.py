"""Database-backed profile store."""

from sqlalchemy.ext.asyncio import AsyncSession

from trustgate.db.repositories.profile import ProfileRepository

from .types import RenterProfileData


class DatabaseProfileStore:
    """Profile store reading the renter_profiles table."""

    def __init__(self, db: AsyncSession):
        self.profiles = ProfileRepository(db)

    async def get_profile(self, renter_id: str) -> RenterProfileData | None:
        profile = await self.profiles.get(renter_id)
        if profile is None:
            return None
        return RenterProfileData(
            user_id=profile.user_id,
            full_name=profile.full_name,
            email=profile.email,
            drivers_license_number=profile.drivers_license_number,
            drivers_license_state=profile.drivers_license_state,
        )
