"""Profile management service."""

import structlog
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from bptrack_server.models.profile import Profile
from bptrack_server.models.reading import BloodPressureReading
from bptrack_server.models.reminder import Reminder
from bptrack_server.schemas.profiles import ProfileCreate, ProfileUpdate

logger = structlog.get_logger()


class ProfileService:
    """Service for creating, updating and removing profiles."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize profile service.

        Args:
            session: Database session
        """
        self.session = session
        self.logger = logger.bind(service="profiles")

    async def list_profiles(self) -> list[Profile]:
        """Get all profiles, oldest first."""
        stmt = select(Profile).order_by(Profile.created_at.asc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_profile(self, profile_id: str) -> Profile | None:
        """Get a profile by id."""
        return await self.session.get(Profile, profile_id)

    async def create_profile(self, data: ProfileCreate) -> Profile:
        """Create a profile.

        Args:
            data: Validated profile fields

        Returns:
            The stored profile
        """
        profile = Profile(
            name=data.name,
            gender=data.gender,
            age=data.age,
            medical_conditions=list(data.medical_conditions),
        )
        self.session.add(profile)
        await self.session.commit()
        await self.session.refresh(profile)

        self.logger.info("Profile created", profile_id=profile.id)
        return profile

    async def update_profile(self, profile_id: str, data: ProfileUpdate) -> Profile | None:
        """Apply a partial update.

        Returns:
            The updated profile, or None if not found
        """
        profile = await self.get_profile(profile_id)
        if profile is None:
            return None

        for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(profile, field, value)

        await self.session.commit()
        await self.session.refresh(profile)

        self.logger.info("Profile updated", profile_id=profile_id)
        return profile

    async def delete_profile(self, profile_id: str) -> bool:
        """Delete a profile together with its readings and reminders.

        Returns:
            True if the profile existed
        """
        profile = await self.get_profile(profile_id)
        if profile is None:
            return False

        # Explicit deletes so this works even where FK cascades are off (SQLite)
        readings = await self.session.execute(
            delete(BloodPressureReading).where(BloodPressureReading.profile_id == profile_id)
        )
        reminders = await self.session.execute(
            delete(Reminder).where(Reminder.profile_id == profile_id)
        )
        await self.session.delete(profile)
        await self.session.commit()

        self.logger.info(
            "Profile deleted",
            profile_id=profile_id,
            readings_deleted=readings.rowcount,
            reminders_deleted=reminders.rowcount,
        )
        return True
