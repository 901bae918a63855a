"""Measurement reminder service."""

import structlog
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from bptrack_server.models.reminder import Reminder
from bptrack_server.schemas.reminders import ReminderCreate, ReminderUpdate

logger = structlog.get_logger()


class ReminderService:
    """Service for a profile's measurement reminders."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize reminder service.

        Args:
            session: Database session
        """
        self.session = session
        self.logger = logger.bind(service="reminders")

    async def list_reminders(self, profile_id: str) -> list[Reminder]:
        """Get a profile's reminders ordered by time of day."""
        stmt = select(Reminder).where(Reminder.profile_id == profile_id).order_by(Reminder.time)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_reminder(self, profile_id: str, reminder_id: str) -> Reminder | None:
        stmt = (
            select(Reminder)
            .where(Reminder.profile_id == profile_id)
            .where(Reminder.id == reminder_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create_reminder(self, profile_id: str, data: ReminderCreate) -> Reminder:
        """Create an active reminder for a profile."""
        reminder = Reminder(
            profile_id=profile_id,
            title=data.title,
            time=data.time,
            is_repeating=data.is_repeating,
            days_of_week=list(data.days_of_week),
            is_active=True,
        )
        self.session.add(reminder)
        await self.session.commit()
        await self.session.refresh(reminder)

        self.logger.info("Reminder created", profile_id=profile_id, reminder_id=reminder.id)
        return reminder

    async def update_reminder(
        self,
        profile_id: str,
        reminder_id: str,
        data: ReminderUpdate,
    ) -> Reminder | None:
        """Apply a partial update.

        Returns:
            The updated reminder, or None if not found for this profile
        """
        reminder = await self.get_reminder(profile_id, reminder_id)
        if reminder is None:
            return None

        for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(reminder, field, value)

        await self.session.commit()
        await self.session.refresh(reminder)

        self.logger.info("Reminder updated", profile_id=profile_id, reminder_id=reminder_id)
        return reminder

    async def delete_reminder(self, profile_id: str, reminder_id: str) -> bool:
        """Delete a reminder.

        Returns:
            True if a reminder was deleted
        """
        stmt = (
            delete(Reminder)
            .where(Reminder.profile_id == profile_id)
            .where(Reminder.id == reminder_id)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0
