"""Reminder API endpoints."""

from typing import Any

from litestar import Router, delete, get, patch, post
from litestar.exceptions import NotFoundException
from litestar.status_codes import HTTP_200_OK, HTTP_201_CREATED, HTTP_204_NO_CONTENT
from sqlalchemy.ext.asyncio import AsyncSession

from bptrack_server.api.params import require_profile, validate_id
from bptrack_server.schemas.reminders import ReminderCreate, ReminderRead, ReminderUpdate
from bptrack_server.services.reminders import ReminderService


@get("/profiles/{profile_id:str}/reminders", status_code=HTTP_200_OK)
async def list_reminders(profile_id: str, session: AsyncSession) -> list[dict[str, Any]]:
    """List a profile's reminders ordered by time of day."""
    await require_profile(session, profile_id)
    reminders = await ReminderService(session).list_reminders(profile_id)
    return [ReminderRead.model_validate(r).to_json() for r in reminders]


@post("/profiles/{profile_id:str}/reminders", status_code=HTTP_201_CREATED)
async def create_reminder(
    profile_id: str,
    data: ReminderCreate,
    session: AsyncSession,
) -> dict[str, Any]:
    """Create a reminder.

    Example body:
        {"title": "Morning reading", "time": "07:30", "isRepeating": true,
         "daysOfWeek": ["monday", "wednesday", "friday"]}
    """
    await require_profile(session, profile_id)
    reminder = await ReminderService(session).create_reminder(profile_id, data)
    return ReminderRead.model_validate(reminder).to_json()


@patch("/profiles/{profile_id:str}/reminders/{reminder_id:str}", status_code=HTTP_200_OK)
async def update_reminder(
    profile_id: str,
    reminder_id: str,
    data: ReminderUpdate,
    session: AsyncSession,
) -> dict[str, Any]:
    """Update a reminder (including turning it on or off)."""
    validate_id(profile_id, "profile_id")
    validate_id(reminder_id, "reminder_id")
    reminder = await ReminderService(session).update_reminder(profile_id, reminder_id, data)
    if reminder is None:
        raise NotFoundException(f"Reminder {reminder_id} not found")
    return ReminderRead.model_validate(reminder).to_json()


@delete("/profiles/{profile_id:str}/reminders/{reminder_id:str}", status_code=HTTP_204_NO_CONTENT)
async def delete_reminder(profile_id: str, reminder_id: str, session: AsyncSession) -> None:
    """Delete a reminder."""
    validate_id(profile_id, "profile_id")
    validate_id(reminder_id, "reminder_id")
    if not await ReminderService(session).delete_reminder(profile_id, reminder_id):
        raise NotFoundException(f"Reminder {reminder_id} not found")


reminders_router = Router(
    path="/",
    route_handlers=[list_reminders, create_reminder, update_reminder, delete_reminder],
    tags=["Reminders"],
)
