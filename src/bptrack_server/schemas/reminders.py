"""Pydantic schemas for measurement reminders."""

from typing import Literal

from pydantic import Field

from bptrack_server.schemas.base import CamelModel, UTCDateTime

Weekday = Literal["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

# 24h HH:MM
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class ReminderCreate(CamelModel):
    """Body for creating a reminder."""

    title: str = Field(min_length=1, max_length=200)
    time: str = Field(pattern=TIME_PATTERN, description="Time of day, HH:MM")
    is_repeating: bool = False
    days_of_week: list[Weekday] = Field(default_factory=list)


class ReminderUpdate(CamelModel):
    """Partial reminder update."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    time: str | None = Field(default=None, pattern=TIME_PATTERN)
    is_repeating: bool | None = None
    days_of_week: list[Weekday] | None = None
    is_active: bool | None = None


class ReminderRead(CamelModel):
    """Reminder as returned by the API."""

    id: str
    profile_id: str
    title: str
    time: str
    is_repeating: bool
    days_of_week: list[str]
    is_active: bool
    created_at: UTCDateTime
