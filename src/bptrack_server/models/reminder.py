"""Measurement reminder model."""

from typing import Any

from sqlalchemy import JSON, Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from bptrack_server.models.base import Base, ProfileScopedMixin, TimestampMixin, generate_uuid


class Reminder(Base, ProfileScopedMixin, TimestampMixin):
    """Reminder to take a reading at a given time of day."""

    __tablename__ = "reminders"
    __table_args__ = {"comment": "Per-profile measurement reminders"}

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_uuid,
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)
    time: Mapped[str] = mapped_column(String(5), nullable=False, comment="HH:MM, 24h")
    is_repeating: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    days_of_week: Mapped[list[Any]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Lowercase weekday names (monday..sunday)",
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
