"""Profile model."""

from typing import Any

from sqlalchemy import JSON, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from bptrack_server.models.base import Base, TimestampMixin, generate_uuid


class Profile(Base, TimestampMixin):
    """A person whose blood pressure is tracked.

    One household can hold several profiles; readings and reminders are
    scoped to a profile via profile_id.
    """

    __tablename__ = "profiles"
    __table_args__ = {"comment": "Tracked people (family members)"}

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_uuid,
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)
    gender: Mapped[str] = mapped_column(String(10), nullable=False, comment="male or female")
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    medical_conditions: Mapped[list[Any]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Free-form list of conditions (e.g. Diabetic)",
    )

    def __repr__(self) -> str:
        return f"<Profile {self.id}: {self.name}>"
