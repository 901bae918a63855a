"""Blood pressure reading model."""

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from bptrack_server.models.base import Base, ProfileScopedMixin, TimestampMixin, generate_uuid


class BloodPressureReading(Base, ProfileScopedMixin, TimestampMixin):
    """A single blood pressure measurement.

    classification, pulse_pressure and mean_arterial_pressure are derived
    from systolic/diastolic by ReadingService and written in the same
    transaction as the raw values. They are never taken from client input.
    """

    __tablename__ = "blood_pressure_readings"
    __table_args__ = (
        Index("ix_readings_profile_date", "profile_id", "reading_date"),
        {"comment": "Blood pressure readings with derived ACC/AHA classification"},
    )

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_uuid,
    )

    # Measured values (mmHg / bpm)
    systolic: Mapped[int] = mapped_column(Integer, nullable=False)
    diastolic: Mapped[int] = mapped_column(Integer, nullable=False)
    pulse: Mapped[int] = mapped_column(Integer, nullable=False)

    # Optional extras
    weight: Mapped[int | None] = mapped_column(Integer, comment="Body weight in kg")
    notes: Mapped[str | None] = mapped_column(Text)

    # When the measurement was taken (client supplied)
    reading_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )

    # Derived values
    classification: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="ACC/AHA 2017 category",
    )
    pulse_pressure: Mapped[int] = mapped_column(
        "pulse_pressure",
        Integer,
        nullable=False,
        comment="Systolic minus diastolic",
    )
    mean_arterial_pressure: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Diastolic plus a third of pulse pressure, rounded",
    )

    def __repr__(self) -> str:
        return f"<BloodPressureReading {self.id}: {self.systolic}/{self.diastolic}>"
