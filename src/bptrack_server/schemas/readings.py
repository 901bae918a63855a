"""Pydantic schemas for blood pressure readings.

Domain ranges are enforced here, at the API boundary. The classifier
itself accepts any integers.
"""

from datetime import datetime
from typing import Self

from pydantic import Field, field_validator, model_validator

from bptrack_server.schemas.base import CamelModel, UTCDateTime, to_utc

SYSTOLIC_RANGE = (70, 250)
DIASTOLIC_RANGE = (40, 150)
PULSE_RANGE = (40, 200)
WEIGHT_RANGE = (20, 300)


class ReadingCreate(CamelModel):
    """Body for creating a reading.

    Derived fields (classification, pulse pressure, MAP) are not accepted;
    they are always computed server-side.
    """

    systolic: int = Field(ge=SYSTOLIC_RANGE[0], le=SYSTOLIC_RANGE[1])
    diastolic: int = Field(ge=DIASTOLIC_RANGE[0], le=DIASTOLIC_RANGE[1])
    pulse: int = Field(ge=PULSE_RANGE[0], le=PULSE_RANGE[1])
    weight: int | None = Field(default=None, ge=WEIGHT_RANGE[0], le=WEIGHT_RANGE[1])
    notes: str | None = Field(default=None, max_length=2000)
    reading_date: datetime

    @field_validator("reading_date")
    @classmethod
    def normalize_reading_date(cls, value: datetime) -> datetime:
        return to_utc(value)


class ReadingUpdate(CamelModel):
    """Partial update. Only fields present in the request are changed."""

    systolic: int | None = Field(default=None, ge=SYSTOLIC_RANGE[0], le=SYSTOLIC_RANGE[1])
    diastolic: int | None = Field(default=None, ge=DIASTOLIC_RANGE[0], le=DIASTOLIC_RANGE[1])
    pulse: int | None = Field(default=None, ge=PULSE_RANGE[0], le=PULSE_RANGE[1])
    weight: int | None = Field(default=None, ge=WEIGHT_RANGE[0], le=WEIGHT_RANGE[1])
    notes: str | None = Field(default=None, max_length=2000)
    reading_date: datetime | None = None

    @field_validator("reading_date")
    @classmethod
    def normalize_reading_date(cls, value: datetime | None) -> datetime | None:
        return to_utc(value) if value is not None else None

    @model_validator(mode="after")
    def reject_null_measurements(self) -> Self:
        # weight and notes may be cleared; the rest are required columns
        for name in ("systolic", "diastolic", "pulse", "reading_date"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class ReadingRead(CamelModel):
    """Reading as returned by the API."""

    id: str
    profile_id: str
    systolic: int
    diastolic: int
    pulse: int
    weight: int | None = None
    notes: str | None = None
    reading_date: UTCDateTime
    classification: str
    pulse_pressure: int = Field(alias="pulseStressure")
    mean_arterial_pressure: int
    created_at: UTCDateTime
