"""Pydantic schemas for the statistics summary."""

from datetime import datetime

from pydantic import Field

from bptrack_server.schemas.base import CamelModel


class Averages(CamelModel):
    """Mean of each field over the window, rounded to an integer."""

    systolic: int = Field(default=0, description="Average systolic (mmHg)")
    diastolic: int = Field(default=0, description="Average diastolic (mmHg)")
    pulse: int = Field(default=0, description="Average pulse (bpm)")
    # Wire name kept as the existing front end spells it
    pulse_pressure: int = Field(
        default=0,
        alias="pulseStressure",
        description="Average of each reading's pulse pressure",
    )
    mean_arterial_pressure: int = Field(
        default=0, description="Average of each reading's mean arterial pressure"
    )


class Range(CamelModel):
    """Observed minimum and maximum."""

    min: int = 0
    max: int = 0


class Ranges(CamelModel):
    """Min/max of the raw measured fields."""

    systolic: Range = Field(default_factory=Range)
    diastolic: Range = Field(default_factory=Range)
    pulse: Range = Field(default_factory=Range)


class Period(CamelModel):
    """The window the summary was computed over."""

    start_date: datetime = Field(description="Window start (inclusive)")
    end_date: datetime = Field(description="Window end (inclusive)")
    days: int = Field(description="Window length in days")


class StatisticsSummary(CamelModel):
    """Summary of a profile's readings within a time window.

    Computed on request, never persisted.
    """

    total_readings: int = Field(default=0, description="Readings in the window")
    averages: Averages = Field(default_factory=Averages)
    ranges: Ranges = Field(default_factory=Ranges)
    distribution: dict[str, int] = Field(
        default_factory=dict,
        description="Reading count per category; absent categories are zero",
    )
    period: Period
