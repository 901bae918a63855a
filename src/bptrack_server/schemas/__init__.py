"""Pydantic schemas for API requests and responses."""

from bptrack_server.schemas.classification import ClassificationResult
from bptrack_server.schemas.profiles import ProfileCreate, ProfileRead, ProfileUpdate
from bptrack_server.schemas.readings import ReadingCreate, ReadingRead, ReadingUpdate
from bptrack_server.schemas.reminders import ReminderCreate, ReminderRead, ReminderUpdate
from bptrack_server.schemas.statistics import (
    Averages,
    Period,
    Range,
    Ranges,
    StatisticsSummary,
)

__all__ = [
    "Averages",
    "ClassificationResult",
    "Period",
    "ProfileCreate",
    "ProfileRead",
    "ProfileUpdate",
    "Range",
    "Ranges",
    "ReadingCreate",
    "ReadingRead",
    "ReadingUpdate",
    "ReminderCreate",
    "ReminderRead",
    "ReminderUpdate",
    "StatisticsSummary",
]
