"""Application services."""

from bptrack_server.services.profiles import ProfileService
from bptrack_server.services.readings import ReadingService
from bptrack_server.services.reminders import ReminderService
from bptrack_server.services.statistics import StatisticsService, aggregate_readings

__all__ = [
    "ProfileService",
    "ReadingService",
    "ReminderService",
    "StatisticsService",
    "aggregate_readings",
]
